"""
Tank Controller - Orchestration layer

Handles fuel deliveries into the tank and packages the outcome.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from fuel_station.modules.tank.model import TANK_CAPACITY, Tank


@dataclass
class DeliveryResult:
    """
    Result of a fuel delivery.

    Attributes:
        requested: Volume offered by the truck [L]
        accepted: True if the whole volume went into the tank
        level_before: Tank level before the delivery [L]
        level_after: Tank level after the delivery [L]
        flags: Diagnostic flags dictionary
    """
    requested: float
    accepted: bool
    level_before: float
    level_after: float
    flags: Dict[str, bool]


@dataclass
class TankStatus:
    """Snapshot of the tank level."""
    level: float
    capacity: float
    headroom: float
    fill_ratio: float


class TankController:
    """
    Controller for the station tank.

    Owns the Tank instance that the pumps are later bound to.
    """

    def __init__(self, capacity: float = TANK_CAPACITY, tank: Optional[Tank] = None):
        """
        Initialize controller.

        Args:
            capacity: Tank capacity [L], used when no tank is given
            tank: Existing tank to control

        Raises:
            ValueError: If capacity is not a positive number
        """
        self.logger = logging.getLogger(__name__)

        if tank is None:
            if isinstance(capacity, bool) or not isinstance(capacity, (int, float)) or not capacity > 0:
                raise ValueError(f"Tank capacity must be positive, got {capacity}")
            tank = Tank(capacity=capacity)
        self.tank = tank

    def deliver(self, amount: float) -> DeliveryResult:
        """
        Fill the tank from a fuel truck.

        A refused delivery is all-or-nothing: the level is left untouched.

        Args:
            amount: Volume delivered [L]

        Returns:
            DeliveryResult with levels and diagnostic flags
        """
        flags = {
            "invalid_amount": not amount >= 0,
            "no_room": False,
        }

        level_before = self.tank.level
        accepted = self.tank.fill(amount)
        if not accepted and not flags["invalid_amount"]:
            flags["no_room"] = True

        if accepted:
            self.logger.info("Delivered %.1f L into tank", amount)
        else:
            self.logger.warning(
                "Delivery of %s L refused (level %.1f / %.1f L)",
                amount, level_before, self.tank.capacity,
            )

        return DeliveryResult(
            requested=amount,
            accepted=accepted,
            level_before=level_before,
            level_after=self.tank.level,
            flags=flags,
        )

    def top_up(self) -> DeliveryResult:
        """Deliver exactly the missing volume so the tank ends full."""
        return self.deliver(self.tank.headroom)

    def status(self) -> TankStatus:
        """Return a snapshot of the tank level."""
        level = self.tank.level
        capacity = self.tank.capacity
        return TankStatus(
            level=level,
            capacity=capacity,
            headroom=capacity - level,
            fill_ratio=level / capacity,
        )
