"""
Pump Controller - Orchestration layer

Drives a pump through a number of cycles and packages the result for
billing and display.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fuel_station.modules.pump.model import DEFAULT_PUMP_RATE, Pump
from fuel_station.modules.tank.model import Tank


@dataclass
class DispenseResult:
    """
    Result of a dispensing run.

    Attributes:
        cycles_requested: Number of pump cycles asked for
        cycles_completed: Cycles that actually delivered fuel
        liters: Sum of the liters returned by each cycle [L]
        flags: Diagnostic flags dictionary
    """
    cycles_requested: int
    cycles_completed: int
    liters: float
    flags: Dict[str, bool]


@dataclass
class Bill:
    """
    Amount due for the liters on the pump meter.

    Attributes:
        liters: Liters on the meter [L]
        price: Price per liter
        amount: Amount truncated toward zero
        amount_exact: Amount without truncation
    """
    liters: float
    price: float
    amount: int
    amount_exact: float


class PumpController:
    """
    Controller for one pump.

    Orchestrates the pump model without direct UI dependencies.
    """

    def __init__(self, tank: Tank, rate: float = DEFAULT_PUMP_RATE, number: Optional[int] = None):
        """
        Initialize controller with a pump bound to the tank.

        Args:
            tank: Shared station tank
            rate: Liters per pump cycle [L]
            number: Pump number used for display and logging

        Raises:
            ValueError: If rate is not positive
        """
        self.logger = logging.getLogger(__name__)

        if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not rate > 0:
            raise ValueError(f"Pump rate must be positive, got {rate}")

        self.pump = Pump(tank, rate=rate, number=number)

    @property
    def number(self) -> Optional[int]:
        return self.pump.number

    def dispense(
        self,
        cycles: int,
        on_cycle: Optional[Callable[[int, float], None]] = None,
    ) -> DispenseResult:
        """
        Run the pump for a number of cycles.

        Args:
            cycles: Number of pump cycles (>= 0)
            on_cycle: Optional callback receiving (cycle index, liters)

        Returns:
            DispenseResult with total liters and diagnostic flags

        Raises:
            ValueError: If cycles is not a non-negative integer
        """
        if isinstance(cycles, bool) or not isinstance(cycles, int) or cycles < 0:
            raise ValueError(f"Cycles must be a non-negative integer, got {cycles}")

        flags = {
            "tank_empty": False,
        }

        liters = 0.0
        completed = 0
        for i in range(cycles):
            pumped = self.pump.pump_fuel()
            if pumped > 0:
                completed += 1
            else:
                flags["tank_empty"] = True
            liters += pumped
            if on_cycle is not None:
                on_cycle(i, pumped)

        if flags["tank_empty"]:
            self.logger.warning(
                "No more fuel in the tank: pump #%s completed %d of %d cycles",
                self.number, completed, cycles,
            )

        return DispenseResult(
            cycles_requested=cycles,
            cycles_completed=completed,
            liters=liters,
            flags=flags,
        )

    def bill(self, price_per_liter: float) -> Bill:
        """
        Compute the amount due for the current meter reading.

        Args:
            price_per_liter: Price per liter (>= 0)

        Returns:
            Bill with truncated and exact amounts

        Raises:
            ValueError: If the price is negative
        """
        if not price_per_liter >= 0:
            raise ValueError(f"Price per liter must be non-negative, got {price_per_liter}")

        return Bill(
            liters=self.pump.dispensed,
            price=price_per_liter,
            amount=self.pump.turnover(price_per_liter),
            amount_exact=self.pump.turnover_exact(price_per_liter),
        )

    def reset(self) -> None:
        """Reset the pump meter for the next customer."""
        self.pump.reset_counter()
