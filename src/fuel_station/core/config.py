"""
StationConfig - Configuration of a simulated gas station

Collects the tunable parameters of the station (tank capacity, pumps,
pricing, pacing) in a single validated dataclass.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


@dataclass
class StationConfig:
    """
    Configuration for one gas station.

    Attributes:
        tank_capacity: Capacity of the shared fuel tank [L]
        pump_count: Number of pumps bound to the tank [-]
        pump_rate: Liters drawn per pump cycle [L/cycle]
        initial_fill: First delivery when the station opens [L]
        price_per_liter: Flat price charged per liter [currency/L]
        currency: Currency label used in displays
        pace: Pacing scale of the console narration (1.0 = real time)
    """
    tank_capacity: float = 1000.0
    pump_count: int = 8
    pump_rate: float = 0.3
    initial_fill: float = 800.0
    price_per_liter: float = 10
    currency: str = "DKK"
    pace: float = 0.0

    @classmethod
    def from_params(cls, params: Optional[Dict[str, Any]] = None) -> "StationConfig":
        """
        Build a validated configuration from a parameter dictionary.

        Unknown keys are ignored; missing keys keep their defaults.

        Args:
            params: Dictionary of overrides (e.g. from the UI or CLI)

        Returns:
            Validated StationConfig

        Raises:
            ValueError: If any parameter is out of range
        """
        params = params or {}
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in params.items() if k in known and v is not None})
        config.validate()
        return config

    def validate(self) -> None:
        """
        Check that every parameter is physically meaningful.

        An initial fill larger than the tank is accepted here: the station
        simply fails to open.

        Raises:
            ValueError: If a parameter is out of range
        """
        if not _is_number(self.tank_capacity) or self.tank_capacity <= 0:
            self._reject(f"Tank capacity must be positive, got {self.tank_capacity}")
        if isinstance(self.pump_count, bool) or not isinstance(self.pump_count, int) or self.pump_count <= 0:
            self._reject(f"Pump count must be a positive integer, got {self.pump_count}")
        if not _is_number(self.pump_rate) or self.pump_rate <= 0:
            self._reject(f"Pump rate must be positive, got {self.pump_rate}")
        if not _is_number(self.initial_fill) or self.initial_fill < 0:
            self._reject(f"Initial fill must be non-negative, got {self.initial_fill}")
        if not _is_number(self.price_per_liter) or self.price_per_liter < 0:
            self._reject(f"Price per liter must be non-negative, got {self.price_per_liter}")
        if not _is_number(self.pace) or self.pace < 0:
            self._reject(f"Pace must be non-negative, got {self.pace}")

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _reject(message: str) -> None:
        logger.error(message)
        raise ValueError(message)


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
