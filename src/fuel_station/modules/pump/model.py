"""
Pump Model - Fuel pump drawing from the station tank

A pump withdraws fuel from the shared tank in fixed increments and keeps
its own meter of dispensed liters for billing.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from typing import Optional

from fuel_station.modules.tank.model import Tank


DEFAULT_PUMP_RATE = 0.3  # L per pump cycle


class Pump:
    """
    Physical model of a dispensing pump.

    The pump references the tank but does not own it; many pumps share
    one tank.

    Attributes:
        tank: Tank to draw fuel from
        rate: Liters drawn per call to pump_fuel [L]
        dispensed: Liters pumped since creation or last reset [L]
        number: Optional pump number used for display
    """

    def __init__(self, tank: Tank, rate: float = DEFAULT_PUMP_RATE, number: Optional[int] = None):
        self.tank = tank
        self.rate = rate
        self.number = number
        self.dispensed = 0.0

    def pump_fuel(self) -> float:
        """
        Run one pump cycle.

        Returns:
            Liters pumped: the pump rate, or 0.0 if the tank could not
            supply it (meter unchanged)
        """
        if self.tank.draw(self.rate):
            self.dispensed += self.rate
            return self.rate
        return 0.0

    def reset_counter(self) -> None:
        """Reset the dispensed-liters meter."""
        self.dispensed = 0.0

    def turnover(self, price_per_liter: float) -> int:
        """
        Turnover of this pump, truncated toward zero.

        Args:
            price_per_liter: Price per liter

        Returns:
            int(price_per_liter * dispensed)
        """
        return int(price_per_liter * self.dispensed)

    def turnover_exact(self, price_per_liter: float) -> float:
        """Turnover of this pump without truncation."""
        return price_per_liter * self.dispensed

    def __repr__(self) -> str:
        return f"Pump(number={self.number}, rate={self.rate}, dispensed={self.dispensed:.2f})"
