"""
Station Model

Assembles one tank and its pumps into a gas station and keeps the sales
ledger of the station.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from fuel_station.core.config import StationConfig
from fuel_station.modules.pump import PumpController
from fuel_station.modules.tank import DeliveryResult, TankController


BILLING_MODES = ("truncated", "exact")


class StationClosedError(RuntimeError):
    """Raised when a customer is served before the station has opened."""


@dataclass
class SaleResult:
    """
    One customer served at one pump.

    Attributes:
        customer: Customer description
        pump_number: Pump used (1..N)
        liters: Liters dispensed [L]
        amount: Price truncated toward zero
        exact: Price without truncation
        billing: Billing mode used for this sale ("truncated" or "exact")
        flags: Diagnostic flags from the pump run
    """
    customer: str
    pump_number: int
    liters: float
    amount: int
    exact: float
    billing: str = "truncated"
    flags: Dict[str, bool] = field(default_factory=dict)

    @property
    def billed(self) -> float:
        """Amount charged to the customer under the sale's billing mode."""
        return self.exact if self.billing == "exact" else self.amount


class StationModel:
    """
    Gas station with one shared tank and N numbered pumps.

    The station is closed until the first delivery succeeds.
    """

    def __init__(self, config: Optional[StationConfig] = None):
        """
        Build the tank and the pumps.

        Args:
            config: Station configuration (defaults if None)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.logger = logging.getLogger(__name__)

        self.config = config or StationConfig()
        self.config.validate()

        self.tank_ctrl = TankController(capacity=self.config.tank_capacity)
        self.pumps: List[PumpController] = [
            PumpController(self.tank_ctrl.tank, rate=self.config.pump_rate, number=n)
            for n in range(1, self.config.pump_count + 1)
        ]

        self.is_open = False
        self.delivered = 0.0
        self.last_delivery: Optional[DeliveryResult] = None
        self.sales: List[SaleResult] = []
        self.level_history: List[float] = [self.tank_ctrl.tank.level]

    @property
    def tank(self):
        return self.tank_ctrl.tank

    def open(self) -> bool:
        """
        Open the station with its initial fuel delivery.

        Returns:
            True if the station is open, False if the initial delivery did
            not fit (station stays closed, tank untouched)
        """
        if self.is_open:
            return True

        result = self._receive(self.config.initial_fill)
        if not result.accepted:
            self.logger.warning(
                "Station cannot open: initial fill of %.1f L exceeds tank capacity %.1f L",
                self.config.initial_fill, self.config.tank_capacity,
            )
            return False

        self.is_open = True
        self.logger.info("Station open with %d pumps", len(self.pumps))
        return True

    def deliver(self, amount: float) -> DeliveryResult:
        """
        Receive a mid-session fuel delivery into the tank.

        A closed station takes no deliveries, so the initial fill always
        finds the tank empty.

        Args:
            amount: Volume delivered [L]

        Returns:
            DeliveryResult from the tank controller

        Raises:
            StationClosedError: If the station is not open
        """
        if not self.is_open:
            raise StationClosedError("Station is closed: open it before ordering deliveries")
        return self._receive(amount)

    def _receive(self, amount: float) -> DeliveryResult:
        result = self.tank_ctrl.deliver(amount)
        self.last_delivery = result
        if result.accepted:
            self.delivered += amount
            self.level_history.append(result.level_after)
        return result

    def pump(self, pump_number: int) -> PumpController:
        """
        Look up a pump by its number.

        Raises:
            ValueError: If no pump has this number
        """
        if isinstance(pump_number, bool) or not isinstance(pump_number, int) \
                or not 1 <= pump_number <= len(self.pumps):
            raise ValueError(
                f"Pump number must be in 1..{len(self.pumps)}, got {pump_number}"
            )
        return self.pumps[pump_number - 1]

    def serve(
        self,
        customer: str,
        pump_number: int,
        cycles: int,
        billing: str = "truncated",
        on_cycle: Optional[Callable[[int, float], None]] = None,
    ) -> SaleResult:
        """
        Serve one customer at one pump.

        The pump meter is reset before fueling, so the bill covers this
        customer only.

        Args:
            customer: Customer description
            pump_number: Pump to use (1..N)
            cycles: Number of pump cycles
            billing: "truncated" or "exact"
            on_cycle: Optional callback receiving (cycle index, liters)

        Returns:
            SaleResult recorded in the ledger

        Raises:
            StationClosedError: If the station is not open
            ValueError: If the pump number, cycles or billing mode is invalid
        """
        if not self.is_open:
            raise StationClosedError("Station is closed: open it before serving customers")
        if billing not in BILLING_MODES:
            raise ValueError(f"Billing must be one of {BILLING_MODES}, got {billing!r}")
        if isinstance(cycles, bool) or not isinstance(cycles, int) or cycles < 0:
            raise ValueError(f"Cycles must be a non-negative integer, got {cycles}")

        pump = self.pump(pump_number)
        pump.reset()
        result = pump.dispense(cycles, on_cycle=on_cycle)
        bill = pump.bill(self.config.price_per_liter)

        sale = SaleResult(
            customer=customer,
            pump_number=pump_number,
            liters=result.liters,
            amount=bill.amount,
            exact=bill.amount_exact,
            billing=billing,
            flags=dict(result.flags),
        )
        self.sales.append(sale)
        self.level_history.append(self.tank.level)

        self.logger.info(
            "Sale at pump #%d: %s, %.1f L, %.2f %s",
            pump_number, customer, sale.liters, sale.billed, self.config.currency,
        )
        return sale

    @property
    def fuel_sold(self) -> float:
        """Liters sold over all recorded sales [L]."""
        return sum(s.liters for s in self.sales)

    @property
    def fuel_lost(self) -> float:
        """Liters that left the tank since the first delivery [L]."""
        return self.delivered - self.tank.level

    def revenue(self, exact: bool = False) -> float:
        """
        Station revenue over all recorded sales.

        Args:
            exact: Sum the untruncated amounts instead of the billed ones
        """
        if exact:
            return sum(s.exact for s in self.sales)
        return sum(s.billed for s in self.sales)

    def liters_per_pump(self) -> Dict[int, float]:
        """Liters sold per pump number, zero for unused pumps [L]."""
        totals = {p.number: 0.0 for p in self.pumps}
        for s in self.sales:
            totals[s.pump_number] += s.liters
        return totals
