"""
Station Controller

Orchestrates interaction between UI and station model, including the
scripted two-customer demo.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from fuel_station.core.config import StationConfig
from fuel_station.modules.tank import TankStatus
from .model import SaleResult, StationModel


@dataclass(frozen=True)
class CustomerScript:
    """
    One scripted customer of the demo.

    Attributes:
        name: Customer description
        cycles: Pump cycles needed
        marker_every: Cycles per progress mark
        billing: "truncated" or "exact"
        pump_number: Pump to use; None picks pump #2 (or #1 on a one-pump station)
    """
    name: str
    cycles: int
    marker_every: int = 1
    billing: str = "truncated"
    pump_number: Optional[int] = None


DEMO_CUSTOMERS = (
    CustomerScript("Fiat Punto, red", cycles=60, marker_every=6, billing="truncated"),
    CustomerScript("Opel Corsa, black", cycles=80, marker_every=8, billing="exact"),
)


@dataclass
class DemoReport:
    """Outcome of a demo run."""
    opened: bool
    sales: List[SaleResult] = field(default_factory=list)
    fuel_lost: float = 0.0
    revenue: float = 0.0
    revenue_exact: float = 0.0
    tank: Optional[TankStatus] = None


EventHandler = Callable[[str, Dict[str, Any]], None]


class StationController:
    """Controller for the gas station simulation."""

    def __init__(self, params: Optional[Dict] = None):
        """
        Initialize controller.

        Args:
            params: Parameter overrides (see get_default_params)

        Raises:
            ValueError: If a parameter is invalid
        """
        self.logger = logging.getLogger(__name__)
        self.config = StationConfig.from_params(params)
        self.model: Optional[StationModel] = None

    def get_default_params(self) -> Dict:
        """Get default parameter set for UI initialization."""
        return StationConfig().to_dict()

    def build(self, params: Optional[Dict] = None) -> StationModel:
        """
        Build a fresh station.

        Args:
            params: Parameter overrides; None keeps the current configuration

        Returns:
            New StationModel (closed until opened)
        """
        if params is not None:
            self.config = StationConfig.from_params(params)
        self.model = StationModel(self.config)
        return self.model

    def run_demo(
        self,
        customers: Optional[Sequence[CustomerScript]] = None,
        on_event: Optional[EventHandler] = None,
    ) -> DemoReport:
        """
        Run the scripted demo on a fresh station.

        Events passed to on_event: install_tank, install_pumps,
        delivery_ordered, delivery, customer_arrives, cycle,
        customer_leaves, summary.

        Args:
            customers: Customer script (default: DEMO_CUSTOMERS)
            on_event: Optional callback receiving (event name, payload)

        Returns:
            DemoReport; opened is False if the initial delivery failed
        """
        customers = DEMO_CUSTOMERS if customers is None else customers
        emit = on_event or (lambda event, payload: None)

        emit("install_tank", {})
        model = self.build()
        emit("install_pumps", {"count": len(model.pumps)})

        emit("delivery_ordered", {"amount": self.config.initial_fill})
        opened = model.open()
        emit("delivery", {"result": model.last_delivery, "accepted": opened})
        if not opened:
            self.logger.warning("Demo aborted: station could not open")
            report = DemoReport(opened=False, tank=model.tank_ctrl.status())
            emit("summary", {"report": report, "currency": self.config.currency})
            return report

        default_pump = min(2, len(model.pumps))
        for ordinal, script in enumerate(customers):
            pump_number = script.pump_number or default_pump
            emit("customer_arrives", {"script": script, "ordinal": ordinal, "pump_number": pump_number})

            def on_cycle(index: int, liters: float, script=script) -> None:
                emit("cycle", {"script": script, "index": index, "liters": liters})

            sale = model.serve(
                script.name,
                pump_number,
                script.cycles,
                billing=script.billing,
                on_cycle=on_cycle,
            )
            emit("customer_leaves", {"sale": sale, "currency": self.config.currency})

        report = DemoReport(
            opened=True,
            sales=list(model.sales),
            fuel_lost=model.fuel_lost,
            revenue=model.revenue(),
            revenue_exact=model.revenue(exact=True),
            tank=model.tank_ctrl.status(),
        )
        emit("summary", {"report": report, "currency": self.config.currency})
        return report
