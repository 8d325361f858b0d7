"""
Station Module - Gas station assembling the tank and its pumps

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Station with one tank, N pumps and a sales ledger
- controller.py: Configuration and the scripted demo
- view.py: Console narration and Tkinter GUI with Matplotlib

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from fuel_station.modules.station.model import SaleResult, StationClosedError, StationModel
from fuel_station.modules.station.controller import (
    DEMO_CUSTOMERS,
    CustomerScript,
    DemoReport,
    StationController,
)
from fuel_station.modules.station.view import StationView

__all__ = [
    "SaleResult",
    "StationClosedError",
    "StationModel",
    "DEMO_CUSTOMERS",
    "CustomerScript",
    "DemoReport",
    "StationController",
    "StationView",
]
