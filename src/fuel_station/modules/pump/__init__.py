"""
Pump Module - Fuel pump of the station

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Pump drawing fixed increments from the tank, with its meter
- controller.py: Dispensing runs and billing
- view.py: Console output

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from fuel_station.modules.pump.model import DEFAULT_PUMP_RATE, Pump
from fuel_station.modules.pump.controller import Bill, DispenseResult, PumpController
from fuel_station.modules.pump.view import PumpView

__all__ = [
    "DEFAULT_PUMP_RATE",
    "Pump",
    "Bill",
    "DispenseResult",
    "PumpController",
    "PumpView",
]
