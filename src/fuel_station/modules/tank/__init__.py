"""
Tank Module - Shared fuel reservoir of the station

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Bounded tank with atomic draw/fill
- controller.py: Deliveries and status snapshots
- view.py: Console output

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from fuel_station.modules.tank.model import TANK_CAPACITY, Tank
from fuel_station.modules.tank.controller import DeliveryResult, TankController, TankStatus
from fuel_station.modules.tank.view import TankView

__all__ = [
    "TANK_CAPACITY",
    "Tank",
    "DeliveryResult",
    "TankController",
    "TankStatus",
    "TankView",
]
