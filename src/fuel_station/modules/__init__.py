"""Modules package - Physical components of the gas station"""

from fuel_station.modules.tank import Tank, TankController
from fuel_station.modules.pump import Pump, PumpController
from fuel_station.modules.station import StationController, StationModel

__all__ = [
    "Tank",
    "TankController",
    "Pump",
    "PumpController",
    "StationController",
    "StationModel",
]
