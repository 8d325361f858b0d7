"""
fuel_station - Gas station fuel accounting simulator

One shared fuel tank drawn from by several pumps, each keeping its own
meter for billing.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

__version__ = "0.1.0"

from fuel_station.core.config import StationConfig
from fuel_station.modules.tank.model import Tank
from fuel_station.modules.pump.model import Pump

__all__ = [
    "StationConfig",
    "Tank",
    "Pump",
]
