"""Core configuration for the fuel station simulator"""

from fuel_station.core.config import StationConfig

__all__ = [
    "StationConfig",
]
