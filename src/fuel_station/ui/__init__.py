"""
UI Package - Graphical User Interface for the gas station simulator

This package provides the Tkinter main window.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from fuel_station.ui.app import MainWindow

__all__ = ["MainWindow"]
