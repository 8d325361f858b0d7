"""
Main entry point for the Gas Station Simulator

Launch the application with: python main.py

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from fuel_station.ui.app import main

if __name__ == "__main__":
    main()
