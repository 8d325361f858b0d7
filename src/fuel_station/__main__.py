"""
Entry point for the Gas Station Simulator

Allows running the application with: python -m fuel_station

Without flags the Tkinter GUI opens; --console narrates the scripted
two-customer demo instead.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import argparse
import logging
import sys
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Gas station fuel accounting simulator")
    p.add_argument("--console", action="store_true", help="Run the narrated console demo instead of the GUI")
    p.add_argument("--pumps", type=int, dest="pump_count", help="Number of pumps")
    p.add_argument("--rate", type=float, dest="pump_rate", help="Liters per pump cycle")
    p.add_argument("--capacity", type=float, dest="tank_capacity", help="Tank capacity in liters")
    p.add_argument("--initial-fill", type=float, dest="initial_fill", help="First delivery in liters")
    p.add_argument("--price", type=float, dest="price_per_liter", help="Price per liter")
    p.add_argument("--delay", type=float, dest="pace", help="Narration pace (1.0 = real time, 0 = instant)")
    p.add_argument("--log-level", default="WARNING", help="Logging level")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.console:
        from fuel_station.ui.app import main as gui_main
        gui_main()
        return 0

    from fuel_station.modules.station import StationController, StationView

    try:
        controller = StationController(vars(args))
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    report = StationView.run_console_demo(controller)
    return 0 if report.opened else 1


if __name__ == "__main__":
    sys.exit(main())
