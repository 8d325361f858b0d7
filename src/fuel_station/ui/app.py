"""
Main Application Window - Gas Station Simulator

Provides the main window with a button that opens the station simulation.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import tkinter as tk
from tkinter import ttk


class MainWindow:
    """
    Main application window for the gas station simulator.
    """

    def __init__(self):
        """Initialize the main application window."""
        self.root = tk.Tk()
        self.root.title("Gas Station Simulator")
        self.root.geometry("500x320")

        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface components."""
        header = ttk.Label(
            self.root,
            text="Gas Station Simulator",
            font=("Arial", 16, "bold"),
        )
        header.pack(pady=20)

        desc = ttk.Label(
            self.root,
            text="One shared fuel tank, several metered pumps",
            font=("Arial", 10),
        )
        desc.pack(pady=10)

        ttk.Separator(self.root, orient="horizontal").pack(fill="x", pady=20)

        modules_frame = ttk.LabelFrame(
            self.root,
            text="Simulation",
            padding=20,
        )
        modules_frame.pack(padx=20, pady=10, fill="both", expand=True)

        button_style = {"width": 25, "padding": 10}

        btn_station = ttk.Button(
            modules_frame,
            text="⛽ Station",
            command=self._open_station,
            **button_style,
        )
        btn_station.grid(row=0, column=0, padx=10, pady=5, sticky="ew")

        modules_frame.columnconfigure(0, weight=1)

    def _open_station(self):
        """Open the station simulation window."""
        # Import here to allow headless testing
        from fuel_station.modules.station.view import StationTkView

        StationTkView.open_window(self.root)

    def run(self):
        """Start the application main loop."""
        self.root.mainloop()


def main():
    """Entry point for the UI application."""
    app = MainWindow()
    app.run()


if __name__ == "__main__":
    main()
