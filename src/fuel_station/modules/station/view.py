"""
Station View

Console narration of the demo and Tkinter GUI with Matplotlib charts.
"""

import time
from typing import Any, Dict, Optional

from fuel_station.modules.pump.view import PumpView
from fuel_station.modules.tank.view import TankView
from .controller import DemoReport, StationController
from .model import SaleResult

# Pause before each narrated event [s], scaled by the pace factor
PACING = {
    "install_tank": 1.0,
    "install_pumps": 2.0,
    "delivery_ordered": 1.5,
    "delivery": 7.0,
    "customer_arrives": 3.0,
    "lining_up": 2.5,
    "cycle": 0.1,
    "customer_leaves": 1.0,
    "summary": 2.5,
}

ORDINALS = ("first", "second", "third", "fourth", "fifth")

OUT_OF_FUEL_NOTICE = "No more fuel in the gas tank!"


class StationView:
    """
    Console view for the station.

    Only prints and paces; all bookkeeping happens in the controller.
    """

    @staticmethod
    def display_sale(sale: SaleResult, currency: str = "DKK") -> None:
        """
        Display a completed sale.

        Args:
            sale: Sale to display
            currency: Currency label
        """
        if sale.billing == "exact":
            price = f"{sale.exact:.2f} {currency}"
        else:
            price = f"{sale.amount},00 {currency}"
        name = sale.customer.split(",")[0]
        print(f"and off goes the {name}, filled with {sale.liters:.1f} liters "
              f"of fuel for a price of {price}")

    @staticmethod
    def display_summary(report: DemoReport, currency: str = "DKK") -> None:
        """
        Display the end-of-demo summary.

        Args:
            report: Demo outcome
            currency: Currency label
        """
        if not report.opened:
            print("\nClosing down, and going out of business.")
            return
        print(f"\nSo far the gas tank has lost {report.fuel_lost:.1f} liters of fuel, "
              f"with a revenue of {report.revenue:.2f} {currency}")
        if report.tank is not None:
            TankView.display_status(report.tank)

    @staticmethod
    def run_console_demo(controller: Optional[StationController] = None, pace: Optional[float] = None) -> DemoReport:
        """
        Narrate the scripted demo on the console.

        Args:
            controller: Station controller (default configuration if None)
            pace: Pacing scale, 1.0 gives the full-length narration and 0
                disables sleeping (default: configured pace)

        Returns:
            DemoReport of the run
        """
        controller = controller or StationController()
        pace = controller.config.pace if pace is None else pace

        def pause(event: str) -> None:
            if pace > 0:
                time.sleep(PACING[event] * pace)

        def on_event(event: str, payload: Dict[str, Any]) -> None:
            if event != "cycle":
                pause(event)

            if event == "install_tank":
                print("Installing gas tank ... ")
            elif event == "install_pumps":
                print("Gas tank now installed.\n")
                print(f"Installing {payload['count']} gas pumps ... ")
                print(f"{payload['count']} pumps now installed.\n")
            elif event == "delivery_ordered":
                print("Fuel delivery has been ordered.")
            elif event == "delivery":
                print("Fuel truck has arrived! Filling tank ...")
                TankView.display_delivery(payload["result"])
                if payload["accepted"]:
                    print("\nGas station ready for business ... !")
            elif event == "customer_arrives":
                script = payload["script"]
                ordinal = payload["ordinal"]
                label = ORDINALS[ordinal] if ordinal < len(ORDINALS) else "next"
                print(f"\nHere comes the {label} customer, a {script.name}...")
                pause("lining_up")
                print(f"Lining up along gas pump #{payload['pump_number']}, aaaaaaaaand ...")
                print("[", end="", flush=True)
            elif event == "cycle":
                PumpView.progress_marker(payload["index"], payload["script"].marker_every)
                pause("cycle")
            elif event == "customer_leaves":
                print("]\n")
                sale = payload["sale"]
                if sale.flags.get("tank_empty"):
                    print(OUT_OF_FUEL_NOTICE)
                StationView.display_sale(sale, payload["currency"])
            elif event == "summary":
                StationView.display_summary(payload["report"], payload["currency"])

        return controller.run_demo(on_event=on_event)


class StationTkView:
    """
    Tkinter-based GUI view for the station.

    Provides inputs to serve customers and receive deliveries, a results
    log, and charts of the tank level and liters sold per pump.
    """

    @staticmethod
    def open_window(parent):
        """
        Open station simulation window.

        Args:
            parent: Parent Tkinter window
        """
        # Import Tkinter and Matplotlib here to avoid issues in headless environments
        import tkinter as tk
        from tkinter import ttk, messagebox
        import matplotlib
        matplotlib.use('TkAgg')
        from matplotlib.figure import Figure
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
        import numpy as np

        from fuel_station.modules.station.model import BILLING_MODES, StationClosedError

        window = tk.Toplevel(parent)
        window.title("Gas Station - Simulation")
        window.geometry("1100x700")

        controller = StationController()
        defaults = controller.get_default_params()
        state = {"model": controller.build()}

        var_pumps = tk.StringVar(value=str(defaults["pump_count"]))
        var_initial = tk.StringVar(value=str(defaults["initial_fill"]))
        var_price = tk.StringVar(value=str(defaults["price_per_liter"]))
        var_customer = tk.StringVar(value="Customer")
        var_pump = tk.StringVar(value="2")
        var_cycles = tk.StringVar(value="60")
        var_billing = tk.StringVar(value=BILLING_MODES[0])
        var_delivery = tk.StringVar(value="100")

        # ========== LEFT PANEL: Inputs ==========
        left_frame = ttk.Frame(window, padding=10)
        left_frame.grid(row=0, column=0, sticky="nsew", padx=5, pady=5)

        ttk.Label(left_frame, text="Station", font=("Arial", 12, "bold")).grid(
            row=0, column=0, columnspan=2, pady=10
        )

        ttk.Label(left_frame, text="Pumps:").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_pumps, width=15).grid(row=1, column=1, pady=2)
        ttk.Label(left_frame, text="Initial fill [L]:").grid(row=2, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_initial, width=15).grid(row=2, column=1, pady=2)
        ttk.Label(left_frame, text="Price per liter:").grid(row=3, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_price, width=15).grid(row=3, column=1, pady=2)

        def open_station():
            try:
                params = dict(defaults)
                params.update(
                    pump_count=int(var_pumps.get()),
                    initial_fill=float(var_initial.get()),
                    price_per_liter=float(var_price.get()),
                )
                model = controller.build(params)
                state["model"] = model
                if model.open():
                    log(f"Station open: {model.tank.level:.1f} L in tank, {len(model.pumps)} pumps")
                else:
                    messagebox.showwarning(
                        "Closed",
                        f"Initial fill of {params['initial_fill']} L does not fit in the tank.",
                    )
                refresh()
            except ValueError as e:
                messagebox.showerror("Error", f"Invalid value:\n{str(e)}")

        ttk.Button(left_frame, text="🏁 Open station", command=open_station, width=25).grid(
            row=4, column=0, columnspan=2, pady=5
        )

        ttk.Separator(left_frame, orient="horizontal").grid(
            row=5, column=0, columnspan=2, sticky="ew", pady=10
        )

        ttk.Label(left_frame, text="Customer:").grid(row=6, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_customer, width=15).grid(row=6, column=1, pady=2)
        ttk.Label(left_frame, text="Pump #:").grid(row=7, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_pump, width=15).grid(row=7, column=1, pady=2)
        ttk.Label(left_frame, text="Cycles:").grid(row=8, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_cycles, width=15).grid(row=8, column=1, pady=2)
        ttk.Label(left_frame, text="Billing:").grid(row=9, column=0, sticky="w", pady=2)
        ttk.Combobox(
            left_frame, textvariable=var_billing, values=BILLING_MODES, state="readonly", width=12
        ).grid(row=9, column=1, pady=2)

        def serve():
            try:
                sale = state["model"].serve(
                    var_customer.get(),
                    int(var_pump.get()),
                    int(var_cycles.get()),
                    billing=var_billing.get(),
                )
                log(f"Pump #{sale.pump_number}: {sale.customer}, {sale.liters:.1f} L, "
                    f"{sale.billed:.2f} {controller.config.currency}")
                if sale.flags.get("tank_empty"):
                    log("  No more fuel in the gas tank!")
                refresh()
            except StationClosedError as e:
                messagebox.showwarning("Closed", str(e))
            except ValueError as e:
                messagebox.showerror("Error", f"Invalid value:\n{str(e)}")

        ttk.Button(left_frame, text="⛽ Serve customer", command=serve, width=25).grid(
            row=10, column=0, columnspan=2, pady=5
        )

        ttk.Label(left_frame, text="Delivery [L]:").grid(row=11, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_delivery, width=15).grid(row=11, column=1, pady=2)

        def deliver():
            try:
                result = state["model"].deliver(float(var_delivery.get()))
                if result.accepted:
                    log(f"Delivered {result.requested:.1f} L, tank at {result.level_after:.1f} L")
                else:
                    log(f"Delivery of {result.requested:.1f} L refused (no room)")
                refresh()
            except ValueError as e:
                messagebox.showerror("Error", f"Invalid value:\n{str(e)}")
            except StationClosedError as e:
                messagebox.showwarning("Station closed", str(e))

        ttk.Button(left_frame, text="🚚 Deliver fuel", command=deliver, width=25).grid(
            row=12, column=0, columnspan=2, pady=5
        )

        def reset():
            state["model"] = controller.build()
            results_text.delete("1.0", "end")
            refresh()

        ttk.Button(left_frame, text="🔄 Reset", command=reset, width=25).grid(
            row=13, column=0, columnspan=2, pady=5
        )

        # ========== RIGHT PANEL: Results ==========
        right_frame = ttk.Frame(window, padding=10)
        right_frame.grid(row=0, column=1, sticky="nsew", padx=5, pady=5)

        ttk.Label(right_frame, text="Journal", font=("Arial", 12, "bold")).grid(
            row=0, column=0, columnspan=2, pady=10, sticky="w"
        )

        results_text = tk.Text(right_frame, width=60, height=14, wrap="word")
        results_text.grid(row=1, column=0, sticky="nsew", pady=5)

        scrollbar = ttk.Scrollbar(right_frame, orient="vertical", command=results_text.yview)
        scrollbar.grid(row=1, column=1, sticky="ns")
        results_text.config(yscrollcommand=scrollbar.set)

        status_var = tk.StringVar(value="")
        ttk.Label(right_frame, textvariable=status_var, font=("Arial", 10, "bold")).grid(
            row=2, column=0, columnspan=2, sticky="w", pady=5
        )

        def log(line: str):
            results_text.insert("end", line + "\n")
            results_text.see("end")

        # ========== BOTTOM PANEL: Plots ==========
        plot_frame = ttk.LabelFrame(window, text="Tank level and sales per pump", padding=10)
        plot_frame.grid(row=1, column=0, columnspan=2, sticky="nsew", padx=5, pady=5)

        fig = Figure(figsize=(12, 4), dpi=100)
        ax_level = fig.add_subplot(121)
        ax_sales = fig.add_subplot(122)

        canvas = FigureCanvasTkAgg(fig, master=plot_frame)
        canvas.get_tk_widget().pack(fill="both", expand=True)

        def refresh():
            model = state["model"]
            status = model.tank_ctrl.status()
            currency = controller.config.currency
            status_var.set(
                f"Tank {status.level:.1f} / {status.capacity:.0f} L  |  "
                f"sold {model.fuel_sold:.1f} L  |  revenue {model.revenue():.2f} {currency}  |  "
                f"{'OPEN' if model.is_open else 'CLOSED'}"
            )

            ax_level.clear()
            ax_sales.clear()

            # Tank level after each delivery or sale
            history = np.asarray(model.level_history, dtype=float)
            ax_level.step(np.arange(len(history)), history, where="post", color="darkblue", linewidth=2)
            ax_level.axhline(status.capacity, color="gray", linestyle="--", linewidth=1, label="Capacity")
            ax_level.set_ylim(0, status.capacity * 1.05)
            ax_level.set_xlabel("Event", fontsize=10)
            ax_level.set_ylabel("Level [L]", fontsize=10)
            ax_level.set_title("Tank level", fontsize=11, fontweight="bold")
            ax_level.grid(True, alpha=0.3, linestyle=":")
            ax_level.legend(loc="best", fontsize=9)

            # Liters sold per pump
            totals = model.liters_per_pump()
            positions = np.arange(len(totals))
            ax_sales.bar(positions, list(totals.values()), color="darkorange")
            ax_sales.set_xticks(positions)
            ax_sales.set_xticklabels([f"#{n}" for n in totals])
            ax_sales.set_xlabel("Pump", fontsize=10)
            ax_sales.set_ylabel("Sold [L]", fontsize=10)
            ax_sales.set_title("Liters sold per pump", fontsize=11, fontweight="bold")
            ax_sales.grid(True, alpha=0.3, axis="y", linestyle=":")

            fig.tight_layout()
            canvas.draw()

        refresh()

        # Configure grid weights
        window.columnconfigure(0, weight=1)
        window.columnconfigure(1, weight=2)
        window.rowconfigure(0, weight=1)
        window.rowconfigure(1, weight=1)

        left_frame.columnconfigure(1, weight=1)
        right_frame.columnconfigure(0, weight=1)
        right_frame.rowconfigure(1, weight=1)
