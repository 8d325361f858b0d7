"""
Tank View - Console reporting of the tank state

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

from fuel_station.modules.tank.controller import DeliveryResult, TankStatus


class TankView:
    """
    View component for the tank.

    No computation should occur here - only presentation.
    """

    @staticmethod
    def display_status(status: TankStatus) -> None:
        """
        Display the tank level.

        Args:
            status: Snapshot to display
        """
        print(f"Tank: {status.level:.1f} / {status.capacity:.1f} L "
              f"({status.fill_ratio * 100:.1f} %), room for {status.headroom:.1f} L")

    @staticmethod
    def display_delivery(result: DeliveryResult) -> None:
        """
        Display the outcome of a delivery.

        Args:
            result: Delivery to display
        """
        if result.accepted:
            print(f"Filled the gas tank with {result.requested:.0f} liters of fuel.")
            return

        print(f"Failed to fill the gas tank with {result.requested:.0f} liters of fuel...")
        active_flags = [k for k, v in result.flags.items() if v]
        if active_flags:
            print(f"  [{', '.join(active_flags)}]")
