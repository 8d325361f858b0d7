"""
Pump View - Console reporting of pump activity

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""


class PumpView:
    """
    View component for a pump.

    No computation should occur here - only presentation.
    """

    @staticmethod
    def progress_marker(index: int, every: int) -> None:
        """
        Print one progress mark every `every` pump cycles.

        Args:
            index: Cycle index (0-based)
            every: Cycles per mark; 0 disables marks
        """
        if every > 0 and index % every == 0:
            print("#", end="", flush=True)
