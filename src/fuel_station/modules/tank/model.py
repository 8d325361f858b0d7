"""
Tank Model - Shared fuel reservoir of the station

A bounded accumulator: fuel can be drawn while supply remains and filled
while room remains. Failure is reported through the boolean return only.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import threading


TANK_CAPACITY = 1000.0  # L


class Tank:
    """
    Physical model of the station fuel tank.

    The tank is the sole authority over the fuel level. Every pump of the
    station holds a reference to the same instance, so the check and the
    mutation of the level happen under one lock.

    Invariant: 0 <= level <= capacity.
    """

    def __init__(self, capacity: float = TANK_CAPACITY, level: float = 0.0):
        """
        Initialize tank.

        Args:
            capacity: Maximum stored volume [L]
            level: Initial stored volume [L] (default: empty)

        Raises:
            ValueError: If capacity is not positive or level is out of range
        """
        if not capacity > 0:
            raise ValueError(f"Tank capacity must be positive, got {capacity}")
        if not 0 <= level <= capacity:
            raise ValueError(
                f"Tank level must be in [0, {capacity}], got {level}"
            )

        self._capacity = float(capacity)
        self._level = float(level)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> float:
        """Maximum stored volume [L]."""
        return self._capacity

    @property
    def level(self) -> float:
        """Current stored volume [L]."""
        with self._lock:
            return self._level

    @property
    def headroom(self) -> float:
        """Volume that can still be filled in [L]."""
        with self._lock:
            return self._capacity - self._level

    def draw(self, amount: float) -> bool:
        """
        Withdraw fuel from the tank.

        Args:
            amount: Volume to withdraw [L], must be >= 0

        Returns:
            True if the whole amount was withdrawn, False if the tank
            holds less than requested (level unchanged)
        """
        with self._lock:
            # Inclusive bound: the last drop can be drawn
            if not 0 <= amount <= self._level:
                return False
            self._level -= amount
            return True

    def fill(self, amount: float) -> bool:
        """
        Deposit fuel into the tank.

        Args:
            amount: Volume to deposit [L], must be >= 0

        Returns:
            True if the whole amount fits, False otherwise (level unchanged)
        """
        with self._lock:
            if not 0 <= amount <= self._capacity - self._level:
                return False
            # Rounding of level + headroom must not pass capacity
            self._level = min(self._level + amount, self._capacity)
            return True

    def __repr__(self) -> str:
        return f"Tank(level={self.level:.2f}, capacity={self._capacity:.2f})"
