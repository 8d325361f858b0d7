"""
Unit tests for Tank module

Tests the bounded tank model, its atomicity under concurrent pumps, and
the delivery controller.

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import math
import random
from concurrent.futures import ThreadPoolExecutor

import pytest
from fuel_station.modules.pump import Pump
from fuel_station.modules.tank import TANK_CAPACITY, Tank, TankController


@pytest.fixture
def tank():
    """Fixture providing an empty tank with default capacity."""
    return Tank()


@pytest.fixture
def controller():
    """Fixture providing a TankController with an empty tank."""
    return TankController()


class TestTankConstruction:
    """Test tank construction and validation."""

    def test_default_capacity(self, tank):
        """New tank is empty with the default capacity of 1000 L."""
        assert tank.capacity == TANK_CAPACITY == 1000.0
        assert tank.level == 0.0
        assert tank.headroom == 1000.0

    def test_custom_capacity(self):
        """Capacity is a constructor parameter."""
        tank = Tank(capacity=50.0, level=20.0)
        assert tank.capacity == 50.0
        assert tank.level == 20.0
        assert tank.headroom == 30.0

    @pytest.mark.parametrize("capacity", [0.0, -10.0, float("nan")])
    def test_invalid_capacity(self, capacity):
        """Non-positive capacity raises ValueError."""
        with pytest.raises(ValueError, match="capacity"):
            Tank(capacity=capacity)

    @pytest.mark.parametrize("level", [-0.1, 1000.1])
    def test_invalid_level(self, level):
        """Initial level outside [0, capacity] raises ValueError."""
        with pytest.raises(ValueError, match="level"):
            Tank(level=level)


class TestTankFill:
    """Test filling the tank."""

    def test_fill_to_capacity_boundary(self, tank):
        """
        Filling an empty tank with exactly its capacity succeeds;
        one more milliliter is refused.
        """
        assert tank.fill(1000) is True
        assert tank.level == 1000.0

        assert tank.fill(0.001) is False
        assert tank.level == 1000.0, "Refused fill must leave level unchanged"

    def test_fill_exceeding_headroom(self):
        """A fill larger than the headroom is not partially applied."""
        tank = Tank(level=900.0)
        assert tank.fill(100.5) is False
        assert tank.level == 900.0

    def test_fill_zero(self, tank):
        """Zero fill always succeeds and changes nothing."""
        assert tank.fill(0.0) is True
        assert tank.level == 0.0

    @pytest.mark.parametrize("amount", [-1.0, -0.001, float("nan")])
    def test_fill_invalid_amount(self, amount):
        """Negative or NaN amounts are rejected without touching the level."""
        tank = Tank(level=500.0)
        assert tank.fill(amount) is False
        assert tank.level == 500.0


class TestTankDraw:
    """Test drawing from the tank."""

    def test_draw_within_supply(self):
        """Draw within the supply reduces the level."""
        tank = Tank(level=800.0)
        assert tank.draw(0.5) is True
        assert tank.level == 799.5

    def test_draw_exact_level(self):
        """Drawing exactly the remaining supply succeeds (inclusive bound)."""
        tank = Tank(level=12.5)
        assert tank.draw(12.5) is True
        assert tank.level == 0.0

    def test_draw_more_than_level(self):
        """Drawing more than the supply fails and leaves the level unchanged."""
        tank = Tank(level=0.2)
        assert tank.draw(0.3) is False
        assert tank.level == 0.2

    def test_draw_from_empty(self, tank):
        """An empty tank refuses any positive draw."""
        assert tank.draw(0.3) is False
        assert tank.level == 0.0

    @pytest.mark.parametrize("amount", [-5.0, float("nan")])
    def test_draw_invalid_amount(self, amount):
        """Negative or NaN draws are rejected (no level increase)."""
        tank = Tank(level=10.0)
        assert tank.draw(amount) is False
        assert tank.level == 10.0

    @pytest.mark.parametrize("x", [0.25, 12.5, 400.0, 800.0])
    def test_draw_then_fill_restores_level(self, x):
        """draw(x) followed by fill(x) restores the original level."""
        tank = Tank(level=800.0)
        assert tank.draw(x)
        assert tank.fill(x)
        assert tank.level == 800.0


class TestTankInvariant:
    """Test the capacity invariant over arbitrary operation sequences."""

    def test_random_sequence_keeps_bounds(self):
        """0 <= level <= capacity after every draw/fill."""
        rng = random.Random(718)
        tank = Tank(capacity=100.0)

        for _ in range(2000):
            amount = rng.uniform(0.0, 60.0)
            before = tank.level
            if rng.random() < 0.5:
                ok = tank.draw(amount)
                expected = before - amount if ok else before
            else:
                ok = tank.fill(amount)
                expected = before + amount if ok else before

            assert 0.0 <= tank.level <= tank.capacity
            assert math.isclose(tank.level, expected, abs_tol=1e-9)


class TestTankConcurrency:
    """Test that concurrent pumps cannot overdraw the shared tank."""

    def test_concurrent_pumps_never_overdraw(self):
        """
        Eight pumps on eight threads demand 120 L from a 30 L supply.

        The tank must end non-negative and the pumps must account for
        exactly what left the tank.
        """
        tank = Tank(level=30.0)
        pumps = [Pump(tank, rate=0.3, number=n) for n in range(1, 9)]

        def run(pump):
            return sum(pump.pump_fuel() for _ in range(50))

        with ThreadPoolExecutor(max_workers=8) as pool:
            pumped = list(pool.map(run, pumps))

        assert tank.level >= 0.0
        assert tank.level < 0.3, "Tank should be drained below one increment"
        assert sum(pumped) + tank.level == pytest.approx(30.0)
        assert sum(p.dispensed for p in pumps) == pytest.approx(sum(pumped))


class TestTankController:
    """Test deliveries through the controller."""

    def test_invalid_capacity(self):
        """Controller rejects non-positive capacity."""
        with pytest.raises(ValueError, match="capacity"):
            TankController(capacity=0)

    def test_accepted_delivery(self, controller):
        """Delivery that fits is accepted with no flags."""
        result = controller.deliver(800.0)

        assert result.accepted
        assert result.level_before == 0.0
        assert result.level_after == 800.0
        assert not any(result.flags.values())

    def test_refused_delivery(self, controller):
        """Delivery that does not fit is refused with no_room flag."""
        controller.deliver(800.0)
        result = controller.deliver(300.0)

        assert not result.accepted
        assert result.flags["no_room"]
        assert not result.flags["invalid_amount"]
        assert result.level_after == 800.0

    def test_negative_delivery(self, controller):
        """Negative delivery is flagged as invalid."""
        result = controller.deliver(-10.0)

        assert not result.accepted
        assert result.flags["invalid_amount"]
        assert not result.flags["no_room"]

    def test_top_up(self, controller):
        """Top-up fills the tank exactly to capacity."""
        controller.deliver(123.4)
        result = controller.top_up()

        assert result.accepted
        assert controller.tank.level == pytest.approx(1000.0)

    def test_status(self, controller):
        """Status snapshot reports level, headroom and fill ratio."""
        controller.deliver(250.0)
        status = controller.status()

        assert status.level == 250.0
        assert status.capacity == 1000.0
        assert status.headroom == 750.0
        assert status.fill_ratio == 0.25
