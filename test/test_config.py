"""
Unit tests for StationConfig and the command-line entry point

Author: Fuel Station Simulator Project
Date: 2026-10-19
"""

import pytest
from fuel_station.__main__ import main, parse_args
from fuel_station.core.config import StationConfig


class TestStationConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Defaults describe the reference station."""
        config = StationConfig()

        assert config.tank_capacity == 1000.0
        assert config.pump_count == 8
        assert config.pump_rate == 0.3
        assert config.initial_fill == 800.0
        assert config.price_per_liter == 10
        assert config.currency == "DKK"
        assert config.pace == 0.0

    def test_from_params(self):
        """Overrides apply; unknown keys and None values are ignored."""
        config = StationConfig.from_params({
            "pump_count": 4,
            "price_per_liter": 12.5,
            "console": True,
            "pump_rate": None,
        })

        assert config.pump_count == 4
        assert config.price_per_liter == 12.5
        assert config.pump_rate == 0.3

    def test_from_params_empty(self):
        """No params gives the defaults."""
        assert StationConfig.from_params() == StationConfig()

    @pytest.mark.parametrize("params, message", [
        ({"tank_capacity": 0.0}, "Tank capacity"),
        ({"tank_capacity": float("inf")}, "Tank capacity"),
        ({"pump_count": 0}, "Pump count"),
        ({"pump_count": 2.5}, "Pump count"),
        ({"pump_rate": 0.0}, "Pump rate"),
        ({"initial_fill": -1.0}, "Initial fill"),
        ({"price_per_liter": -10}, "Price per liter"),
        ({"pace": -0.5}, "Pace"),
    ])
    def test_invalid_params(self, params, message):
        """Out-of-range parameters raise ValueError naming the parameter."""
        with pytest.raises(ValueError, match=message):
            StationConfig.from_params(params)

    def test_initial_fill_above_capacity_is_valid(self):
        """Overfilling is not a config error; the station just cannot open."""
        config = StationConfig.from_params({"initial_fill": 1500.0})
        assert config.initial_fill == 1500.0

    def test_to_dict(self):
        """to_dict round-trips through from_params."""
        config = StationConfig(pump_count=3)
        assert StationConfig.from_params(config.to_dict()) == config


class TestCommandLine:
    """Test argument parsing and the console entry point."""

    def test_parse_args(self):
        """Flags map onto configuration parameter names."""
        args = parse_args(["--console", "--pumps", "4", "--rate", "0.5", "--price", "11"])

        assert args.console
        assert args.pump_count == 4
        assert args.pump_rate == 0.5
        assert args.price_per_liter == 11.0
        assert args.tank_capacity is None

    def test_console_demo(self, capsys):
        """Console demo exits with status 0."""
        assert main(["--console"]) == 0
        assert "So far the gas tank has lost" in capsys.readouterr().out

    def test_console_demo_cannot_open(self, capsys):
        """Station that cannot open exits with status 1."""
        assert main(["--console", "--initial-fill", "2000"]) == 1
        assert "Closing down" in capsys.readouterr().out

    def test_invalid_configuration(self, capsys):
        """Invalid configuration exits with status 2."""
        assert main(["--console", "--pumps", "0"]) == 2
        assert "Invalid configuration" in capsys.readouterr().err
