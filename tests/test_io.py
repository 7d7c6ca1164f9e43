"""
Tests for the IO module - config file loading and parsing.
"""

import logging

import pytest
from pydantic import ValidationError

from changegears import (
    load_config,
    parse_config_text,
    save_config_json,
    SolverConfig,
)
from changegears.io.loaders import CONFIG_KEYS, CONFIG_KEY_FOR_FIELD


class TestParseConfigText:
    """Tests for the KEY = value config format."""

    def test_sample_config(self, sample_config_text):
        config = parse_config_text(sample_config_text)

        assert config.available_gears == (20, 30, 40, 50, 60, 80, 100)
        assert config.max_reductions == 1
        assert config.max_gear_teeth == 24
        assert config.lead == 0.125
        assert config.show_best_count == 3

    def test_defaults(self):
        config = parse_config_text("GEAR = 20\n")

        assert config.max_reductions == 0
        assert config.max_gear_teeth == 120
        assert config.lead == 0.0
        assert config.show_best_count == 10

    def test_gear_order_and_repeats_preserved(self):
        config = parse_config_text("GEAR = 40\nGEAR = 20\nGEAR = 40\n")
        assert config.available_gears == (40, 20, 40)

    def test_keys_case_insensitive(self):
        config = parse_config_text("lead = 8\nMax_Reductions = 2\n")
        assert config.lead == 8.0
        assert config.max_reductions == 2

    def test_comments_and_blank_lines(self):
        text = "# header\n\n   \nLEAD = 8  # inline\n#GEAR = 99\n"
        config = parse_config_text(text)
        assert config.lead == 8.0
        assert config.available_gears == ()

    def test_unknown_key_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="changegears.io.loaders"):
            config = parse_config_text("LEAD = 8\nSPINDLE = 3\n", source="lathe.conf")

        assert config.lead == 8.0
        assert "SPINDLE" in caplog.text
        assert "lathe.conf:2" in caplog.text

    def test_missing_equals(self):
        with pytest.raises(ValueError, match="lathe.conf:2"):
            parse_config_text("LEAD = 8\nGEAR 20\n", source="lathe.conf")

    def test_missing_value(self):
        with pytest.raises(ValueError, match="missing value for LEAD"):
            parse_config_text("LEAD =\n")

    def test_bad_number(self):
        with pytest.raises(ValueError, match="invalid value for MAX_REDUCTIONS"):
            parse_config_text("MAX_REDUCTIONS = two\n")

    def test_bad_gear_in_list(self):
        with pytest.raises(ValueError, match="invalid value for GEAR"):
            parse_config_text("GEAR = 20, x, 40\n")

    def test_non_positive_gear_rejected(self):
        with pytest.raises(ValidationError):
            parse_config_text("GEAR = 20, 0\n")


class TestLoadConfig:
    """Tests for load_config file handling."""

    def test_load_key_value_file(self, temp_config_file, sample_config):
        assert load_config(temp_config_file) == sample_config

    def test_load_json_file(self, temp_json_config_file, sample_config):
        assert load_config(temp_json_config_file) == sample_config

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.conf")

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("not valid json {")
        with pytest.raises(ValueError):
            load_config(bad)

    def test_json_extra_fields_ignored(self, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text('{"available_gears": [20, 40], "lead": 8, "notes": "shop lathe"}')
        config = load_config(path)
        assert config.available_gears == (20, 40)

    def test_save_and_reload(self, tmp_path, sample_config):
        path = tmp_path / "saved.json"
        save_config_json(sample_config, path)
        assert load_config(path) == sample_config


class TestModels:
    """Tests for SolverConfig behaviour."""

    def test_config_is_frozen(self, sample_config):
        with pytest.raises(ValidationError):
            sample_config.lead = 4.0

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            SolverConfig(max_reductions=-1)

    def test_key_lookup_tables_agree(self):
        for key, field_name in CONFIG_KEYS.items():
            assert CONFIG_KEY_FOR_FIELD[field_name] == key
