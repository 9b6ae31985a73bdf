"""Tests for winzoom configuration loading and validation."""

import pytest

from winzoom.config.settings import (
    DEFAULT_CONFIG,
    EXAMPLE_CONFIG,
    BorderStyle,
    ZoomConfig,
    deep_merge,
    get_config_path,
    load_config,
    save_example_config,
)
from winzoom.utils.error_handling import ConfigError


class TestZoomConfig:
    """Tests for ZoomConfig construction."""

    def test_defaults(self):
        config = ZoomConfig()
        assert config.toggle_key == "f9"
        assert config.border is BorderStyle.NONE
        assert config.use_tab_zoom is True

    def test_from_dict_none_matches_defaults(self):
        assert ZoomConfig.from_dict(None) == ZoomConfig()

    def test_partial_mapping_keeps_other_defaults(self):
        config = ZoomConfig.from_dict({"border": "rounded"})
        assert config.border is BorderStyle.ROUNDED
        assert config.toggle_key == "f9"
        assert config.use_tab_zoom is True

    def test_nested_mappings_merge(self):
        config = ZoomConfig.from_dict({"mappings": {"other": "x"}})
        assert config.mappings == {"toggle": "f9", "other": "x"}

    def test_null_toggle_disables_binding(self):
        assert ZoomConfig.from_dict({"mappings": {"toggle": None}}).toggle_key is None

    @pytest.mark.parametrize("style", [s.value for s in BorderStyle])
    def test_all_border_styles_accepted(self, style):
        assert ZoomConfig.from_dict({"border": style}).border.value == style

    def test_unknown_border_raises(self):
        with pytest.raises(ConfigError, match="Unknown border style"):
            ZoomConfig.from_dict({"border": "zigzag"})

    def test_non_bool_tab_zoom_raises(self):
        with pytest.raises(ConfigError, match="use_tab_zoom"):
            ZoomConfig.from_dict({"use_tab_zoom": "yes"})

    def test_non_string_key_raises(self):
        with pytest.raises(ConfigError, match="toggle"):
            ZoomConfig.from_dict({"mappings": {"toggle": 5}})

    def test_mappings_must_be_mapping(self):
        with pytest.raises(ConfigError, match="mappings"):
            ZoomConfig.from_dict({"mappings": "f9"})

    def test_to_dict(self):
        config = ZoomConfig(border=BorderStyle.SHADOW, use_tab_zoom=False)
        assert config.to_dict() == {
            "mappings": {"toggle": "f9"},
            "border": "shadow",
            "use_tab_zoom": False,
        }


def test_deep_merge_does_not_mutate_inputs():
    override = {"mappings": {"toggle": "x"}}
    merged = deep_merge(DEFAULT_CONFIG, override)

    assert merged["mappings"]["toggle"] == "x"
    assert DEFAULT_CONFIG["mappings"]["toggle"] == "f9"


class TestConfigFile:
    """Tests for reading and writing the YAML config file."""

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.setattr("winzoom.config.settings.WINZOOM_CONFIG_DIR", tmp_path)
        assert get_config_path() == tmp_path / "config.yaml"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") == ZoomConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == ZoomConfig()

    def test_reads_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("border: double\nuse_tab_zoom: false\nmappings:\n  toggle: null\n")

        config = load_config(path)

        assert config.border is BorderStyle.DOUBLE
        assert config.use_tab_zoom is False
        assert config.toggle_key is None

    def test_malformed_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("border: [unclosed\n")
        assert load_config(path) == ZoomConfig()

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_save_example_config(self, tmp_path):
        path = tmp_path / "sub" / "config.yaml"

        assert save_example_config(path) is True
        assert path.read_text() == EXAMPLE_CONFIG
        assert load_config(path) == ZoomConfig()

    def test_save_example_config_keeps_existing(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("border: single\n")

        assert save_example_config(path) is False
        assert path.read_text() == "border: single\n"
