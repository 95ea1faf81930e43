"""Tests for configuration loading."""

from namecraft.config import DEFAULTS, get_setting, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(str(tmp_path / 'missing.yaml'))
        assert config == DEFAULTS
        assert config is not DEFAULTS

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("generation:\n  count: 12\nai:\n  model: gemini-2.0-flash\n")
        config = load_config(str(path))
        assert config['generation']['count'] == 12
        assert config['generation']['min_score'] == 40
        assert config['ai']['model'] == 'gemini-2.0-flash'

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("")
        assert load_config(str(path)) == DEFAULTS


class TestGetSetting:
    """Tests for dotted-path lookups."""

    def test_nested_value(self):
        assert get_setting({'a': {'b': 3}}, 'a.b') == 3

    def test_missing_value(self):
        assert get_setting({'a': {}}, 'a.b.c', 'x') == 'x'

    def test_null_uses_default(self):
        assert get_setting({'a': {'b': None}}, 'a.b', 7) == 7
