from pathlib import Path

import pytest

from convertigo.config import DEFAULT_BASE_URL, load_config
from convertigo.errors import ConfigError


def test_bundled_config_lists_display_currencies():
    cfg = load_config()

    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout_seconds is None
    codes = [c.code for c in cfg.supported_currencies]
    assert codes == ["USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF", "CNY"]
    assert cfg.supported_currencies[0].label == "US Dollar"


def test_missing_keys_fall_back_to_defaults(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text("supported_currencies:\n  - usd\n  - code: eur\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.base_url == DEFAULT_BASE_URL
    assert [(c.code, c.label) for c in cfg.supported_currencies] == [("USD", "usd"), ("EUR", "eur")]


def test_timeout_is_read_as_float(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text("api:\n  base_url: http://rates.test\n  timeout_seconds: 10\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.base_url == "http://rates.test"
    assert cfg.timeout_seconds == 10.0


def test_malformed_file_raises_config_error(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file_raises_config_error(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_non_numeric_timeout_raises_config_error(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text("api:\n  timeout_seconds: soon\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_supported_currencies_must_be_a_list(tmp_path: Path):
    path = tmp_path / "converter.yaml"
    path.write_text("supported_currencies: USD\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)
