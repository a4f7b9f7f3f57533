import textwrap

import pytest

from theater.config import DEFAULT_RATES, RateTable, get_config, refresh_config
from theater.errors import ConfigError


def test_defaults_without_pyproject(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = refresh_config(tmp_path)

    assert cfg.rates == DEFAULT_RATES
    assert cfg.log_level == "WARNING"


def test_config_loads_rates_from_pyproject(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        textwrap.dedent(
            """
            [tool.theater]
            log_level = "debug"

            [tool.theater.rates]
            tragedy_base = 45000
            comedy_per_attendee = 350
            """
        ),
        encoding="utf-8",
    )

    monkeypatch.chdir(tmp_path)
    cfg = refresh_config()

    assert cfg.rates.tragedy_base == 45000
    assert cfg.rates.comedy_per_attendee == 350
    assert cfg.rates.comedy_base == DEFAULT_RATES.comedy_base
    assert cfg.log_level == "DEBUG"


def test_config_found_in_parent_directory(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.rates]\ncomedy_threshold = 25\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert refresh_config(nested).rates.comedy_threshold == 25


def test_env_override_rate(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.rates]\ntragedy_base = 45000\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("THEATER_TRAGEDY_BASE", "50000")

    assert refresh_config().rates.tragedy_base == 50000


def test_invalid_env_rate_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("THEATER_COMEDY_BASE", "lots")

    with pytest.raises(ConfigError):
        refresh_config()


def test_zero_credit_divisor_rejected():
    with pytest.raises(ConfigError):
        RateTable(comedy_extra_credit_divisor=0)


def test_negative_rate_rejected():
    with pytest.raises(ConfigError):
        RateTable(tragedy_over_rate=-1)


def test_unknown_rate_keys_are_logged(tmp_path, caplog):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.rates]\nmusical_base = 1\n", encoding="utf-8")

    with caplog.at_level("WARNING", logger="theater.config"):
        cfg = refresh_config(tmp_path)

    assert cfg.rates == DEFAULT_RATES
    assert "musical_base" in caplog.text


def test_unsupported_log_level_rejected(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("THEATER_LOG_LEVEL", "loud")

    with pytest.raises(ConfigError):
        refresh_config()


def test_get_config_is_cached_until_refresh(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.rates]\ncomedy_base = 31000\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert get_config().rates.comedy_base == 31000
    monkeypatch.setenv("THEATER_COMEDY_BASE", "32000")
    assert get_config().rates.comedy_base == 31000
    assert refresh_config(tmp_path).rates.comedy_base == 32000


def test_malformed_pyproject_raises_config_error(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.theater.rates\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        refresh_config(tmp_path)
    assert "Invalid TOML" in excinfo.value.explanation
