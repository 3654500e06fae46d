from __future__ import annotations

import pytest

from nulldate.config import (
    DATE_FORMAT_ENV_VAR,
    DateLayoutConfig,
    InvalidConfigurationError,
    configure_date_layout,
    get_date_layout_config,
)
from nulldate.domain import DateLayout, NullableDateString, get_default_layout


def test_get_date_layout_config_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DATE_FORMAT_ENV_VAR, raising=False)

    assert get_date_layout_config() == DateLayoutConfig(pattern="%Y-%m-%d")


def test_get_date_layout_config_ignores_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DATE_FORMAT_ENV_VAR, "   ")

    assert get_date_layout_config().pattern == "%Y-%m-%d"


def test_get_date_layout_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DATE_FORMAT_ENV_VAR, "%d/%m/%Y")

    assert get_date_layout_config().pattern == "%d/%m/%Y"


def test_configure_date_layout_installs_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DATE_FORMAT_ENV_VAR, "%d/%m/%Y")

    layout = configure_date_layout()

    assert layout == DateLayout("%d/%m/%Y")
    assert get_default_layout() == layout
    assert NullableDateString.from_string("14/02/2023").valid


def test_configure_date_layout_with_explicit_config() -> None:
    layout = configure_date_layout(DateLayoutConfig(pattern="%Y%m%d"))

    assert get_default_layout() is layout
    assert NullableDateString.from_string("20230214").value == "20230214"


def test_invalid_pattern_raises_configuration_error() -> None:
    with pytest.raises(InvalidConfigurationError, match="YYYY-MM-DD"):
        configure_date_layout(DateLayoutConfig(pattern="YYYY-MM-DD"))

    assert get_default_layout() == DateLayout()
