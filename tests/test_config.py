"""Tests for config module."""

import pytest

from lazy_sequence import InvalidArgument, SinkType
from lazy_sequence.config import get_app_config, get_sequence_config

ENV_VARS = [
    "SEQUENCE_START",
    "SEQUENCE_END",
    "SEQUENCE_STEP",
    "SEQUENCE_SINK",
    "SEQUENCE_TAKE",
    "COMPARE_PIPELINES",
    "VERBOSE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_sequence_config_defaults():
    """Test default sequence parameters."""
    config = get_sequence_config()

    assert (config.start, config.end, config.step) == (0, 10, 1)


def test_sequence_config_from_env(monkeypatch):
    """Test parsing ints and floats from the environment."""
    monkeypatch.setenv("SEQUENCE_START", "-5")
    monkeypatch.setenv("SEQUENCE_END", "2.5")
    monkeypatch.setenv("SEQUENCE_STEP", " 0.5 ")

    config = get_sequence_config()

    assert config.start == -5
    assert isinstance(config.start, int)
    assert config.end == 2.5
    assert config.step == 0.5


def test_sequence_config_invalid_number(monkeypatch):
    """Test that unparsable numbers raise InvalidArgument."""
    monkeypatch.setenv("SEQUENCE_STEP", "one")

    with pytest.raises(InvalidArgument, match="SEQUENCE_STEP"):
        get_sequence_config()


def test_app_config_defaults():
    """Test default application configuration."""
    config = get_app_config()

    assert config.sink is SinkType.LIST
    assert config.take is None
    assert config.compare_pipelines is False
    assert config.verbose is False


def test_app_config_from_env(monkeypatch):
    """Test loading application configuration."""
    monkeypatch.setenv("SEQUENCE_SINK", "Series")
    monkeypatch.setenv("SEQUENCE_TAKE", "3")
    monkeypatch.setenv("COMPARE_PIPELINES", "true")
    monkeypatch.setenv("VERBOSE", "1")

    config = get_app_config()

    assert config.sink is SinkType.SERIES
    assert config.take == 3
    assert config.compare_pipelines is True
    assert config.verbose is True


@pytest.mark.parametrize(
    "name,value,match",
    [
        ("SEQUENCE_SINK", "numpy", "Unknown sink"),
        ("SEQUENCE_TAKE", "many", "SEQUENCE_TAKE"),
        ("SEQUENCE_TAKE", "-1", "negative"),
    ],
)
def test_app_config_invalid_values(monkeypatch, name, value, match):
    """Test that invalid application settings raise InvalidArgument."""
    monkeypatch.setenv(name, value)

    with pytest.raises(InvalidArgument, match=match):
        get_app_config()
