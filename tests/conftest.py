"""Shared fixtures for the discovery payload tests."""

import pytest

from hass_mqtt_discovery.common import Availability, Device, Origin


@pytest.fixture
def header() -> dict:
    """The header fields used by most entity tests."""
    return {
        "topic_prefix": "topic/prefix",
        "origin": Origin(name="application name"),
        "device": Device(name="device name"),
        "availability": Availability.single_topic("~/availability").with_expire_after(60),
    }


@pytest.fixture
def header_payload() -> dict:
    """The serialized form of the ``header`` fixture."""
    return {
        "~": "topic/prefix",
        "o": {"name": "application name"},
        "dev": {"name": "device name"},
        "avty_mode": "all",
        "avty": [{"t": "~/availability"}],
        "exp_aft": 60,
    }
