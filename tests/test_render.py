"""Test rendering payloads from a configuration file."""

import json
from io import StringIO

import pytest

from hass_mqtt_discovery.entity import Sensor, Switch
from hass_mqtt_discovery.lib.render import RenderError, build_entities, load_config, render_payloads

CONFIG = """
topic_prefix: home/kitchen
origin:
  name: my-app
  sw_version: "1.0"
device:
  name: Kitchen
  identifiers: [kitchen-01]
  connections: [[mac, "02:5b:26:a8:dc:12"]]
availability:
  mode: any
  availability:
    - topic: ~/status
entities:
  - component: sensor
    options:
      unique_id: kitchen-temperature
      state_topic: ~/temperature
      device_class: temperature
      unit_of_measurement: °C
  - component: switch
    options:
      uniq_id: kitchen-light
      cmd_t: ~/light/set
      qos: 1
      "~": home/kitchen/light
"""


def test_load_config():
    """Test loading a valid configuration file."""
    config = load_config(StringIO(CONFIG))
    assert config.topic_prefix == "home/kitchen"
    assert config.origin.sw_version == "1.0"
    assert config.device.identifiers == ["kitchen-01"]
    assert len(config.entities) == 2


def test_build_entities():
    """Test that the file-level settings are applied to every entity."""
    sensor, switch = build_entities(load_config(StringIO(CONFIG)))
    assert isinstance(sensor, Sensor)
    assert isinstance(switch, Switch)
    assert sensor.topic_prefix == "home/kitchen"
    assert switch.topic_prefix == "home/kitchen/light"
    assert switch.unique_id == "kitchen-light"
    assert sensor.device == switch.device


def test_build_entities_are_independent():
    """Test that changing one built entity leaves the others and the configuration untouched."""
    config = load_config(StringIO(CONFIG))
    sensor, switch = build_entities(config)
    sensor.device.add_identifier("sensor-only")
    sensor.origin.with_sw_version("2.0")
    sensor.availability.with_expire_after(60)
    assert switch.device.identifiers == ["kitchen-01"]
    assert switch.origin.sw_version == "1.0"
    assert switch.availability.expire_after is None
    assert config.device.identifiers == ["kitchen-01"]
    assert config.availability.expire_after is None


def test_render_payloads():
    """Test rendering the compact payloads."""
    sensor, switch = render_payloads(load_config(StringIO(CONFIG)))
    assert json.loads(sensor) == {
        "~": "home/kitchen",
        "o": {"name": "my-app", "sw": "1.0"},
        "dev": {"name": "Kitchen", "ids": ["kitchen-01"], "cns": [["mac", "02:5b:26:a8:dc:12"]]},
        "avty_mode": "any",
        "avty": [{"t": "~/status"}],
        "uniq_id": "kitchen-temperature",
        "stat_t": "~/temperature",
        "dev_cla": "temperature",
        "unit_of_meas": "°C",
    }
    assert json.loads(switch)["qos"] == "1"
    assert json.loads(switch)["platform"] == "switch"


def test_invalid_yaml():
    """Test that broken YAML is reported as a render error."""
    with pytest.raises(RenderError, match="not valid YAML"):
        load_config(StringIO("origin: [unclosed"))


def test_invalid_config():
    """Test that a configuration without an origin is rejected."""
    with pytest.raises(RenderError, match="configuration file is invalid"):
        load_config(StringIO("device: {}\nentities: []\n"))


def test_empty_config():
    """Test that an empty file is rejected."""
    with pytest.raises(RenderError):
        load_config(StringIO(""))


def test_unknown_component():
    """Test that unknown components are reported."""
    config = load_config(StringIO("origin: {name: app}\ndevice: {}\nentities: [{component: light}]\n"))
    with pytest.raises(RenderError, match="Unknown component 'light'"):
        build_entities(config)


def test_invalid_entity():
    """Test that an entity missing a required option is reported."""
    config = load_config(StringIO("origin: {name: app}\ndevice: {}\nentities: [{component: sensor}]\n"))
    with pytest.raises(RenderError, match="The sensor entity 1 is invalid"):
        build_entities(config)
