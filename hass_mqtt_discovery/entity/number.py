"""Number entities."""

from enum import StrEnum
from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.device_classes import NumberDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig
from hass_mqtt_discovery.units import Unit


class DisplayMode(StrEnum):
    """How a number is displayed in the UI."""

    BOX = "box"
    SLIDER = "slider"


class Number(EntityConfig):
    """A numeric value that can be read and set."""

    component: ClassVar[str] = "number"

    state_topic: str = Field(alias="stat_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
    command_topic: str = Field(alias="cmd_t")
    command_template: str | None = Field(default=None, alias="cmd_tpl")
    optimistic: bool | None = Field(default=None, alias="opt")
    retain: bool | None = Field(default=None, alias="ret")
    device_class: NumberDeviceClass | None = Field(default=None, alias="dev_cla")
    name: str | None = None
    min: float | None = None
    max: float | None = None
    mode: DisplayMode | None = None
    payload_reset: str | None = Field(default=None, alias="pl_rst")
    step: float | None = None
    unit_of_measurement: Unit | None = Field(default=None, alias="unit_of_meas")
