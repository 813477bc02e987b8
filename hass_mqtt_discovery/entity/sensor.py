"""Sensor entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import SensorStateClass
from hass_mqtt_discovery.device_classes import SensorDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig
from hass_mqtt_discovery.units import Unit


class Sensor(EntityConfig):
    """A read-only value published on the state topic."""

    component: ClassVar[str] = "sensor"

    state_topic: str = Field(alias="stat_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
    device_class: SensorDeviceClass | None = Field(default=None, alias="dev_cla")
    # Sends update events even when the value has not changed.
    force_update: bool | None = Field(default=None, alias="frc_upd")
    last_reset_value_template: str | None = Field(default=None, alias="lrst_val_tpl")
    name: str | None = None
    suggested_display_precision: int | None = Field(default=None, alias="sug_dsp_prc")
    state_class: SensorStateClass | None = Field(default=None, alias="stat_cla")
    unit_of_measurement: Unit | None = Field(default=None, alias="unit_of_meas")
