"""Binary sensor entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.device_classes import BinarySensorDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class BinarySensor(EntityConfig):
    """A sensor with an ``on`` and an ``off`` state."""

    component: ClassVar[str] = "binary_sensor"

    state_topic: str = Field(alias="stat_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
    device_class: BinarySensorDeviceClass | None = Field(default=None, alias="dev_cla")
    force_update: bool | None = Field(default=None, alias="frc_upd")
    name: str | None = None
    # Seconds after which the sensor's state is reset to off.
    off_delay: int | None = Field(default=None, alias="off_dly")
    payload_off: str | None = Field(default=None, alias="pl_off")
    payload_on: str | None = Field(default=None, alias="pl_on")
