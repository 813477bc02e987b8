"""Event entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.device_classes import EventDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class Event(EntityConfig):
    """Receives events of the configured types on the state topic."""

    component: ClassVar[str] = "event"

    device_class: EventDeviceClass | None = Field(default=None, alias="dev_cla")
    encoding: str | None = Field(default=None, alias="e")
    event_types: list[str] = Field(alias="evt_typ")
    name: str | None = None
    qos: QosLevel | None = None
    state_topic: str = Field(alias="stat_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
