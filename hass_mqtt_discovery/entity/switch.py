"""Switch entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.device_classes import SwitchDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class Switch(EntityConfig):
    """A switch with an on and an off state."""

    component: ClassVar[str] = "switch"

    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_topic: str = Field(alias="cmd_t")
    device_class: SwitchDeviceClass | None = Field(default=None, alias="dev_cla")
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_off: str | None = Field(default=None, alias="pl_off")
    payload_on: str | None = Field(default=None, alias="pl_on")
    platform: str = "switch"
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    state_off: str | None = Field(default=None, alias="stat_off")
    state_on: str | None = Field(default=None, alias="stat_on")
    state_topic: str | None = Field(default=None, alias="stat_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
