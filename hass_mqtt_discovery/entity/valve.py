"""Valve entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.device_classes import ValveDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class Valve(EntityConfig):
    """A valve that is either open/closed or reports its position."""

    component: ClassVar[str] = "valve"

    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_topic: str | None = Field(default=None, alias="cmd_t")
    device_class: ValveDeviceClass | None = Field(default=None, alias="dev_cla")
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_close: str | None = Field(default=None, alias="pl_cls")
    payload_open: str | None = Field(default=None, alias="pl_open")
    payload_stop: str | None = Field(default=None, alias="pl_stop")
    platform: str = "valve"
    position_closed: int | None = Field(default=None, alias="pos_clsd")
    position_open: int | None = Field(default=None, alias="pos_open")
    qos: QosLevel | None = None
    reports_position: bool | None = Field(default=None, alias="pos")
    retain: bool | None = Field(default=None, alias="ret")
    state_closed: str | None = Field(default=None, alias="stat_clsd")
    state_closing: str | None = Field(default=None, alias="stat_closing")
    state_open: str | None = Field(default=None, alias="stat_open")
    state_opening: str | None = Field(default=None, alias="stat_opening")
    state_topic: str | None = Field(default=None, alias="stat_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
