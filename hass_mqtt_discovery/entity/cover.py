"""Cover entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.device_classes import CoverDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class Cover(EntityConfig):
    """A cover such as a blind, garage door or shutter, with optional position and tilt."""

    component: ClassVar[str] = "cover"

    command_topic: str | None = Field(default=None, alias="cmd_t")
    device_class: CoverDeviceClass | None = Field(default=None, alias="dev_cla")
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_close: str | None = Field(default=None, alias="pl_cls")
    payload_open: str | None = Field(default=None, alias="pl_open")
    payload_stop: str | None = Field(default=None, alias="pl_stop")
    platform: str = "cover"
    position_closed: int | None = Field(default=None, alias="pos_clsd")
    position_open: int | None = Field(default=None, alias="pos_open")
    position_template: str | None = Field(default=None, alias="pos_tpl")
    position_topic: str | None = Field(default=None, alias="pos_t")
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    set_position_template: str | None = Field(default=None, alias="set_pos_tpl")
    set_position_topic: str | None = Field(default=None, alias="set_pos_t")
    state_closed: str | None = Field(default=None, alias="stat_clsd")
    state_closing: str | None = Field(default=None, alias="stat_closing")
    state_open: str | None = Field(default=None, alias="stat_open")
    state_opening: str | None = Field(default=None, alias="stat_opening")
    state_stopped: str | None = Field(default=None, alias="stat_stopped")
    state_topic: str | None = Field(default=None, alias="stat_t")
    tilt_closed_value: int | None = Field(default=None, alias="tilt_clsd_val")
    tilt_command_template: str | None = Field(default=None, alias="tilt_cmd_tpl")
    tilt_command_topic: str | None = Field(default=None, alias="tilt_cmd_t")
    tilt_max: int | None = None
    tilt_min: int | None = None
    tilt_opened_value: int | None = Field(default=None, alias="tilt_opnd_val")
    tilt_optimistic: bool | None = Field(default=None, alias="tilt_opt")
    tilt_status_template: str | None = Field(default=None, alias="tilt_status_tpl")
    tilt_status_topic: str | None = Field(default=None, alias="tilt_status_t")
    value_template: str | None = Field(default=None, alias="val_tpl")
