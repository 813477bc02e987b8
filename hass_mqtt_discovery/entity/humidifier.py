"""Humidifier entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.device_classes import HumidifierDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class Humidifier(EntityConfig):
    """A humidifier or dehumidifier with a target humidity and optional modes."""

    component: ClassVar[str] = "humidifier"

    action_template: str | None = Field(default=None, alias="act_tpl")
    action_topic: str | None = Field(default=None, alias="act_t")
    current_humidity_template: str | None = None
    current_humidity_topic: str | None = None
    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_topic: str = Field(alias="cmd_t")
    device_class: HumidifierDeviceClass | None = Field(default=None, alias="dev_cla")
    encoding: str | None = Field(default=None, alias="e")
    max_humidity: float | None = Field(default=None, alias="max_hum")
    min_humidity: float | None = Field(default=None, alias="min_hum")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_off: str | None = Field(default=None, alias="pl_off")
    payload_on: str | None = Field(default=None, alias="pl_on")
    payload_reset_humidity: str | None = Field(default=None, alias="pl_rst_hum")
    payload_reset_mode: str | None = Field(default=None, alias="pl_rst_mode")
    target_humidity_command_template: str | None = Field(default=None, alias="hum_cmd_tpl")
    target_humidity_command_topic: str = Field(alias="hum_cmd_t")
    target_humidity_state_topic: str | None = Field(default=None, alias="hum_stat_t")
    target_humidity_state_template: str | None = Field(default=None, alias="hum_state_tpl")
    mode_command_template: str | None = Field(default=None, alias="mode_cmd_tpl")
    mode_command_topic: str | None = Field(default=None, alias="mode_cmd_t")
    mode_state_topic: str | None = Field(default=None, alias="mode_stat_t")
    mode_state_template: str | None = Field(default=None, alias="mode_stat_tpl")
    modes: list[str] | None = None
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    state_topic: str | None = Field(default=None, alias="stat_t")
    state_value_template: str | None = Field(default=None, alias="stat_val_tpl")
