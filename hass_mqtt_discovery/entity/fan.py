"""Fan entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig


class Fan(EntityConfig):
    """A fan with optional direction, oscillation, speed percentage and preset modes."""

    component: ClassVar[str] = "fan"

    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_topic: str = Field(alias="cmd_t")
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    direction_command_template: str | None = Field(default=None, alias="dir_cmd_tpl")
    direction_command_topic: str | None = Field(default=None, alias="dir_cmd_t")
    direction_state_topic: str | None = Field(default=None, alias="dir_stat_t")
    direction_value_template: str | None = Field(default=None, alias="dir_val_tpl")
    oscillation_command_template: str | None = Field(default=None, alias="osc_cmd_tpl")
    oscillation_command_topic: str | None = Field(default=None, alias="osc_cmd_t")
    oscillation_state_topic: str | None = Field(default=None, alias="osc_stat_t")
    oscillation_value_template: str | None = Field(default=None, alias="osc_val_tpl")
    payload_off: str | None = Field(default=None, alias="pl_off")
    payload_on: str | None = Field(default=None, alias="pl_on")
    payload_oscillation_off: str | None = Field(default=None, alias="pl_osc_off")
    payload_oscillation_on: str | None = Field(default=None, alias="pl_osc_on")
    payload_reset_percentage: str | None = Field(default=None, alias="pl_rst_pct")
    payload_reset_preset_mode: str | None = Field(default=None, alias="pl_rst_pr_mode")
    percentage_command_template: str | None = Field(default=None, alias="pct_cmd_tpl")
    percentage_command_topic: str | None = Field(default=None, alias="pct_cmd_t")
    percentage_state_topic: str | None = Field(default=None, alias="pct_stat_t")
    percentage_value_template: str | None = Field(default=None, alias="pct_val_tpl")
    platform: str = "fan"
    preset_mode_command_template: str | None = Field(default=None, alias="pr_mode_cmd_tpl")
    preset_mode_command_topic: str | None = Field(default=None, alias="pr_mode_cmd_t")
    preset_mode_state_topic: str | None = Field(default=None, alias="pr_mode_stat_t")
    preset_mode_value_template: str | None = Field(default=None, alias="pr_mode_val_tpl")
    preset_modes: list[str] | None = Field(default=None, alias="pr_modes")
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    speed_range_max: int | None = Field(default=None, alias="spd_rng_max")
    speed_range_min: int | None = Field(default=None, alias="spd_rng_min")
    state_topic: str | None = Field(default=None, alias="stat_t")
    state_value_template: str | None = Field(default=None, alias="stat_val_tpl")
