"""Climate (HVAC) entities."""

from enum import StrEnum
from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.entity.base import EntityConfig


class TemperatureUnit(StrEnum):
    """The unit a climate device reports its temperatures in."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


class Climate(EntityConfig):
    """A heating, ventilation or air conditioning device.

    Topics are split into command topics (Home Assistant to device) and state
    topics (device to Home Assistant); each state topic may carry a template
    that extracts the value from the incoming payload.
    """

    component: ClassVar[str] = "climate"

    action_template: str | None = Field(default=None, alias="act_tpl")
    action_topic: str | None = Field(default=None, alias="act_t")
    current_humidity_template: str | None = None
    current_humidity_topic: str | None = None
    current_temperature_template: str | None = Field(default=None, alias="curr_temp_tpl")
    current_temperature_topic: str | None = Field(default=None, alias="curr_temp_t")
    fan_mode_command_template: str | None = Field(default=None, alias="fan_mode_cmd_tpl")
    fan_mode_command_topic: str | None = Field(default=None, alias="fan_mode_cmd_t")
    fan_mode_state_template: str | None = Field(default=None, alias="fan_mode_stat_tpl")
    fan_mode_state_topic: str | None = Field(default=None, alias="fan_mode_stat_t")
    fan_modes: list[str] | None = None
    # Initial target temperature.
    initial: float | None = Field(default=None, alias="init")
    max_humidity: float | None = Field(default=None, alias="max_hum")
    max_temp: float | None = None
    min_humidity: float | None = Field(default=None, alias="min_hum")
    min_temp: float | None = None
    mode_command_template: str | None = Field(default=None, alias="mode_cmd_tpl")
    mode_command_topic: str | None = Field(default=None, alias="mode_cmd_t")
    mode_state_template: str | None = Field(default=None, alias="mode_stat_tpl")
    mode_state_topic: str | None = Field(default=None, alias="mode_stat_t")
    modes: list[str] | None = None
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    power_command_template: str | None = None
    power_command_topic: str | None = None
    precision: float | None = None
    preset_mode_command_template: str | None = Field(default=None, alias="pr_mode_cmd_tpl")
    preset_mode_command_topic: str | None = Field(default=None, alias="pr_mode_cmd_t")
    preset_mode_state_topic: str | None = Field(default=None, alias="pr_mode_stat_t")
    preset_mode_value_template: str | None = Field(default=None, alias="pr_mode_val_tpl")
    preset_modes: list[str] | None = Field(default=None, alias="pr_modes")
    retain: bool | None = Field(default=None, alias="ret")
    swing_mode_command_template: str | None = Field(default=None, alias="swing_mode_cmd_tpl")
    swing_mode_command_topic: str | None = Field(default=None, alias="swing_mode_cmd_t")
    swing_mode_state_template: str | None = Field(default=None, alias="swing_mode_stat_tpl")
    swing_mode_state_topic: str | None = Field(default=None, alias="swing_mode_stat_t")
    swing_modes: list[str] | None = None
    target_humidity_command_template: str | None = Field(default=None, alias="hum_cmd_tpl")
    target_humidity_command_topic: str | None = Field(default=None, alias="hum_cmd_t")
    target_humidity_state_topic: str | None = Field(default=None, alias="hum_stat_t")
    target_humidity_state_template: str | None = Field(default=None, alias="hum_state_tpl")
    temperature_command_template: str | None = Field(default=None, alias="temp_cmd_tpl")
    temperature_command_topic: str | None = Field(default=None, alias="temp_cmd_t")
    temperature_high_command_template: str | None = Field(default=None, alias="temp_hi_cmd_tpl")
    temperature_high_command_topic: str | None = Field(default=None, alias="temp_hi_cmd_t")
    temperature_high_state_template: str | None = Field(default=None, alias="temp_hi_stat_tpl")
    temperature_high_state_topic: str | None = Field(default=None, alias="temp_hi_stat_t")
    temperature_low_command_template: str | None = Field(default=None, alias="temp_lo_cmd_tpl")
    temperature_low_command_topic: str | None = Field(default=None, alias="temp_lo_cmd_t")
    temperature_low_state_template: str | None = Field(default=None, alias="temp_lo_stat_tpl")
    temperature_low_state_topic: str | None = Field(default=None, alias="temp_lo_stat_t")
    temperature_state_template: str | None = Field(default=None, alias="temp_stat_tpl")
    temperature_state_topic: str | None = Field(default=None, alias="temp_stat_t")
    temperature_unit: TemperatureUnit | None = Field(default=None, alias="temp_unit")
    temp_step: float | None = None
    value_template: str | None = Field(default=None, alias="val_tpl")
