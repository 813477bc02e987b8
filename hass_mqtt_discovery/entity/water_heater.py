"""Water heater entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig
from hass_mqtt_discovery.entity.climate import TemperatureUnit


class WaterHeater(EntityConfig):
    """A water heater with a target temperature and operation modes."""

    component: ClassVar[str] = "water_heater"

    current_temperature_template: str | None = Field(default=None, alias="curr_temp_tpl")
    current_temperature_topic: str | None = Field(default=None, alias="curr_temp_t")
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    initial: int | None = Field(default=None, alias="init")
    max_temp: float | None = None
    min_temp: float | None = None
    mode_command_template: str | None = Field(default=None, alias="mode_cmd_tpl")
    mode_command_topic: str | None = Field(default=None, alias="mode_cmd_t")
    mode_state_template: str | None = Field(default=None, alias="mode_stat_tpl")
    mode_state_topic: str | None = Field(default=None, alias="mode_stat_t")
    modes: list[str] | None = None
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_off: str | None = Field(default=None, alias="pl_off")
    payload_on: str | None = Field(default=None, alias="pl_on")
    platform: str = "water_heater"
    power_command_template: str | None = None
    power_command_topic: str | None = None
    precision: float | None = None
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    temperature_command_template: str | None = Field(default=None, alias="temp_cmd_tpl")
    temperature_command_topic: str | None = Field(default=None, alias="temp_cmd_t")
    temperature_state_template: str | None = Field(default=None, alias="temp_stat_tpl")
    temperature_state_topic: str | None = Field(default=None, alias="temp_stat_t")
    temperature_unit: TemperatureUnit | None = Field(default=None, alias="temp_unit")
    value_template: str | None = Field(default=None, alias="val_tpl")
