"""Siren entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig


class Siren(EntityConfig):
    """A siren that can be turned on and off, optionally with a duration and volume."""

    component: ClassVar[str] = "siren"

    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_off_template: str | None = Field(default=None, alias="cmd_off_tpl")
    command_topic: str | None = Field(default=None, alias="cmd_t")
    encoding: str | None = Field(default=None, alias="e")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_available: str | None = Field(default=None, alias="pl_avail")
    payload_not_available: str | None = Field(default=None, alias="pl_not_avail")
    payload_off: str | None = Field(default=None, alias="pl_off")
    payload_on: str | None = Field(default=None, alias="pl_on")
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    state_off: str | None = Field(default=None, alias="stat_off")
    state_on: str | None = Field(default=None, alias="stat_on")
    state_topic: str | None = Field(default=None, alias="stat_t")
    state_value_template: str | None = Field(default=None, alias="stat_val_tpl")
    support_duration: bool | None = Field(default=None, alias="sup_dur")
    support_volume_set: bool | None = Field(default=None, alias="sup_vol")
