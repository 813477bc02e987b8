"""Lock entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig


class Lock(EntityConfig):
    """A lock that can be locked, unlocked and optionally opened."""

    component: ClassVar[str] = "lock"

    # A regular expression the code must match before the command is sent.
    code_format: str | None = None
    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_topic: str = Field(alias="cmd_t")
    encoding: str | None = Field(default=None, alias="e")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    payload_lock: str | None = Field(default=None, alias="pl_lock")
    payload_unlock: str | None = Field(default=None, alias="pl_unlk")
    payload_open: str | None = Field(default=None, alias="pl_open")
    payload_reset: str | None = Field(default=None, alias="pl_rst")
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    state_jammed: str | None = Field(default=None, alias="stat_jam")
    state_locked: str | None = Field(default=None, alias="stat_locked")
    state_locking: str | None = Field(default=None, alias="stat_locking")
    state_topic: str | None = Field(default=None, alias="stat_t")
    state_unlocked: str | None = Field(default=None, alias="stat_unlocked")
    state_unlocking: str | None = Field(default=None, alias="stat_unlocking")
    value_template: str | None = Field(default=None, alias="val_tpl")
