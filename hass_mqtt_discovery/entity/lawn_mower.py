"""Lawn mower entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig


class LawnMower(EntityConfig):
    """A robotic lawn mower that can be started, paused and docked."""

    component: ClassVar[str] = "lawn_mower"

    activity_state_topic: str | None = None
    activity_value_template: str | None = None
    dock_command_template: str | None = None
    dock_command_topic: str | None = None
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    name: str | None = None
    optimistic: bool | None = Field(default=None, alias="opt")
    pause_command_template: str | None = None
    pause_command_topic: str | None = None
    platform: str = "lawn_mower"
    qos: QosLevel | None = None
    start_mowing_template: str | None = None
    start_mowing_command_topic: str | None = None
    retain: bool | None = Field(default=None, alias="ret")
