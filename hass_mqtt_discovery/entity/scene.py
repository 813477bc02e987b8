"""Scene entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig


class Scene(EntityConfig):
    """A scene activated by publishing ``payload_on`` to the command topic."""

    component: ClassVar[str] = "scene"

    command_topic: str | None = Field(default=None, alias="cmd_t")
    encoding: str | None = Field(default=None, alias="e")
    name: str | None = None
    payload_on: str | None = Field(default=None, alias="pl_on")
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
