"""Configuration file models."""

from pydantic import BaseModel

from hass_mqtt_discovery.common import Availability, Device, Origin


class EntityModel(BaseModel):
    component: str
    options: dict = {}


class ConfigModel(BaseModel):
    topic_prefix: str | None = None
    origin: Origin
    device: Device
    availability: Availability | None = None
    entities: list[EntityModel]
