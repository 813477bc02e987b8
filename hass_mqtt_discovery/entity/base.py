"""The header fields shared by every entity configuration."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.base import DiscoveryModel
from hass_mqtt_discovery.common import Availability, Device, EntityCategory, Origin


class DiscoveryEntity(DiscoveryModel):
    """Represents a single entity announced through MQTT discovery.

    Subclasses declare ``availability`` themselves, as its keys are merged into
    the payload at the position of the field.
    """

    component: ClassVar[str] = ""
    flattened: ClassVar[tuple[str, ...]] = ("availability",)

    # Replaces `~` with this value in any topic of the payload.
    topic_prefix: str | None = Field(default=None, alias="~")
    origin: Origin = Field(alias="o")
    device: Device = Field(alias="dev")


class EntityConfig(DiscoveryEntity):
    """The generic entity configuration most platforms build on."""

    entity_category: EntityCategory | None = Field(default=None, alias="ent_cat")
    icon: str | None = Field(default=None, alias="ic")
    json_attributes_topic: str | None = Field(default=None, alias="json_attr_t")
    json_attributes_template: str | None = Field(default=None, alias="json_attr_tpl")
    # Used instead of `name` for the automatic generation of the `entity_id`.
    object_id: str | None = Field(default=None, alias="obj_id")
    unique_id: str | None = Field(default=None, alias="uniq_id")
    availability: Availability = Field(default_factory=Availability)
    enabled_by_default: bool | None = Field(default=None, alias="en")
