"""Tag scanners."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import Availability, EntityCategory
from hass_mqtt_discovery.entity.base import DiscoveryEntity


class Tag(DiscoveryEntity):
    """Receives the ids of scanned tags on a topic."""

    component: ClassVar[str] = "tag"

    availability: Availability = Field(default_factory=Availability)
    entity_category: EntityCategory | None = Field(default=None, alias="ent_cat")
    topic: str = Field(alias="t")
    value_template: str | None = Field(default=None, alias="val_tpl")
