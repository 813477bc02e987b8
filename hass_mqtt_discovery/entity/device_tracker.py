"""Device tracker entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import Availability, EntityCategory, QosLevel
from hass_mqtt_discovery.entity.base import DiscoveryEntity


class DeviceTracker(DiscoveryEntity):
    """Tracks the location of a device from a state or attributes topic."""

    component: ClassVar[str] = "device_tracker"

    availability: Availability = Field(default_factory=Availability)
    entity_category: EntityCategory | None = Field(default=None, alias="ent_cat")
    icon: str | None = Field(default=None, alias="ic")
    json_attributes_template: str | None = Field(default=None, alias="json_attr_tpl")
    json_attributes_topic: str | None = Field(default=None, alias="json_attr_t")
    name: str | None = None
    object_id: str | None = Field(default=None, alias="obj_id")
    payload_home: str | None = Field(default=None, alias="pl_home")
    payload_not_home: str | None = Field(default=None, alias="pl_not_home")
    payload_reset: str | None = Field(default=None, alias="pl_rst")
    platform: str = "device_tracker"
    qos: QosLevel | None = None
    # One of gps, router, bluetooth or bluetooth_le.
    source_type: str | None = Field(default=None, alias="src_type")
    state_topic: str | None = Field(default=None, alias="stat_t")
    unique_id: str | None = Field(default=None, alias="uniq_id")
    value_template: str | None = Field(default=None, alias="val_tpl")
