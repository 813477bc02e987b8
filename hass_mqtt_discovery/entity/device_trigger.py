"""Device triggers."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import Availability, EntityCategory, QosLevel
from hass_mqtt_discovery.entity.base import DiscoveryEntity


class DeviceTrigger(DiscoveryEntity):
    """Generates device trigger events from messages on a topic.

    Device triggers are announced on the ``device_automation`` component. The
    combination of ``type`` and ``subtype`` should be unique for a device.
    """

    component: ClassVar[str] = "device_automation"

    availability: Availability = Field(default_factory=Availability)
    entity_category: EntityCategory | None = Field(default=None, alias="ent_cat")
    automation_type: str = Field(default="trigger", alias="atype")
    payload: str | None = Field(default=None, alias="pl")
    qos: QosLevel | None = None
    topic: str = Field(alias="t")
    # e.g. button_short_press
    type: str
    # e.g. button_1
    subtype: str = Field(alias="stype")
    value_template: str | None = Field(default=None, alias="val_tpl")
