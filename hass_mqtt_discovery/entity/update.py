"""Update entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.device_classes import UpdateDeviceClass
from hass_mqtt_discovery.entity.base import EntityConfig


class Update(EntityConfig):
    """Announces available firmware or software updates and how to install them."""

    component: ClassVar[str] = "update"

    command_topic: str | None = Field(default=None, alias="cmd_t")
    device_class: UpdateDeviceClass | None = Field(default=None, alias="dev_cla")
    display_precision: int | None = None
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    latest_version_template: str | None = Field(default=None, alias="l_ver_tpl")
    latest_version_topic: str | None = Field(default=None, alias="l_ver_t")
    name: str | None = None
    payload_install: str | None = Field(default=None, alias="pl_inst")
    platform: str = "update"
    qos: QosLevel | None = None
    release_summary: str | None = Field(default=None, alias="rel_s")
    release_url: str | None = Field(default=None, alias="rel_u")
    retain: bool | None = Field(default=None, alias="ret")
    state_topic: str | None = Field(default=None, alias="stat_t")
    title: str | None = Field(default=None, alias="tit")
    value_template: str | None = Field(default=None, alias="val_tpl")
