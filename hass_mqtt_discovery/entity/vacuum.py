"""Vacuum cleaner entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import Availability, EntityCategory, QosLevel
from hass_mqtt_discovery.entity.base import DiscoveryEntity


class Vacuum(DiscoveryEntity):
    """A robot vacuum reporting its state as JSON on the state topic."""

    component: ClassVar[str] = "vacuum"

    availability: Availability = Field(default_factory=Availability)
    entity_category: EntityCategory | None = Field(default=None, alias="ent_cat")
    command_topic: str | None = Field(default=None, alias="cmd_t")
    encoding: str | None = Field(default=None, alias="e")
    fan_speed_list: list[str] | None = Field(default=None, alias="fanspd_lst")
    json_attributes_template: str | None = Field(default=None, alias="json_attr_tpl")
    json_attributes_topic: str | None = Field(default=None, alias="json_attr_t")
    name: str | None = None
    object_id: str | None = Field(default=None, alias="obj_id")
    payload_clean_spot: str | None = Field(default=None, alias="pl_cln_sp")
    payload_locate: str | None = Field(default=None, alias="pl_loc")
    payload_pause: str | None = Field(default=None, alias="pl_paus")
    payload_return_to_base: str | None = Field(default=None, alias="pl_ret")
    payload_start: str | None = Field(default=None, alias="pl_strt")
    payload_stop: str | None = Field(default=None, alias="pl_stop")
    platform: str = "vacuum"
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    send_command_topic: str | None = Field(default=None, alias="send_cmd_t")
    set_fan_speed_topic: str | None = Field(default=None, alias="set_fan_spd_t")
    state_topic: str | None = Field(default=None, alias="stat_t")
    supported_features: list[str] | None = Field(default=None, alias="sup_feat")
    unique_id: str | None = Field(default=None, alias="uniq_id")
