"""Alarm control panel entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.common import QosLevel
from hass_mqtt_discovery.entity.base import EntityConfig


class AlarmControlPanel(EntityConfig):
    """An alarm panel controlled through command and state topics."""

    component: ClassVar[str] = "alarm_control_panel"

    # Either a fixed code, or one of REMOTE_CODE / REMOTE_CODE_TEXT to have the code sent to the device.
    code: str | None = None
    code_arm_required: bool | None = Field(default=None, alias="cod_arm_req")
    code_disarm_required: bool | None = Field(default=None, alias="cod_dis_req")
    code_trigger_required: bool | None = Field(default=None, alias="cod_trig_req")
    command_template: str | None = Field(default=None, alias="cmd_tpl")
    command_topic: str = Field(alias="cmd_t")
    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    name: str | None = None
    payload_arm_away: str | None = Field(default=None, alias="pl_arm_away")
    payload_arm_home: str | None = Field(default=None, alias="pl_arm_home")
    payload_arm_night: str | None = Field(default=None, alias="pl_arm_nite")
    payload_arm_vacation: str | None = Field(default=None, alias="pl_arm_vacation")
    payload_arm_custom_bypass: str | None = Field(default=None, alias="pl_arm_custom_b")
    payload_disarm: str | None = Field(default=None, alias="pl_disarm")
    payload_trigger: str | None = Field(default=None, alias="pl_trig")
    platform: str = "alarm_control_panel"
    qos: QosLevel | None = None
    retain: bool | None = Field(default=None, alias="ret")
    state_topic: str = Field(alias="stat_t")
    supported_features: list[str] | None = Field(default=None, alias="sup_feat")
    value_template: str | None = Field(default=None, alias="val_tpl")
