"""Test that every field is sent under its documented configuration key."""

import pytest

from hass_mqtt_discovery.common import Availability, AvailabilityCheck, Device, Origin
from hass_mqtt_discovery.entity import (
    AlarmControlPanel,
    BinarySensor,
    Camera,
    Climate,
    Cover,
    DeviceTracker,
    DeviceTrigger,
    EntityConfig,
    Event,
    Fan,
    Humidifier,
    Image,
    LawnMower,
    Lock,
    Number,
    Scene,
    Sensor,
    Siren,
    Switch,
    Tag,
    Update,
    Vacuum,
    Valve,
    WaterHeater,
)

HEADER = {
    "topic_prefix": "~",
    "origin": "o",
    "device": "dev",
    "availability": "availability",
    "entity_category": "ent_cat",
}

GENERIC = {
    **HEADER,
    "icon": "ic",
    "json_attributes_topic": "json_attr_t",
    "json_attributes_template": "json_attr_tpl",
    "object_id": "obj_id",
    "unique_id": "uniq_id",
    "enabled_by_default": "en",
}

KEYS = [
    (
        AlarmControlPanel,
        {
            **GENERIC,
            "code": "code",
            "code_arm_required": "cod_arm_req",
            "code_disarm_required": "cod_dis_req",
            "code_trigger_required": "cod_trig_req",
            "command_template": "cmd_tpl",
            "command_topic": "cmd_t",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "name": "name",
            "payload_arm_away": "pl_arm_away",
            "payload_arm_home": "pl_arm_home",
            "payload_arm_night": "pl_arm_nite",
            "payload_arm_vacation": "pl_arm_vacation",
            "payload_arm_custom_bypass": "pl_arm_custom_b",
            "payload_disarm": "pl_disarm",
            "payload_trigger": "pl_trig",
            "platform": "platform",
            "qos": "qos",
            "retain": "ret",
            "state_topic": "stat_t",
            "supported_features": "sup_feat",
            "value_template": "val_tpl",
        },
    ),
    (
        BinarySensor,
        {
            **GENERIC,
            "state_topic": "stat_t",
            "value_template": "val_tpl",
            "device_class": "dev_cla",
            "force_update": "frc_upd",
            "name": "name",
            "off_delay": "off_dly",
            "payload_off": "pl_off",
            "payload_on": "pl_on",
        },
    ),
    (
        Camera,
        {
            **GENERIC,
            "encoding": "e",
            "entity_picture": "ent_pic",
            "image_encoding": "img_e",
            "name": "name",
            "topic": "t",
        },
    ),
    (
        Climate,
        {
            **GENERIC,
            "action_template": "act_tpl",
            "action_topic": "act_t",
            "current_humidity_template": "current_humidity_template",
            "current_humidity_topic": "current_humidity_topic",
            "current_temperature_template": "curr_temp_tpl",
            "current_temperature_topic": "curr_temp_t",
            "fan_mode_command_template": "fan_mode_cmd_tpl",
            "fan_mode_command_topic": "fan_mode_cmd_t",
            "fan_mode_state_template": "fan_mode_stat_tpl",
            "fan_mode_state_topic": "fan_mode_stat_t",
            "fan_modes": "fan_modes",
            "initial": "init",
            "max_humidity": "max_hum",
            "max_temp": "max_temp",
            "min_humidity": "min_hum",
            "min_temp": "min_temp",
            "mode_command_template": "mode_cmd_tpl",
            "mode_command_topic": "mode_cmd_t",
            "mode_state_template": "mode_stat_tpl",
            "mode_state_topic": "mode_stat_t",
            "modes": "modes",
            "name": "name",
            "optimistic": "opt",
            "power_command_template": "power_command_template",
            "power_command_topic": "power_command_topic",
            "precision": "precision",
            "preset_mode_command_template": "pr_mode_cmd_tpl",
            "preset_mode_command_topic": "pr_mode_cmd_t",
            "preset_mode_state_topic": "pr_mode_stat_t",
            "preset_mode_value_template": "pr_mode_val_tpl",
            "preset_modes": "pr_modes",
            "retain": "ret",
            "swing_mode_command_template": "swing_mode_cmd_tpl",
            "swing_mode_command_topic": "swing_mode_cmd_t",
            "swing_mode_state_template": "swing_mode_stat_tpl",
            "swing_mode_state_topic": "swing_mode_stat_t",
            "swing_modes": "swing_modes",
            "target_humidity_command_template": "hum_cmd_tpl",
            "target_humidity_command_topic": "hum_cmd_t",
            "target_humidity_state_topic": "hum_stat_t",
            "target_humidity_state_template": "hum_state_tpl",
            "temperature_command_template": "temp_cmd_tpl",
            "temperature_command_topic": "temp_cmd_t",
            "temperature_high_command_template": "temp_hi_cmd_tpl",
            "temperature_high_command_topic": "temp_hi_cmd_t",
            "temperature_high_state_template": "temp_hi_stat_tpl",
            "temperature_high_state_topic": "temp_hi_stat_t",
            "temperature_low_command_template": "temp_lo_cmd_tpl",
            "temperature_low_command_topic": "temp_lo_cmd_t",
            "temperature_low_state_template": "temp_lo_stat_tpl",
            "temperature_low_state_topic": "temp_lo_stat_t",
            "temperature_state_template": "temp_stat_tpl",
            "temperature_state_topic": "temp_stat_t",
            "temperature_unit": "temp_unit",
            "temp_step": "temp_step",
            "value_template": "val_tpl",
        },
    ),
    (
        Cover,
        {
            **GENERIC,
            "command_topic": "cmd_t",
            "device_class": "dev_cla",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "name": "name",
            "optimistic": "opt",
            "payload_close": "pl_cls",
            "payload_open": "pl_open",
            "payload_stop": "pl_stop",
            "platform": "platform",
            "position_closed": "pos_clsd",
            "position_open": "pos_open",
            "position_template": "pos_tpl",
            "position_topic": "pos_t",
            "qos": "qos",
            "retain": "ret",
            "set_position_template": "set_pos_tpl",
            "set_position_topic": "set_pos_t",
            "state_closed": "stat_clsd",
            "state_closing": "stat_closing",
            "state_open": "stat_open",
            "state_opening": "stat_opening",
            "state_stopped": "stat_stopped",
            "state_topic": "stat_t",
            "tilt_closed_value": "tilt_clsd_val",
            "tilt_command_template": "tilt_cmd_tpl",
            "tilt_command_topic": "tilt_cmd_t",
            "tilt_max": "tilt_max",
            "tilt_min": "tilt_min",
            "tilt_opened_value": "tilt_opnd_val",
            "tilt_optimistic": "tilt_opt",
            "tilt_status_template": "tilt_status_tpl",
            "tilt_status_topic": "tilt_status_t",
            "value_template": "val_tpl",
        },
    ),
    (
        DeviceTracker,
        {
            **HEADER,
            "icon": "ic",
            "json_attributes_template": "json_attr_tpl",
            "json_attributes_topic": "json_attr_t",
            "name": "name",
            "object_id": "obj_id",
            "payload_home": "pl_home",
            "payload_not_home": "pl_not_home",
            "payload_reset": "pl_rst",
            "platform": "platform",
            "qos": "qos",
            "source_type": "src_type",
            "state_topic": "stat_t",
            "unique_id": "uniq_id",
            "value_template": "val_tpl",
        },
    ),
    (
        DeviceTrigger,
        {
            **HEADER,
            "automation_type": "atype",
            "payload": "pl",
            "qos": "qos",
            "topic": "t",
            "type": "type",
            "subtype": "stype",
            "value_template": "val_tpl",
        },
    ),
    (
        Event,
        {
            **GENERIC,
            "device_class": "dev_cla",
            "encoding": "e",
            "event_types": "evt_typ",
            "name": "name",
            "qos": "qos",
            "state_topic": "stat_t",
            "value_template": "val_tpl",
        },
    ),
    (
        Fan,
        {
            **GENERIC,
            "command_template": "cmd_tpl",
            "command_topic": "cmd_t",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "name": "name",
            "optimistic": "opt",
            "direction_command_template": "dir_cmd_tpl",
            "direction_command_topic": "dir_cmd_t",
            "direction_state_topic": "dir_stat_t",
            "direction_value_template": "dir_val_tpl",
            "oscillation_command_template": "osc_cmd_tpl",
            "oscillation_command_topic": "osc_cmd_t",
            "oscillation_state_topic": "osc_stat_t",
            "oscillation_value_template": "osc_val_tpl",
            "payload_off": "pl_off",
            "payload_on": "pl_on",
            "payload_oscillation_off": "pl_osc_off",
            "payload_oscillation_on": "pl_osc_on",
            "payload_reset_percentage": "pl_rst_pct",
            "payload_reset_preset_mode": "pl_rst_pr_mode",
            "percentage_command_template": "pct_cmd_tpl",
            "percentage_command_topic": "pct_cmd_t",
            "percentage_state_topic": "pct_stat_t",
            "percentage_value_template": "pct_val_tpl",
            "platform": "platform",
            "preset_mode_command_template": "pr_mode_cmd_tpl",
            "preset_mode_command_topic": "pr_mode_cmd_t",
            "preset_mode_state_topic": "pr_mode_stat_t",
            "preset_mode_value_template": "pr_mode_val_tpl",
            "preset_modes": "pr_modes",
            "qos": "qos",
            "retain": "ret",
            "speed_range_max": "spd_rng_max",
            "speed_range_min": "spd_rng_min",
            "state_topic": "stat_t",
            "state_value_template": "stat_val_tpl",
        },
    ),
    (
        Humidifier,
        {
            **GENERIC,
            "action_template": "act_tpl",
            "action_topic": "act_t",
            "current_humidity_template": "current_humidity_template",
            "current_humidity_topic": "current_humidity_topic",
            "command_template": "cmd_tpl",
            "command_topic": "cmd_t",
            "device_class": "dev_cla",
            "encoding": "e",
            "max_humidity": "max_hum",
            "min_humidity": "min_hum",
            "name": "name",
            "optimistic": "opt",
            "payload_off": "pl_off",
            "payload_on": "pl_on",
            "payload_reset_humidity": "pl_rst_hum",
            "payload_reset_mode": "pl_rst_mode",
            "target_humidity_command_template": "hum_cmd_tpl",
            "target_humidity_command_topic": "hum_cmd_t",
            "target_humidity_state_topic": "hum_stat_t",
            "target_humidity_state_template": "hum_state_tpl",
            "mode_command_template": "mode_cmd_tpl",
            "mode_command_topic": "mode_cmd_t",
            "mode_state_topic": "mode_stat_t",
            "mode_state_template": "mode_stat_tpl",
            "modes": "modes",
            "qos": "qos",
            "retain": "ret",
            "state_topic": "stat_t",
            "state_value_template": "stat_val_tpl",
        },
    ),
    (
        Image,
        {
            **GENERIC,
            "content_type": "cont_type",
            "encoding": "e",
            "image_encoding": "img_e",
            "image_topic": "img_t",
            "name": "name",
            "url_template": "url_tpl",
            "url_topic": "url_t",
        },
    ),
    (
        LawnMower,
        {
            **GENERIC,
            "activity_state_topic": "activity_state_topic",
            "activity_value_template": "activity_value_template",
            "dock_command_template": "dock_command_template",
            "dock_command_topic": "dock_command_topic",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "name": "name",
            "optimistic": "opt",
            "pause_command_template": "pause_command_template",
            "pause_command_topic": "pause_command_topic",
            "platform": "platform",
            "qos": "qos",
            "start_mowing_template": "start_mowing_template",
            "start_mowing_command_topic": "start_mowing_command_topic",
            "retain": "ret",
        },
    ),
    (
        Lock,
        {
            **GENERIC,
            "code_format": "code_format",
            "command_template": "cmd_tpl",
            "command_topic": "cmd_t",
            "encoding": "e",
            "name": "name",
            "optimistic": "opt",
            "payload_lock": "pl_lock",
            "payload_unlock": "pl_unlk",
            "payload_open": "pl_open",
            "payload_reset": "pl_rst",
            "qos": "qos",
            "retain": "ret",
            "state_jammed": "stat_jam",
            "state_locked": "stat_locked",
            "state_locking": "stat_locking",
            "state_topic": "stat_t",
            "state_unlocked": "stat_unlocked",
            "state_unlocking": "stat_unlocking",
            "value_template": "val_tpl",
        },
    ),
    (
        Number,
        {
            **GENERIC,
            "state_topic": "stat_t",
            "value_template": "val_tpl",
            "command_topic": "cmd_t",
            "command_template": "cmd_tpl",
            "optimistic": "opt",
            "retain": "ret",
            "device_class": "dev_cla",
            "name": "name",
            "min": "min",
            "max": "max",
            "mode": "mode",
            "payload_reset": "pl_rst",
            "step": "step",
            "unit_of_measurement": "unit_of_meas",
        },
    ),
    (
        Scene,
        {
            **GENERIC,
            "command_topic": "cmd_t",
            "encoding": "e",
            "name": "name",
            "payload_on": "pl_on",
            "qos": "qos",
            "retain": "ret",
        },
    ),
    (
        Sensor,
        {
            **GENERIC,
            "state_topic": "stat_t",
            "value_template": "val_tpl",
            "device_class": "dev_cla",
            "force_update": "frc_upd",
            "last_reset_value_template": "lrst_val_tpl",
            "name": "name",
            "suggested_display_precision": "sug_dsp_prc",
            "state_class": "stat_cla",
            "unit_of_measurement": "unit_of_meas",
        },
    ),
    (
        Siren,
        {
            **GENERIC,
            "command_template": "cmd_tpl",
            "command_off_template": "cmd_off_tpl",
            "command_topic": "cmd_t",
            "encoding": "e",
            "name": "name",
            "optimistic": "opt",
            "payload_available": "pl_avail",
            "payload_not_available": "pl_not_avail",
            "payload_off": "pl_off",
            "payload_on": "pl_on",
            "qos": "qos",
            "retain": "ret",
            "state_off": "stat_off",
            "state_on": "stat_on",
            "state_topic": "stat_t",
            "state_value_template": "stat_val_tpl",
            "support_duration": "sup_dur",
            "support_volume_set": "sup_vol",
        },
    ),
    (
        Switch,
        {
            **GENERIC,
            "command_template": "cmd_tpl",
            "command_topic": "cmd_t",
            "device_class": "dev_cla",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "name": "name",
            "optimistic": "opt",
            "payload_off": "pl_off",
            "payload_on": "pl_on",
            "platform": "platform",
            "qos": "qos",
            "retain": "ret",
            "state_off": "stat_off",
            "state_on": "stat_on",
            "state_topic": "stat_t",
            "value_template": "val_tpl",
        },
    ),
    (Tag, {**HEADER, "topic": "t", "value_template": "val_tpl"}),
    (
        Update,
        {
            **GENERIC,
            "command_topic": "cmd_t",
            "device_class": "dev_cla",
            "display_precision": "display_precision",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "latest_version_template": "l_ver_tpl",
            "latest_version_topic": "l_ver_t",
            "name": "name",
            "payload_install": "pl_inst",
            "platform": "platform",
            "qos": "qos",
            "release_summary": "rel_s",
            "release_url": "rel_u",
            "retain": "ret",
            "state_topic": "stat_t",
            "title": "tit",
            "value_template": "val_tpl",
        },
    ),
    (
        Vacuum,
        {
            **HEADER,
            "command_topic": "cmd_t",
            "encoding": "e",
            "fan_speed_list": "fanspd_lst",
            "json_attributes_template": "json_attr_tpl",
            "json_attributes_topic": "json_attr_t",
            "name": "name",
            "object_id": "obj_id",
            "payload_clean_spot": "pl_cln_sp",
            "payload_locate": "pl_loc",
            "payload_pause": "pl_paus",
            "payload_return_to_base": "pl_ret",
            "payload_start": "pl_strt",
            "payload_stop": "pl_stop",
            "platform": "platform",
            "qos": "qos",
            "retain": "ret",
            "send_command_topic": "send_cmd_t",
            "set_fan_speed_topic": "set_fan_spd_t",
            "state_topic": "stat_t",
            "supported_features": "sup_feat",
            "unique_id": "uniq_id",
        },
    ),
    (
        Valve,
        {
            **GENERIC,
            "command_template": "cmd_tpl",
            "command_topic": "cmd_t",
            "device_class": "dev_cla",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "name": "name",
            "optimistic": "opt",
            "payload_close": "pl_cls",
            "payload_open": "pl_open",
            "payload_stop": "pl_stop",
            "platform": "platform",
            "position_closed": "pos_clsd",
            "position_open": "pos_open",
            "qos": "qos",
            "reports_position": "pos",
            "retain": "ret",
            "state_closed": "stat_clsd",
            "state_closing": "stat_closing",
            "state_open": "stat_open",
            "state_opening": "stat_opening",
            "state_topic": "stat_t",
            "value_template": "val_tpl",
        },
    ),
    (
        WaterHeater,
        {
            **GENERIC,
            "current_temperature_template": "curr_temp_tpl",
            "current_temperature_topic": "curr_temp_t",
            "encoding": "e",
            "entity_picture": "ent_pic",
            "initial": "init",
            "max_temp": "max_temp",
            "min_temp": "min_temp",
            "mode_command_template": "mode_cmd_tpl",
            "mode_command_topic": "mode_cmd_t",
            "mode_state_template": "mode_stat_tpl",
            "mode_state_topic": "mode_stat_t",
            "modes": "modes",
            "name": "name",
            "optimistic": "opt",
            "payload_off": "pl_off",
            "payload_on": "pl_on",
            "platform": "platform",
            "power_command_template": "power_command_template",
            "power_command_topic": "power_command_topic",
            "precision": "precision",
            "qos": "qos",
            "retain": "ret",
            "temperature_command_template": "temp_cmd_tpl",
            "temperature_command_topic": "temp_cmd_t",
            "temperature_state_template": "temp_stat_tpl",
            "temperature_state_topic": "temp_stat_t",
            "temperature_unit": "temp_unit",
            "value_template": "val_tpl",
        },
    ),
]


def wire_keys(model) -> dict[str, str]:
    """Map every field name of ``model`` to the key it is serialized under."""
    return {name: field.alias or name for name, field in model.model_fields.items()}


@pytest.mark.parametrize(("model", "keys"), KEYS, ids=[model.__name__ for model, _ in KEYS])
def test_entity_keys(model, keys):
    """Test that the entity's fields map to exactly the documented keys."""
    assert wire_keys(model) == keys


def test_generic_entity_keys():
    """Test the keys of the generic entity configuration."""
    assert wire_keys(EntityConfig) == GENERIC


def test_common_keys():
    """Test the keys of the shared building blocks."""
    assert wire_keys(Origin) == {"name": "name", "sw_version": "sw", "support_url": "support_url"}
    assert wire_keys(Device) == {
        "name": "name",
        "identifiers": "ids",
        "connections": "cns",
        "configuration_url": "cu",
        "manufacturer": "mf",
        "model": "mdl",
        "suggested_area": "sa",
        "sw_version": "sw",
        "hw_version": "hw",
        "via_device": "via_device",
    }
    assert wire_keys(Availability) == {"mode": "avty_mode", "availability": "avty", "expire_after": "exp_aft"}
    assert wire_keys(AvailabilityCheck) == {
        "payload_available": "pl_avail",
        "payload_not_available": "pl_not_avail",
        "topic": "t",
        "value_template": "val_tpl",
    }
