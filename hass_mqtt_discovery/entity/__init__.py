"""Entity configurations for each supported platform component."""

from hass_mqtt_discovery.entity.alarm_control_panel import AlarmControlPanel
from hass_mqtt_discovery.entity.base import DiscoveryEntity, EntityConfig
from hass_mqtt_discovery.entity.binary_sensor import BinarySensor
from hass_mqtt_discovery.entity.camera import Camera
from hass_mqtt_discovery.entity.climate import Climate, TemperatureUnit
from hass_mqtt_discovery.entity.cover import Cover
from hass_mqtt_discovery.entity.device_tracker import DeviceTracker
from hass_mqtt_discovery.entity.device_trigger import DeviceTrigger
from hass_mqtt_discovery.entity.event import Event
from hass_mqtt_discovery.entity.fan import Fan
from hass_mqtt_discovery.entity.humidifier import Humidifier
from hass_mqtt_discovery.entity.image import Image
from hass_mqtt_discovery.entity.lawn_mower import LawnMower
from hass_mqtt_discovery.entity.lock import Lock
from hass_mqtt_discovery.entity.number import DisplayMode, Number
from hass_mqtt_discovery.entity.scene import Scene
from hass_mqtt_discovery.entity.sensor import Sensor
from hass_mqtt_discovery.entity.siren import Siren
from hass_mqtt_discovery.entity.switch import Switch
from hass_mqtt_discovery.entity.tag import Tag
from hass_mqtt_discovery.entity.update import Update
from hass_mqtt_discovery.entity.vacuum import Vacuum
from hass_mqtt_discovery.entity.valve import Valve
from hass_mqtt_discovery.entity.water_heater import WaterHeater

COMPONENTS: dict[str, type[DiscoveryEntity]] = {
    entity.component: entity
    for entity in (
        AlarmControlPanel,
        BinarySensor,
        Camera,
        Climate,
        Cover,
        DeviceTracker,
        DeviceTrigger,
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
}

__all__ = [
    "COMPONENTS",
    "AlarmControlPanel",
    "BinarySensor",
    "Camera",
    "Climate",
    "Cover",
    "DeviceTracker",
    "DeviceTrigger",
    "DiscoveryEntity",
    "DisplayMode",
    "EntityConfig",
    "Event",
    "Fan",
    "Humidifier",
    "Image",
    "LawnMower",
    "Lock",
    "Number",
    "Scene",
    "Sensor",
    "Siren",
    "Switch",
    "Tag",
    "TemperatureUnit",
    "Update",
    "Vacuum",
    "Valve",
    "WaterHeater",
]
