"""Building blocks shared by every entity configuration."""

from enum import StrEnum
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, BeforeValidator, Field, model_serializer, model_validator

from hass_mqtt_discovery.base import DiscoveryModel


class EntityCategory(StrEnum):
    """Classification of a non-primary entity."""

    # Allows changing the configuration of a device.
    CONFIG = "config"
    # Exposes configuration or diagnostics of a device without allowing changes.
    DIAGNOSTIC = "diagnostic"


class Qos(StrEnum):
    """The maximum QoS level used when receiving and publishing messages."""

    AT_MOST_ONCE = "0"
    AT_LEAST_ONCE = "1"
    EXACTLY_ONCE = "2"


def coerce_qos(value: Any) -> Any:
    """Accept bare integer QoS levels as written in YAML files."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


QosLevel = Annotated[Qos, BeforeValidator(coerce_qos)]


class SensorStateClass(StrEnum):
    """How the state of a sensor is aggregated into long-term statistics."""

    MEASUREMENT = "measurement"
    TOTAL = "total"
    TOTAL_INCREASING = "total_increasing"


class Origin(DiscoveryModel):
    """The application that supplies the discovery payload."""

    name: str
    sw_version: str | None = Field(default=None, alias="sw")
    support_url: str | None = None

    def with_sw_version(self, sw_version: str) -> Self:
        """Set the software version of the supplying application."""
        self.sw_version = sw_version
        return self

    def with_support_url(self, support_url: str) -> Self:
        """Set the support URL of the supplying application."""
        self.support_url = support_url
        return self


class DeviceConnection(BaseModel):
    """A ``[connection_type, connection_identifier]`` pair, e.g. ``["mac", "02:5b:26:a8:dc:12"]``."""

    type: str
    identifier: str

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, value: Any) -> Any:
        """Accept the two-element array form used on the wire."""
        if isinstance(value, (list, tuple)) and len(value) == 2:  # noqa: PLR2004
            return {"type": value[0], "identifier": value[1]}
        return value

    @model_serializer
    def as_pair(self) -> list[str]:
        """Serialize as a two-element array instead of an object."""
        return [self.type, self.identifier]

    @classmethod
    def mac(cls, mac_address: str) -> "DeviceConnection":
        """A connection identified by the MAC address of a network interface."""
        return cls(type="mac", identifier=mac_address)


class Device(DiscoveryModel):
    """The device an entity belongs to, tying it into the device registry.

    Only works when the entity's ``unique_id`` is set. At least one of
    ``identifiers`` or ``connections`` must be present to identify the device.
    """

    omit_empty: ClassVar[tuple[str, ...]] = ("identifiers", "connections")

    name: str | None = None
    identifiers: list[str] = Field(default_factory=list, alias="ids")
    connections: list[DeviceConnection] = Field(default_factory=list, alias="cns")
    configuration_url: str | None = Field(default=None, alias="cu")
    manufacturer: str | None = Field(default=None, alias="mf")
    model: str | None = Field(default=None, alias="mdl")
    suggested_area: str | None = Field(default=None, alias="sa")
    sw_version: str | None = Field(default=None, alias="sw")
    hw_version: str | None = Field(default=None, alias="hw")
    via_device: str | None = None

    def add_identifier(self, identifier: str) -> Self:
        """Add an ID that uniquely identifies the device, for example a serial number."""
        self.identifiers.append(identifier)
        return self

    def add_connection(self, connection: DeviceConnection | tuple[str, str]) -> Self:
        """Add a connection of the device to the outside world."""
        if not isinstance(connection, DeviceConnection):
            connection = DeviceConnection.model_validate(connection)
        self.connections.append(connection)
        return self


class AvailabilityMode(StrEnum):
    """Controls the conditions needed to set the entity to ``available``."""

    # payload_available must be received on all configured topics.
    ALL = "all"
    # payload_available must be received on at least one configured topic.
    ANY = "any"
    # The last payload received on any configured topic controls the availability.
    LATEST = "latest"


class AvailabilityCheck(DiscoveryModel):
    """A topic to subscribe to for availability (online/offline) updates."""

    payload_available: str | None = Field(default=None, alias="pl_avail")
    payload_not_available: str | None = Field(default=None, alias="pl_not_avail")
    topic: str = Field(alias="t")
    value_template: str | None = Field(default=None, alias="val_tpl")

    @classmethod
    def for_topic(cls, topic: str) -> "AvailabilityCheck":
        """A check on ``topic`` using the default ``online`` and ``offline`` payloads."""
        return cls(topic=topic)


class Availability(DiscoveryModel):
    """How Home Assistant checks the availability of an entity.

    The fields are merged into the entity's own payload rather than nested.
    Without any checks only the mode (and ``exp_aft`` when set) is sent.
    """

    omit_empty: ClassVar[tuple[str, ...]] = ("availability",)

    mode: AvailabilityMode = Field(default=AvailabilityMode.ALL, alias="avty_mode")
    availability: list[AvailabilityCheck] = Field(default_factory=list, alias="avty")
    # Seconds after which the state expires if it is not updated.
    expire_after: int | None = Field(default=None, alias="exp_aft")

    @classmethod
    def single_topic(cls, topic: str) -> "Availability":
        """A single check on ``topic`` using the default payloads."""
        return cls.single(AvailabilityCheck.for_topic(topic))

    @classmethod
    def single(cls, check: AvailabilityCheck) -> "Availability":
        """An availability using a single check."""
        return cls(mode=AvailabilityMode.ALL, availability=[check])

    @classmethod
    def all(cls, checks: list[AvailabilityCheck]) -> "Availability":
        """An availability requiring all the given checks."""
        return cls(mode=AvailabilityMode.ALL, availability=checks)

    @classmethod
    def any(cls, checks: list[AvailabilityCheck]) -> "Availability":
        """An availability requiring any of the given checks."""
        return cls(mode=AvailabilityMode.ANY, availability=checks)

    @classmethod
    def latest(cls, checks: list[AvailabilityCheck]) -> "Availability":
        """An availability controlled by the latest payload on any of the given checks."""
        return cls(mode=AvailabilityMode.LATEST, availability=checks)

    def with_expire_after(self, expire_after: int) -> Self:
        """Set the number of seconds after which the state expires if not updated."""
        self.expire_after = expire_after
        return self
