"""Camera entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.entity.base import EntityConfig


class Camera(EntityConfig):
    """A camera receiving still images on a topic."""

    component: ClassVar[str] = "camera"

    encoding: str | None = Field(default=None, alias="e")
    entity_picture: str | None = Field(default=None, alias="ent_pic")
    # Set to `b64` when the images are base64 encoded.
    image_encoding: str | None = Field(default=None, alias="img_e")
    name: str | None = None
    topic: str = Field(alias="t")
