"""Image entities."""

from typing import ClassVar

from pydantic import Field

from hass_mqtt_discovery.entity.base import EntityConfig


class Image(EntityConfig):
    """An image received either as data on ``image_topic`` or as a URL on ``url_topic``."""

    component: ClassVar[str] = "image"

    content_type: str | None = Field(default=None, alias="cont_type")
    encoding: str | None = Field(default=None, alias="e")
    image_encoding: str | None = Field(default=None, alias="img_e")
    image_topic: str | None = Field(default=None, alias="img_t")
    name: str | None = None
    url_template: str | None = Field(default=None, alias="url_tpl")
    url_topic: str | None = Field(default=None, alias="url_t")
