"""Functions for turning a configuration file into discovery payloads."""

from typing import IO, Any

from pydantic import ValidationError
from yaml import YAMLError, safe_load

from hass_mqtt_discovery.entity import COMPONENTS, DiscoveryEntity
from hass_mqtt_discovery.settings import ConfigModel, EntityModel


class RenderError(Exception):
    """An exception raised while rendering the discovery payloads."""

    pass


def load_config(stream: IO) -> ConfigModel:
    """Load and validate the configuration file."""
    try:
        return ConfigModel.model_validate(safe_load(stream))
    except YAMLError as err:
        msg = f"The configuration file is not valid YAML: {err}"
        raise RenderError(msg) from err
    except ValidationError as err:
        msg = f"The configuration file is invalid: {err}"
        raise RenderError(msg) from err


def option_names(entity_cls: type[DiscoveryEntity], options: dict[str, Any]) -> dict[str, Any]:
    """Map any short keys in ``options`` to the field names of ``entity_cls``."""
    names = {field.alias: name for name, field in entity_cls.model_fields.items() if field.alias is not None}
    return {names.get(key, key): value for key, value in options.items()}


def build_entity(config: ConfigModel, entity: EntityModel, index: int = 0) -> DiscoveryEntity:
    """Build a single entity, using the file-level settings unless the entity overrides them."""
    entity_cls = COMPONENTS.get(entity.component)
    if entity_cls is None:
        msg = f"Unknown component {entity.component!r} for entity {index + 1}."
        raise RenderError(msg)
    values: dict[str, Any] = {
        "origin": config.origin.model_copy(deep=True),
        "device": config.device.model_copy(deep=True),
    }
    if config.topic_prefix is not None:
        values["topic_prefix"] = config.topic_prefix
    if config.availability is not None:
        values["availability"] = config.availability.model_copy(deep=True)
    values.update(option_names(entity_cls, entity.options))
    try:
        return entity_cls(**values)
    except ValidationError as err:
        msg = f"The {entity.component} entity {index + 1} is invalid: {err}"
        raise RenderError(msg) from err


def build_entities(config: ConfigModel) -> list[DiscoveryEntity]:
    """Build all entities defined in the configuration."""
    return [build_entity(config, entity, idx) for idx, entity in enumerate(config.entities)]


def render_payloads(config: ConfigModel) -> list[str]:
    """Render the compact JSON discovery payload of every configured entity."""
    return [entity.to_json() for entity in build_entities(config)]
