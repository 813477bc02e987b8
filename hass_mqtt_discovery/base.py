"""Compact serialization shared by every discovery model.

All models serialize using their short wire keys. Unset values are dropped, the
fields listed in ``omit_empty`` are dropped when they hold an empty collection,
and the fields listed in ``flattened`` have their own keys merged into the
parent object in place of the field itself.
"""

from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer

ModelT = TypeVar("ModelT", bound="DiscoveryModel")


class DiscoveryModel(BaseModel):
    """Base model for all discovery records."""

    model_config = ConfigDict(
        extra="forbid",
        serialize_by_alias=True,
        validate_assignment=True,
        validate_by_alias=True,
        validate_by_name=True,
    )

    omit_empty: ClassVar[tuple[str, ...]] = ()
    flattened: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def keys_for(cls, *names: str) -> set[str]:
        """Return every key the named fields may be serialized under."""
        keys = set()
        for name in names:
            keys.add(name)
            field = cls.model_fields.get(name)
            if field is None:
                continue
            if field.serialization_alias is not None:
                keys.add(field.serialization_alias)
            if field.alias is not None:
                keys.add(field.alias)
        return keys

    @classmethod
    def builder(cls, **values: Any) -> "ModelBuilder[Self]":
        """Start a fluent builder for this model."""
        return ModelBuilder(cls, **values)

    @model_serializer(mode="wrap")
    def serialize_compact(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Serialize the fields, then apply the compaction rules."""
        return self.compact(handler(self))

    def compact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Drop unset and empty values and merge flattened records into ``data``."""
        omit_empty = self.keys_for(*self.omit_empty)
        flattened = self.keys_for(*self.flattened)
        result = {}
        for key, value in data.items():
            if value is None:
                continue
            if key in omit_empty and len(value) == 0:
                continue
            if key in flattened and isinstance(value, dict):
                result.update(value)
                continue
            result[key] = value
        return result

    def discovery_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible discovery payload."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Return the compact JSON discovery payload."""
        return self.model_dump_json()


class ModelBuilder(Generic[ModelT]):
    """Chainable setters for the fields of a discovery model.

    Every field of the model is available as a method of the same name that
    records the value and returns the builder. Nothing is validated until
    :meth:`build` is called.
    """

    def __init__(self, model: type[ModelT], **values: Any) -> None:
        self._model = model
        self._values: dict[str, Any] = dict(values)

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._model.model_fields:
            msg = f"{self._model.__name__} has no field {name!r}"
            raise AttributeError(msg)

        def setter(value: Any) -> "ModelBuilder[ModelT]":
            self._values[name] = value
            return self

        setter.__name__ = name
        return setter

    def __dir__(self) -> list[str]:
        return [*super().__dir__(), *self._model.model_fields]

    def build(self) -> ModelT:
        """Validate the collected values and return the model."""
        return self._model(**self._values)
