"""Base Pydantic model shared by every StepSecurity API payload."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer, model_validator


class WireModel(BaseModel):
    """Pydantic model for a JSON document exchanged with the StepSecurity API.

    Decoding is lenient: unknown keys are ignored and keys that are missing or
    null fall back to the field default, and a null document decodes as
    one with every field at its default. Fields listed in ``omit_empty`` are
    dropped from the encoded document when they hold an empty value.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    omit_empty: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _drop_null_values(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @model_serializer(mode="wrap")
    def _omit_empty_values(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        for name in self.omit_empty:
            field = type(self).model_fields[name]
            for key in (field.alias, name):
                if key is not None and key in data and _is_empty(data[key]):
                    del data[key]
        return data

    def to_wire(self) -> dict[str, Any]:
        """Encode the model as the JSON-compatible document sent to the API."""
        return self.model_dump(mode="json", by_alias=True)


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, dict)) and not value:
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0


def zero_null_values(value: Any, zero: Any) -> Any:
    """Replace null values of a JSON object with the zero value of its value type."""
    if isinstance(value, dict):
        return {key: zero if item is None else item for key, item in value.items()}
    return value
