from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class SerialModel(BaseModel):
    """Base for every serialized pass entity.

    Values are immutable, validated strictly (no str -> number coercion) and
    reject keys they do not declare. Aliased fields only accept their wire
    key, never the Python attribute name. Optional fields (declared with a
    ``None`` default) are left out of the dumped dict when unset instead of
    being written as ``null``.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    @model_serializer(mode="wrap")
    def _omit_absent_options(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for field_name, field_info in type(self).model_fields.items():
            if field_info.default is not None or getattr(self, field_name) is not None:
                continue
            data.pop(field_name, None)
            if field_info.alias:
                data.pop(field_info.alias, None)
        return data
