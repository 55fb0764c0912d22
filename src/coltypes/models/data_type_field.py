"""Pydantic adapter for DataType.

On the wire a DataType is a bare string equal to its label, or null when no
type is specified.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from coltypes.core.exceptions import InvalidDataTypeError
from coltypes.types.data_type import DataType

logger = logging.getLogger(__name__)


def serialize_data_type(value: Optional[DataType]) -> Optional[str]:
    return value.value if value is not None else None


def deserialize_data_type(raw: Optional[str]) -> Optional[DataType]:
    """Build a DataType from its wire label.

    Empty or missing labels mean "no type specified" and yield None.
    Unknown labels are accepted as extension types.
    """
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        raise InvalidDataTypeError(label=raw, reason="data type label must be a string")

    data_type = DataType(raw)
    if not data_type.is_predefined:
        logger.debug(f"Deserialized extension data type label: {raw!r}")
    return data_type


def _validate(raw: Any) -> Optional[DataType]:
    if isinstance(raw, DataType):
        return raw
    return deserialize_data_type(raw)


class _DataTypePydanticAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(serialize_data_type),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return handler(core_schema.nullable_schema(core_schema.str_schema()))


DataTypeField = Annotated[Optional[DataType], _DataTypePydanticAnnotation]

_ADAPTER: TypeAdapter[Optional[DataType]] = TypeAdapter(DataTypeField)


def dump_data_type_json(value: Optional[DataType]) -> str:
    """Serialize to a JSON string token, e.g. '"VarChar"' or 'null'."""
    return _ADAPTER.dump_json(value).decode("utf-8")


def load_data_type_json(text: str | bytes) -> Optional[DataType]:
    return _ADAPTER.validate_json(text)
