from __future__ import annotations

from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from coltypes.core.exceptions import ColumnSpecError
from coltypes.models.data_type_field import DataTypeField
from coltypes.types.data_type import DataType, ignore_case_key


class TableColumn(BaseModel):
    """Column descriptor for a plugin-defined table.

    `data_type` travels as a bare label string. A missing or empty label
    means no type was specified.
    """

    attribute_name: str
    data_type: DataTypeField = None

    # Only meaningful for VarChar (and extension types); 0 means "default length".
    data_length: int = Field(default=0, ge=0)

    is_primary_key: bool = False
    is_identity: bool = False

    @field_validator("attribute_name")
    @classmethod
    def _validate_attribute_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("attribute_name must not be empty")
        return v

    @model_validator(mode="after")
    def _validate_data_length(self) -> "TableColumn":
        if self.data_length and self.data_type is not None:
            if self.data_type.is_predefined and self.data_type != DataType.VAR_CHAR:
                raise ValueError(
                    f"data_length is only valid for VarChar columns, not {self.data_type}"
                )
        return self

    @model_validator(mode="after")
    def _validate_identity(self) -> "TableColumn":
        if self.is_identity and self.data_type != DataType.INTEGER:
            raise ValueError("is_identity requires data_type 'Integer'")
        return self


def load_table_columns(items: Iterable[Dict[str, Any]]) -> List[TableColumn]:
    """Validate column documents, rejecting duplicate attribute names (ignoring case)."""
    columns: List[TableColumn] = []
    seen: Dict[str, int] = {}
    for index, item in enumerate(items):
        try:
            column = TableColumn.model_validate(item)
        except ValidationError as exc:
            raise ColumnSpecError(
                reason="Invalid column definition",
                details={"index": index, "errors": exc.errors(include_url=False)},
            ) from exc

        key = ignore_case_key(column.attribute_name)
        if key in seen:
            raise ColumnSpecError(
                reason="Duplicate attribute_name",
                details={"index": index, "first_index": seen[key], "attribute_name": column.attribute_name},
            )
        seen[key] = index
        columns.append(column)
    return columns


def dump_table_columns(columns: Iterable[TableColumn]) -> List[Dict[str, Any]]:
    return [column.model_dump(mode="json") for column in columns]
