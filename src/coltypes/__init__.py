"""coltypes.

Column data type labels for plugin-defined database tables.

DataType is an open-set enumeration of column types (Boolean, DateTime,
Decimal, Integer, Text, VarChar, or any extension label) that compares
ignoring case and serializes as a bare label string.
"""

from coltypes.core.exceptions import ColtypesException, ColumnSpecError, InvalidDataTypeError
from coltypes.models.data_type_field import (
    DataTypeField,
    deserialize_data_type,
    dump_data_type_json,
    load_data_type_json,
    serialize_data_type,
)
from coltypes.models.table_column import TableColumn, dump_table_columns, load_table_columns
from coltypes.types.data_type import (
    BOOLEAN,
    DATE_TIME,
    DECIMAL,
    INTEGER,
    PREDEFINED_DATA_TYPES,
    TEXT,
    VAR_CHAR,
    DataType,
)

__version__ = "0.1.0"

__all__ = [
    "DataType",
    "BOOLEAN",
    "DATE_TIME",
    "DECIMAL",
    "INTEGER",
    "TEXT",
    "VAR_CHAR",
    "PREDEFINED_DATA_TYPES",
    "DataTypeField",
    "serialize_data_type",
    "deserialize_data_type",
    "dump_data_type_json",
    "load_data_type_json",
    "TableColumn",
    "load_table_columns",
    "dump_table_columns",
    "ColtypesException",
    "InvalidDataTypeError",
    "ColumnSpecError",
]
