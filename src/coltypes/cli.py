"""
Command-line interface for coltypes.

Validates column definition files and lists the predefined data types.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from coltypes.core.logger import get_logger
from coltypes.models.table_column import TableColumn, load_table_columns
from coltypes.types.data_type import PREDEFINED_DATA_TYPES

logger = get_logger(__name__)


def validate_columns(config_path: str) -> List[TableColumn]:
    """
    Load and validate a JSON file holding a list of column definitions.

    Args:
        config_path: Path to a JSON file, e.g.
            [{"attribute_name": "Id", "data_type": "Integer", "is_identity": true}]

    Returns:
        The validated columns

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a JSON list
        ColumnSpecError: If any column definition is invalid
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Columns file not found: {config_path}")

    with open(config_file, "r") as f:
        document = json.load(f)

    if not isinstance(document, list):
        raise ValueError(f"Expected a JSON list of columns, got {type(document).__name__}")

    logger.info(f"Validating columns: {config_path}")
    columns = load_table_columns(document)
    for column in columns:
        if column.data_type is not None and not column.data_type.is_predefined:
            logger.warning(
                f"Column {column.attribute_name!r} uses extension data type {str(column.data_type)!r}"
            )
    logger.info(f"{len(columns)} column(s) are valid")
    return columns


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command-line interface for coltypes.

    Usage:
        coltypes validate /path/to/columns.json
        coltypes types
    """
    parser = argparse.ArgumentParser(
        prog="coltypes",
        description="Column data type labels and column definitions",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a JSON file of column definitions",
    )
    validate_parser.add_argument("config", help="Path to columns file (JSON)")

    subparsers.add_parser("types", help="List the predefined data types")

    args = parser.parse_args(argv)

    if args.verbose:
        get_logger("coltypes", level="DEBUG")

    if args.command == "validate":
        try:
            validate_columns(args.config)
            return 0
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            return 1

    if args.command == "types":
        for data_type in PREDEFINED_DATA_TYPES.values():
            print(data_type)
        return 0

    parser.print_help()
    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
