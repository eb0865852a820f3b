"""Plain fixed-width table output."""

from collections.abc import Sequence
from typing import Any

from rich.console import Console

console = Console()


def column_widths(rows: Sequence[dict[str, Any]], columns: Sequence[str]) -> list[int]:
    """Width of each column: the longest of its header and its values."""
    return [
        max([len(column)] + [len(str(row[column])) for row in rows])
        for column in columns
    ]


def format_table(rows: Sequence[dict[str, Any]], columns: Sequence[str]) -> list[str]:
    """Lay out rows as a header, a dashed separator and one line per row.

    Every field is left-justified to its column width and fields are joined
    by a single space.

    Args:
        rows: Records to show; each must contain every requested column
        columns: Keys to show, in order

    Returns:
        Table lines without trailing newlines

    Raises:
        KeyError: If a row lacks one of the columns
    """
    widths = column_widths(rows, columns)

    def format_line(values: Sequence[Any]) -> str:
        return " ".join(str(value).ljust(width) for value, width in zip(values, widths))

    lines = [
        format_line(columns),
        format_line(["-" * width for width in widths]),
    ]
    for row in rows:
        lines.append(format_line([row[column] for column in columns]))
    return lines


def print_table_for_columns(
    rows: Sequence[dict[str, Any]], columns: Sequence[str]
) -> None:
    """Print the table to standard output.

    Lines are written as laid out, without rich's markup, emoji or tab
    expansion, so the printed widths match ``column_widths``.
    """
    lines = format_table(rows, columns)
    console.file.write("".join(f"{line}\n" for line in lines))
    console.file.flush()
