"""Render volume records for the terminal."""
import json
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

KeyList = List[str]
Formatter = Callable[[Any], str]
FormatterList = Dict[str, Formatter]

# Server values are printed verbatim, never read as markup
console = Console(markup=False, color_system=None, highlight=False)


def json_formatter(value: Any) -> str:
    """Pretty-print a nested value such as volume metadata."""
    if value is None:
        return ""
    return json.dumps(value, indent=2, sort_keys=True)


def default_formatter(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def wire_key(key: str) -> str:
    """Map a display key to the record's field name (``PoolId`` -> ``poolId``)."""
    return key[:1].lower() + key[1:]


def project(
    record: Mapping[str, Any],
    keys: KeyList,
    formatters: Optional[FormatterList] = None,
) -> Dict[str, str]:
    """Select exactly ``keys`` from ``record``, in order, as display strings."""
    formatters = formatters or {}
    row = {}
    for key in keys:
        fmt = formatters.get(key, default_formatter)
        row[key] = fmt(record.get(wire_key(key)))
    return row


def print_dict(
    record: Mapping[str, Any],
    keys: KeyList,
    formatters: Optional[FormatterList] = None,
) -> None:
    """Print one record as a Property/Value table."""
    table = Table(box=box.ASCII, show_lines=True)
    table.add_column("Property", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in project(record, keys, formatters).items():
        table.add_row(key, Text(value))
    console.print(table)


def print_list(
    records: Iterable[Mapping[str, Any]],
    keys: KeyList,
    formatters: Optional[FormatterList] = None,
) -> None:
    """Print records as a table with one column per key."""
    table = Table(box=box.ASCII)
    for key in keys:
        table.add_column(key, overflow="fold")
    for record in records:
        table.add_row(*(Text(value) for value in project(record, keys, formatters).values()))
    console.print(table)
