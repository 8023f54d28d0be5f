"""CSV output of aggregated rows."""

from collections.abc import Iterable
from typing import TextIO

from src.exchange_rates.model.quote import AggregatedRow

CSV_HEADER = "Exchange,Market,Price"


def format_lines(rows: Iterable[AggregatedRow]) -> list[str]:
    """Header plus one line per row, each with a trailing newline."""
    return [f"{CSV_HEADER}\n", *(f"{row.to_csv_line()}\n" for row in rows)]


def write_rows(rows: Iterable[AggregatedRow], stream: TextIO) -> None:
    """Write the table to `stream` in the given row order."""
    for line in format_lines(rows):
        stream.write(line)
    stream.flush()
