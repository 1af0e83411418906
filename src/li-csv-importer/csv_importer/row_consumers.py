"""Per-row hooks invoked by the CSV file processor.

A row consumer receives one decoded row at a time. The importer does not
define what happens to a row; deployments that need to store or forward
rows pass their own consumer to ``create_coordinator``.
"""

# Standard Library
from typing import Callable, Dict, List, Union

# A decoded row maps column names to field values. Fields beyond the header
# are collected as a list under CSV_EXTRA_FIELDS_KEY.
Row = Dict[str, Union[str, List[str]]]

RowConsumer = Callable[[Row], None]


def discard_row(row: Row) -> None:
    """Default row consumer, which leaves the row untouched."""
    return None
