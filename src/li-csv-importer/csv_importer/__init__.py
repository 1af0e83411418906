"""CSV importer for S3 object-created notifications.

This package downloads newly created CSV objects from S3, decodes them into
rows and reports which objects were imported and which failed.
"""

# Local Modules
from csv_importer.coordinator import (
    BatchCoordinator,
    create_coordinator,
    is_csv_object,
)
from csv_importer.data_classes import (
    FileFailed,
    FileProcessed,
    ImportReport,
    ObjectNotification,
)
from csv_importer.processor import CsvFileProcessor
from csv_importer.row_consumers import RowConsumer, discard_row

__all__ = [
    "BatchCoordinator",
    "CsvFileProcessor",
    "FileFailed",
    "FileProcessed",
    "ImportReport",
    "ObjectNotification",
    "RowConsumer",
    "create_coordinator",
    "discard_row",
    "is_csv_object",
]
