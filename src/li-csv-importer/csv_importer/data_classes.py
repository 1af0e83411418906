# Standard Library
from typing import Any, Dict, List, Union
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ObjectNotification:
    """Data class for a single newly created S3 object.

    Attributes
    ----------
        bucket_name : str
            The name of the bucket holding the object.
        object_key : str
            The URL-decoded key of the object.
    """

    bucket_name: str = field(
        metadata={"description": "The name of the bucket holding the object."}
    )
    object_key: str = field(
        metadata={"description": "The URL-decoded key of the object."}
    )


@dataclass(frozen=True)
class FileProcessed:
    """Result of an object that was downloaded and decoded successfully."""

    object_key: str
    row_count: int


@dataclass(frozen=True)
class FileFailed:
    """Result of an object whose processing raised an error."""

    object_key: str
    reason: str


FileResult = Union[FileProcessed, FileFailed]


@dataclass
class ImportReport:
    """Data class summarizing one invocation of the importer.

    Attributes
    ----------
        processed : List[str]
            Keys of the objects that were imported without error, in
            processing order.
        errors : List[str]
            One description per object that failed.
        total_records_processed : int
            Always 0. Kept in the report for consumers that expect it.
    """

    processed: List[str] = field(
        default_factory=list,
        metadata={"description": "Keys of the objects imported."},
    )
    errors: List[str] = field(
        default_factory=list,
        metadata={"description": "Descriptions of the failed objects."},
    )
    total_records_processed: int = field(
        default=0,
        metadata={"description": "Reserved record counter, never set."},
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report into the Lambda response payload."""
        return {
            "processed": list(self.processed),
            "errors": list(self.errors),
            "total_records_processed": self.total_records_processed,
        }
