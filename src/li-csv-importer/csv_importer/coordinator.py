# Standard Library
from typing import Iterable, Optional

# Third Party
from aws_lambda_powertools import Logger

# Local Modules
from csv_importer.aws import S3Client
from csv_importer.config import ACCEPTED_SUFFIX, AWS_REGION
from csv_importer.processor import CsvFileProcessor
from csv_importer.row_consumers import RowConsumer, discard_row
from csv_importer.data_classes import (
    FileFailed,
    FileProcessed,
    ImportReport,
    ObjectNotification,
)

# Initialize logger
logger = Logger(service="csv_importer_coordinator")


def is_csv_object(object_key: str) -> bool:
    """Check whether an object key names a CSV file.

    Parameters
    ----------
    object_key : str
        The S3 object key to check.

    Returns
    -------
    bool
        True if the key ends with ``.csv``, ignoring case.
    """
    return object_key.lower().endswith(ACCEPTED_SUFFIX)


class BatchCoordinator:
    """Run the file processor over a batch of S3 object notifications."""

    def __init__(
        self,
        file_processor: CsvFileProcessor,
        lambda_logger: Optional[Logger] = None,
    ) -> None:
        self.file_processor = file_processor
        self.lambda_logger = lambda_logger or logger

    def handle(
        self, notifications: Iterable[ObjectNotification]
    ) -> ImportReport:
        """Import every CSV object in the batch, in order.

        Objects whose key does not end in ``.csv`` are skipped and appear
        nowhere in the report. Every other object is listed either in
        ``processed`` or, with the failure reason, in ``errors``.

        Parameters
        ----------
        notifications : Iterable[ObjectNotification]
            The objects to import.

        Returns
        -------
        ImportReport
            The outcome of the batch.
        """
        report = ImportReport()

        for notification in notifications:
            bucket_name = notification.bucket_name
            object_key = notification.object_key

            self.lambda_logger.info(
                "Processing S3 event.",
                extra={"bucket_name": bucket_name, "object_key": object_key},
            )

            # The bucket notification should only send CSV files already
            if not is_csv_object(object_key):
                self.lambda_logger.warning(
                    f"Object {object_key} is not a CSV file. Skipping."
                )
                continue

            result = self.file_processor.process(bucket_name, object_key)

            if isinstance(result, FileProcessed):
                report.processed.append(result.object_key)
            elif isinstance(result, FileFailed):
                self.lambda_logger.error(
                    f"Failed to process s3://{bucket_name}/{object_key}. "
                    f"Error: {result.reason}",
                    extra={
                        "bucket_name": bucket_name,
                        "object_key": object_key,
                    },
                )
                report.errors.append(
                    f"Error processing {result.object_key}: {result.reason}"
                )
            else:
                raise TypeError(
                    f"Unexpected file processor result: {result!r}"
                )

        return report


def create_coordinator(
    lambda_logger: Optional[Logger] = None,
    row_consumer: RowConsumer = discard_row,
    region_name: Optional[str] = AWS_REGION,
) -> BatchCoordinator:
    """Build a coordinator wired to a real S3 client.

    Parameters
    ----------
    lambda_logger : Optional[Logger]
        Logger shared by the coordinator and the file processor.
    row_consumer : RowConsumer
        Callable invoked once per decoded row, by default ``discard_row``.
    region_name : Optional[str]
        Region for the S3 client, by default the ``AWS_REGION`` variable.

    Returns
    -------
    BatchCoordinator
        A coordinator ready to handle notification batches.
    """
    file_processor = CsvFileProcessor(
        s3_client=S3Client(region_name=region_name),
        lambda_logger=lambda_logger,
        row_consumer=row_consumer,
    )
    return BatchCoordinator(
        file_processor=file_processor, lambda_logger=lambda_logger
    )
