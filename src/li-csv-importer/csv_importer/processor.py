# Standard Library
import io
import csv
from typing import List, Optional

# Third Party
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Local Modules
from csv_importer.aws import S3Client
from csv_importer.config import (
    CSV_DELIMITER,
    CSV_ENCODING,
    CSV_EXTRA_FIELDS_KEY,
    CSV_MISSING_FIELD_VALUE,
)
from csv_importer.data_classes import FileFailed, FileProcessed, FileResult
from csv_importer.row_consumers import Row, RowConsumer, discard_row

# Initialize logger
logger = Logger(service="csv_importer_processor")


class CsvFileProcessor:
    """Download one CSV object from S3 and feed its rows to a consumer."""

    def __init__(
        self,
        s3_client: S3Client,
        lambda_logger: Optional[Logger] = None,
        row_consumer: RowConsumer = discard_row,
    ) -> None:
        """Initialize the processor with its collaborators.

        Parameters
        ----------
        s3_client : S3Client
            Client used to open the object's content stream.
        lambda_logger : Optional[Logger]
            The logger instance for logging messages. Defaults to the
            module logger.
        row_consumer : RowConsumer
            Callable invoked once per decoded row, by default
            ``discard_row``.
        """
        self.s3_client = s3_client
        self.lambda_logger = lambda_logger or logger
        self.row_consumer = row_consumer

    def process(self, bucket_name: str, object_key: str) -> FileResult:
        """Import a single CSV object.

        Any error raised while downloading, decoding or consuming the rows
        is logged and returned as a ``FileFailed`` result, so callers never
        have to handle exceptions for an individual object.

        Parameters
        ----------
        bucket_name : str
            The name of the S3 bucket containing the CSV file.
        object_key : str
            The key of the CSV file in the S3 bucket.

        Returns
        -------
        FileResult
            ``FileProcessed`` with the decoded row count, or ``FileFailed``
            with the error message.
        """
        try:
            rows = self.read_rows(bucket_name, object_key)
            self.lambda_logger.info(
                f"Successfully read {len(rows)} rows from CSV file: "
                f"{object_key}"
            )

            for row in rows:
                self.row_consumer(row)

        # Handle specific AWS errors and log them
        except ClientError as e:
            self.lambda_logger.exception(
                f"AWS ClientError during processing of {object_key}: {e}"
            )
            return FileFailed(object_key=object_key, reason=_describe(e))
        except Exception as e:
            self.lambda_logger.exception(
                f"Unexpected error during processing of {object_key}: {e}"
            )
            return FileFailed(object_key=object_key, reason=_describe(e))

        return FileProcessed(object_key=object_key, row_count=len(rows))

    def read_rows(self, bucket_name: str, object_key: str) -> List[Row]:
        """Download an object and decode its whole content into rows.

        The first line is the header. Short rows are padded with empty
        strings and surplus fields are kept as a list under
        ``CSV_EXTRA_FIELDS_KEY``.

        Parameters
        ----------
        bucket_name : str
            The name of the S3 bucket containing the CSV file.
        object_key : str
            The key of the CSV file in the S3 bucket.

        Returns
        -------
        List[Row]
            Every decoded row, in file order.

        Raises
        ------
        ClientError
            If the object cannot be downloaded.
        csv.Error
            If the content is not valid CSV.
        UnicodeDecodeError
            If the content is not valid UTF-8.
        """
        self.lambda_logger.info(
            f"Downloading CSV file from S3: {bucket_name}/{object_key}"
        )
        stream = self.s3_client.open_object_stream(bucket_name, object_key)
        with stream as body:
            content = body.read().decode(CSV_ENCODING)

        # newline="" leaves line splitting to the csv module
        with io.StringIO(content, newline="") as text_stream:
            reader = csv.DictReader(
                text_stream,
                delimiter=CSV_DELIMITER,
                restval=CSV_MISSING_FIELD_VALUE,
                restkey=CSV_EXTRA_FIELDS_KEY,
            )
            return list(reader)


def _describe(error: Exception) -> str:
    # Some exceptions (e.g. bare KeyError) have an empty message
    return str(error) or error.__class__.__name__
