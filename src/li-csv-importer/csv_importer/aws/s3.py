"""S3 client wrapper for reading imported objects."""

# Standard Library
from contextlib import contextmanager
from typing import Iterator, Optional

# Third Party
import boto3
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="s3-client-wrapper")


class S3Client:
    """Wrapper class for AWS S3 read operations using boto3.

    The importer only ever reads objects, so this class exposes a single
    streaming read that releases the underlying HTTP connection when the
    caller is done with it.
    """

    def __init__(self, region_name: Optional[str] = None) -> None:
        """Initialize the S3Client with an optional region.

        Parameters
        ----------
        region_name : Optional[str]
            The AWS region to create the client in. If not provided, the
            default region configured in boto3 will be used.
        """
        try:
            self._client = boto3.client("s3", region_name=region_name)
        except Exception as e:
            logger.error("Failed to create S3 client: %s", e)
            raise

    @contextmanager
    def open_object_stream(
        self, bucket_name: str, object_key: str
    ) -> Iterator[StreamingBody]:
        """Open a readable byte stream for an S3 object.

        The stream is closed when the ``with`` block exits, whether or not
        the block raised.

        Parameters
        ----------
        bucket_name : str
            The name of the S3 bucket holding the object.
        object_key : str
            The key (path) of the object in the bucket.

        Yields
        ------
        StreamingBody
            The object's content stream.

        Raises
        ------
        ClientError
            If the object does not exist or cannot be read.
        """
        logger.info(
            "Downloading object from S3.",
            extra={"bucket_name": bucket_name, "object_key": object_key},
        )
        try:
            response = self._client.get_object(
                Bucket=bucket_name, Key=object_key
            )
        except ClientError as e:
            logger.error(
                "Failed to get object s3://%s/%s - Error: %s",
                bucket_name,
                object_key,
                e,
            )
            raise

        body = response["Body"]
        try:
            yield body
        finally:
            body.close()
