# Standard Library
from typing import Dict, Any
from urllib.parse import unquote_plus

# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from aws_lambda_powertools.utilities.data_classes import S3Event, event_source

# Local Modules
from csv_importer import ObjectNotification, create_coordinator

# Initialize Powertools
logger = Logger()

# Build the coordinator once per execution environment
try:
    coordinator = create_coordinator(lambda_logger=logger)
except Exception as e:
    logger.exception(f"Failed to initialize the CSV import coordinator: {e}")
    raise


@logger.inject_lambda_context(log_event=True)
@event_source(data_class=S3Event)
def lambda_handler(event: S3Event, context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function handler to import CSV files announced by S3 events.

    Parameters
    ----------
    event : S3Event
        The S3 event data automatically parsed by Powertools.
    context : LambdaContext
        The context object containing runtime information.

    Returns
    -------
    Dict[str, Any]
        The import report with the ``processed`` keys, the ``errors``
        descriptions and ``total_records_processed``.
    """
    logger.info("CSV import Lambda triggered.")

    notifications = []
    for record in event.records:
        # S3 object keys are URL-encoded in the event (e.g. spaces become '+')
        object_key = unquote_plus(record.s3.get_object.key)
        bucket_name = record.s3.bucket.name

        # Log the event details for debugging and traceability
        logger.info(
            "Received S3 event record.",
            extra={
                "event_name": record.event_name,
                "event_time": str(record.event_time),
                "bucket_name": bucket_name,
                "object_key": object_key,
                "object_size": record.s3.get_object.size,
            },
        )
        notifications.append(
            ObjectNotification(bucket_name=bucket_name, object_key=object_key)
        )

    report = coordinator.handle(notifications)

    logger.info(
        "CSV import loop completed for all records in the event.",
        extra={
            "processed_count": len(report.processed),
            "error_count": len(report.errors),
        },
    )
    return report.to_dict()
