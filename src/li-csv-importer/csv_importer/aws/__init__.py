"""AWS module for the CSV importer.

This module provides the AWS clients the importer depends on.
"""

# Local Modules
from csv_importer.aws.s3 import S3Client

__all__ = [
    "S3Client",
]
