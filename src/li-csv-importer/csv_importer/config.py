"""Configuration for the CSV importer.

This module reads the environment once at import time and exposes the fixed
parsing settings the importer applies to every object.
"""

# Standard Library
import os

# Environment variables for configuration
AWS_REGION = os.environ.get("AWS_REGION")

# Only objects whose key ends with this suffix (case-insensitive) are imported
ACCEPTED_SUFFIX = ".csv"

# Fixed CSV parsing settings
CSV_DELIMITER = ","
CSV_ENCODING = "utf-8-sig"
CSV_MISSING_FIELD_VALUE = ""
CSV_EXTRA_FIELDS_KEY = "_extra_fields"
