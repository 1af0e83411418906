# Standard Library
import os
import sys
import importlib.util
from pathlib import Path
from types import ModuleType

# Third Party
import pytest
import boto3
from moto import mock_aws

# Lambda source folder holding the csv_importer package
LAMBDA_SRC_FOLDER = "li-csv-importer"

# Bucket used by the tests as the source of imported CSV files
SOURCE_BUCKET_NAME = "test-imports-bucket"


@pytest.fixture(scope="session")
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture(scope="function")
def mocked_s3(aws_credentials):
    """
    Mocked S3 service using moto for testing.
    This fixture sets up a mocked S3 service that can be used in tests.
    """
    with mock_aws():
        # Create a mocked S3 client
        s3_client = boto3.client("s3", region_name="us-east-1")
        yield s3_client


@pytest.fixture(scope="function")
def create_source_bucket(mocked_s3):
    """
    Create the source imports bucket in the mocked S3 service.
    """
    mocked_s3.create_bucket(Bucket=SOURCE_BUCKET_NAME)
    return SOURCE_BUCKET_NAME


def pytest_configure(config):
    """
    Configure pytest to add the Lambda source folder to sys.path so the
    csv_importer package can be imported in tests.
    """
    # Get the absolute path to the project root
    project_root = Path(__file__).parent.parent

    # Add the Lambda source folder to sys.path
    lambda_src_path = project_root / "src" / LAMBDA_SRC_FOLDER
    if str(lambda_src_path) not in sys.path:
        sys.path.insert(0, str(lambda_src_path))

    return config


def import_csv_importer_handler() -> ModuleType:
    """
    Load a fresh copy of the CSV importer Lambda handler.

    The Lambda folder name contains hyphens, so the handler cannot be imported
    normally. Each call executes the module again, which builds its S3 client
    and coordinator inside whatever mocks are active at that moment.

    Returns
    -------
    ModuleType
        The freshly executed handler module

    Raises
    ------
    ImportError
        If handler.py is missing or cannot be loaded
    """
    # Get the absolute path to the project root
    project_root = Path(__file__).parent.parent

    # Construct the path to the handler.py file
    handler_path = project_root / "src" / LAMBDA_SRC_FOLDER / "handler.py"

    if not handler_path.exists():
        raise ImportError(f"Handler file {handler_path} does not exist")

    # Module name used while the handler is registered in sys.modules
    safe_module_name = "csv_importer_lambda_handler"

    # Load the module specification
    spec = importlib.util.spec_from_file_location(
        safe_module_name, handler_path
    )
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load spec for {handler_path}")

    # Create the module
    handler_module = importlib.util.module_from_spec(spec)

    # The Lambda folder must be importable for "from csv_importer import ..."
    original_path = sys.path.copy()
    sys.path.insert(0, str(handler_path.parent))

    # Register the module in sys.modules
    sys.modules[safe_module_name] = handler_module

    try:
        # Execute the module code
        spec.loader.exec_module(handler_module)
        return handler_module
    except Exception:
        # Clean up in case of error
        if safe_module_name in sys.modules:
            del sys.modules[safe_module_name]
        raise
    finally:
        # Restore original sys.path
        sys.path = original_path
