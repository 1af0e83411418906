"""Nox configuration file for running tests and linting.

This file is used to define the sessions that Nox will run. Nox is a Python
automation tool that allows you to run tests, linters, and other tasks in
isolated virtual environments.

This configuration is set up to run tests using pytest with coverage and to
check code style with flake8.
"""

# Third-Party
import nox

# Define the Python versions to use for the sessions
python_versions = ["3.12"]

# Define the Nox sessions to run
nox.options.sessions = ["test_and_lint"]

# Reuse existing virtual environments to speed up the process
nox.options.reuse_existing_virtualenvs = True


@nox.session(python=python_versions, venv_backend="venv")
def test_and_lint(session):
    # Install dependencies
    session.run("python", "-m", "pip", "install", "--upgrade", "pip")
    session.install("poetry")
    session.run("poetry", "lock")
    session.run("poetry", "install", "--extras", "test")

    # Run tests with coverage
    session.run(
        "poetry",
        "run",
        "pytest",
        "-s",
        "--cov-report",
        "term-missing",
        "--cov=src",
        "tests/unit",
    )

    # Run code linting with flake8
    session.run("poetry", "run", "flake8", "src")
