import pytest
from typer.testing import CliRunner


@pytest.fixture(scope="session")
def cli():
    """Shared CliRunner for all CLI tests."""
    return CliRunner()
