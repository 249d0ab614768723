"""Pytest configuration for MCP server tests."""

import os
import shutil
import tempfile

import pytest


FIXTURES_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), 'fixtures'))


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="module")
def test_base_path():
    """Temporary project root holding the fixture profiles."""
    temp_dir = tempfile.mkdtemp()
    shutil.copytree(
        os.path.join(FIXTURES_PATH, 'input-parameters'),
        os.path.join(temp_dir, 'input-parameters')
    )
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)
