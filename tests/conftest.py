"""
Pytest configuration and shared fixtures.

Provides:
- Qt core application fixture (session-scoped, offscreen)
- Sample history targets
- Temporary directories
"""

import os
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope='session')
def qapp():
    """
    Qt application fixture (session-scoped).

    Creates a single QCoreApplication instance for all tests.
    """
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app
    # Note: Don't quit app in tests, causes crashes


@pytest.fixture
def temp_dir():
    """Temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def shape():
    """Plain object with a few editable attributes."""
    from tests.mocks.mock_target import MockShape
    return MockShape(x=1, y=2, color="red")


@pytest.fixture
def store():
    """Recording property store."""
    from tests.mocks.mock_target import RecordingStore
    return RecordingStore({'a': 1, 'b': 2})


@pytest.fixture
def history(store):
    """History manager over the recording store capturing a and b."""
    from chronicler import HistoryManager
    return HistoryManager(store, ['a', 'b'])
