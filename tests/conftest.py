import io
import os

import pytest

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def sample_log():
    return os.path.join(DATA_DIR, "access.log")
