import os
import tempfile

# must happen before colorfloor.config is imported
_db_dir = tempfile.mkdtemp(prefix="colorfloor-tests-")
os.environ.setdefault("SQLITE_URL", f"sqlite:///{_db_dir}/test.db")
os.environ.setdefault("RUN_SESSION_LOOP", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BROADCAST_URL", "memory://")

import random

import pytest

from colorfloor.models import RoundSettings
from tests.fakes import FakeClock, FakeWorld, RecordingObserver


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    return RoundSettings()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def world():
    return FakeWorld()
