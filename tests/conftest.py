"""Shared fixtures for tests that reach the engine through a fake library."""

import pytest
from fake_engine import FakeEngineLib

from imflags.ffi import Engine


@pytest.fixture
def fake_lib() -> FakeEngineLib:
    return FakeEngineLib()


@pytest.fixture
def engine(fake_lib: FakeEngineLib) -> Engine:
    return Engine(fake_lib, "out_param")


@pytest.fixture
def by_value_engine(fake_lib: FakeEngineLib) -> Engine:
    return Engine(fake_lib, "by_value")
