import pytest

from litmaps.families import FamilyRegistry


class RecordingDict(dict):
    """dict that remembers the capacity hints it was created with."""

    hints: list = []

    @classmethod
    def with_capacity(cls, capacity):
        cls.hints.append(capacity)
        return cls()


class RecordingSet(set):
    hints: list = []

    @classmethod
    def with_capacity(cls, capacity):
        cls.hints.append(capacity)
        return cls()


@pytest.fixture
def recording_dict():
    RecordingDict.hints = []
    return RecordingDict


@pytest.fixture
def recording_set():
    RecordingSet.hints = []
    return RecordingSet


@pytest.fixture
def clean_registry():
    """Restore the registered families after a test that changes them."""
    saved = FamilyRegistry.get_all_registered()
    yield FamilyRegistry
    FamilyRegistry._families.clear()
    FamilyRegistry._families.update(saved)
