"""
Hot path profiling tests.

Profiling is switched on by JSONX_PROFILE at import time. The ``profiling``
fixture reloads the profiler with the variable set and points the classifier
and encoder at it, so the recording path runs whatever the environment says.
"""

import importlib
from collections.abc import Iterator

import pytest

import jsonx
import jsonx._profile as profile
from jsonx import classify
from jsonx import encode
from jsonx._profile import PROFILE_HOT_PATHS
from jsonx._profile import ProfileContext


@pytest.fixture
def profiling(monkeypatch: pytest.MonkeyPatch) -> Iterator[object]:
    monkeypatch.setenv("JSONX_PROFILE", "1")
    enabled = importlib.reload(profile)
    if not enabled.PROFILE_HOT_PATHS:
        monkeypatch.undo()
        importlib.reload(profile)
        pytest.skip("profiling is compiled out under -O")
    for module in (classify, encode):
        monkeypatch.setattr(module, "PROFILE_HOT_PATHS", True)
        monkeypatch.setattr(module, "ProfileContext", enabled.ProfileContext)
    enabled.clear_hot_path_stats()
    yield enabled
    monkeypatch.undo()
    importlib.reload(profile)


def test_record_call_accumulates() -> None:
    """
    Validates per-function statistics accumulate across calls.
    """
    stats = jsonx.HotPathStats("encode_into")
    stats.record_call(100, 10)
    stats.record_call(50)
    assert stats.call_count == 2
    assert stats.total_time_ns == 150
    assert stats.bytes_processed == 10


def test_stats_follow_profiling_switch() -> None:
    """
    Validates statistics are collected only when profiling is enabled.
    """
    jsonx.clear_hot_path_stats()
    jsonx.type_of(b"[]")
    jsonx.encode_string("abc")
    stats = jsonx.get_hot_path_stats()
    if PROFILE_HOT_PATHS:
        assert stats["type_of"].call_count == 1
        assert stats["encode_into"].bytes_processed == 3
    else:
        assert stats == {}
    jsonx.clear_hot_path_stats()


def test_enabled_profiling_records_hot_paths(profiling: object) -> None:
    """
    Validates type_of and encode_into record calls, bytes and time.
    """
    jsonx.type_of(b"[1]")
    jsonx.type_of(b"null")
    jsonx.encode_string("abc")

    stats = profile.get_hot_path_stats()
    assert stats["type_of"].call_count == 2
    assert stats["type_of"].bytes_processed == 7
    assert stats["encode_into"].call_count == 1
    assert stats["encode_into"].bytes_processed == 3
    assert stats["encode_into"].total_time_ns >= 0


def test_enabled_profiling_stats_are_copied_and_cleared(
    profiling: object,
) -> None:
    """
    Validates the stats snapshot is a copy and clearing empties it.
    """
    jsonx.type_of(b"1")
    snapshot = profile.get_hot_path_stats()
    snapshot.clear()
    assert "type_of" in profile.get_hot_path_stats()

    profile.clear_hot_path_stats()
    assert profile.get_hot_path_stats() == {}


def test_enabled_profiling_records_failed_calls(profiling: object) -> None:
    """
    Validates a call that raises is still recorded.
    """

    class Broken:
        def write(self, b: object, /) -> None:
            raise OSError("sink closed")

        def write_byte(self, c: int, /) -> None:
            raise OSError("sink closed")

        def write_string(self, s: str, /) -> None:
            raise OSError("sink closed")

    with pytest.raises(OSError, match="sink closed"):
        jsonx.encode_into(Broken(), "abc")
    assert profile.get_hot_path_stats()["encode_into"].call_count == 1


def test_profile_context_is_reentrant() -> None:
    """
    Validates the context manager nests without error.
    """
    with ProfileContext("outer", 1) as outer, ProfileContext("inner"):
        assert isinstance(outer, ProfileContext)
