from __future__ import annotations

import itertools

import pytest

from conftest import make_result
from song_browser.models import Track
from song_browser.state import LibraryState, Phase


def _tracks(*names: str) -> list[Track]:
    return [Track.from_json(make_result(n)) for n in names]


def test_initial_state_is_loading() -> None:
    state = LibraryState()
    assert state.phase is Phase.LOADING
    assert state.tracks == ()
    assert state.is_busy


def test_load_then_complete() -> None:
    state = LibraryState()
    seq = state.begin_load()

    assert state.complete(seq, _tracks("a", "b"))
    assert state.phase is Phase.LOADED
    assert [t.track_name for t in state.tracks] == ["a", "b"]
    assert not state.is_busy


def test_failure_ends_loaded_and_empty() -> None:
    state = LibraryState()
    seq = state.begin_load()
    state.complete(seq, _tracks("a"))

    seq = state.begin_refresh()
    assert state.refreshing
    assert state.fail(seq, "http: HTTP 500")

    assert state.phase is Phase.LOADED
    assert state.tracks == ()
    assert not state.refreshing
    assert state.last_error == "http: HTTP 500"


def test_refresh_replaces_tracks_wholesale() -> None:
    state = LibraryState()
    state.complete(state.begin_load(), _tracks("a", "b"))
    state.complete(state.begin_refresh(), _tracks("c"))

    assert [t.track_name for t in state.tracks] == ["c"]
    assert state.last_error is None


def test_refresh_during_load_stays_loading() -> None:
    state = LibraryState()
    state.begin_load()
    state.begin_refresh()

    assert state.phase is Phase.LOADING
    assert not state.refreshing


def test_stale_completion_is_dropped() -> None:
    state = LibraryState()
    old = state.begin_load()
    new = state.begin_refresh()

    assert not state.complete(old, _tracks("old"))
    assert state.is_loading
    assert state.complete(new, _tracks("new"))
    assert [t.track_name for t in state.tracks] == ["new"]


@pytest.mark.parametrize("order", list(itertools.permutations(["load", "refresh"])))
@pytest.mark.parametrize("outcomes", list(itertools.product([True, False], repeat=2)))
def test_overlapping_load_and_refresh_settle_loaded(
    order: tuple[str, str], outcomes: tuple[bool, bool]
) -> None:
    state = LibraryState()
    seqs = {"load": state.begin_load(), "refresh": state.begin_refresh()}
    ok = dict(zip(("load", "refresh"), outcomes))

    for name in order:
        if ok[name]:
            state.complete(seqs[name], _tracks(name))
        else:
            state.fail(seqs[name], "network: down")

    assert state.phase is Phase.LOADED
    assert not state.refreshing
    expected = ["refresh"] if ok["refresh"] else []
    assert [t.track_name for t in state.tracks] == expected


def test_sequence_is_monotonic() -> None:
    state = LibraryState()
    seqs = [state.begin_load(), state.begin_refresh(), state.begin_refresh()]
    assert seqs == sorted(set(seqs))
    assert state.latest_seq == seqs[-1]
