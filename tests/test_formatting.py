from __future__ import annotations

import re

import pytest

from song_browser.formatting import format_duration


@pytest.mark.parametrize(
    ("millis", "expected"),
    [
        (0, "00:00"),
        (999, "00:00"),
        (1000, "00:01"),
        (59999, "00:59"),
        (60000, "01:00"),
        (90000, "01:30"),
        (214240, "03:34"),
        (3725000, "62:05"),
        (6000000, "100:00"),
    ],
)
def test_format_duration_values(millis: int, expected: str) -> None:
    assert format_duration(millis) == expected


def test_format_duration_shape_and_parts() -> None:
    pattern = re.compile(r"^\d{2,}:\d{2}$")
    for m in list(range(0, 130000, 517)) + [10**9, 10**12 + 123]:
        out = format_duration(m)
        assert pattern.match(out), out
        minutes, seconds = out.split(":")
        assert int(minutes) == m // 60000
        assert int(seconds) == (m // 1000) % 60


def test_format_duration_rejects_negative() -> None:
    with pytest.raises(ValueError):
        format_duration(-1)


@pytest.mark.parametrize("bad", [1.5, "90000", None, True])
def test_format_duration_rejects_non_int(bad: object) -> None:
    with pytest.raises(TypeError):
        format_duration(bad)  # type: ignore[arg-type]
