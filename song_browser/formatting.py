from __future__ import annotations


def format_duration(millis: int) -> str:
    """Render a track length as ``MM:SS``.

    Minutes are not wrapped into hours, so long tracks print as ``125:07``.
    """
    if isinstance(millis, bool) or not isinstance(millis, int):
        raise TypeError(f"millis must be an int, got {type(millis).__name__}")
    if millis < 0:
        raise ValueError(f"millis must be >= 0, got {millis}")

    total_seconds = millis // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
