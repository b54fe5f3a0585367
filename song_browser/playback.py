from __future__ import annotations


class InertTransport:
    """
    Previous / play-pause / next for the detail screen.

    Playback is not implemented. Each control accepts a call and does
    nothing: no state change, no side effect. A real player would replace
    this class with the same three methods.
    """

    def previous(self) -> None:
        return None

    def play_pause(self) -> None:
        return None

    def next(self) -> None:
        return None
