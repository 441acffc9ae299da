"""
The search box: one free-text input with a single change subscriber.

Every change (a keystroke or a programmatic set) calls the subscriber
synchronously with the full current text; control returns to the caller only
after the subscriber has finished.
"""

from typing import Callable, Optional

QueryCallback = Callable[[str], object]

BACKSPACE_KEYS = ("\x7f", "\b")


class QueryInput:
    """Free-text input surface with exactly one change callback."""

    def __init__(self, text: str = ""):
        self._text = text
        self._callback: Optional[QueryCallback] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_subscribed(self) -> bool:
        return self._callback is not None

    def subscribe(self, callback: QueryCallback) -> None:
        """
        Register the change callback.

        Raises:
            RuntimeError: If a callback is already registered
        """
        if self._callback is not None:
            raise RuntimeError("QueryInput already has a subscriber")
        self._callback = callback

    def unsubscribe(self) -> None:
        self._callback = None

    def set_text(self, text: str) -> None:
        """Replace the input text and notify the subscriber."""
        self._text = text
        self._notify()

    def type_key(self, key: str) -> None:
        """
        Apply one keystroke: backspace deletes the last character, anything
        else is appended.
        """
        if key in BACKSPACE_KEYS:
            self._text = self._text[:-1]
        else:
            self._text += key
        self._notify()

    def clear(self) -> None:
        self.set_text("")

    def _notify(self) -> None:
        if self._callback is not None:
            self._callback(self._text)
