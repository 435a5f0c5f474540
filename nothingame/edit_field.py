"""Single-line text field with Emacs-style editing keys."""

from __future__ import annotations

from nothingame.events import Event, Key, KeyDown, Mod, TextInput

BUFFER_CAPACITY = 256

_WORD_CHARS = frozenset(
    "$%0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)


def is_emacs_word(c: str) -> bool:
    """Whether c is a word character in Emacs's fundamental mode."""
    return c in _WORD_CHARS


class EditField:
    """A line of at most capacity characters with a cursor."""

    def __init__(self, capacity: int = BUFFER_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("edit field capacity must not be negative")
        self._capacity = capacity
        self._text = ""
        self._cursor = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert_char(self, c: str) -> None:
        """Insert c at the cursor; ignored when the field is full."""
        if len(self._text) >= self._capacity:
            return
        self._text = self._text[: self._cursor] + c + self._text[self._cursor :]
        self._cursor += 1

    def forward_char(self) -> None:
        if self._cursor < len(self._text):
            self._cursor += 1

    def backward_char(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_beginning_of_line(self) -> None:
        self._cursor = 0

    def move_end_of_line(self) -> None:
        self._cursor = len(self._text)

    def forward_word(self) -> None:
        """Move to the end of the current or next word."""
        while True:
            self.forward_char()
            if self._cursor >= len(self._text):
                break
            current = self._text[self._cursor]
            preceding = self._text[self._cursor - 1]
            if not is_emacs_word(current) and is_emacs_word(preceding):
                break

    def backward_word(self) -> None:
        """Move to the start of the current or previous word."""
        while True:
            self.backward_char()
            if self._cursor == 0:
                break
            current = self._text[self._cursor]
            preceding = self._text[self._cursor - 1]
            if is_emacs_word(current) and not is_emacs_word(preceding):
                break

    def _kill_region(self, start: int, end: int) -> None:
        if end > len(self._text):
            raise IndexError("region ends past the end of the text")
        if end <= start:
            return
        self._text = self._text[:start] + self._text[end:]
        self._cursor = start

    def delete_char(self) -> None:
        if self._cursor >= len(self._text):
            return
        self._kill_region(self._cursor, self._cursor + 1)

    def delete_backward_char(self) -> None:
        if self._cursor == 0:
            return
        self._kill_region(self._cursor - 1, self._cursor)

    def kill_word(self) -> None:
        start = self._cursor
        self.forward_word()
        self._kill_region(start, self._cursor)

    def backward_kill_word(self) -> None:
        end = self._cursor
        self.backward_word()
        self._kill_region(self._cursor, end)

    def kill_to_end_of_line(self) -> None:
        self._kill_region(self._cursor, len(self._text))

    def replace(self, text: str | None) -> None:
        """Replace the contents with text, truncated to the capacity."""
        self.clean()
        if text is None:
            return
        for c in text:
            self.insert_char(c)

    def clean(self) -> None:
        self._text = ""
        self._cursor = 0

    _PLAIN_KEYS = {
        Key.HOME: move_beginning_of_line,
        Key.END: move_end_of_line,
        Key.BACKSPACE: delete_backward_char,
        Key.DELETE: delete_char,
        Key.RIGHT: forward_char,
        Key.LEFT: backward_char,
    }

    _ALT_KEYS = {
        Key.BACKSPACE: backward_kill_word,
        Key.DELETE: backward_kill_word,
        Key.RIGHT: forward_word,
        Key.F: forward_word,
        Key.LEFT: backward_word,
        Key.B: backward_word,
        Key.D: kill_word,
    }

    _CTRL_KEYS = {
        Key.BACKSPACE: backward_kill_word,
        Key.DELETE: kill_word,
        Key.RIGHT: forward_word,
        Key.LEFT: backward_word,
        Key.A: move_beginning_of_line,
        Key.E: move_end_of_line,
        Key.F: forward_char,
        Key.B: backward_char,
        Key.D: delete_char,
        Key.K: kill_to_end_of_line,
    }

    def handle_event(self, event: Event) -> None:
        """Apply a key press or typed text to the field."""
        if isinstance(event, KeyDown):
            if event.mod & Mod.ALT:
                table = self._ALT_KEYS
            elif event.mod & Mod.CTRL:
                table = self._CTRL_KEYS
            else:
                table = self._PLAIN_KEYS
            action = table.get(event.key)
            if action is not None:
                action(self)
        elif isinstance(event, TextInput):
            if event.mod & (Mod.CTRL | Mod.ALT):
                return
            for c in event.text:
                self.insert_char(c)