"""Raw terminal handling for the interactive tree session.

``TerminalController`` switches the tty into raw mode on the alternate screen.
``KeyReader`` turns raw input bytes into key tokens understood by
``cardtree.input.normalize_key`` plus a few editing tokens for the search
prompt (TAB, BACKSPACE, CTRL_U, CTRL_C, ESC).
"""

from __future__ import annotations

import contextlib
import os
import select
import termios
import tty
from collections import deque
from collections.abc import Iterator

ESC_SEQUENCE_TIMEOUT_MS = 25

_ALT_SCREEN_ON = b"\x1b[?1049h\x1b[?25l"
_ALT_SCREEN_OFF = b"\x1b[?25h\x1b[?1049l"

_SINGLE_BYTE_KEYS = {
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b" ": "SPACE",
    b"\x03": "CTRL_C",
    b"\x15": "CTRL_U",
}

# Final byte of CSI / SS3 cursor sequences.
_ARROW_FINAL_BYTES = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}


class TerminalController:
    """Own tty state for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_attrs = termios.tcgetattr(stdin_fd)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8"))

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Raw input on the alternate screen; the saved tty state is restored on exit."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, _ALT_SCREEN_ON)
        try:
            yield
        finally:
            os.write(self.stdout_fd, _ALT_SCREEN_OFF)
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attrs)


class KeyReader:
    """Decode key tokens from a file descriptor.

    A byte read while probing for an escape sequence that turns out not to
    belong to one is kept and decoded by the next ``read`` call.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: deque[bytes] = deque()

    def _next_byte(self, timeout_ms: int | None) -> bytes:
        if self._pending:
            return self._pending.popleft()
        if timeout_ms is not None:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return b""
        return os.read(self.fd, 1)

    def read(self, timeout_ms: int | None = None) -> str:
        """Return one key token, or ``""`` on timeout or end of input."""
        ch = self._next_byte(timeout_ms)
        if not ch:
            return ""
        if ch in _SINGLE_BYTE_KEYS:
            return _SINGLE_BYTE_KEYS[ch]
        if ch != b"\x1b":
            return ch.decode("utf-8", errors="replace")

        intro = self._next_byte(ESC_SEQUENCE_TIMEOUT_MS)
        if intro not in (b"[", b"O"):
            if intro:
                self._pending.append(intro)
            return "ESC"
        final = self._next_byte(ESC_SEQUENCE_TIMEOUT_MS)
        return _ARROW_FINAL_BYTES.get(final, "ESC")
