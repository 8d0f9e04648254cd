import threading
from enum import IntFlag
from typing import NamedTuple

from .colors import CYAN, RED, RESET, YELLOW

MESSAGE_CAPACITY = 5


class MessageStyle(IntFlag):
    """Message box styles delivered by the node's UI interface."""

    NONE = 0
    INFORMATION = 1
    WARNING = 2
    ERROR = 4
    # Only meaningful to GUIs that hide sensitive text
    SECURE = 1 << 30


STYLE_CAPTIONS = {
    MessageStyle.ERROR: f"{RED}Error{RESET}",
    MessageStyle.WARNING: f"{YELLOW}Warning{RESET}",
    MessageStyle.INFORMATION: f"{CYAN}Information{RESET}",
}


class MessageEntry(NamedTuple):
    caption: str
    body: str


class MessageQueue:
    """
    Bounded list of operator-facing messages.

    Any thread may post; the renderer takes a copy with snapshot(). Once the
    queue holds more than MESSAGE_CAPACITY entries after a post, the entry at
    the tail (the one just posted) is dropped, so older messages win.
    """

    def __init__(self, on_post=None, capacity=MESSAGE_CAPACITY):
        self._lock = threading.Lock()
        self._entries = []
        self._on_post = on_post
        self._capacity = capacity

    def post(self, caption, body):
        with self._lock:
            self._entries.append(MessageEntry(caption, body))
            if len(self._entries) > self._capacity:
                self._entries.pop()
        # Outside the lock: the refresh handshake sleeps
        if self._on_post is not None:
            self._on_post()

    def snapshot(self):
        with self._lock:
            return list(self._entries)

    def __len__(self):
        with self._lock:
            return len(self._entries)


def caption_for(caption, style):
    """Pick the caption shown for a message box of the given style."""
    style = int(style) & ~MessageStyle.SECURE.value
    return STYLE_CAPTIONS.get(style, caption)
