"""Cursor-lock state for Planetwalk."""

import enum


class CursorLock(enum.Enum):
    """Whether pointer motion drives the look controls."""

    FREE = "free"
    LOCKED = "locked"


class CursorLockState:
    """Session-owned cursor mode, read by the player rig."""

    def __init__(self, mode: CursorLock = CursorLock.FREE) -> None:
        self.mode = mode

    @property
    def locked(self) -> bool:
        return self.mode is CursorLock.LOCKED

    def capture(self) -> None:
        self.mode = CursorLock.LOCKED

    def release(self) -> None:
        self.mode = CursorLock.FREE
