"""Core module of pycaststatus.

Everything needed to map status messages from a receiver onto channels lives here.
The mappers share a single `UpdaterState` instance holding the few values that must
survive between messages.
"""

import threading
from typing import Optional


class UpdaterState:
    """Values cached between status messages for one device session.

    The volume is read from other threads (e.g. when answering a "current volume"
    query) while status messages are processed, so it is guarded by a lock. Other
    fields are only touched from the thread delivering messages.
    """

    def __init__(self) -> None:
        """Initialize a new UpdaterState instance."""
        self._lock = threading.Lock()
        self._volume: Optional[int] = None
        self.app_session_id: Optional[str] = None
        self.image_src: Optional[str] = None

    @property
    def volume(self) -> Optional[int]:
        """Return last published volume in percent."""
        with self._lock:
            return self._volume

    @volume.setter
    def volume(self, value: Optional[int]) -> None:
        """Change last published volume."""
        with self._lock:
            self._volume = value

    def __str__(self) -> str:
        """Return string representation of state."""
        return (
            f"UpdaterState(volume={self.volume}, "
            f"app_session_id={self.app_session_id}, image_src={self.image_src})"
        )
