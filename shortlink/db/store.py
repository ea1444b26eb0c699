import threading
from typing import Dict, Optional, Protocol


class URLStore(Protocol):
    """Identifier -> original URL mapping. get() returns None when missing."""

    def put(self, identifier: int, url: str) -> None: ...

    def get(self, identifier: int) -> Optional[str]: ...


class InMemoryURLStore:
    """Process-local store; lives as long as the object does."""

    def __init__(self):
        self._urls: Dict[int, str] = {}
        self._lock = threading.Lock()

    def put(self, identifier: int, url: str) -> None:
        with self._lock:
            self._urls[identifier] = url

    def get(self, identifier: int) -> Optional[str]:
        with self._lock:
            return self._urls.get(identifier)

    def clear(self) -> None:
        with self._lock:
            self._urls.clear()

    def __len__(self):
        with self._lock:
            return len(self._urls)
