from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, Union


class FeedProvider(ABC):
    """
    Provider contract (interface).

    Any provider must implement:
    - stream_messages(): raw inbound feed messages (async iterator)

    Providers only move bytes. Decoding into Ticks is TickSource's job, so
    every provider gets the same malformed-message handling.
    """

    @abstractmethod
    def stream_messages(self, endpoint: str) -> AsyncIterator[Union[str, bytes]]:
        raise NotImplementedError
