"""
Page Revalidator Interface

Outbound signal that a rendered page is stale after a write
(e.g. '/events/{slug}' once its ticket types change).
"""

from typing import Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IPageRevalidator(Protocol):
    async def revalidate(self, *, path: str) -> None:
        """
        Signal that ``path`` must be re-rendered.

        Note:
            - Never raises into the caller; the write already committed
            - Silently ignores paths nobody listens to
        """
        ...

    async def subscribe(self, *, path: str) -> MemoryObjectReceiveStream[str]:
        """Receive revalidated paths; ``'*'`` receives every path."""
        ...

    async def unsubscribe(self, *, path: str, stream: MemoryObjectReceiveStream[str]) -> None: ...
