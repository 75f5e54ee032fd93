"""
In-memory Page Revalidation Broadcaster

Fans revalidated page paths out to in-process subscribers (a page cache,
an SSE relay to the dashboard) over anyio memory streams.
"""

from typing import Dict, List

from anyio import WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger


ALL_PATHS = '*'


class InMemoryRevalidationBroadcasterImpl:
    """
    In-memory pub/sub for page revalidation

    - Each path has a list of subscriber stream tuples; ``'*'`` sees every path
    - Stream max buffer: 10 paths, a full stream drops the signal
    - Empty subscriber lists are removed on unsubscribe
    """

    def __init__(self) -> None:
        self._subscribers: Dict[
            str, List[tuple[MemoryObjectSendStream[str], MemoryObjectReceiveStream[str]]]
        ] = {}

    async def subscribe(self, *, path: str) -> MemoryObjectReceiveStream[str]:
        send_stream, receive_stream = create_memory_object_stream[str](max_buffer_size=10)
        self._subscribers.setdefault(path, []).append((send_stream, receive_stream))

        Logger.base.debug(
            f'📡 [REVALIDATE] Subscribed to {path} '
            f'(total subscribers: {len(self._subscribers[path])})'
        )
        return receive_stream

    async def revalidate(self, *, path: str) -> None:
        subscribers = [*self._subscribers.get(path, []), *self._subscribers.get(ALL_PATHS, [])]
        delivered = 0
        dropped = 0

        for send_stream, _ in subscribers:
            try:
                send_stream.send_nowait(path)
                delivered += 1
            except WouldBlock:
                dropped += 1
                Logger.base.warning(f'⚠️ [REVALIDATE] Stream full, dropping {path}')

        Logger.base.info(f'🔁 [REVALIDATE] {path}: delivered={delivered}, dropped={dropped}')

    async def unsubscribe(self, *, path: str, stream: MemoryObjectReceiveStream[str]) -> None:
        if path not in self._subscribers:
            return

        subscribers = self._subscribers[path]
        for i, (send_stream, receive_stream) in enumerate(subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                subscribers.pop(i)
                break

        if not subscribers:
            del self._subscribers[path]
            Logger.base.debug(f'📡 [REVALIDATE] Cleaned up empty list for {path}')
