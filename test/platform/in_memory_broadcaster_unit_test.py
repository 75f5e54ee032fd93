"""
Unit tests for InMemoryRevalidationBroadcasterImpl

Test Focus:
1. Subscribers of a path receive it, others do not
2. Wildcard subscribers receive every path
3. A full stream drops the signal instead of raising
4. Unsubscribe closes the stream and removes empty lists
"""

from anyio import ClosedResourceError, WouldBlock
import pytest

from src.platform.event.in_memory_broadcaster import (
    ALL_PATHS,
    InMemoryRevalidationBroadcasterImpl,
)


@pytest.fixture
def broadcaster():
    return InMemoryRevalidationBroadcasterImpl()


@pytest.mark.unit
class TestRevalidationBroadcaster:
    @pytest.mark.asyncio
    async def test_subscriber_receives_its_path(self, broadcaster):
        # Given
        stream = await broadcaster.subscribe(path='/events/summer-fest')
        other = await broadcaster.subscribe(path='/events/winter-fest')

        # When
        await broadcaster.revalidate(path='/events/summer-fest')

        # Then
        assert stream.receive_nowait() == '/events/summer-fest'
        with pytest.raises(WouldBlock):
            other.receive_nowait()

    @pytest.mark.asyncio
    async def test_wildcard_receives_every_path(self, broadcaster):
        stream = await broadcaster.subscribe(path=ALL_PATHS)

        await broadcaster.revalidate(path='/events/a')
        await broadcaster.revalidate(path='/events/b')

        assert stream.receive_nowait() == '/events/a'
        assert stream.receive_nowait() == '/events/b'

    @pytest.mark.asyncio
    async def test_nobody_listening_is_fine(self, broadcaster):
        await broadcaster.revalidate(path='/events/nobody')

    @pytest.mark.asyncio
    async def test_full_stream_drops_without_raising(self, broadcaster):
        # Given: buffer of 10 already full
        stream = await broadcaster.subscribe(path='/events/busy')
        for _ in range(10):
            await broadcaster.revalidate(path='/events/busy')

        # When: one more
        await broadcaster.revalidate(path='/events/busy')

        # Then: the first 10 are there, the 11th was dropped
        received = [stream.receive_nowait() for _ in range(10)]
        assert received == ['/events/busy'] * 10
        with pytest.raises(WouldBlock):
            stream.receive_nowait()

    @pytest.mark.asyncio
    async def test_unsubscribe_closes_and_cleans_up(self, broadcaster):
        stream = await broadcaster.subscribe(path='/events/gone')

        await broadcaster.unsubscribe(path='/events/gone', stream=stream)

        assert '/events/gone' not in broadcaster._subscribers
        with pytest.raises(ClosedResourceError):
            stream.receive_nowait()

    @pytest.mark.asyncio
    async def test_unsubscribe_unknown_path_is_noop(self, broadcaster):
        stream = await broadcaster.subscribe(path='/events/kept')

        await broadcaster.unsubscribe(path='/events/unknown', stream=stream)

        assert len(broadcaster._subscribers['/events/kept']) == 1
