"""
Tests for the auth state broadcast channel.
"""

import asyncio

import pytest

from xboard_sdk.auth_state import AuthState
from xboard_sdk.auth_state import AuthStateEmitter


def test_initial_state_defaults_to_unauthenticated():
    assert AuthStateEmitter().current is AuthState.UNAUTHENTICATED
    assert (
        AuthStateEmitter(AuthState.AUTHENTICATED).current is AuthState.AUTHENTICATED
    )


@pytest.mark.asyncio
async def test_emit_updates_current_before_delivery():
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()

    emitter.emit(AuthState.AUTHENTICATED)

    assert emitter.current is AuthState.AUTHENTICATED
    assert subscription.get_nowait() is AuthState.AUTHENTICATED


@pytest.mark.asyncio
async def test_repeated_state_is_still_delivered():
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()

    emitter.emit(AuthState.UNAUTHENTICATED)
    emitter.emit(AuthState.UNAUTHENTICATED)

    assert subscription.pending == 2


@pytest.mark.asyncio
async def test_every_subscriber_gets_events_in_order():
    emitter = AuthStateEmitter()
    first = emitter.subscribe()
    second = emitter.subscribe()
    sequence = [
        AuthState.AUTHENTICATED,
        AuthState.UNAUTHENTICATED,
        AuthState.AUTHENTICATED,
    ]

    for state in sequence:
        emitter.emit(state)
    emitter.close()

    assert [s async for s in first] == sequence
    assert [s async for s in second] == sequence


@pytest.mark.asyncio
async def test_no_replay_for_late_subscribers():
    emitter = AuthStateEmitter()
    emitter.emit(AuthState.AUTHENTICATED)

    late = emitter.subscribe()

    with pytest.raises(asyncio.QueueEmpty):
        late.get_nowait()


@pytest.mark.asyncio
async def test_slow_subscriber_does_not_block_emitter():
    """
    GIVEN: one subscriber that never reads and one that does
    WHEN: many events are emitted
    THEN: emit returns immediately and the reader sees every event
    """
    emitter = AuthStateEmitter()
    idle = emitter.subscribe()
    reader = emitter.subscribe()

    for _ in range(500):
        emitter.emit(AuthState.AUTHENTICATED)

    assert idle.pending == 500
    assert reader.pending == 500


@pytest.mark.asyncio
async def test_waiting_subscriber_is_woken_by_emit():
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()

    waiter = asyncio.create_task(subscription.__anext__())
    await asyncio.sleep(0)
    emitter.emit(AuthState.AUTHENTICATED)

    assert await asyncio.wait_for(waiter, timeout=1) is AuthState.AUTHENTICATED


@pytest.mark.asyncio
async def test_cancel_stops_delivery():
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()

    subscription.cancel()
    emitter.emit(AuthState.AUTHENTICATED)

    assert emitter.subscriber_count == 0
    assert [s async for s in subscription] == []


@pytest.mark.asyncio
async def test_close_is_idempotent_and_refuses_new_subscribers():
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()

    emitter.close()
    emitter.close()

    assert emitter.closed
    assert [s async for s in subscription] == []
    with pytest.raises(RuntimeError):
        emitter.subscribe()


@pytest.mark.asyncio
async def test_emit_after_close_updates_state_without_delivery():
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()
    emitter.close()

    emitter.emit(AuthState.AUTHENTICATED)

    assert emitter.current is AuthState.AUTHENTICATED
    assert [s async for s in subscription] == []
