"""
Authentication state and its broadcast channel.

AuthStateEmitter holds the current AuthState and fans every transition out to
any number of subscribers. Each subscriber owns its own unbounded
asyncio.Queue, so a slow consumer never blocks the emitter or the other
subscribers. New subscribers only see events emitted after they subscribed.

Example:
    emitter = AuthStateEmitter()
    subscription = emitter.subscribe()

    emitter.emit(AuthState.AUTHENTICATED)

    async for state in subscription:
        print(state)
"""

import asyncio
import enum
import logging

logger = logging.getLogger("xboard_sdk.auth_state")

_CLOSED = object()


class AuthState(enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class AuthStateSubscription:
    """
    A single subscriber's view of the auth event stream.

    Iterate with ``async for``; iteration stops once the emitter is closed or
    the subscription is cancelled.
    """

    def __init__(self, emitter: "AuthStateEmitter"):
        self._emitter = emitter
        self._queue: asyncio.Queue = asyncio.Queue()
        self._done = False

    def _deliver(self, item) -> None:
        self._queue.put_nowait(item)

    def __aiter__(self):
        return self

    async def __anext__(self) -> AuthState:
        if self._done:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            self._done = True
            raise StopAsyncIteration
        return item

    def get_nowait(self) -> AuthState:
        """
        Returns the next pending event without waiting.

        Raises:
            asyncio.QueueEmpty: If no event is pending.
            StopAsyncIteration: If the stream has ended.
        """
        if self._done:
            raise StopAsyncIteration
        item = self._queue.get_nowait()
        if item is _CLOSED:
            self._done = True
            raise StopAsyncIteration
        return item

    @property
    def pending(self) -> int:
        """Number of undelivered items, including the end-of-stream marker."""
        return self._queue.qsize()

    def cancel(self) -> None:
        """Stops receiving events and ends iteration."""
        if self._done:
            return
        self._emitter._unsubscribe(self)
        self._deliver(_CLOSED)


class AuthStateEmitter:
    """
    Holds the current AuthState and broadcasts every emitted value.

    Args:
        initial (AuthState): State at construction. Defaults to UNAUTHENTICATED.
    """

    def __init__(self, initial: AuthState = AuthState.UNAUTHENTICATED):
        self._current = initial
        self._subscribers: list[AuthStateSubscription] = []
        self._closed = False

    @property
    def current(self) -> AuthState:
        return self._current

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> AuthStateSubscription:
        if self._closed:
            raise RuntimeError("Auth state stream is closed")
        subscription = AuthStateSubscription(self)
        self._subscribers.append(subscription)
        return subscription

    def _unsubscribe(self, subscription: AuthStateSubscription) -> None:
        if subscription in self._subscribers:
            self._subscribers.remove(subscription)

    def emit(self, state: AuthState) -> None:
        """
        Sets the current state and notifies every subscriber.

        Subscribers are notified even when the state did not change, since
        login and logout are lifecycle events in their own right.
        """
        previous = self._current
        self._current = state
        if self._closed:
            logger.debug(f"Auth state set to {state.value} after close; not broadcast")
            return
        logger.debug(
            f"Auth state {previous.value} -> {state.value} "
            f"({len(self._subscribers)} subscribers)"
        )
        for subscription in list(self._subscribers):
            subscription._deliver(state)

    def close(self) -> None:
        """Ends every subscription. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        subscribers, self._subscribers = self._subscribers, []
        for subscription in subscribers:
            subscription._deliver(_CLOSED)
        logger.debug("Auth state stream closed")
