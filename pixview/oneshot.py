"""A channel that carries exactly one value from one thread to another."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from enum import Enum
from typing import Any, Generic, Tuple, TypeVar, Union

T = TypeVar("T")

_EMPTY: Any = object()


class OneshotError(Exception):
    """Base class for errors of a one-shot channel."""

    default_message = "one-shot channel error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class DisconnectedError(OneshotError):
    """The sender was closed without sending a value."""

    default_message = "the sender of the oneshot channel was dropped without setting a value"


class AlreadyRetrievedError(OneshotError):
    """The value has already been taken from the channel."""

    default_message = "the value of the oneshot channel has already been retrieved"


class NotReadyError(OneshotError):
    """No value has been sent yet."""

    default_message = "the value of the oneshot channel is not available yet"


class _State(Enum):
    NOT_READY = 0
    FINISHED = 1
    DISCONNECTED = 2


class _Shared:
    def __init__(self) -> None:
        self.condition = threading.Condition()
        self.state = _State.NOT_READY
        self.value: Any = _EMPTY


class Sender(Generic[T]):
    """Sending half of a one-shot channel.

    Closing the sender (explicitly, via ``with``, or by garbage collection)
    without sending disconnects the channel.
    """

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared
        self._used = False

    def send(self, value: T) -> None:
        """Send the value; a sender can be used only once."""
        if self._used:
            raise RuntimeError("the oneshot sender has already been used")
        self._used = True
        with self._shared.condition:
            self._shared.value = value
            self._shared.state = _State.FINISHED
            self._shared.condition.notify_all()

    def close(self) -> None:
        """Give up the sender; a receiver waiting for a value is disconnected."""
        if self._used:
            return
        self._used = True
        with self._shared.condition:
            if self._shared.state is _State.NOT_READY:
                self._shared.state = _State.DISCONNECTED
            self._shared.condition.notify_all()

    def __enter__(self) -> "Sender[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        if hasattr(self, "_shared"):
            self.close()


class Receiver(Generic[T]):
    """Receiving half of a one-shot channel."""

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared

    def _take(self) -> T:
        shared = self._shared
        if shared.state is _State.FINISHED:
            if shared.value is _EMPTY:
                raise AlreadyRetrievedError()
            value, shared.value = shared.value, _EMPTY
            return value
        if shared.state is _State.DISCONNECTED:
            raise DisconnectedError()
        raise NotReadyError()

    def recv(self) -> T:
        """Block until the value arrives or the sender is closed."""
        with self._shared.condition:
            while True:
                try:
                    return self._take()
                except NotReadyError:
                    self._shared.condition.wait()

    def try_recv(self) -> T:
        """Take the value without blocking."""
        with self._shared.condition:
            return self._take()

    def recv_timeout(self, timeout: Union[float, timedelta]) -> T:
        """Wait at most ``timeout`` (seconds or a timedelta) for the value."""
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        return self.recv_deadline(time.monotonic() + timeout)

    def recv_deadline(self, deadline: float) -> T:
        """Wait until ``deadline``, a :func:`time.monotonic` instant, for the value."""
        condition = self._shared.condition
        with condition:
            while True:
                try:
                    return self._take()
                except NotReadyError:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise
                    if not condition.wait(remaining):
                        raise


def channel() -> Tuple[Sender[Any], Receiver[Any]]:
    """Create a connected sender and receiver."""
    shared = _Shared()
    return Sender(shared), Receiver(shared)