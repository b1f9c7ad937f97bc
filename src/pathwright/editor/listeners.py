"""Relocation listeners and the registry that notifies them.

Listeners are external clients (language servers, file-tree views, ...) that
want to hear about renames. Each hook is optional: a listener may implement
only ``will_relocate``, only ``did_relocate``, or both.
"""

import inspect
from collections.abc import Awaitable, Callable, Iterator
from typing import Any, Protocol

import anyio
import structlog

from pathwright.core.schemas import RelocationEvent

SideEffect = Callable[[], Any]


class WillRelocateListener(Protocol):
    def will_relocate(
        self, event: RelocationEvent, deadline: float
    ) -> SideEffect | None | Awaitable[SideEffect | None]:
        """Prepare for a rename; may return an edit to apply before it happens.

        ``deadline`` is an absolute ``anyio.current_time()`` value after which
        the engine stops waiting.
        """
        ...


class DidRelocateListener(Protocol):
    def did_relocate(self, event: RelocationEvent) -> None | Awaitable[None]: ...


class ListenerRegistry:
    """Ordered collection of relocation listeners.

    Listeners are notified in registration order. Failures and timeouts are
    logged and never propagate to the rename that triggered them.
    """

    def __init__(self, listeners: list[object] | None = None, logger: Any = None):
        self._listeners: list[object] = list(listeners or [])
        self._logger = logger or structlog.get_logger(__name__)

    def register(self, listener: object) -> None:
        self._listeners.append(listener)

    def unregister(self, listener: object) -> None:
        self._listeners.remove(listener)

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[object]:
        return iter(list(self._listeners))

    async def notify_will_relocate(
        self, event: RelocationEvent, timeout: float
    ) -> None:
        """Run every ``will_relocate`` hook and apply the edits they return.

        Args:
            event: The rename about to happen
            timeout: Seconds each listener gets before it is skipped
        """
        for listener in self:
            hook = getattr(listener, "will_relocate", None)
            if not callable(hook):
                continue

            log = self._logger.bind(
                listener=type(listener).__name__,
                old_path=str(event.old_path),
                new_path=str(event.new_path),
            )
            deadline = anyio.current_time() + timeout
            side_effect: Any = None
            try:
                with anyio.move_on_after(timeout) as scope:
                    side_effect = hook(event, deadline)
                    if inspect.isawaitable(side_effect):
                        side_effect = await side_effect
                if scope.cancelled_caught:
                    log.warning("relocate.will_timeout", timeout=timeout)
                    continue
                if callable(side_effect):
                    applied = side_effect()
                    if inspect.isawaitable(applied):
                        await applied
            except Exception as exc:
                log.warning("relocate.will_failed", error=str(exc))

    async def notify_did_relocate(
        self, event: RelocationEvent, timeout: float
    ) -> None:
        """Run every ``did_relocate`` hook, ignoring failures and timeouts.

        Hooks are awaited, not detached: the caller gets its outcome once
        every hook has returned or used up ``timeout``, so the added latency
        is at most ``timeout`` per listener.

        Args:
            event: The completed rename
            timeout: Seconds each listener gets before it is skipped
        """
        for listener in self:
            hook = getattr(listener, "did_relocate", None)
            if not callable(hook):
                continue
            try:
                with anyio.move_on_after(timeout) as scope:
                    result = hook(event)
                    if inspect.isawaitable(result):
                        await result
                if scope.cancelled_caught:
                    self._logger.warning(
                        "relocate.did_timeout",
                        listener=type(listener).__name__,
                        timeout=timeout,
                    )
            except Exception as exc:
                self._logger.warning(
                    "relocate.did_failed",
                    listener=type(listener).__name__,
                    old_path=str(event.old_path),
                    new_path=str(event.new_path),
                    error=str(exc),
                )
