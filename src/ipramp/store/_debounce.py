# pyright: reportAny=false, reportExplicitAny=false
"""Debounced field writes for free-text idea edits.

Edits are buffered per ``(idea_id, field)`` and written through the
persistence adapter after an inactivity window, or immediately on
:meth:`FieldDebouncer.flush`. Each write is a single-field merge, so
buffers for different fields of the same idea never overwrite each other.
Repeated edits of the same field are last-write-wins.
"""

from types import TracebackType  # noqa: TC003
from typing import TYPE_CHECKING, Any, Final, Self

import anyio
import anyio.abc

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ipramp.storage import PersistenceAdapter

__all__ = ["DEFAULT_DEBOUNCE_SECONDS", "FieldDebouncer"]

DEFAULT_DEBOUNCE_SECONDS: Final = 0.5

type FieldKey = tuple[str, str]


class FieldDebouncer:
    """Buffers field edits and flushes them after a quiet period.

    Use as an async context manager; timers run in a task group owned by
    the debouncer. Leaving the context flushes every pending edit.

    Example:
        async with FieldDebouncer(adapter, delay=0.5) as debouncer:
            debouncer.set("idea-1", "title", "Faster cache")
            await debouncer.flush("idea-1", "title")
    """

    __slots__: Final = (
        "_adapter",
        "_delay",
        "_generations",
        "_logger",
        "_pending",
        "_sequence",
        "_task_group",
    )

    _adapter: "PersistenceAdapter"  # noqa: UP037
    _delay: float
    _logger: "FilteringBoundLogger | None"  # noqa: UP037
    _pending: dict[FieldKey, Any]
    _generations: dict[FieldKey, int]
    _sequence: int
    _task_group: anyio.abc.TaskGroup | None

    def __init__(
        self,
        adapter: "PersistenceAdapter",  # noqa: UP037
        *,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the debouncer.

        Args:
            adapter: Adapter whose ``update_idea`` receives the writes.
            delay: Inactivity window in seconds.
            logger: Optional logger.

        Raises:
            ValueError: If ``delay`` is negative.
        """
        if delay < 0:
            msg = "Debounce delay cannot be negative"
            raise ValueError(msg)
        self._adapter = adapter
        self._delay = delay
        self._logger = logger
        self._pending = {}
        self._generations = {}
        self._sequence = 0
        self._task_group = None

    async def __aenter__(self) -> Self:
        self._task_group = anyio.create_task_group()
        _ = await self._task_group.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None:
        task_group = self._task_group
        if task_group is None:
            return None
        try:
            if exc_type is None:
                await self.flush_all()
        finally:
            # Unflushed timers are dropped; a flush error propagates after
            # the group has exited.
            task_group.cancel_scope.cancel()
            self._task_group = None
            suppress = await task_group.__aexit__(exc_type, exc_val, exc_tb)
        return suppress

    @property
    def pending(self) -> dict[FieldKey, Any]:
        """Snapshot of buffered edits that have not been written yet."""
        return dict(self._pending)

    def set(self, idea_id: str, field: str, value: Any) -> None:
        """Buffer an edit and restart the field's inactivity timer.

        Raises:
            RuntimeError: If called outside the ``async with`` block.
        """
        if self._task_group is None:
            msg = "FieldDebouncer must be entered before use"
            raise RuntimeError(msg)
        key = (idea_id, field)
        # Tokens never repeat, so a stale timer cannot match a later edit.
        self._sequence += 1
        generation = self._sequence
        self._generations[key] = generation
        self._pending[key] = value
        self._task_group.start_soon(self._expire, key, generation)

    async def _expire(self, key: FieldKey, generation: int) -> None:
        await anyio.sleep(self._delay)
        # A newer edit restarted the timer.
        if self._generations.get(key) != generation:
            return
        await self._write(key)

    async def _write(self, key: FieldKey) -> bool:
        if key not in self._pending:
            return False
        value = self._pending.pop(key)
        _ = self._generations.pop(key, None)
        idea_id, field = key
        updated = await self._adapter.update_idea(idea_id, **{field: value})
        if self._logger:
            self._logger.debug(
                "field_flushed", idea_id=idea_id, field=field, found=updated is not None
            )
        return True

    async def flush(self, idea_id: str, field: str) -> bool:
        """Write one buffered edit now.

        Returns:
            True if an edit was pending.
        """
        return await self._write((idea_id, field))

    async def flush_all(self) -> int:
        """Write every buffered edit now.

        Returns:
            Number of edits written.
        """
        written = 0
        for key in list(self._pending):
            if await self._write(key):
                written += 1
        return written
