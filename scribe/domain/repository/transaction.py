"""Work deferred until the request transaction has committed."""

from collections.abc import Awaitable, Callable


class AfterCommit:
    """Callbacks to run once the surrounding transaction commits.

    The persistence layer calls ``run`` after a successful commit. On
    rollback the callbacks are never run.

    A request that ends in an error the API turns into a response never
    raises out of the request scope, so the error handler calls ``cancel``
    instead; the persistence layer then rolls back as if it had raised.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], Awaitable[object]]] = []
        self._cancelled = False

    def add(self, callback: Callable[[], Awaitable[object]]) -> None:
        self._callbacks.append(callback)

    def __len__(self) -> int:
        return len(self._callbacks)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Mark the request as failed: roll back and drop the callbacks."""
        self._cancelled = True
        self._callbacks = []

    async def run(self) -> None:
        """Run and clear the queued callbacks, in the order they were added.

        Does nothing once cancelled.
        """
        if self._cancelled:
            return
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            await callback()
