"""Wait-for-all barrier over named readiness signals."""

import logging
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


class StartupBarrier:
    """Join over named readiness signals with a single failure path.

    Signals may arrive in any order. ``on_ready`` fires once every signal is
    ready; ``on_failed`` fires on the first failure. Exactly one of them
    fires, exactly once; later signals are ignored.

    Usage:
        barrier = StartupBarrier(["ui", "host", "catalog"], on_ready=start, on_failed=abort)
        barrier.signal_ready("ui")
        barrier.signal_failed("catalog", CatalogLoadError("offline"))
    """

    def __init__(
        self,
        names: Iterable[str],
        on_ready: Callable[[], None],
        on_failed: Callable[[str, Exception], None],
    ):
        self._pending = set(names)
        if not self._pending:
            raise ValueError("A startup barrier needs at least one signal")
        self._names = frozenset(self._pending)
        self._on_ready = on_ready
        self._on_failed = on_failed
        self._settled = False
        self._failed = False

    @property
    def is_settled(self) -> bool:
        """True once on_ready or on_failed has fired."""
        return self._settled

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def pending(self) -> set[str]:
        """Signals not yet reported ready."""
        return set(self._pending)

    def signal_ready(self, name: str) -> None:
        """Report a named prerequisite as ready.

        Raises:
            ValueError: If the name is not one of the barrier's signals
        """
        self._check_name(name)
        if self._settled:
            return

        self._pending.discard(name)
        logger.debug(f"Startup signal ready: {name} (waiting on {sorted(self._pending)})")
        if not self._pending:
            self._settled = True
            self._on_ready()

    def signal_failed(self, name: str, error: Exception) -> None:
        """Report a named prerequisite as failed.

        Raises:
            ValueError: If the name is not one of the barrier's signals
        """
        self._check_name(name)
        if self._settled:
            return

        self._settled = True
        self._failed = True
        logger.warning(f"Startup signal failed: {name}: {error}")
        self._on_failed(name, error)

    def _check_name(self, name: str) -> None:
        if name not in self._names:
            raise ValueError(f"Unknown startup signal '{name}'")
