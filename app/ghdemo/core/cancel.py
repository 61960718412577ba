"""Cooperative cancellation for long-running runs."""

import logging
import signal
import threading
from types import FrameType

from ghdemo.core.errors import context_error

logger = logging.getLogger(__name__)


class CancellationToken:
    """Flag checked by the orchestrators before every remote call.

    Cancelling is idempotent and safe from signal handlers.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, operation: str) -> None:
        """Raise a context-layer LayeredError if the token was cancelled."""
        if self._event.is_set():
            raise context_error(operation)


def install_sigint_handler(token: CancellationToken) -> None:
    """Cancel ``token`` on the first Ctrl-C instead of raising KeyboardInterrupt.

    A second Ctrl-C falls through to the default handler.

    Args:
        token: Token to cancel.
    """

    def _handler(signum: int, frame: FrameType | None) -> None:
        logger.warning("Interrupt received, stopping after the current operation")
        token.cancel()
        signal.signal(signal.SIGINT, signal.default_int_handler)

    signal.signal(signal.SIGINT, _handler)
