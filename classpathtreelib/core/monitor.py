"""Progress monitors used for advisory cancellation."""

import threading

from .errors import OperationCanceledError


class ProgressMonitor:
    """Cancellation flag polled by long-running resolvers.

    The default monitor is never canceled. Any thread may call cancel();
    the resolver running the query checks it between units of work.
    """

    def __init__(self):
        self._canceled = threading.Event()

    def cancel(self) -> None:
        """Request cancellation of the running query."""
        self._canceled.set()

    def is_canceled(self) -> bool:
        """Check whether cancellation was requested."""
        return self._canceled.is_set()

    def check_canceled(self) -> None:
        """Raise OperationCanceledError if cancellation was requested."""
        if self.is_canceled():
            raise OperationCanceledError()


class NullProgressMonitor(ProgressMonitor):
    """Monitor that ignores cancel requests."""

    def cancel(self) -> None:
        pass
