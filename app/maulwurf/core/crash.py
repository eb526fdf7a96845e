"""Top-level handler for uncaught exceptions.

Records a ``fatal`` log entry for any exception that would otherwise
end the process (or a worker thread), then hands over to the hook that
was installed before.
"""

import sys
import threading
import traceback
from types import TracebackType

from maulwurf.core.state import AppState


def _describe(exc_type: type[BaseException], exc: BaseException | None) -> str:
    """Build a one-line description of an exception."""
    lines = traceback.format_exception_only(exc_type, exc)
    return lines[-1].strip() if lines else exc_type.__name__


def install_crash_handler(state: AppState) -> None:
    """Hook sys.excepthook and threading.excepthook for fatal logging.

    KeyboardInterrupt is passed straight to the previous hook.

    Args:
        state: State whose log receives the fatal entries.
    """
    previous_hook = sys.excepthook
    previous_thread_hook = threading.excepthook

    def excepthook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if not issubclass(exc_type, KeyboardInterrupt):
            state.log("fatal", f"Unhandled exception: {_describe(exc_type, exc)}")
        previous_hook(exc_type, exc, tb)

    def thread_excepthook(args: threading.ExceptHookArgs) -> None:
        if not issubclass(args.exc_type, SystemExit):
            name = args.thread.name if args.thread is not None else "unknown"
            state.log(
                "fatal",
                f"Unhandled exception in thread {name}: "
                f"{_describe(args.exc_type, args.exc_value)}",
            )
        previous_thread_hook(args)

    sys.excepthook = excepthook
    threading.excepthook = thread_excepthook
