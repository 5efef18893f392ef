"""
Run the service with uvicorn.

    greeting-service
    python -m app.server

Host and port come from settings (SERVER_HOST, SERVER_PORT). If the port
cannot be bound uvicorn logs the error and the process exits non-zero.
SIGINT/SIGTERM shut the listener down and the process exits 0.
"""

import signal

import uvicorn

from app.core.config import get_settings

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _exit_cleanly(signum, frame) -> None:
    # uvicorn re-raises the shutdown signal once it has stopped serving
    raise SystemExit(0)


def main() -> None:
    """Start the HTTP listener and block until SIGINT/SIGTERM."""
    settings = get_settings()
    previous = {sig: signal.signal(sig, _exit_cleanly) for sig in SHUTDOWN_SIGNALS}
    try:
        # log_config=None: setup_logging (lifespan startup) owns the handlers.
        # access_log=False: the greeting handler writes the one line per request.
        uvicorn.run(
            "app.main:app",
            host=settings.SERVER_HOST,
            port=settings.SERVER_PORT,
            log_config=None,
            access_log=False,
        )
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


if __name__ == "__main__":
    main()
