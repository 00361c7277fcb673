from __future__ import annotations

import argparse
import time

from .runtime.config import LOG_LEVELS, load_settings
from .runtime.logs import configure_logging
from .runtime.server import DeedbookServer, run


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="deedbook", description="deedbook: property ownership registry server")
    p.add_argument("--host", default=None, help="bind host (default: DEEDBOOK_HOST or 127.0.0.1)")
    p.add_argument("--port", type=int, default=None, help="bind port (default: DEEDBOOK_PORT or 8000)")
    p.add_argument("--log-level", default=None, choices=LOG_LEVELS)
    p.add_argument("--access-log", action="store_true")
    p.add_argument("--open-browser", action="store_true", help="open the interactive API docs")
    args = p.parse_args(argv)

    # Flags win over the environment; only unset flags read DEEDBOOK_*.
    settings = load_settings(host=args.host, port=args.port, log_level=args.log_level)

    configure_logging(settings.log_level)
    srv = run(
        host=settings.host,
        port=settings.port or 8000,
        log_level=settings.log_level,
        access_log=args.access_log,
        open_browser=args.open_browser,
        new_server=True,
    )
    if not isinstance(srv, DeedbookServer):
        raise RuntimeError(f"expected a local server, got {type(srv).__name__}")
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
