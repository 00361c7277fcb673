from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
import webbrowser
from dataclasses import dataclass, replace
from typing import Any

import uvicorn

from ..core.addresses import normalize_address
from ..core.projection import event_to_dict, listing_to_dict
from ..core.registry import PropertyRegistry
from ..sdk.client import DeedbookClient
from ..sdk.handles import PropertyHandle
from .app import create_app
from .config import _normalize_base_url, load_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeedbookServer:
    """A server started in this process, with direct access to its registry.

    The property methods call the registry in-process (no HTTP round trip) as
    `caller`. Use `connect()` to act as a different identity.
    """

    host: str
    port: int
    url: str
    registry: PropertyRegistry
    caller: str | None = None

    def connect(self, caller: str) -> DeedbookServer:
        return replace(self, caller=normalize_address(caller))

    def as_client(self) -> DeedbookClient:
        return DeedbookClient(self.url.rstrip("/"), caller=self.caller)

    def _require_caller(self) -> str:
        if self.caller is None:
            raise ValueError("caller is required for mutating calls; use connect(address)")
        return self.caller

    def add_property(self, location: str, price: int) -> PropertyHandle:
        pid = self.registry.add_property(self._require_caller(), location, price)
        return PropertyHandle(pid, ops=self)

    def get_property(self, property_id: int) -> dict[str, Any]:
        return listing_to_dict(self.registry.properties(int(property_id)))

    def properties(self, property_id: int) -> tuple[str, int, str]:
        return self.registry.properties(int(property_id)).as_tuple()

    def owner_of(self, property_id: int) -> str:
        return self.registry.owner_of(int(property_id))

    def property_count(self) -> int:
        return self.registry.property_count()

    def transfer_ownership(self, property_id: int, new_owner: str) -> dict[str, Any]:
        event = self.registry.transfer_ownership(self._require_caller(), int(property_id), new_owner)
        return event_to_dict(event)

    def update_property_price(self, property_id: int, new_price: int) -> dict[str, Any]:
        event = self.registry.update_property_price(self._require_caller(), int(property_id), new_price)
        return event_to_dict(event)

    def delete_property(self, property_id: int) -> dict[str, Any]:
        event = self.registry.delete_property(self._require_caller(), int(property_id))
        return event_to_dict(event)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a deedbook server is reachable."""

    import httpx

    try:
        return DeedbookClient(base_url).healthy(timeout_s=timeout_s)
    except (httpx.HTTPError, ValueError):
        return False


def _wait_until_started(server: uvicorn.Server, *, timeout_s: float) -> None:
    deadline = time.monotonic() + timeout_s
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError(f"deedbook server did not start within {timeout_s:.1f}s")
        time.sleep(0.01)


def run(
    *,
    host: str | None = None,
    port: int | None = None,
    caller: str | None = None,
    registry: PropertyRegistry | None = None,
    open_browser: bool = False,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 10.0,
) -> DeedbookServer | DeedbookClient:
    """Start a deedbook API server with a single Python call.

    Behavior:
    - If DEEDBOOK_URL is set, we *attach* to that existing server (client mode) unless
      `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      we attach to it (client mode) unless `new_server=True`.
    - Otherwise we start a new local server on a background thread (server mode) and
      return a `DeedbookServer` bound to its registry.

    Unset arguments fall back to `DEEDBOOK_*` environment settings. An explicit
    argument is used as-is, even when the matching variable is malformed.
    """

    settings = load_settings(host=host, port=port, log_level=log_level)
    host = settings.host
    port = settings.port
    log_level = settings.log_level

    # 1) Try attaching to an explicitly provided server.
    if settings.url and not new_server:
        if _is_server_alive(settings.url, timeout_s=connect_timeout_s):
            logger.info("Attaching to deedbook server at %s", settings.url)
            return DeedbookClient(settings.url, caller=caller)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to deedbook server at %s", default_url)
            return DeedbookClient(default_url, caller=caller)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    reg = registry if registry is not None else PropertyRegistry()
    app = create_app(reg, settings)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    _wait_until_started(server, timeout_s=startup_timeout_s)

    url = f"http://{host}:{port}/"
    logger.info("deedbook server listening on %s", url)
    if open_browser:
        webbrowser.open(url + "docs")

    return DeedbookServer(
        host=host,
        port=port,
        url=url,
        registry=reg,
        caller=normalize_address(caller) if caller is not None else None,
    )
