from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from ..core.addresses import normalize_address
from ..core.errors import error_from_name
from ..api.parsing import CALLER_HEADER
from .handles import PropertyHandle

if TYPE_CHECKING:
    import httpx


def _raise_for_response(res: httpx.Response, what: str) -> None:
    if res.status_code < 400:
        return
    detail: Any = None
    try:
        detail = res.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    if isinstance(detail, dict) and "error" in detail:
        raise error_from_name(str(detail["error"]), detail.get("reason"))
    raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")


@dataclass(frozen=True)
class EventRecord:
    """One entry of the server's event log, as returned by `DeedbookClient.events()`."""

    seq: int
    event: str
    args: dict[str, Any]


class DeedbookClient:
    """HTTP client for a running deedbook server.

    Contract:
    - POST   /api/properties                 {"location", "price"}
    - GET    /api/properties/{id}
    - GET    /api/properties/{id}/owner
    - PATCH  /api/properties/{id}/owner      {"newOwner"}
    - PATCH  /api/properties/{id}/price      {"price"}
    - DELETE /api/properties/{id}
    - GET    /api/properties/count

    Mutations are sent as `caller` (the `X-Caller` header). Use `connect()` to
    act as someone else. Rejections come back as the matching `RegistryError`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        caller: str | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._caller = normalize_address(caller) if caller is not None else None
        # An injected client (e.g. FastAPI's TestClient) is reused and never closed here.
        self._http = http

    @property
    def caller(self) -> str | None:
        return self._caller

    def connect(self, caller: str) -> DeedbookClient:
        return DeedbookClient(self.base_url, caller=caller, http=self._http)

    @contextlib.contextmanager
    def _session(self, timeout_s: float) -> Iterator[httpx.Client]:
        if self._http is not None:
            yield self._http
            return

        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            yield client

    def _caller_headers(self) -> dict[str, str]:
        if self._caller is None:
            raise ValueError("caller is required for mutating calls; use connect(address)")
        return {CALLER_HEADER: self._caller}

    def healthy(self, *, timeout_s: float = 1.0) -> bool:
        with self._session(timeout_s) as client:
            res = client.get("/healthz")
            return res.status_code == 200 and bool(res.json().get("ok"))

    def add_property(self, location: str, price: int, *, timeout_s: float = 10.0) -> PropertyHandle:
        headers = self._caller_headers()
        with self._session(timeout_s) as client:
            res = client.post("/api/properties", json={"location": location, "price": price}, headers=headers)
            _raise_for_response(res, "Add property")
            data = res.json()
        pid = data.get("id")
        if pid is None:
            raise RuntimeError(f"Add property returned invalid response: {data}")
        return PropertyHandle(int(pid), ops=self)

    def get_property(self, property_id: int, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with self._session(timeout_s) as client:
            res = client.get(f"/api/properties/{int(property_id)}")
            _raise_for_response(res, "Get property")
            return dict(res.json())

    def properties(self, property_id: int, *, timeout_s: float = 10.0) -> tuple[str, int, str]:
        """(location, price, owner), zeroed for absent or deleted ids."""

        data = self.get_property(property_id, timeout_s=timeout_s)
        return (str(data["location"]), int(data["price"]), str(data["owner"]))

    def owner_of(self, property_id: int, *, timeout_s: float = 10.0) -> str:
        with self._session(timeout_s) as client:
            res = client.get(f"/api/properties/{int(property_id)}/owner")
            _raise_for_response(res, "Get owner")
            return str(res.json()["owner"])

    def property_count(self, *, timeout_s: float = 10.0) -> int:
        with self._session(timeout_s) as client:
            res = client.get("/api/properties/count")
            _raise_for_response(res, "Get property count")
            return int(res.json()["propertyCount"])

    def transfer_ownership(self, property_id: int, new_owner: str, *, timeout_s: float = 10.0) -> dict[str, Any]:
        headers = self._caller_headers()
        with self._session(timeout_s) as client:
            res = client.patch(
                f"/api/properties/{int(property_id)}/owner",
                json={"newOwner": str(new_owner)},
                headers=headers,
            )
            _raise_for_response(res, "Transfer ownership")
            return dict(res.json()["event"])

    def update_property_price(self, property_id: int, new_price: int, *, timeout_s: float = 10.0) -> dict[str, Any]:
        headers = self._caller_headers()
        with self._session(timeout_s) as client:
            res = client.patch(
                f"/api/properties/{int(property_id)}/price",
                json={"price": new_price},
                headers=headers,
            )
            _raise_for_response(res, "Update price")
            return dict(res.json()["event"])

    def delete_property(self, property_id: int, *, timeout_s: float = 10.0) -> dict[str, Any]:
        headers = self._caller_headers()
        with self._session(timeout_s) as client:
            res = client.delete(f"/api/properties/{int(property_id)}", headers=headers)
            _raise_for_response(res, "Delete property")
            return dict(res.json()["event"])

    def events(self, *, after: int = 0, timeout_s: float = 10.0) -> list[EventRecord]:
        with self._session(timeout_s) as client:
            res = client.get("/api/events", params={"after": str(int(after))})
            _raise_for_response(res, "Get events")
            data = res.json()
        out: list[EventRecord] = []
        for item in data.get("events", []):
            args = {k: v for k, v in item.items() if k not in {"seq", "event", "emittedAt"}}
            out.append(EventRecord(seq=int(item["seq"]), event=str(item["event"]), args=args))
        return out
