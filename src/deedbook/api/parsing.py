from __future__ import annotations

from typing import Any

CALLER_HEADER = "X-Caller"


def parse_int(value: Any, *, field: str) -> int:
    """Parse a JSON integer (or a string of digits). Floats and bools are rejected."""

    if value is None:
        raise ValueError(f"Missing {field}")
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s, 10)
        except ValueError as ex:
            raise ValueError(f"Invalid {field}") from ex
    raise ValueError(f"Invalid {field}")


def parse_text(value: Any, *, field: str) -> str:
    if value is None:
        raise ValueError(f"Missing {field}")
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}")
    return value


def parse_caller(headers: Any) -> str:
    caller = headers.get(CALLER_HEADER)
    if caller is None or not str(caller).strip():
        raise ValueError(f"Missing {CALLER_HEADER} header")
    return str(caller).strip()


def parse_add_body(body: dict[str, Any]) -> tuple[str, int]:
    location = parse_text(body.get("location"), field="location")
    price = parse_int(body.get("price"), field="price")
    return location, price


def parse_after(value: Any) -> int:
    if value is None:
        return 0
    after = parse_int(value, field="after")
    if after < 0:
        raise ValueError("after must be >= 0")
    return after
