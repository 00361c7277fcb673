from __future__ import annotations


def test_run_auto_attaches_to_existing_server() -> None:
    """If a server is reachable at host/port, deedbook.run() should attach by default."""

    import deedbook

    server = deedbook.run(host="127.0.0.1", port=0, new_server=True)
    assert isinstance(server, deedbook.DeedbookServer)

    attached = deedbook.run(host=server.host, port=server.port, caller="0x" + "1" * 40)

    from deedbook.sdk.client import DeedbookClient

    assert isinstance(attached, DeedbookClient)
    assert attached.base_url.rstrip("/") == f"http://{server.host}:{server.port}"

    # Both views share the same registry.
    attached.add_property("123 Main St", 100)
    assert server.registry.property_count() == 1
    assert server.properties(1)[0] == "123 Main St"


def test_run_new_server_forces_start_even_if_env_url_is_set() -> None:
    import os

    import deedbook

    s1 = deedbook.run(host="127.0.0.1", port=0, new_server=True)

    os.environ["DEEDBOOK_URL"] = f"http://{s1.host}:{s1.port}"
    try:
        s2 = deedbook.run(host="127.0.0.1", port=0, new_server=True)
    finally:
        os.environ.pop("DEEDBOOK_URL", None)

    from deedbook.runtime.server import DeedbookServer

    assert isinstance(s2, DeedbookServer)
    assert (s2.host, s2.port) != (s1.host, s1.port)
    assert s2.registry is not s1.registry


def test_run_explicit_port_ignores_malformed_env_port(monkeypatch) -> None:
    import deedbook

    monkeypatch.delenv("DEEDBOOK_URL", raising=False)
    monkeypatch.setenv("DEEDBOOK_PORT", "abc")
    monkeypatch.setenv("DEEDBOOK_LOG_LEVEL", "trace")

    server = deedbook.run(host="127.0.0.1", port=0, log_level="warning", new_server=True)

    assert isinstance(server, deedbook.DeedbookServer)
    assert server.port != 0


def test_cli_flags_override_malformed_env(monkeypatch) -> None:
    import deedbook.__main__ as cli

    monkeypatch.setenv("DEEDBOOK_PORT", "abc")
    monkeypatch.setenv("DEEDBOOK_LOG_LEVEL", "trace")

    seen: dict = {}

    def fake_run(**kwargs):
        seen.update(kwargs)
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run", fake_run)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)

    try:
        cli.main(["--host", "127.0.0.1", "--port", "9123", "--log-level", "debug"])
    except KeyboardInterrupt:
        pass

    assert seen["host"] == "127.0.0.1"
    assert seen["port"] == 9123
    assert seen["log_level"] == "debug"
    assert seen["new_server"] is True
