"""Tests for settings, process bootstrap and the timeout middleware."""

import asyncio
import socket

import pytest

from profile_api.app import server
from profile_api.app.core.config import Settings
from profile_api.app.core.middleware import TimeoutMiddleware
from profile_api.app.main import create_app
from profile_api.app.services.user_service import UserStore


def test_default_settings():
    settings = Settings()
    assert settings.read_timeout == 10
    assert settings.write_timeout == 10
    assert settings.idle_timeout == 60


def test_build_config_uses_settings():
    settings = Settings(host="127.0.0.1", port=9099, idle_timeout=60)
    config = server.build_config(create_app(settings), settings)
    assert config.host == "127.0.0.1"
    assert config.port == 9099
    assert config.timeout_keep_alive == 60
    assert config.access_log is False


def test_main_returns_1_when_port_is_taken():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(1)
        port = sock.getsockname()[1]

        assert server.main(Settings(host="127.0.0.1", port=port)) == 1


def test_main_returns_1_on_startup_error(monkeypatch):
    async def fail(settings):
        raise OSError("address already in use")

    monkeypatch.setattr(server, "serve", fail)
    assert server.main(Settings()) == 1


def test_main_returns_0_on_clean_shutdown(monkeypatch):
    async def ok(settings):
        return None

    monkeypatch.setattr(server, "serve", ok)
    assert server.main(Settings()) == 0


# --- TimeoutMiddleware ---

HTTP_SCOPE = {"type": "http", "method": "POST", "path": "/"}


async def read_body_then_disconnect(scope, receive, send):
    await receive()
    await receive()


def test_read_timeout_aborts_slow_body():
    async def slow_receive():
        await asyncio.sleep(1)
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message):
        pass

    middleware = TimeoutMiddleware(read_body_then_disconnect, read_timeout=0.01, write_timeout=1)
    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(middleware(HTTP_SCOPE, slow_receive, send))


def test_receive_after_body_is_not_timed():
    messages = [
        {"type": "http.request", "body": b"{}", "more_body": False},
        {"type": "http.disconnect"},
    ]

    async def receive():
        message = messages.pop(0)
        if message["type"] == "http.disconnect":
            await asyncio.sleep(0.05)
        return message

    async def send(message):
        pass

    middleware = TimeoutMiddleware(read_body_then_disconnect, read_timeout=0.01, write_timeout=1)
    asyncio.run(middleware(HTTP_SCOPE, receive, send))
    assert messages == []


def test_write_timeout_aborts_slow_send():
    async def app(scope, receive, send):
        await send({"type": "http.response.start", "status": 200, "headers": []})

    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    async def slow_send(message):
        await asyncio.sleep(1)

    middleware = TimeoutMiddleware(app, read_timeout=1, write_timeout=0.01)
    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(middleware(HTTP_SCOPE, receive, slow_send))


def test_read_timeout_drops_request_without_response():
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "scheme": "http",
        "path": "/api/users",
        "raw_path": b"/api/users",
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"testserver"), (b"content-type", b"application/json")],
        "client": ("127.0.0.1", 50000),
        "server": ("testserver", 80),
    }
    sent = []

    async def slow_receive():
        await asyncio.sleep(1)
        return {"type": "http.request", "body": b"{}", "more_body": False}

    async def send(message):
        sent.append(message)

    store = UserStore()
    app = create_app(Settings(read_timeout=0.05), store=store)
    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(app(scope, slow_receive, send))
    assert sent == []
    assert len(store) == 0
