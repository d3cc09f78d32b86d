import socket

import httpx
import pytest

from todo_api.config import get_settings
from todo_api.server import TodoServer


@pytest.mark.asyncio
async def test_server_serves_over_socket_and_stops():
    server = TodoServer(settings=get_settings(), port=0)
    await server.start()
    port = server.port
    assert port != 0
    try:
        assert server.started
        async with httpx.AsyncClient(base_url=f"http://127.0.0.1:{port}", trust_env=False) as client:
            preflight = await client.options("/api/todos")
            assert preflight.status_code == 200
            assert preflight.headers["access-control-allow-origin"] == "*"

            health = await client.get("/health")
            assert health.status_code == 200

            resp = await client.post(
                "/api/auth/register",
                json={"username": "socket_user", "email": "socket@x.com", "password": "p1"},
            )
            assert resp.status_code in (201, 400), resp.text
    finally:
        await server.stop()

    with pytest.raises(httpx.ConnectError):
        async with httpx.AsyncClient(trust_env=False) as client:
            await client.get(f"http://127.0.0.1:{port}/health")


@pytest.mark.asyncio
async def test_start_twice_is_refused():
    server = TodoServer(settings=get_settings(), port=0)
    await server.start()
    try:
        with pytest.raises(RuntimeError):
            await server.start()
    finally:
        await server.stop()


@pytest.mark.asyncio
async def test_stop_without_start_is_noop():
    server = TodoServer(settings=get_settings(), port=0)
    await server.stop()
    assert not server.started


@pytest.mark.asyncio
async def test_start_on_occupied_port_raises():
    settings = get_settings()
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind((settings.host, 0))
        taken.listen()
        server = TodoServer(settings=settings, port=taken.getsockname()[1])

        with pytest.raises(RuntimeError):
            await server.start()
        assert not server.started
