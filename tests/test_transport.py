from __future__ import annotations

import asyncio
import logging

import aiohttp
import pytest
from aiohttp import web
from aiohttp import test_utils

from pyzif._transport import HttpTransport
from pyzif.client import ZifClient
from pyzif.config import ZifConfig
from pyzif.exceptions import ZifTransportError


def _app() -> web.Application:
    async def resolve(request: web.Request) -> web.Response:
        address = request.match_info["address"]
        if address == "ZAlpha":
            return web.json_response(
                {"status": "ok", "value": {"name": "Alpha", "publicKey": "c2VjcmV0", "postCount": 2}}
            )
        if address == "ZBroken":
            return web.Response(status=500, text="internal error")
        if address == "ZGarbage":
            return web.Response(text="<html>not json</html>")
        if address == "ZUndecodable":
            return web.Response(body=b"\xff\xfe\xfa", content_type="application/json", charset="utf-8")
        if address == "ZArray":
            return web.json_response(["unexpected"])
        if address == "ZSlow":
            await asyncio.sleep(1.0)
        return web.json_response({"status": "err", "error": "Address could not be resolved"})

    app = web.Application()
    app.router.add_get("/self/resolve/{address}/", resolve)
    return app


@pytest.mark.asyncio
async def test_get_json_returns_decoded_object() -> None:
    async with test_utils.TestServer(_app()) as server:
        config = ZifConfig(base_url=str(server.make_url("/")))
        async with aiohttp.ClientSession() as session:
            body = await HttpTransport(config, session).get_json("/self/resolve/ZAlpha/")

    assert body["status"] == "ok"
    assert body["value"]["name"] == "Alpha"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("address", "status_code"),
    [("ZBroken", 500), ("ZGarbage", None), ("ZUndecodable", None), ("ZArray", None)],
)
async def test_bad_responses_raise_transport_error(address: str, status_code: int | None) -> None:
    endpoint = f"/self/resolve/{address}/"
    async with test_utils.TestServer(_app()) as server:
        config = ZifConfig(base_url=str(server.make_url("/")))
        async with aiohttp.ClientSession() as session:
            with pytest.raises(ZifTransportError) as exc_info:
                await HttpTransport(config, session).get_json(endpoint)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.endpoint == endpoint


@pytest.mark.asyncio
async def test_request_timeout_raises_transport_error() -> None:
    async with test_utils.TestServer(_app()) as server:
        config = ZifConfig(base_url=str(server.make_url("/")), request_timeout=0.05)
        async with aiohttp.ClientSession() as session:
            with pytest.raises(ZifTransportError, match="timed out"):
                await HttpTransport(config, session).get_json("/self/resolve/ZSlow/")


@pytest.mark.asyncio
async def test_unreachable_daemon_raises_transport_error() -> None:
    async with test_utils.TestServer(_app()) as server:
        base_url = str(server.make_url("/"))
    # Server is closed now.
    async with aiohttp.ClientSession() as session:
        with pytest.raises(ZifTransportError, match="failed"):
            await HttpTransport(ZifConfig(base_url=base_url), session).get_json("/self/resolve/ZAlpha/")


@pytest.mark.asyncio
async def test_trace_logging_redacts_keys(caplog: pytest.LogCaptureFixture) -> None:
    async with test_utils.TestServer(_app()) as server:
        config = ZifConfig(base_url=str(server.make_url("/")), api_trace_enabled=True)
        with caplog.at_level(logging.DEBUG, logger="pyzif._transport"):
            async with ZifClient(config) as client:
                record = await client.resolve("ZAlpha")

    assert record.name == "Alpha"
    assert record.raw["publicKey"] == "c2VjcmV0"
    assert "<redacted>" in caplog.text
    assert "c2VjcmV0" not in caplog.text
