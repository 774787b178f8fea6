"""
Tests for the aiohttp transport against a local server.
"""

import asyncio
from datetime import timedelta

import pytest
from aiohttp import web
from aiohttp import test_utils

from ssoclient import AiohttpTransport, HTTPConfig, NetworkError, SSOClient, ClientIdentity


async def create_token(request):
    form = await request.post()
    if form.get("secret") != "pw":
        return web.json_response({"error": "invalid client"}, status=403)
    return web.json_response({
        "tokens": {"access": {"token": f"token-for-{form['client']}", "expires": 1999999999}}
    })


async def create_scope(request):
    reader = await request.multipart()
    names = []
    async for part in reader:
        names.append(part.name)
        await part.read()
    return web.json_response({"token": request.query.get("token"), "fields": names})


async def slow(request):
    await asyncio.sleep(1)
    return web.Response(text="late")


def make_app():
    app = web.Application()
    app.router.add_post("/token/create.json", create_token)
    app.router.add_post("/scope/create/{id}.json", create_scope)
    app.router.add_get("/slow", slow)
    return app


class TestAiohttpTransport:
    """Test requests against an aiohttp test server"""

    @pytest.mark.asyncio
    async def test_client_credentials_round_trip(self):
        server = test_utils.TestServer(make_app())
        await server.start_server()
        endpoint = str(server.make_url("")).rstrip("/")
        try:
            async with SSOClient.new(ClientIdentity(endpoint, 7, "pw")) as client:
                token = await client.exchange_client_credentials()
            assert token.get_id() == "token-for-7"
        finally:
            await server.close()

    @pytest.mark.asyncio
    async def test_status_is_returned_not_raised(self):
        server = test_utils.TestServer(make_app())
        await server.start_server()
        transport = AiohttpTransport()
        try:
            response = await transport.post(
                str(server.make_url("/token/create.json")), {"client": "7", "secret": "bad"}
            )
            assert response.status_code == 403
            assert response.json() == {"error": "invalid client"}
        finally:
            await transport.close()
            await server.close()

    @pytest.mark.asyncio
    async def test_multipart_upload(self, tmp_path):
        icon = tmp_path / "icon.png"
        icon.write_bytes(b"\x89PNG")
        server = test_utils.TestServer(make_app())
        await server.start_server()
        transport = AiohttpTransport()
        try:
            response = await transport.post(
                str(server.make_url("/scope/create/contacts.json")),
                {"name": "Contacts"},
                params={"token": "t"},
                files={"icon": str(icon)},
            )
            assert response.json() == {"token": "t", "fields": ["name", "icon"]}
        finally:
            await transport.close()
            await server.close()

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self):
        server = test_utils.TestServer(make_app())
        await server.start_server()
        transport = AiohttpTransport(HTTPConfig(timeout=timedelta(milliseconds=100)))
        try:
            with pytest.raises(NetworkError):
                await transport.get(str(server.make_url("/slow")))
        finally:
            await transport.close()
            await server.close()

    @pytest.mark.asyncio
    async def test_connection_refused_is_network_error(self):
        server = test_utils.TestServer(make_app())
        await server.start_server()
        url = str(server.make_url("/token/create.json"))
        await server.close()

        transport = AiohttpTransport()
        try:
            with pytest.raises(NetworkError):
                await transport.post(url, {"client": "7"})
        finally:
            await transport.close()
