import asyncio

import pytest
from aiohttp import test_utils, web

from commontests.assertions import ResponseChecks
from commontests.cli import run_collection_async
from commontests.collection import validate_collection_yaml
from commontests.reporting import RequestStatus, RunStatus, TestRunner
from commontests.transport import HTTPClient, RequestSpec, TransportError

HAL_ITEMS = {
    "_links": {
        "self": {"href": "https://api.example.com/items?page=1"},
        "first": {"href": "https://api.example.com/items?page=1"},
        "last": {"href": "https://api.example.com/items?page=1"},
    },
    "_embedded": {"resourceList": [{"id": "123e4567-e89b-12d3-a456-426614174000"}]},
    "_page": {"size": 1, "number": 1},
}


def make_app() -> web.Application:
    async def items(request):
        return web.json_response(HAL_ITEMS, content_type="application/hal+json")

    async def create(request):
        payload = await request.json()
        return web.json_response(
            {"id": 1, **payload}, status=201, headers={"Location": "/items/1"}
        )

    async def down(request):
        return web.Response(status=503, text="maintenance")

    async def binary(request):
        return web.Response(body=b"\xff\xfe\x00garbage", content_type="application/json")

    async def tagged(request):
        response = web.json_response({})
        response.headers.add("X-Tag", "a")
        response.headers.add("X-Tag", "b")
        return response

    app = web.Application()
    app.router.add_get("/items", items)
    app.router.add_post("/items", create)
    app.router.add_get("/down", down)
    app.router.add_get("/binary", binary)
    app.router.add_get("/tagged", tagged)
    return app


def run_with_server(coro_factory):
    """Start the test app, run coro_factory(server) and return its result."""

    async def _run():
        async with test_utils.TestServer(make_app()) as server:
            return await coro_factory(server)

    return asyncio.run(_run())


class TestHTTPClient:
    """Integration tests for the aiohttp based client."""

    def test_captures_response(self):
        async def scenario(server):
            async with HTTPClient() as client:
                return await client.send(RequestSpec("GET", str(server.make_url("/items"))))

        response = run_with_server(scenario)
        assert response.status_code == 200
        assert response.header("content-type").startswith("application/hal+json")
        assert response.json() == HAL_ITEMS
        assert response.elapsed_ms > 0

    def test_sends_json_and_keeps_location(self):
        async def scenario(server):
            async with HTTPClient() as client:
                return await client.send(
                    RequestSpec("POST", str(server.make_url("/items")), json={"name": "new"})
                )

        response = run_with_server(scenario)
        assert response.status_code == 201
        assert response.location == "/items/1"
        assert response.json() == {"id": 1, "name": "new"}

    def test_undecodable_body_is_a_failing_schema_check(self):
        async def scenario(server):
            async with HTTPClient() as client:
                return await client.send(RequestSpec("GET", str(server.make_url("/binary"))))

        response = run_with_server(scenario)
        assert response.status_code == 200
        assert "\ufffd" in response.text

        runner = TestRunner()
        outcome = ResponseChecks(response, runner).check_json_schema({"type": "object"})
        assert outcome.failed
        assert "not valid JSON" in outcome.message

    def test_repeated_headers_are_joined(self):
        async def scenario(server):
            async with HTTPClient() as client:
                return await client.send(RequestSpec("GET", str(server.make_url("/tagged"))))

        response = run_with_server(scenario)
        assert response.header("x-tag") == "a, b"

    def test_not_connected(self):
        async def scenario():
            await HTTPClient().send(RequestSpec("GET", "http://127.0.0.1:9/"))

        with pytest.raises(TransportError):
            asyncio.run(scenario())

    def test_connection_refused(self):
        async def scenario():
            async with HTTPClient() as client:
                await client.send(RequestSpec("GET", "http://127.0.0.1:9/", timeout_ms=2000))

        with pytest.raises(TransportError) as excinfo:
            asyncio.run(scenario())
        assert excinfo.value.url == "http://127.0.0.1:9/"


class TestRunCollection:
    """End-to-end tests running collections against a local server."""

    def collection_for(self, server, requests_yaml):
        collection, result = validate_collection_yaml(
            f"version: 1\nname: local\nenv:\n  BASE: 'http://{server.host}:{server.port}'\n"
            f"requests:\n{requests_yaml}"
        )
        assert result.is_valid, str(result)
        return collection

    def test_all_checks_pass(self):
        requests_yaml = (
            "  - id: list\n"
            "    url: '{{env.BASE}}/items'\n"
            "    expect:\n"
            "      status: 200\n"
            "      content_type: application/hal+json\n"
            "      time_ms: 5000\n"
            "      hal: {items: {type: object, required: [id]}}\n"
            "  - id: create\n"
            "    method: POST\n"
            "    url: '{{env.BASE}}/items'\n"
            "    json: {name: new}\n"
            "    expect: {status: 201, location: /items/1}\n"
        )

        async def scenario(server):
            collection = self.collection_for(server, requests_yaml)
            return await run_collection_async(collection, quiet=True)

        report = run_with_server(scenario).report
        assert report.status == RunStatus.PASSED, report.summary()
        assert [o.description for o in report.requests[0].outcomes] == [
            "Status Code (Success)",
            "Content Type",
            "JSON Schema",
            "Response Time < 5s",
        ]

    def test_infrastructure_failure_skips_queued_requests(self):
        requests_yaml = (
            "  - id: down\n"
            "    url: '{{env.BASE}}/down'\n"
            "    expect: {status: 200, content_type: application/json}\n"
            "  - id: list\n"
            "    url: '{{env.BASE}}/items'\n"
            "    expect: {status: 200}\n"
        )

        async def scenario(server):
            collection = self.collection_for(server, requests_yaml)
            return await run_collection_async(collection, quiet=True)

        report = run_with_server(scenario).report
        assert report.status == RunStatus.ABORTED
        down, listed = report.requests
        assert [o.description for o in down.outcomes] == ["Status Code (Success)"]
        assert down.status == RequestStatus.FAILED
        assert listed.status == RequestStatus.SKIPPED
        assert "503" in listed.skip_reason
