"""Tests for waypoint.testing.TestClient."""

from waypoint import App, Request
from waypoint.testing import TestClient


def _app() -> App:
    app = App()
    app.add_routes({"/docs": "https://example.com/docs"})
    return app


class TestTestClient:
    async def test_redirect_not_followed(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/docs")
        assert response.status == 302
        assert response.location == "https://example.com/docs"
        assert response.body_bytes == b""

    async def test_query_string_ignored_for_lookup(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/docs?page=2")
        assert response.status == 302

    async def test_any_method_redirects(self) -> None:
        async with TestClient(_app()) as client:
            post = await client.post("/docs", body=b"x=1")
            head = await client.head("/docs")
        assert post.status == 302
        assert head.status == 302

    async def test_unmatched_reaches_default(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/nowhere")
        assert response.status == 200
        assert response.text == "Hello, world!"
        assert response.content_type.startswith("text/plain")

    async def test_entering_builds_chain(self) -> None:
        app = _app()
        assert app._chain is None
        async with TestClient(app):
            assert app._chain is not None

    async def test_resolve(self) -> None:
        async with TestClient(_app()) as client:
            assert await client.resolve("/docs") == "https://example.com/docs"
            assert await client.resolve("/nowhere") is None

    async def test_headers_reach_default_handler(self) -> None:
        app = App()

        @app.default
        def echo(request: Request) -> str:
            return ",".join(request.headers.get_list("x-tag"))

        async with TestClient(app) as client:
            response = await client.get("/", headers={"X-Tag": "a"})
        assert response.text == "a"
