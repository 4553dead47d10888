"""End-to-end tests: the greeting app through its ASGI interface."""

import pytest

from salute.app import App
from salute.config import AppConfig
from salute.errors import ConfigurationError
from salute.http.request import RequestContext
from salute.http.response import Response
from salute.main import create_app
from salute.testing import TestClient

NOT_FOUND = {"message": "Not Found", "statusCode": 404}
INTERNAL_ERROR = {
    "error": "Internal Server Error",
    "message": "A non-numeric HTTP status code was returned.",
}


@pytest.fixture
def app() -> App:
    return create_app(AppConfig())


class TestHello:
    @pytest.mark.parametrize("name", ["Ada", "Grace Hopper", "Zoë", "名前"])
    async def test_named(self, app: App, name: str) -> None:
        async with TestClient(app) as client:
            response = await client.post("/hello", json={"name": name})

        assert response.status == 200
        assert response.content_type == "application/json"
        assert response.json() == {"message": f"Hello there, {name}!", "statusCode": 200}

    @pytest.mark.parametrize(
        "body",
        [b"", b"{oops", b"[]", b'{"nick": "x"}', b'{"name": "Ada", "x": NaN}'],
    )
    async def test_friend_fallback(self, app: App, body: bytes) -> None:
        async with TestClient(app) as client:
            response = await client.post("/hello", body=body)

        assert response.status == 200
        assert response.json() == {"message": "Hello there, friend!", "statusCode": 200}

    async def test_slashes_normalized(self, app: App) -> None:
        async with TestClient(app) as client:
            plain = await client.post("/hello", json={"name": "Ada"})
            slashed = await client.post("//hello/", json={"name": "Ada"})

        assert slashed.status == plain.status == 200
        assert slashed.json() == plain.json()

    async def test_query_string_ignored_for_matching(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.post("/hello?lang=en", json={"name": "Ada"})

        assert response.status == 200

    async def test_body_split_across_chunks(self, app: App) -> None:
        raw = '{"name": "Zoë"}'.encode()
        split = raw.index("ë".encode()) + 1

        async with TestClient(app) as client:
            response = await client.post("/hello", chunks=[raw[:split], raw[split:]])

        assert response.json()["message"] == "Hello there, Zoë!"


class TestNotFound:
    @pytest.mark.parametrize(
        ("method", "path"),
        [("GET", "/hello"), ("POST", "/goodbye"), ("PUT", "/hello"), ("GET", "/"), ("POST", "/hello/x")],
    )
    async def test_unregistered(self, app: App, method: str, path: str) -> None:
        async with TestClient(app) as client:
            response = await client.request(method, path)

        assert response.status == 404
        assert response.content_type == "application/json"
        assert response.json() == NOT_FOUND


class TestHandlerContract:
    async def test_non_numeric_status(self) -> None:
        app = App()
        app.register("/bad", "get", lambda ctx: Response({"secret": "ignored"}, "OK"))

        async with TestClient(app) as client:
            response = await client.get("/bad")

        assert response.status == 500
        assert response.json() == INTERNAL_ERROR

    @pytest.mark.parametrize("status", [42, 0, -1, 600])
    async def test_out_of_range_status(self, status: int) -> None:
        app = App()
        app.register("/odd", "get", lambda ctx: Response({"ignored": True}, status))

        async with TestClient(app) as client:
            response = await client.get("/odd")

        assert response.status == 500
        assert response.json() == INTERNAL_ERROR

    async def test_raising_handler_keeps_serving(self) -> None:
        def boom(ctx: RequestContext) -> Response:
            raise RuntimeError("boom")

        app = App()
        app.register("/boom", "get", boom)
        app.register("/ok", "get", lambda ctx: Response({"ok": True}))

        async with TestClient(app) as client:
            failed = await client.get("/boom")
            ok = await client.get("/ok")

        assert failed.status == 500
        assert ok.status == 200

    async def test_already_serialized_body(self) -> None:
        app = App()
        app.register("/raw", "get", lambda ctx: Response('{"raw": 1}', 200))

        async with TestClient(app) as client:
            response = await client.get("/raw")

        assert response.text == '{"raw": 1}'

    async def test_second_registration_wins(self) -> None:
        app = App()
        app.register("/x", "get", lambda ctx: Response("first"))
        app.register("/x", "get", lambda ctx: Response("second"))

        async with TestClient(app) as client:
            response = await client.get("/x")

        assert response.text == "second"

    async def test_handler_sees_query_and_headers(self) -> None:
        seen: list[RequestContext] = []

        def capture(ctx: RequestContext) -> Response:
            seen.append(ctx)
            return Response({})

        app = App()
        app.register("/capture", "get", capture)

        async with TestClient(app) as client:
            await client.get("/capture?a=1&a=2", headers={"X-Trace": "abc"})

        assert seen[0].query.get_list("a") == ["1", "2"]
        assert seen[0].headers["x-trace"] == "abc"
        assert seen[0].method == "get"


class TestFreeze:
    async def test_register_after_startup_rejected(self, app: App) -> None:
        async with TestClient(app):
            assert app.frozen is True
            with pytest.raises(ConfigurationError):
                app.register("/late", "get", lambda ctx: Response({}))

    async def test_first_request_freezes(self) -> None:
        app = create_app(AppConfig())
        client = TestClient(app)
        await client.post("/hello")

        assert app.frozen is True


class TestCreateApp:
    def test_routes(self) -> None:
        assert create_app(AppConfig()).router.routes == [("hello", "post")]

    def test_config_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SALUTE_ENV", "production")
        assert create_app().config.port == 8080
