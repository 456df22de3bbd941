import httpx
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.apps.media.routers.media_router import get_http_client
from src.apps.media.services.media_proxy import CACHE_CONTROL, build_target_url, create_http_client
from src.edge import app as edge_app

STORAGE = "https://gwptkkewewqekdmqowbl.supabase.co/storage/v1/object/public/media"


class Upstream:
    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest_asyncio.fixture
async def proxy():
    async def connect(response: httpx.Response):
        upstream = Upstream(response)
        http_client = create_http_client(transport=httpx.MockTransport(upstream))
        edge_app.dependency_overrides[get_http_client] = lambda: http_client
        clients.append(http_client)
        return upstream

    clients = []
    async with AsyncClient(transport=ASGITransport(app=edge_app), base_url="http://edge") as ac:
        yield ac, connect
    for http_client in clients:
        await http_client.aclose()
    edge_app.dependency_overrides.clear()


async def test_build_target_url_appends_path_verbatim():
    assert build_target_url("/images/a.png") == f"{STORAGE}/images/a.png"
    assert build_target_url("/") == f"{STORAGE}/"


async def test_forwards_path_and_relays_body(proxy):
    client, connect = proxy
    upstream = await connect(
        httpx.Response(200, content=b"\x89PNG", headers={"Content-Type": "image/png"})
    )

    response = await client.get("/images/a.png")

    assert len(upstream.requests) == 1
    request = upstream.requests[0]
    assert request.method == "GET"
    assert str(request.url) == f"{STORAGE}/images/a.png"
    assert request.headers["user-agent"] == "Netlify-Edge"

    assert response.status_code == 200
    assert response.content == b"\x89PNG"
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == CACHE_CONTROL


async def test_relays_upstream_not_found_with_cache_header(proxy):
    client, connect = proxy
    await connect(
        httpx.Response(404, content=b'{"error":"not_found"}', headers={"Content-Type": "application/json"})
    )

    response = await client.get("/missing.jpg")

    assert response.status_code == 404
    assert response.content == b'{"error":"not_found"}'
    assert response.headers["cache-control"] == "public, max-age=31536000, immutable"


async def test_missing_upstream_content_type_is_empty(proxy):
    client, connect = proxy
    await connect(httpx.Response(200, content=b"raw"))

    response = await client.get("/docs/file.bin")

    assert response.headers["content-type"] == ""
    assert response.content == b"raw"


async def test_root_path_is_forwarded(proxy):
    client, connect = proxy
    upstream = await connect(httpx.Response(400, content=b""))

    response = await client.get("/")

    assert str(upstream.requests[0].url) == f"{STORAGE}/"
    assert response.status_code == 400


async def test_percent_escapes_reach_upstream_unchanged(proxy):
    client, connect = proxy
    upstream = await connect(httpx.Response(200, content=b"img"))

    for path in ("/images/a%3Fv%3D1.png", "/images/a%23b.png", "/images/dir%2Ffile.png"):
        await client.get(path)

    assert [str(request.url) for request in upstream.requests] == [
        f"{STORAGE}/images/a%3Fv%3D1.png",
        f"{STORAGE}/images/a%23b.png",
        f"{STORAGE}/images/dir%2Ffile.png",
    ]


async def test_query_string_is_not_forwarded(proxy):
    client, connect = proxy
    upstream = await connect(httpx.Response(200, content=b"img"))

    await client.get("/images/a.png?width=200")

    assert str(upstream.requests[0].url) == f"{STORAGE}/images/a.png"
