"""Forward media paths to the public storage bucket."""

from typing import Optional

import httpx
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from src.core.config import settings

CACHE_CONTROL = "public, max-age=31536000, immutable"


def build_target_url(path: str) -> str:
    """Origin + bucket prefix + the inbound path, concatenated verbatim."""
    return f"{settings.MEDIA_ORIGIN}{settings.MEDIA_BUCKET_PREFIX}{path}"


def create_http_client(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=transport,
        timeout=None,
        headers={"User-Agent": settings.MEDIA_PROXY_USER_AGENT},
    )


class MediaProxyService:
    """Relay one upstream response: same body, same status, fixed caching."""

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    async def forward(self, path: str) -> StreamingResponse:
        request = self.http_client.build_request("GET", build_target_url(path))
        upstream = await self.http_client.send(request, stream=True)
        return StreamingResponse(
            upstream.aiter_bytes(),
            status_code=upstream.status_code,
            headers={
                "Content-Type": upstream.headers.get("content-type", ""),
                "Cache-Control": CACHE_CONTROL,
            },
            background=BackgroundTask(upstream.aclose),
        )
