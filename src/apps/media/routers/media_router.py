"""Media proxy router."""

import httpx
from fastapi import APIRouter, Depends, Request

from src.apps.media.services.media_proxy import MediaProxyService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """The edge app's shared upstream client (created in its lifespan)."""
    return request.app.state.http_client


def get_media_service(client: httpx.AsyncClient = Depends(get_http_client)):
    return MediaProxyService(client)


def inbound_path(request: Request) -> str:
    """The request path as received, percent escapes intact."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    # some servers keep the query string in raw_path
    return raw_path.decode("latin-1").split("?", 1)[0]


router = APIRouter(tags=["Media"])


@router.get("/{path:path}", summary="Proxy a media asset")
async def proxy_media(
    request: Request,
    service: MediaProxyService = Depends(get_media_service),
):
    return await service.forward(inbound_path(request))
