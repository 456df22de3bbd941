"""Static response rules: redirects, per-path headers, trailing slashes."""

import re
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List

from fastapi import Request, Response
from fastapi.responses import RedirectResponse

SITEMAP_HEADERS = {
    "Content-Type": "application/xml; charset=utf-8",
    "Cache-Control": "public, max-age=86400, stale-while-revalidate=43200",
}


def _compile(source: str) -> "re.Pattern[str]":
    # `:name` segments match anything but a slash
    pattern = re.sub(r":(\w+)", r"(?P<\1>[^/]+?)", re.escape(source))
    return re.compile(f"^{pattern}$")


@dataclass
class Redirect:
    source: str
    destination: str
    permanent: bool = True

    def __post_init__(self):
        self.pattern = _compile(self.source)


@dataclass
class HeaderRule:
    source: str
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.pattern = _compile(self.source)


REDIRECTS: List[Redirect] = []

HEADER_RULES: List[HeaderRule] = [
    HeaderRule("/sitemap.xml", SITEMAP_HEADERS),
    HeaderRule("/sitemap-categories.xml", SITEMAP_HEADERS),
    HeaderRule("/sitemap-:id.xml", SITEMAP_HEADERS),
]

TRAILING_SLASH = False


async def site_rules_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    path = request.url.path

    for redirect in REDIRECTS:
        match = redirect.pattern.match(path)
        if match:
            destination = redirect.destination
            for name, value in match.groupdict().items():
                destination = destination.replace(f":{name}", value)
            return RedirectResponse(destination, status_code=308 if redirect.permanent else 307)

    if not TRAILING_SLASH and path != "/" and path.endswith("/"):
        target = path.rstrip("/") or "/"
        if request.url.query:
            target = f"{target}?{request.url.query}"
        return RedirectResponse(target, status_code=308)

    response = await call_next(request)

    for rule in HEADER_RULES:
        if rule.pattern.match(path):
            for key, value in rule.headers.items():
                response.headers[key] = value

    return response
