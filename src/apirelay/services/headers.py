"""Header sanitizing for forwarded requests and relayed responses."""

from typing import Dict, Iterable, Mapping, Tuple, Union

import httpx
from starlette.datastructures import MutableHeaders

HeaderItems = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

# Hop-by-hop headers plus edge headers that identify the caller or the edge.
STRIPPED_REQUEST_HEADERS = frozenset(
    {
        "host",
        "cf-connecting-ip",
        "cf-ipcountry",
        "cf-ray",
        "cf-visitor",
        "cf-worker",
        "cf-ew-via",
        "cf-placement",
        "x-forwarded-for",
        "x-forwarded-proto",
        "x-real-ip",
        "connection",
        "upgrade",
        "keep-alive",
        "transfer-encoding",
        "te",
        "trailer",
    }
)

STRIPPED_RESPONSE_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "transfer-encoding",
        "te",
        "trailer",
        "upgrade",
    }
)

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, PATCH, OPTIONS",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Expose-Headers": "*",
    "Access-Control-Max-Age": "86400",
}


def _iter_items(headers: HeaderItems) -> Iterable[Tuple[str, str]]:
    if isinstance(headers, httpx.Headers):
        # Raw bytes keep repeated names apart and round-trip any obs-text
        return [
            (name.decode("latin-1"), value.decode("latin-1"))
            for name, value in headers.raw
        ]
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def build_forward_headers(incoming: HeaderItems) -> Dict[str, str]:
    """Copy request headers except the denylisted ones.

    Auth and content headers pass through untouched, whatever scheme the
    upstream uses.
    """
    forwarded: Dict[str, str] = {}
    for name, value in _iter_items(incoming):
        if name.lower() in STRIPPED_REQUEST_HEADERS:
            continue
        if name in forwarded:
            forwarded[name] = f"{forwarded[name]}, {value}"
        else:
            forwarded[name] = value
    return forwarded


def build_response_headers(upstream: HeaderItems) -> MutableHeaders:
    """Copy upstream response headers and apply the hardening and CORS set.

    Hardening and CORS values always win over an upstream header of the
    same name.
    """
    headers = MutableHeaders()
    for name, value in _iter_items(upstream):
        if name.lower() not in STRIPPED_RESPONSE_HEADERS:
            headers.append(name, value)
    for name, value in SECURITY_HEADERS.items():
        headers[name] = value
    for name, value in CORS_HEADERS.items():
        headers[name] = value
    return headers
