"""Services module for apirelay."""

from .dashboard import render_dashboard
from .diagnostics import collect_debug_info
from .forwarder import Forwarder, build_target_url
from .headers import build_forward_headers, build_response_headers
from .prober import probe_upstream, probe_upstreams

__all__ = [
    "Forwarder",
    "build_target_url",
    "build_forward_headers",
    "build_response_headers",
    "collect_debug_info",
    "probe_upstream",
    "probe_upstreams",
    "render_dashboard",
]
