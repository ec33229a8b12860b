"""Tests for request and response header sanitizing."""

import httpx
import pytest

from apirelay.services.headers import (
    CORS_HEADERS,
    SECURITY_HEADERS,
    STRIPPED_REQUEST_HEADERS,
    STRIPPED_RESPONSE_HEADERS,
    build_forward_headers,
    build_response_headers,
)


class TestBuildForwardHeaders:
    """Tests for the forwarded request header set."""

    @pytest.mark.parametrize("name", sorted(STRIPPED_REQUEST_HEADERS))
    def test_denylisted_header_stripped_in_any_casing(self, name):
        incoming = [
            (name, "a"),
            (name.upper(), "b"),
            (name.title(), "c"),
            ("Content-Type", "application/json"),
        ]
        forwarded = build_forward_headers(incoming)
        assert {key.lower() for key in forwarded} == {"content-type"}

    def test_other_headers_pass_through_unmodified(self):
        incoming = {
            "Authorization": "Bearer sk-test",
            "x-api-key": "sk-ant-123",
            "anthropic-version": "2023-06-01",
            "Content-Type": "application/json; charset=utf-8",
            "Content-Length": "42",
            "X-Custom": "  spaced value  ",
        }
        assert build_forward_headers(incoming) == incoming

    def test_result_is_incoming_minus_denylist(self):
        incoming = {
            "Host": "proxy.example",
            "X-Forwarded-For": "1.2.3.4",
            "CF-Ray": "abc-SJC",
            "Authorization": "Token r8_abc",
            "Accept": "*/*",
        }
        assert build_forward_headers(incoming) == {
            "Authorization": "Token r8_abc",
            "Accept": "*/*",
        }

    def test_repeated_header_values_are_joined(self):
        incoming = [("accept", "text/html"), ("accept", "application/json")]
        assert build_forward_headers(incoming) == {"accept": "text/html, application/json"}

    def test_accepts_httpx_headers(self):
        incoming = httpx.Headers({"Host": "x", "User-Agent": "curl/8"})
        forwarded = build_forward_headers(incoming)
        assert {key.lower(): value for key, value in forwarded.items()} == {
            "user-agent": "curl/8"
        }


class TestBuildResponseHeaders:
    """Tests for the relayed response header set."""

    def test_hop_by_hop_headers_stripped(self):
        upstream = {name.title(): "x" for name in STRIPPED_RESPONSE_HEADERS}
        upstream["Content-Type"] = "application/json"
        headers = build_response_headers(upstream)
        for name in STRIPPED_RESPONSE_HEADERS:
            assert name not in headers
        assert headers["content-type"] == "application/json"

    def test_security_and_cors_headers_always_present(self):
        headers = build_response_headers({})
        for name, value in {**SECURITY_HEADERS, **CORS_HEADERS}.items():
            assert headers[name] == value

    def test_cors_values_override_upstream(self):
        upstream = {
            "Access-Control-Allow-Origin": "https://evil.com",
            "access-control-max-age": "5",
            "X-FRAME-OPTIONS": "ALLOWALL",
        }
        headers = build_response_headers(upstream)
        assert headers.getlist("access-control-allow-origin") == ["*"]
        assert headers.getlist("access-control-max-age") == ["86400"]
        assert headers.getlist("x-frame-options") == ["DENY"]

    def test_cors_header_values(self):
        assert CORS_HEADERS == {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, PATCH, OPTIONS",
            "Access-Control-Allow-Headers": "*",
            "Access-Control-Expose-Headers": "*",
            "Access-Control-Max-Age": "86400",
        }

    def test_repeated_upstream_headers_are_kept(self):
        upstream = httpx.Headers([("set-cookie", "a=1"), ("set-cookie", "b=2")])
        headers = build_response_headers(upstream)
        assert headers.getlist("set-cookie") == ["a=1", "b=2"]

    def test_rate_limit_headers_pass_through(self):
        upstream = {"x-ratelimit-remaining-requests": "99", "retry-after": "3"}
        headers = build_response_headers(upstream)
        assert headers["x-ratelimit-remaining-requests"] == "99"
        assert headers["retry-after"] == "3"

    def test_obs_text_upstream_values_round_trip(self):
        upstream = httpx.Headers([(b"X-Name", b"caf\xc3\xa9"), (b"X-Legacy", b"caf\xe9")])
        headers = build_response_headers(upstream)
        assert (b"x-name", b"caf\xc3\xa9") in headers.raw
        assert (b"x-legacy", b"caf\xe9") in headers.raw
