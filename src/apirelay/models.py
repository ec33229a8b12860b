"""Data models for apirelay."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Route(BaseModel):
    """A path prefix bound to an upstream base URL."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., description="Literal path prefix, starts with '/'")
    upstream_base: str = Field(..., description="Upstream origin the prefix maps to")

    # Dashboard metadata only
    auth: str = Field("", description="How the upstream expects credentials")
    example_endpoint: str = Field("", description="Example path below the prefix")
    note: Optional[str] = Field(None, description="Free-form hint shown on the dashboard")

    @property
    def name(self) -> str:
        """Route name, the prefix without its leading slash."""
        return self.prefix[1:]


class ProbeResult(BaseModel):
    """Outcome of one HEAD probe against an upstream."""

    name: str = Field(..., description="Route name")
    target: str = Field(..., description="Probed upstream base URL")
    ok: bool = Field(..., description="Whether the upstream answered below 500")
    latency_ms: Optional[int] = Field(None, description="Round trip in milliseconds")
    status: Optional[int] = Field(None, description="HTTP status of the probe")


class DebugInfo(BaseModel):
    """Placement and outbound network diagnostics."""

    placement: Optional[str] = None
    entry_colo: Optional[str] = None
    outbound_ip: Optional[str] = None
    outbound_city: Optional[str] = None
    outbound_region: Optional[str] = None
    outbound_country: Optional[str] = None
