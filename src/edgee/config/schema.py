"""Pydantic models for client configuration."""

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api.edgee.ai"


class EdgeeConfig(BaseModel):
    """Resolved client configuration."""

    api_key: str | None = Field(default=None, description="Bearer token for the API")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (None disables the client-side timeout)",
        gt=0,
    )
    max_tool_iterations: int = Field(
        default=10,
        description="Maximum rounds of the automatic tool loop",
        ge=1,
    )
