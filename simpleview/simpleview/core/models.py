"""Request-side models consumed by link building and cache path derivation."""

from __future__ import annotations

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field


class RequestContext(BaseModel):
    """The parts of the current HTTP request a view needs."""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(default="/", description="Request URI: path plus optional query string")
    host: str | None = Field(default=None, description="Host header of the request")

    @property
    def path(self) -> str:
        return urlsplit(self.uri).path

    @property
    def query(self) -> str:
        return urlsplit(self.uri).query
