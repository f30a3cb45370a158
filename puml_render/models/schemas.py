"""
Pydantic Models and Schemas
===========================

Render requests and results exchanged between the renderer and its callers.
A render request is a tagged variant keyed on the HTTP method, so request
construction and dispatch stay exhaustive.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, ConfigDict


class GetRenderRequest(BaseModel):
    """GET request carrying the encoded diagram in the URL path."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = "GET"
    url: str = Field(..., description="Full URL ending in /svg/<token>")


class PostRenderRequest(BaseModel):
    """POST request carrying the raw diagram source as the body."""

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    url: str = Field(..., description="Full URL ending in /svg")
    body: str = Field(..., description="Raw diagram source")


RenderRequest = Annotated[
    Union[GetRenderRequest, PostRenderRequest], Field(discriminator="method")
]


class SVGResult(BaseModel):
    """Successful render result."""

    svg_data: bytes = Field(..., description="Response body exactly as received")
    request: RenderRequest = Field(..., description="Request that produced the body")
    attempts: int = Field(..., ge=1, le=2, description="Number of requests issued")
    file_size: int = Field(..., ge=0, description="Body size in bytes")
