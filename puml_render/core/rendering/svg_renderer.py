"""
SVG Renderer
============

HTTP transport for rendering PlantUML source to SVG on a PlantUML server.

The public PlantUML server only accepts diagrams encoded into the GET path,
so GET is used when no server is given. An explicitly configured server is
assumed to accept the raw source as a POST body.
"""

import asyncio
from typing import Any, Optional, Tuple

import aiohttp

from puml_render.config.logging import get_logger
from puml_render.config.settings import Settings, get_settings
from puml_render.core.encoding.encoder import encode_diagram
from puml_render.models.schemas import (
    GetRenderRequest,
    PostRenderRequest,
    RenderRequest,
    SVGResult,
)

logger = get_logger(__name__)

RETRY_STATUS = 403


class SVGRenderError(Exception):
    """Exception raised when SVG rendering fails."""

    pass


class RemoteRenderError(SVGRenderError):
    """The server answered with a final status other than 200."""

    def __init__(self, status_code: int, url: str, reason: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        self.reason = reason
        message = f"Error rendering SVG file: status code: {status_code}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


def build_render_request(
    diagram: str, server_base: Optional[str], default_server: str
) -> RenderRequest:
    """Choose the transport mode and build the request for one render call."""
    if server_base is None:
        return GetRenderRequest(url=f"{default_server}/svg/{encode_diagram(diagram)}")
    return PostRenderRequest(url=f"{server_base}/svg", body=diagram)


class SVGRenderer:
    """Renders PlantUML source to SVG bytes through a PlantUML server."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.default_server = self.settings.default_server_url
        self.retry_delay = self.settings.retry_delay_seconds
        self.logger: Any = logger.bind(component="svg_renderer")  # structlog.BoundLoggerBase

    def _create_session(self) -> aiohttp.ClientSession:
        """Create the HTTP session for a single render call."""
        timeout = aiohttp.ClientTimeout(total=self.settings.request_timeout)
        return aiohttp.ClientSession(timeout=timeout)

    async def _send(
        self, session: aiohttp.ClientSession, request: RenderRequest
    ) -> Tuple[int, Optional[str], Optional[bytes]]:
        """Issue one request; the body is read only for a 200 response."""
        if isinstance(request, GetRenderRequest):
            context = session.get(request.url)
        else:
            context = session.post(request.url, data=request.body)

        async with context as response:
            self.logger.debug(
                "PlantUML server responded",
                method=request.method,
                url=request.url,
                status=response.status,
            )
            if response.status == 200:
                return response.status, response.reason, await response.read()
            return response.status, response.reason, None

    async def _send_with_retry(
        self, session: aiohttp.ClientSession, request: RenderRequest
    ) -> Tuple[int, Optional[str], Optional[bytes], int]:
        """Send the request, reissuing it once after a delay on 403."""
        status, reason, body = await self._send(session, request)
        if status != RETRY_STATUS:
            return status, reason, body, 1

        self.logger.debug(
            "Request rejected, retrying once", url=request.url, delay=self.retry_delay
        )
        await asyncio.sleep(self.retry_delay)
        status, reason, body = await self._send(session, request)
        return status, reason, body, 2

    async def render(self, diagram: str, server_base: Optional[str] = None) -> SVGResult:
        """
        Render diagram source to SVG.

        Args:
            diagram: PlantUML source text
            server_base: Base URL of a server that accepts POST, or None to use
                the default server with an encoded GET request

        Returns:
            SVGResult holding the response body exactly as received

        Raises:
            RemoteRenderError: If the final response status is not 200
            aiohttp.ClientError: If the request fails at the network level
        """
        request = build_render_request(diagram, server_base, self.default_server)
        self.logger.debug(
            "Rendering SVG", method=request.method, url=request.url, source_length=len(diagram)
        )

        async with self._create_session() as session:
            status, reason, body, attempts = await self._send_with_retry(session, request)

        if status != 200:
            raise RemoteRenderError(status, request.url, reason)

        return SVGResult(svg_data=body, request=request, attempts=attempts, file_size=len(body))


async def render_svg_diagram(diagram: str, server_base: Optional[str] = None) -> bytes:
    """Render PlantUML source to SVG bytes, using the public server by default."""
    result = await SVGRenderer().render(diagram, server_base)
    return result.svg_data
