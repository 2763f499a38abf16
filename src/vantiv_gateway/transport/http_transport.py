"""HTTPS transport for the Vantiv online communicator."""

import uuid

import httpx
import structlog

from vantiv_gateway.models import TransportError
from vantiv_gateway.transport.base import Transport

logger = structlog.get_logger(__name__)


class HttpTransport(Transport):
    """
    Posts LitleXML documents to the Vantiv endpoint with httpx.

    Every failure below the XML layer surfaces as `TransportError`.
    Retrying is the caller's decision.

    Example:
        async with HttpTransport(settings.endpoint_url) as transport:
            gateway = VantivGateway(settings, transport=transport)
    """

    def __init__(self, url: str, timeout_seconds: float = 30.0) -> None:
        """
        Args:
            url: Vantiv online endpoint (sandbox, prelive or production)
            timeout_seconds: Request timeout in seconds (default: 30.0)
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.http_client = httpx.AsyncClient(timeout=timeout_seconds)

        logger.info(
            "http_transport_initialized",
            url=url,
            timeout_seconds=timeout_seconds,
        )

    async def send(self, xml_body: str, headers: dict[str, str]) -> str:
        request_id = str(uuid.uuid4())
        log = logger.bind(url=self.url, correlation_id=request_id)

        log.debug("http_transport_request", bytes=len(xml_body))

        try:
            response = await self.http_client.post(
                self.url,
                headers={**headers, "X-Request-ID": request_id},
                content=xml_body.encode("utf-8"),
            )
        except httpx.TimeoutException as e:
            log.error("http_transport_timeout", error=str(e))
            raise TransportError("Vantiv request timed out") from e
        except httpx.RequestError as e:
            log.error("http_transport_request_error", error=str(e))
            raise TransportError(f"Vantiv request error: {e}") from e

        if response.status_code >= 400:
            log.error("http_transport_error_status", status_code=response.status_code)
            raise TransportError(
                f"Vantiv returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        log.debug("http_transport_response", status_code=response.status_code)
        return response.text

    async def close(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
