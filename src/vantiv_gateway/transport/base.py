"""Base interface for transports."""

from abc import ABC, abstractmethod


class Transport(ABC):
    """
    Abstract base class for delivering encoded requests to Vantiv.

    Transports own everything below the XML document: the endpoint,
    timeouts and connection handling. They do not retry.
    """

    @abstractmethod
    async def send(self, xml_body: str, headers: dict[str, str]) -> str:
        """
        POST `xml_body` and return the raw reply body.

        Raises:
            TransportError: If the exchange fails or returns HTTP status >= 400.

        Note:
            Declined transactions are NOT transport errors. They arrive as
            normal replies and are classified by the gateway.
        """
        pass

    async def close(self) -> None:
        """Release any connections held by the transport."""
        return None
