"""
Transports delivering encoded requests to Vantiv.

- base.Transport: Abstract interface
- http_transport.HttpTransport: httpx-based HTTPS transport
- mock_transport.MockTransport: In-process stand-in for tests and local runs
"""

from vantiv_gateway.transport.base import Transport
from vantiv_gateway.transport.http_transport import HttpTransport
from vantiv_gateway.transport.mock_transport import MockTransport

__all__ = [
    "HttpTransport",
    "MockTransport",
    "Transport",
]
