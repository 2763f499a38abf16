"""Domain models for the Vantiv gateway client."""

from vantiv_gateway.models.authorization import AuthorizationHandle, TxnKind
from vantiv_gateway.models.exceptions import (
    ConfigurationError,
    MalformedResponse,
    OperationNotSupported,
    TransportError,
    UnsupportedPaymentMethod,
    VantivError,
)
from vantiv_gateway.models.options import Address, TransactionOptions
from vantiv_gateway.models.payment_methods import (
    Check,
    CreditCard,
    NetworkTokenCard,
    Registration,
    StoredToken,
)
from vantiv_gateway.models.request import RequestSpec
from vantiv_gateway.models.response import NormalizedResponse, Response, StoreResponse

__all__ = [
    "Address",
    "AuthorizationHandle",
    "Check",
    "ConfigurationError",
    "CreditCard",
    "MalformedResponse",
    "NetworkTokenCard",
    "NormalizedResponse",
    "OperationNotSupported",
    "Registration",
    "RequestSpec",
    "Response",
    "StoreResponse",
    "StoredToken",
    "TransactionOptions",
    "TransportError",
    "TxnKind",
    "UnsupportedPaymentMethod",
    "VantivError",
]
