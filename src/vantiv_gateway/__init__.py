"""Vantiv (LitleXML) payment gateway client."""

from vantiv_gateway.config import VantivSettings
from vantiv_gateway.gateway import AVS_RESPONSE_CODE, VantivGateway
from vantiv_gateway.models import (
    Address,
    AuthorizationHandle,
    Check,
    ConfigurationError,
    CreditCard,
    MalformedResponse,
    NetworkTokenCard,
    OperationNotSupported,
    Registration,
    Response,
    StoredToken,
    StoreResponse,
    TransactionOptions,
    TransportError,
    TxnKind,
    UnsupportedPaymentMethod,
    VantivError,
)
from vantiv_gateway.scrub import scrub

__all__ = [
    "AVS_RESPONSE_CODE",
    "Address",
    "AuthorizationHandle",
    "Check",
    "ConfigurationError",
    "CreditCard",
    "MalformedResponse",
    "NetworkTokenCard",
    "OperationNotSupported",
    "Registration",
    "Response",
    "StoreResponse",
    "StoredToken",
    "TransactionOptions",
    "TransportError",
    "TxnKind",
    "UnsupportedPaymentMethod",
    "VantivError",
    "VantivGateway",
    "VantivSettings",
    "scrub",
]
