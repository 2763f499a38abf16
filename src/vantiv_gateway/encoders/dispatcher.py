"""
Dispatcher mapping payment method types to request encoders.

The table is built once when the gateway is constructed and is never
modified afterwards, so a single dispatcher can be shared by concurrent
calls without locking.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import structlog

from vantiv_gateway.config import VantivSettings
from vantiv_gateway.encoders.authorization import AuthorizationEncoder
from vantiv_gateway.encoders.base import RequestEncoder
from vantiv_gateway.encoders.check import CheckEncoder
from vantiv_gateway.encoders.credit_card import CreditCardEncoder
from vantiv_gateway.encoders.registration import RegistrationEncoder
from vantiv_gateway.encoders.token import TokenEncoder
from vantiv_gateway.models import (
    AuthorizationHandle,
    Check,
    CreditCard,
    NetworkTokenCard,
    Registration,
    StoredToken,
    UnsupportedPaymentMethod,
)

logger = structlog.get_logger(__name__)

# Registry of payment method types and the encoder family handling them
DEFAULT_ENCODERS: dict[type, type[RequestEncoder]] = {
    AuthorizationHandle: AuthorizationEncoder,
    Check: CheckEncoder,
    CreditCard: CreditCardEncoder,
    NetworkTokenCard: CreditCardEncoder,
    Registration: RegistrationEncoder,
    StoredToken: TokenEncoder,
}


class Dispatcher:
    """
    Resolves the request encoder for a payment method.

    Lookup is by exact runtime type. Encoder classes shared by several
    payment method types are instantiated once.

    Example:
        dispatcher = Dispatcher(settings)
        request = dispatcher.resolve(card).authorize(1000, card, options)
    """

    def __init__(
        self,
        settings: VantivSettings,
        encoders: Mapping[type, type[RequestEncoder]] | None = None,
    ) -> None:
        """
        Build the dispatch table.

        Args:
            settings: Credentials passed to every encoder
            encoders: Optional replacement for DEFAULT_ENCODERS

        Raises:
            TypeError: If a registered class is not a RequestEncoder
        """
        encoder_classes = dict(DEFAULT_ENCODERS if encoders is None else encoders)

        instances: dict[type[RequestEncoder], RequestEncoder] = {}
        table: dict[type, RequestEncoder] = {}
        for payment_type, encoder_class in encoder_classes.items():
            if not issubclass(encoder_class, RequestEncoder):
                raise TypeError(
                    f"{encoder_class.__name__} must inherit from RequestEncoder"
                )
            if encoder_class not in instances:
                instances[encoder_class] = encoder_class(settings)
            table[payment_type] = instances[encoder_class]

        self._table: Mapping[type, RequestEncoder] = MappingProxyType(table)

        logger.debug(
            "dispatcher_initialized",
            payment_types=self.supported_types(),
        )

    def resolve(self, payment_method: Any) -> RequestEncoder:
        """
        Get the encoder for `payment_method`.

        Raises:
            UnsupportedPaymentMethod: If no encoder is registered for its type
        """
        encoder = self._table.get(type(payment_method))
        if encoder is None:
            available = ", ".join(self.supported_types())
            raise UnsupportedPaymentMethod(
                f"Unsupported payment method: {type(payment_method).__name__}. "
                f"Supported payment methods: {available}"
            )
        return encoder

    def supported_types(self) -> list[str]:
        """Sorted names of the payment method types with a registered encoder."""
        return sorted(payment_type.__name__ for payment_type in self._table)
