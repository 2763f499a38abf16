"""
Vantiv gateway.

Vantiv was previously known as Litle. The endpoints and the XML format
(LitleXML) still use the old name.

Every operation follows the same path: the dispatcher picks the encoder
for the payment method, the encoder builds a `RequestSpec`, the
transport posts it, the decoder flattens the reply, and the gateway
turns the result into a `Response` carrying a new `AuthorizationHandle`.
"""

import warnings
from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog

from vantiv_gateway import decoder
from vantiv_gateway.config import VantivSettings, settings as default_settings
from vantiv_gateway.encoders.dispatcher import Dispatcher
from vantiv_gateway.models import (
    AuthorizationHandle,
    ConfigurationError,
    RequestSpec,
    Response,
    StoreResponse,
    TransactionOptions,
    TxnKind,
    VantivError,
)
from vantiv_gateway.scrub import scrub
from vantiv_gateway.transport import HttpTransport, Transport

logger = structlog.get_logger(__name__)

# Vantiv AVS response code -> standard AVS result code
AVS_RESPONSE_CODE = {
    "00": "Y",
    "01": "X",
    "02": "D",
    "10": "Z",
    "11": "W",
    "12": "A",
    "13": "A",
    "14": "P",
    "20": "N",
    "30": "S",
    "31": "R",
    "32": "U",
    "33": "R",
    "34": "I",
    "40": "E",
}

DEFAULT_HEADERS = {"Content-Type": "text/xml"}

OptionsArg = Union[TransactionOptions, Mapping[str, Any], None]


def build_options(options: OptionsArg) -> TransactionOptions:
    """Accept `TransactionOptions`, a plain dict, or None."""
    if options is None:
        return TransactionOptions()
    if isinstance(options, TransactionOptions):
        return options
    return TransactionOptions.model_validate(dict(options))


class VantivGateway:
    """
    Client for the Vantiv (LitleXML) online API.

    Supported payment methods: CreditCard, NetworkTokenCard, Check,
    Registration, StoredToken, and AuthorizationHandle for follow-up
    operations. The gateway holds no per-call state; one instance can
    serve concurrent calls.

    Example:
        async with VantivGateway(settings) as gateway:
            response = await gateway.authorize(1000, card, {"order_id": "1"})
            if response.success:
                await gateway.capture(None, response.authorization)
    """

    supports_scrubbing = True

    def __init__(
        self,
        settings: Optional[VantivSettings] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Create a gateway.

        Args:
            settings: Credentials and endpoint (defaults to VANTIV_* environment)
            transport: Transport to post requests with (defaults to HttpTransport)

        Raises:
            ConfigurationError: If login, password or merchant_id is blank
        """
        self.settings = settings or default_settings

        missing = self.settings.missing_credentials()
        if missing:
            raise ConfigurationError(
                f"Missing required credentials: {', '.join(missing)}"
            )

        self.transport = transport or HttpTransport(
            url=self.settings.endpoint_url,
            timeout_seconds=self.settings.timeout_seconds,
        )
        self.dispatcher = Dispatcher(self.settings)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # Operations

    async def authorize(
        self,
        money: int,
        payment_method: Any,
        options: OptionsArg = None,
    ) -> Response:
        """Authorize `money` (in cents) against a payment method."""
        request = self.dispatcher.resolve(payment_method).authorize(
            money, payment_method, build_options(options)
        )
        return await self._commit(request)

    async def capture(
        self,
        money: Optional[int],
        authorization: AuthorizationHandle,
        options: OptionsArg = None,
    ) -> Response:
        """Capture a previous authorization; `money=None` captures the full amount."""
        request = self.dispatcher.resolve(authorization).capture(
            money, authorization, build_options(options)
        )
        return await self._commit(request)

    async def purchase(
        self,
        money: int,
        payment_method: Any,
        options: OptionsArg = None,
    ) -> Response:
        """Authorize and capture in a single transaction."""
        request = self.dispatcher.resolve(payment_method).purchase(
            money, payment_method, build_options(options)
        )
        return await self._commit(request)

    async def refund(
        self,
        money: Optional[int],
        payment_method: Any,
        options: OptionsArg = None,
    ) -> Response:
        """
        Refund money to a customer.

        `payment_method` is either a handle from a previous transaction or
        a payment method for an unreferenced credit.
        """
        request = self.dispatcher.resolve(payment_method).refund(
            money, payment_method, build_options(options)
        )
        return await self._commit(request)

    async def credit(
        self,
        money: Optional[int],
        payment_method: Any,
        options: OptionsArg = None,
    ) -> Response:
        """Deprecated alias of `refund`."""
        warnings.warn(
            "credit is deprecated, use refund instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self.refund(money, payment_method, options)

    async def store(self, payment_method: Any, options: OptionsArg = None) -> StoreResponse:
        """Register a payment method and receive a Vantiv token in return."""
        request = self.dispatcher.resolve(payment_method).store(
            payment_method, build_options(options)
        )
        return await self._commit(request)

    async def void(
        self,
        authorization: AuthorizationHandle,
        options: OptionsArg = None,
    ) -> Response:
        """
        Void (cancel) a transaction from the same business day.

        An authorization is reversed (`authReversal`) rather than voided;
        eCheck transactions use `echeckVoid`. The handle's stored kind
        decides which.
        """
        request = self.dispatcher.resolve(authorization).void(
            authorization, build_options(options)
        )
        return await self._commit(request)

    async def verify(self, payment_method: Any, options: OptionsArg = None) -> Response:
        """
        Verify a payment method with a zero amount authorization followed
        by a void.

        This is not a native Vantiv transaction. The authorization's
        response is always returned; the void's outcome, including
        errors, never replaces it.
        """
        options = build_options(options)
        response = await self.authorize(0, payment_method, options)

        if response.success and response.authorization is not None:
            try:
                void_response = await self.void(response.authorization, options)
            except VantivError as e:
                logger.warning(
                    "vantiv_verify_void_failed",
                    error_type=type(e).__name__,
                    error=str(e),
                )
            else:
                if not void_response.success:
                    logger.warning(
                        "vantiv_verify_void_declined",
                        response=void_response.response_code,
                        message=void_response.message,
                    )

        return response

    def scrub(self, transcript: str) -> str:
        """Redact sensitive values from a request/response transcript."""
        return scrub(transcript)

    # Request submission

    async def _commit(self, request: RequestSpec) -> Response:
        kind = request.response_kind

        logger.info(
            "vantiv_request_submitting",
            operation=request.operation,
            kind=kind.value,
            amount=request.money,
        )
        logger.debug("vantiv_request_xml", request_xml=scrub(request.xml_body))

        raw = await self.transport.send(request.xml_body, dict(DEFAULT_HEADERS))

        logger.debug("vantiv_response_xml", response_xml=scrub(raw))

        parsed = decoder.decode(raw, kind)
        success = decoder.classify_success(kind, parsed)

        logger.info(
            "vantiv_response_decoded",
            operation=request.operation,
            success=success,
            response=parsed.response,
            message=parsed.message,
        )

        common = {
            "success": success,
            "message": parsed.message,
            "params": parsed,
            "avs_result": AVS_RESPONSE_CODE.get(parsed.get("fraudResult_avsResult", "")),
            "cvv_result": parsed.get("fraudResult_cardValidationResult"),
            "test": self.settings.test,
        }

        if kind is TxnKind.REGISTER_TOKEN:
            return StoreResponse(token=parsed.get("litleToken"), **common)

        authorization = self._authorization_from(kind, parsed, request.money)
        return Response(authorization=authorization, **common)

    def _authorization_from(
        self,
        kind: TxnKind,
        parsed: Mapping[str, str],
        money: Optional[int],
    ) -> Optional[AuthorizationHandle]:
        transaction_id = parsed.get("litleTxnId")
        if not transaction_id:
            return None
        return AuthorizationHandle(transaction_id=transaction_id, txn_type=kind, amount=money)
