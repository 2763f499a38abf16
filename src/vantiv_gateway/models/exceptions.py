"""Custom exceptions for the Vantiv gateway client."""


class VantivError(Exception):
    """Base exception for gateway errors."""

    pass


class ConfigurationError(VantivError):
    """
    Raised when the gateway is built without the credentials it needs.

    This is a TERMINAL error raised at construction time, before any
    request is encoded.
    """

    pass


class UnsupportedPaymentMethod(VantivError):
    """
    Raised when no request encoder is registered for a payment method type.

    This is a TERMINAL error. Retrying with the same object cannot succeed.
    """

    pass


class OperationNotSupported(VantivError):
    """
    Raised when an encoder exists for the payment method but does not
    implement the requested operation (e.g. `capture` on a credit card).

    This is a TERMINAL error.
    """

    pass


class TransportError(VantivError):
    """
    Raised by a transport when the HTTP exchange itself fails.

    Examples:
    - Connection errors
    - Timeouts
    - HTTP status >= 400

    The gateway passes this through unmodified and never retries it.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(VantivError):
    """
    Raised when a reply cannot be decoded.

    Either the body is not XML, or it has neither the expected
    `<kind>Response` element nor the `message`/`response` attributes on
    the response root.
    """

    pass
