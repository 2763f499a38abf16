"""Base interface and shared field builders for request encoders."""

from typing import Any, Optional

from vantiv_gateway.config import VantivSettings
from vantiv_gateway.encoders.xml import Node, element, is_blank, optional, serialize, text
from vantiv_gateway.models import (
    Address,
    OperationNotSupported,
    RequestSpec,
    TransactionOptions,
    TxnKind,
)

SCHEMA_VERSION = "9.4"
XML_REQUEST_ROOT = "litleOnlineRequest"

DEFAULT_REPORT_GROUP = "Default Report Group"
ORDER_ID_MAX_LENGTH = 24

SOURCE_APPLE_PAY = "applepay"
SOURCE_RETAIL = "retail"
SOURCE_ECOMMERCE = "ecommerce"


def truncate(value: Optional[str], max_length: int) -> Optional[str]:
    if value is None:
        return None
    return str(value)[:max_length]


def two_digits(value: Any) -> str:
    """Format a month or year as exactly two digits ("9" -> "09", "2021" -> "21")."""
    if is_blank(value):
        return ""
    return f"{int(value):02d}"[-2:]


def exp_date(payment_method: Any) -> str:
    """MMYY expiration for anything exposing `month` and `year`."""
    return f"{two_digits(payment_method.month)}{two_digits(payment_method.year)}"


class RequestEncoder:
    """
    Base class for Vantiv request encoders.

    One encoder exists per payment method family. Each subclass overrides
    the operations that make sense for its family; the rest raise
    `OperationNotSupported`. Encoders are stateless apart from the
    settings they are built with, so one instance can serve concurrent
    calls.
    """

    def __init__(self, settings: VantivSettings) -> None:
        self.settings = settings

    # Operations

    def authorize(
        self,
        money: Optional[int],
        payment_method: Any,
        options: TransactionOptions,
    ) -> RequestSpec:
        raise self._not_supported("authorize")

    def capture(
        self,
        money: Optional[int],
        payment_method: Any,
        options: TransactionOptions,
    ) -> RequestSpec:
        raise self._not_supported("capture")

    def purchase(
        self,
        money: Optional[int],
        payment_method: Any,
        options: TransactionOptions,
    ) -> RequestSpec:
        raise self._not_supported("purchase")

    def refund(
        self,
        money: Optional[int],
        payment_method: Any,
        options: TransactionOptions,
    ) -> RequestSpec:
        raise self._not_supported("refund")

    def store(self, payment_method: Any, options: TransactionOptions) -> RequestSpec:
        raise self._not_supported("store")

    def void(self, payment_method: Any, options: TransactionOptions) -> RequestSpec:
        raise self._not_supported("void")

    # Request assembly

    def build_request(
        self,
        operation: str,
        *body: Optional[Node],
        options: TransactionOptions,
        money: Optional[int] = None,
        response: Optional[TxnKind] = None,
        order_id: bool = True,
    ) -> RequestSpec:
        """
        Wrap `body` in the authenticated request document.

        Args:
            operation: Request element name (e.g. "authorization", "echeckSale")
            body: Child elements of the operation element, in schema order
            options: Transaction options (id, report group, customer, order id)
            money: Amount in cents recorded on the resulting handle
            response: Response kind when it differs from `operation`
            order_id: Prepend the truncated `orderId` element
        """
        transaction = element(
            operation,
            self.order_id(options) if order_id else None,
            *body,
            attributes=self.transaction_attributes(options),
        )
        root = element(
            XML_REQUEST_ROOT,
            self.authentication(),
            transaction,
            attributes={
                "merchantId": self.settings.merchant_id,
                "version": SCHEMA_VERSION,
            },
        )
        return RequestSpec(
            operation=operation,
            xml_body=serialize(root),
            money=money,
            response_operation=response,
        )

    def authentication(self) -> Node:
        return element(
            "authentication",
            text("user", self.settings.login),
            text("password", self.settings.password),
        )

    def transaction_attributes(self, options: TransactionOptions) -> dict[str, Optional[str]]:
        return {
            "id": truncate(options.id or options.order_id, ORDER_ID_MAX_LENGTH),
            "reportGroup": options.merchant or DEFAULT_REPORT_GROUP,
            "customerId": options.customer,
        }

    # Shared field builders

    def order_id(self, options: TransactionOptions) -> Optional[Node]:
        return optional("orderId", truncate(options.order_id, ORDER_ID_MAX_LENGTH))

    def order_source(self, payment_method: Any, options: TransactionOptions) -> Node:
        return text("orderSource", options.order_source or SOURCE_ECOMMERCE)

    def bill_to_address(self, payment_method: Any, options: TransactionOptions) -> Node:
        """The `billToAddress` element is always emitted, even when empty."""
        address = options.billing_address or Address()
        person = self.address_person(payment_method, address)

        return element(
            "billToAddress",
            *self.address_fields(address, person, options),
            optional("companyName", address.company),
        )

    def ship_to_address(self, options: TransactionOptions) -> Optional[Node]:
        address = options.shipping_address
        if address is None or all(is_blank(value) for value in address.model_dump().values()):
            return None

        # Shipping address only accepts `name`
        person = {"name": address.name}

        ship_to = element("shipToAddress", *self.address_fields(address, person, options))
        return ship_to if ship_to.children else None

    def address_fields(
        self,
        address: Address,
        person: dict[str, Optional[str]],
        options: TransactionOptions,
    ) -> list[Optional[Node]]:
        return [
            optional("name", person.get("name")),
            optional("firstName", person.get("first_name")),
            optional("lastName", person.get("last_name")),
            optional("addressLine1", address.address1),
            optional("addressLine2", address.address2),
            optional("city", address.city),
            optional("state", address.state),
            optional("zip", address.zip),
            optional("country", address.country),
            optional("email", options.email),
            optional("phone", address.phone),
        ]

    def address_person(self, payment_method: Any, address: Address) -> dict[str, Optional[str]]:
        """Person name fields; payment method values win over address values."""
        person = {}
        for attribute in ("name", "first_name", "last_name"):
            value = getattr(payment_method, attribute, None)
            person[attribute] = value if not is_blank(value) else getattr(address, attribute)
        return person

    def custom_billing(self, options: TransactionOptions) -> Optional[Node]:
        name = options.descriptor_name
        phone = options.descriptor_phone
        if is_blank(name) and is_blank(phone):
            return None

        return element(
            "customBilling",
            optional("phone", phone),
            optional("descriptor", name),
        )

    def _not_supported(self, operation: str) -> OperationNotSupported:
        return OperationNotSupported(
            f"{type(self).__name__} does not support {operation}"
        )
