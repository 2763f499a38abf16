"""Request encoder for credit cards and network tokenized cards."""

from typing import Optional

from vantiv_gateway.encoders.base import (
    SOURCE_APPLE_PAY,
    SOURCE_ECOMMERCE,
    SOURCE_RETAIL,
    RequestEncoder,
    exp_date,
)
from vantiv_gateway.encoders.xml import Node, element, is_blank, optional, text
from vantiv_gateway.models import (
    CreditCard,
    NetworkTokenCard,
    RequestSpec,
    TransactionOptions,
    TxnKind,
)

CARD_TYPE = {
    "visa": "VI",
    "master": "MC",
    "american_express": "AX",
    "discover": "DI",
    "jcb": "JC",
    "diners_club": "DC",
}

# Point of sale values sent with swiped (track data) cards
POS_CAPABILITY = "magstripe"
POS_ENTRY_MODE = "completeread"
POS_CARDHOLDER_ID = "signature"


class CreditCardEncoder(RequestEncoder):
    """
    Builds authorization, sale, credit and token registration requests
    from card details.

    Cards carrying track data are sent as card-present transactions: the
    raw `track` replaces number/expiration/CVV and a `pos` block is added.
    """

    def authorize(
        self,
        money: Optional[int],
        payment_method: CreditCard,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.AUTHORIZATION.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.ship_to_address(options),
            self.card(payment_method),
            self.cardholder_authentication(payment_method),
            self.pos(payment_method),
            self.custom_billing(options),
            self.debt_repayment(options),
            options=options,
            money=money,
        )

    def purchase(
        self,
        money: Optional[int],
        payment_method: CreditCard,
        options: TransactionOptions,
    ) -> RequestSpec:
        # Schema order differs from authorization: customBilling precedes pos
        return self.build_request(
            TxnKind.SALE.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.ship_to_address(options),
            self.card(payment_method),
            self.cardholder_authentication(payment_method),
            self.custom_billing(options),
            self.pos(payment_method),
            self.debt_repayment(options),
            options=options,
            money=money,
        )

    def refund(
        self,
        money: Optional[int],
        payment_method: CreditCard,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.CREDIT.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.card(payment_method),
            self.custom_billing(options),
            self.pos(payment_method),
            options=options,
            money=money,
        )

    def store(self, payment_method: CreditCard, options: TransactionOptions) -> RequestSpec:
        return self.build_request(
            "registerTokenRequest",
            text("accountNumber", payment_method.number),
            optional("cardValidationNum", payment_method.verification_value),
            options=options,
            response=TxnKind.REGISTER_TOKEN,
        )

    def order_source(self, payment_method: CreditCard, options: TransactionOptions) -> Node:
        order_source = options.order_source
        if not order_source and getattr(payment_method, "source", None) == "apple_pay":
            order_source = SOURCE_APPLE_PAY
        if not order_source:
            order_source = SOURCE_RETAIL if payment_method.has_track_data else SOURCE_ECOMMERCE
        return text("orderSource", order_source)

    def card(self, payment_method: CreditCard) -> Node:
        if payment_method.has_track_data:
            return element("card", text("track", payment_method.track_data))

        return element(
            "card",
            optional("type", CARD_TYPE.get(payment_method.brand or "")),
            optional("number", payment_method.number),
            optional("expDate", exp_date(payment_method)),
            optional("cardValidationNum", payment_method.verification_value),
        )

    def cardholder_authentication(self, payment_method: CreditCard) -> Optional[Node]:
        if not isinstance(payment_method, NetworkTokenCard):
            return None
        if is_blank(payment_method.payment_cryptogram):
            return None

        return element(
            "cardholderAuthentication",
            text("authenticationValue", payment_method.payment_cryptogram),
        )

    def pos(self, payment_method: CreditCard) -> Optional[Node]:
        if not payment_method.has_track_data:
            return None

        return element(
            "pos",
            text("capability", POS_CAPABILITY),
            text("entryMode", POS_ENTRY_MODE),
            text("cardholderId", POS_CARDHOLDER_ID),
        )

    def debt_repayment(self, options: TransactionOptions) -> Optional[Node]:
        if options.debt_repayment is not True:
            return None
        return text("debtRepayment", True)
