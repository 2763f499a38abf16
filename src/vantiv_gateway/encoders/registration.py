"""Request encoder for eProtect (PayPage) registrations."""

from typing import Optional

from vantiv_gateway.encoders.base import RequestEncoder, exp_date
from vantiv_gateway.encoders.xml import Node, element, optional, text
from vantiv_gateway.models import Registration, RequestSpec, TransactionOptions, TxnKind


class RegistrationEncoder(RequestEncoder):
    """
    Builds requests from a PayPage registration id.

    The registration id replaces the card number, so the browser-side
    integration never sends the PAN through the merchant's servers.
    """

    def authorize(
        self,
        money: Optional[int],
        payment_method: Registration,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.AUTHORIZATION.value,
            *self._payment_body(money, payment_method, options),
            options=options,
            money=money,
        )

    def purchase(
        self,
        money: Optional[int],
        payment_method: Registration,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.SALE.value,
            *self._payment_body(money, payment_method, options),
            options=options,
            money=money,
        )

    def refund(
        self,
        money: Optional[int],
        payment_method: Registration,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.CREDIT.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.paypage(payment_method),
            self.custom_billing(options),
            options=options,
            money=money,
        )

    def store(self, payment_method: Registration, options: TransactionOptions) -> RequestSpec:
        return self.build_request(
            "registerTokenRequest",
            text("paypageRegistrationId", payment_method.id),
            options=options,
            response=TxnKind.REGISTER_TOKEN,
        )

    def paypage(self, payment_method: Registration) -> Node:
        return element(
            "paypage",
            text("paypageRegistrationId", payment_method.id),
            optional("expDate", exp_date(payment_method)),
            optional("cardValidationNum", payment_method.verification_value),
        )

    def _payment_body(
        self,
        money: Optional[int],
        payment_method: Registration,
        options: TransactionOptions,
    ) -> list[Optional[Node]]:
        return [
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.ship_to_address(options),
            self.paypage(payment_method),
            self.custom_billing(options),
        ]
