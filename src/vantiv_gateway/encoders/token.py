"""Request encoder for Vantiv tokens."""

from typing import Optional

from vantiv_gateway.encoders.base import RequestEncoder, exp_date
from vantiv_gateway.encoders.xml import Node, element, optional
from vantiv_gateway.models import RequestSpec, StoredToken, TransactionOptions, TxnKind


class TokenEncoder(RequestEncoder):
    """Builds authorization, sale and credit requests from a stored token."""

    def authorize(
        self,
        money: Optional[int],
        payment_method: StoredToken,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.AUTHORIZATION.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.ship_to_address(options),
            self.token(payment_method),
            self.custom_billing(options),
            options=options,
            money=money,
        )

    def purchase(
        self,
        money: Optional[int],
        payment_method: StoredToken,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.SALE.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.ship_to_address(options),
            self.token(payment_method),
            self.custom_billing(options),
            options=options,
            money=money,
        )

    def refund(
        self,
        money: Optional[int],
        payment_method: StoredToken,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.CREDIT.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.token(payment_method),
            self.custom_billing(options),
            options=options,
            money=money,
        )

    def token(self, payment_method: StoredToken) -> Node:
        return element(
            "token",
            optional("litleToken", payment_method.token),
            optional("expDate", exp_date(payment_method)),
            optional("cardValidationNum", payment_method.verification_value),
        )
