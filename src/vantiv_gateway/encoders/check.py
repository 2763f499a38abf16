"""Request encoder for eCheck (bank account) payments."""

from typing import Optional

from vantiv_gateway.encoders.base import RequestEncoder
from vantiv_gateway.encoders.xml import Node, element, optional, text
from vantiv_gateway.models import Check, RequestSpec, TransactionOptions, TxnKind


class CheckEncoder(RequestEncoder):
    """Builds eCheck sale, eCheck credit and eCheck token registration requests."""

    def purchase(
        self,
        money: Optional[int],
        payment_method: Check,
        options: TransactionOptions,
    ) -> RequestSpec:
        # `echeckSale` is answered by `echeckSalesResponse`
        return self.build_request(
            "echeckSale",
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.ship_to_address(options),
            self.echeck(payment_method),
            self.custom_billing(options),
            options=options,
            money=money,
            response=TxnKind.ECHECK_SALE,
        )

    def refund(
        self,
        money: Optional[int],
        payment_method: Check,
        options: TransactionOptions,
    ) -> RequestSpec:
        return self.build_request(
            TxnKind.ECHECK_CREDIT.value,
            optional("amount", money),
            self.order_source(payment_method, options),
            self.bill_to_address(payment_method, options),
            self.echeck(payment_method),
            self.custom_billing(options),
            options=options,
            money=money,
        )

    def store(self, payment_method: Check, options: TransactionOptions) -> RequestSpec:
        return self.build_request(
            "registerTokenRequest",
            element(
                "echeckForToken",
                text("accNum", payment_method.account_number),
                text("routingNum", payment_method.routing_number),
            ),
            options=options,
            response=TxnKind.REGISTER_TOKEN,
        )

    def echeck(self, payment_method: Check) -> Node:
        return element(
            "echeck",
            text("accType", payment_method.vantiv_account_type),
            text("accNum", payment_method.account_number),
            text("routingNum", payment_method.routing_number),
            optional("checkNum", payment_method.number),
        )
