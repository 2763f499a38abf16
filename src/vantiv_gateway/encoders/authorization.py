"""Request encoder for follow-up operations on a previous transaction."""

from typing import Optional

from vantiv_gateway.encoders.base import RequestEncoder
from vantiv_gateway.encoders.xml import optional, text
from vantiv_gateway.models import AuthorizationHandle, RequestSpec, TransactionOptions, TxnKind

# Kind of the original transaction -> request submitted to void it
VOID_TYPES: dict[TxnKind, TxnKind] = {
    TxnKind.AUTHORIZATION: TxnKind.AUTH_REVERSAL,
    TxnKind.ECHECK_SALE: TxnKind.ECHECK_VOID,
    TxnKind.ECHECK_CREDIT: TxnKind.ECHECK_VOID,
}
DEFAULT_VOID_TYPE = TxnKind.VOID

# Kind of the original transaction -> request submitted to refund it
REFUND_TYPES: dict[TxnKind, TxnKind] = {
    TxnKind.ECHECK_SALE: TxnKind.ECHECK_CREDIT,
}
DEFAULT_REFUND_TYPE = TxnKind.CREDIT


def void_type(kind: TxnKind) -> TxnKind:
    return VOID_TYPES.get(kind, DEFAULT_VOID_TYPE)


def refund_type(kind: TxnKind) -> TxnKind:
    return REFUND_TYPES.get(kind, DEFAULT_REFUND_TYPE)


class AuthorizationEncoder(RequestEncoder):
    """
    Builds capture, refund and void requests from an `AuthorizationHandle`.

    None of these requests resend payment details: the handle's
    transaction id identifies the original transaction, and its stored
    kind picks the follow-up element name.
    """

    def capture(
        self,
        money: Optional[int],
        payment_method: AuthorizationHandle,
        options: TransactionOptions,
    ) -> RequestSpec:
        """Capture; omitting `money` captures the full authorized amount."""
        return self.build_request(
            TxnKind.CAPTURE.value,
            text("litleTxnId", payment_method.transaction_id),
            optional("amount", money),
            options=options,
            money=money,
            order_id=False,
        )

    def refund(
        self,
        money: Optional[int],
        payment_method: AuthorizationHandle,
        options: TransactionOptions,
    ) -> RequestSpec:
        kind = refund_type(payment_method.txn_type)

        return self.build_request(
            kind.value,
            text("litleTxnId", payment_method.transaction_id),
            optional("amount", money),
            self.custom_billing(options),
            options=options,
            money=money,
            order_id=False,
        )

    def void(
        self,
        payment_method: AuthorizationHandle,
        options: TransactionOptions,
    ) -> RequestSpec:
        """
        Void, or reverse an uncaptured authorization.

        Only `authReversal` carries an amount: the `amount` option for a
        partial reversal, otherwise the amount on the handle.
        """
        kind = void_type(payment_method.txn_type)

        amount = None
        if kind is TxnKind.AUTH_REVERSAL:
            amount = options.amount if options.amount is not None else payment_method.amount

        return self.build_request(
            kind.value,
            text("litleTxnId", payment_method.transaction_id),
            optional("amount", amount),
            options=options,
            order_id=False,
        )
