"""Authorization handle and transaction kind models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TxnKind(str, Enum):
    """Transaction kinds as they appear in Vantiv response element names.

    A reply to request `<X>` is wrapped in `<KResponse>` where K is the
    value below. For most requests K == X; the exceptions are
    `echeckSale` (answered by `echeckSalesResponse`) and
    `registerTokenRequest` (answered by `registerTokenResponse`).
    """

    AUTHORIZATION = "authorization"
    AUTH_REVERSAL = "authReversal"
    CAPTURE = "capture"
    CREDIT = "credit"
    ECHECK_CREDIT = "echeckCredit"
    ECHECK_SALE = "echeckSales"
    ECHECK_VOID = "echeckVoid"
    REGISTER_TOKEN = "registerToken"
    SALE = "sale"
    VOID = "void"


@dataclass(frozen=True)
class AuthorizationHandle:
    """
    Reference to a previous Vantiv transaction.

    Returned from authorize, purchase, capture, refund and void, and
    consumed by capture, refund and void. The stored `txn_type` decides
    which follow-up request is valid (e.g. voiding an `authorization`
    submits an `authReversal`).

    Example:
        handle = AuthorizationHandle(
            transaction_id="100000000000000001",
            txn_type=TxnKind.AUTHORIZATION,
            amount=100,
        )
    """

    transaction_id: str
    txn_type: TxnKind
    amount: Optional[int] = None

    def __post_init__(self) -> None:
        """Coerce and validate the transaction kind."""
        kind = TxnKind(self.txn_type)
        if kind is TxnKind.REGISTER_TOKEN:
            raise ValueError(
                "registerToken results are tokens, not authorization handles"
            )
        object.__setattr__(self, "txn_type", kind)
