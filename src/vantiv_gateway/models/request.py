"""Encoded request value object."""

from dataclasses import dataclass
from typing import Optional

from vantiv_gateway.models.authorization import TxnKind


@dataclass(frozen=True)
class RequestSpec:
    """
    An encoded request ready to be submitted.

    Vantiv is inconsistent about request and response element names
    (`echeckSale` is answered by `echeckSalesResponse`), so the response
    kind is carried separately and defaults to the request element name.
    """

    operation: str
    xml_body: str
    money: Optional[int] = None
    response_operation: Optional[TxnKind] = None

    @property
    def response_kind(self) -> TxnKind:
        if self.response_operation is not None:
            return TxnKind(self.response_operation)
        return TxnKind(self.operation)
