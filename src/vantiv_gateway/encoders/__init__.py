"""
Vantiv (LitleXML) request encoders.

- base.RequestEncoder: shared request assembly and field builders
- authorization.AuthorizationEncoder: capture/refund/void from a prior handle
- credit_card.CreditCardEncoder: credit cards and network tokenized cards
- check.CheckEncoder: eCheck bank accounts
- registration.RegistrationEncoder: eProtect (PayPage) registration ids
- token.TokenEncoder: stored Vantiv tokens
- dispatcher.Dispatcher: payment method type -> encoder table
"""

from vantiv_gateway.encoders.authorization import AuthorizationEncoder, refund_type, void_type
from vantiv_gateway.encoders.base import RequestEncoder
from vantiv_gateway.encoders.check import CheckEncoder
from vantiv_gateway.encoders.credit_card import CreditCardEncoder
from vantiv_gateway.encoders.dispatcher import DEFAULT_ENCODERS, Dispatcher
from vantiv_gateway.encoders.registration import RegistrationEncoder
from vantiv_gateway.encoders.token import TokenEncoder

__all__ = [
    "AuthorizationEncoder",
    "CheckEncoder",
    "CreditCardEncoder",
    "DEFAULT_ENCODERS",
    "Dispatcher",
    "RegistrationEncoder",
    "RequestEncoder",
    "TokenEncoder",
    "refund_type",
    "void_type",
]
