"""Payment method variants accepted by the gateway.

Each variant is an immutable value object carrying only the fields its
request encoder needs. Dispatch happens on the concrete type, so every
variant listed here has exactly one encoder registered in
`vantiv_gateway.encoders.dispatcher`.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

# Account holder type -> account type -> Vantiv `accType` value
CHECK_TYPE: dict[str, dict[str, str]] = {
    "personal": {
        "checking": "Checking",
        "savings": "Savings",
    },
    "business": {
        "checking": "Corporate",
        "savings": "Corp Savings",
    },
}


@dataclass(frozen=True)
class CreditCard:
    """Card details for card-not-present or swiped (track data) payments.

    Attributes:
        number: Primary account number
        month: Expiration month ("9", "09")
        year: Expiration year ("2021", "21")
        brand: Card brand (visa, master, american_express, discover, jcb, diners_club)
        verification_value: CVV/CVC
        first_name: Cardholder first name
        last_name: Cardholder last name
        track_data: Raw magnetic stripe data for card-present transactions
    """

    number: str
    month: str = ""
    year: str = ""
    brand: Optional[str] = None
    verification_value: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    track_data: Optional[str] = None

    @property
    def name(self) -> str:
        """Full cardholder name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def has_track_data(self) -> bool:
        return bool(self.track_data and self.track_data.strip())


@dataclass(frozen=True)
class NetworkTokenCard(CreditCard):
    """A network tokenized card (Apple Pay, Android Pay, ...).

    The `payment_cryptogram` is sent as `cardholderAuthentication` and
    `source` drives the default order source.
    """

    payment_cryptogram: Optional[str] = None
    source: Optional[str] = None


@dataclass(frozen=True)
class Check:
    """Bank account details for eCheck transactions."""

    routing_number: str
    account_number: str
    account_holder_type: str = "personal"
    account_type: str = "checking"
    number: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that the holder/account combination is one Vantiv accepts."""
        account_types = CHECK_TYPE.get(self.account_holder_type)
        if account_types is None:
            raise ValueError(
                f"account_holder_type must be one of {sorted(CHECK_TYPE)}"
            )
        if self.account_type not in account_types:
            raise ValueError(f"account_type must be one of {sorted(account_types)}")

    @property
    def vantiv_account_type(self) -> str:
        return CHECK_TYPE[self.account_holder_type][self.account_type]


@dataclass(frozen=True)
class Registration:
    """Vantiv eProtect (PayPage) registration returned to the browser.

    Example:
        reg = Registration("1234567890", month="9", verification_value="424", year="2021")
    """

    id: str
    month: str = ""
    verification_value: str = ""
    year: str = ""


@dataclass(frozen=True)
class StoredToken:
    """Vantiv token representing a previously registered account number.

    Vantiv only stores the account number, so expiration and CVV travel
    alongside the token in `metadata`.
    """

    token: str
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Freeze metadata so the token cannot change after construction."""
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def create(
        cls,
        token: str,
        month: str = "",
        verification_value: str = "",
        year: str = "",
    ) -> "StoredToken":
        return cls(
            token=token,
            metadata={
                "month": month,
                "verification_value": verification_value,
                "year": year,
            },
        )

    @property
    def month(self) -> str:
        return self.metadata.get("month", "")

    @property
    def verification_value(self) -> str:
        return self.metadata.get("verification_value", "")

    @property
    def year(self) -> str:
        return self.metadata.get("year", "")
