"""Per-call transaction options.

These models enumerate every option the request encoders recognise.
Unset options are explicit `None` (or `False` for `debt_repayment`)
rather than missing keys.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """Billing or shipping address."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = Field(None, description="Full name")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    address1: Optional[str] = Field(None, description="Street address line 1")
    address2: Optional[str] = Field(None, description="Street address line 2")
    city: Optional[str] = Field(None, description="City")
    state: Optional[str] = Field(None, description="State or province code")
    zip: Optional[str] = Field(None, description="Postal code")
    country: Optional[str] = Field(None, description="ISO country code")
    company: Optional[str] = Field(None, description="Company name (billing only)")
    phone: Optional[str] = Field(None, description="Phone number")


class TransactionOptions(BaseModel):
    """Options accepted by every gateway operation.

    Plain dicts can be converted with `TransactionOptions.model_validate`,
    including nested address dicts.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    order_id: Optional[str] = Field(
        None, description="Merchant order id, truncated to 24 chars"
    )
    id: Optional[str] = Field(
        None, description="Transaction id attribute; defaults to order_id"
    )
    merchant: Optional[str] = Field(
        None, description="Report group; defaults to 'Default Report Group'"
    )
    customer: Optional[str] = Field(None, description="customerId attribute")
    billing_address: Optional[Address] = Field(None, description="billToAddress")
    shipping_address: Optional[Address] = Field(None, description="shipToAddress")
    email: Optional[str] = Field(None, description="Email added to address blocks")
    order_source: Optional[str] = Field(None, description="Overrides the order source")
    descriptor_name: Optional[str] = Field(None, description="Custom billing descriptor")
    descriptor_phone: Optional[str] = Field(None, description="Custom billing phone")
    debt_repayment: bool = Field(False, description="Flag the sale as debt repayment")
    amount: Optional[int] = Field(
        None, description="Amount override for partial authorization reversals"
    )
