"""Decoded response and result models."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from vantiv_gateway.models.authorization import AuthorizationHandle


class NormalizedResponse(Mapping[str, str]):
    """
    Read-only flattened view of a Vantiv reply.

    Keys are the element names found directly under `<kindResponse>`, or
    `parent_child` for one level of nesting (e.g. `fraudResult_avsResult`).
    Unknown elements are passed through as-is.
    """

    def __init__(self, fields: Mapping[str, str]) -> None:
        self._fields = MappingProxyType(dict(fields))

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"NormalizedResponse({dict(self._fields)!r})"

    @property
    def response(self) -> Optional[str]:
        """Three digit Vantiv response code."""
        return self._fields.get("response")

    @property
    def message(self) -> Optional[str]:
        return self._fields.get("message")

    @property
    def auth_code(self) -> Optional[str]:
        return self._fields.get("authCode")


@dataclass(frozen=True)
class Response:
    """
    Result of a gateway operation.

    Declines are normal results with `success=False`; they are never
    raised as exceptions.
    """

    success: bool
    message: Optional[str]
    params: NormalizedResponse
    authorization: Optional[AuthorizationHandle] = None
    avs_result: Optional[str] = None
    cvv_result: Optional[str] = None
    test: bool = False

    @property
    def response_code(self) -> Optional[str]:
        return self.params.response

    @property
    def auth_code(self) -> Optional[str]:
        return self.params.auth_code


@dataclass(frozen=True)
class StoreResponse(Response):
    """
    Result of a `store` (registerToken) operation.

    Carries the bare Vantiv token instead of an authorization handle.
    Tokens cannot be captured, refunded or voided.
    """

    token: Optional[str] = None
