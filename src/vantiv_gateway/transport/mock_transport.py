"""
Mock transport for tests and local development.

MockTransport answers LitleXML requests in-process without network
access. It mirrors the behaviour of the Vantiv sandbox closely enough
to exercise the whole gateway: replies use the real response element
names, transaction ids are issued and remembered so follow-up requests
against unknown ids fail with response 360, and token registration
answers 801 the first time an account is registered and 802 afterwards.

TEST ACCOUNT REFERENCE:
The scripted account numbers below come from the Vantiv certification
suite. If the certification data changes, update TEST_ACCOUNT_BEHAVIORS.
"""

import random
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from lxml import etree

from vantiv_gateway.encoders.xml import XML_NAMESPACE
from vantiv_gateway.models import TransportError
from vantiv_gateway.transport.base import Transport

logger = structlog.get_logger(__name__)

# Request element -> response kind, where they differ
RESPONSE_KINDS = {
    "echeckSale": "echeckSales",
    "registerTokenRequest": "registerToken",
}

# Requests whose replies carry an authCode
AUTH_CODE_KINDS = {"authorization", "sale"}

# Elements identifying the account, searched in order
ACCOUNT_ELEMENTS = (
    "number",
    "accountNumber",
    "accNum",
    "litleToken",
    "paypageRegistrationId",
    "track",
)

TEST_ACCOUNT_BEHAVIORS: dict[str, dict[str, Any]] = {
    # Approvals
    "4457010000000009": {"type": "approved", "auth_code": "11111", "avs": "01", "cvv": "M"},
    "5112010000000003": {"type": "approved", "auth_code": "22222", "avs": "10", "cvv": "M"},
    "6011010000000003": {"type": "approved", "auth_code": "33333", "avs": "10", "cvv": "M"},
    "375001000000005": {"type": "approved", "auth_code": "44444", "avs": "13"},
    # Declines
    "4457010100000008": {
        "type": "decline",
        "response": "110",
        "message": "Insufficient Funds",
        "avs": "34",
        "cvv": "P",
    },
    "5112010100000002": {
        "type": "decline",
        "response": "301",
        "message": "Invalid Account Number",
        "avs": "34",
        "cvv": "N",
    },
    "6011010100000002": {
        "type": "decline",
        "response": "123",
        "message": "Call Discover",
        "avs": "34",
        "cvv": "P",
    },
    "4457119999999999": {
        "type": "decline",
        "response": "820",
        "message": "Credit card number was invalid",
    },
    "10@BC99999": {"type": "decline", "response": "301", "message": "Invalid Account Number"},
    "9099999992": {"type": "decline", "response": "900", "message": "Invalid Bank Routing Number"},
    "1111000100092332": {"type": "decline", "response": "822", "message": "Token was not found"},
    "1112000100000085": {"type": "decline", "response": "823", "message": "Token was invalid"},
    # Transport failures
    "4000000000000119": {"type": "transport_error", "description": "Simulated timeout"},
}


class MockTransport(Transport):
    """
    In-process stand-in for the Vantiv endpoint.

    Args:
        behaviors: Override TEST_ACCOUNT_BEHAVIORS with a custom mapping
        seed: Seed for transaction id / token generation
    """

    def __init__(
        self,
        behaviors: Optional[dict[str, dict[str, Any]]] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.behaviors = TEST_ACCOUNT_BEHAVIORS if behaviors is None else behaviors
        self.requests: list[str] = []
        self._random = random.Random(seed)
        self._transactions: set[str] = set()
        self._registered: dict[str, str] = {}

        logger.info(
            "mock_transport_initialized",
            custom_behaviors=behaviors is not None,
        )

    async def send(self, xml_body: str, headers: dict[str, str]) -> str:
        self.requests.append(xml_body)

        document = etree.fromstring(xml_body.encode("utf-8"))
        transaction = [
            node
            for node in document
            if isinstance(node.tag, str) and etree.QName(node).localname != "authentication"
        ][0]
        operation = etree.QName(transaction).localname
        kind = RESPONSE_KINDS.get(operation, operation)

        account = self._find_text(transaction, ACCOUNT_ELEMENTS)
        behavior = self.behaviors.get(account or "", {"type": "approved"})

        logger.info(
            "mock_transport_request",
            operation=operation,
            behavior=behavior["type"],
        )

        if behavior["type"] == "transport_error":
            raise TransportError(
                f"Mock transport failure: {behavior.get('description', 'Simulated failure')}"
            )

        fields = self._reply_fields(kind, transaction, account, behavior)
        return self._render(kind, transaction, fields)

    def _reply_fields(
        self,
        kind: str,
        transaction: etree._Element,
        account: Optional[str],
        behavior: dict[str, Any],
    ) -> dict[str, Any]:
        txn_id = self._new_transaction_id()
        fields: dict[str, Any] = {"litleTxnId": txn_id}

        order_id = self._find_text(transaction, ("orderId",))
        if order_id:
            fields["orderId"] = order_id

        referenced = self._find_text(transaction, ("litleTxnId",))
        if referenced is not None and referenced not in self._transactions:
            fields["response"] = "360"
            fields["message"] = "No transaction found with specified litleTxnId"
        elif behavior["type"] == "decline":
            fields["response"] = behavior["response"]
            fields["message"] = behavior["message"]
        elif kind == "registerToken":
            previously = account in self._registered
            fields["response"] = "802" if previously else "801"
            fields["message"] = (
                "Account number was previously registered"
                if previously
                else "Account number was successfully registered"
            )
        else:
            fields["response"] = "000"
            fields["message"] = "Approved"

        fields["responseTime"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")

        approved = fields["response"] in ("000", "801", "802")
        if approved and kind != "registerToken":
            self._transactions.add(txn_id)

        if kind in AUTH_CODE_KINDS and approved:
            fields["authCode"] = behavior.get("auth_code", f"{self._random.randint(0, 999999):06d}")

        fraud = {}
        if behavior.get("avs"):
            fraud["avsResult"] = behavior["avs"]
        if behavior.get("cvv"):
            fraud["cardValidationResult"] = behavior["cvv"]
        if fraud and kind in AUTH_CODE_KINDS:
            fields["fraudResult"] = fraud

        if kind == "registerToken" and approved and account:
            token = self._registered.setdefault(account, self._new_token(account))
            fields["litleToken"] = token
            fields["bin"] = account[:6]

        return fields

    def _render(self, kind: str, transaction: etree._Element, fields: dict[str, Any]) -> str:
        ns = XML_NAMESPACE
        root = etree.Element(
            f"{{{ns}}}litleOnlineResponse",
            nsmap={None: ns},
            version="9.4",
            response="0",
            message="Valid Format",
        )
        reply = etree.SubElement(root, f"{{{ns}}}{kind}Response")
        for attribute in ("id", "reportGroup", "customerId"):
            value = transaction.get(attribute)
            if value is not None:
                reply.set(attribute, value)

        for name, value in fields.items():
            node = etree.SubElement(reply, f"{{{ns}}}{name}")
            if isinstance(value, dict):
                for child_name, child_value in value.items():
                    etree.SubElement(node, f"{{{ns}}}{child_name}").text = str(child_value)
            else:
                node.text = str(value)

        return etree.tostring(root, encoding="unicode")

    def _find_text(self, transaction: etree._Element, names: tuple[str, ...]) -> Optional[str]:
        for name in names:
            matches = transaction.xpath(".//*[local-name()=$name]", name=name)
            if matches and matches[0].text:
                return matches[0].text
        return None

    def _new_transaction_id(self) -> str:
        return str(self._random.randint(10**17, 10**18 - 1))

    def _new_token(self, account: str) -> str:
        digits = "".join(str(self._random.randint(0, 9)) for _ in range(12))
        return f"{digits}{account[-4:]}"
