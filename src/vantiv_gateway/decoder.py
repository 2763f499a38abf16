"""
Decoding and success classification for Vantiv replies.

A reply looks like:

    <litleOnlineResponse version="9.4" response="0" message="Valid Format">
      <authorizationResponse id="1" reportGroup="Default Report Group">
        <litleTxnId>100000000000000001</litleTxnId>
        <response>000</response>
        <message>Approved</message>
        <fraudResult>
          <avsResult>00</avsResult>
        </fraudResult>
      </authorizationResponse>
    </litleOnlineResponse>

and flattens to `{"litleTxnId": ..., "response": "000", "message":
"Approved", "fraudResult_avsResult": "00"}`.
"""

import structlog
from lxml import etree

from vantiv_gateway.models import MalformedResponse, NormalizedResponse, TxnKind

logger = structlog.get_logger(__name__)

XML_RESPONSE_ROOT = "litleOnlineResponse"
XML_RESPONSE_NODES = ("message", "response")

RESPONSE_CODE_APPROVED = "000"

# Response codes counted as success, per transaction kind.
# Token registration is idempotent: "801" (registered) and "802"
# (previously registered) both mean the caller has a token.
APPROVED_CODES: dict[TxnKind, frozenset[str]] = {
    TxnKind.REGISTER_TOKEN: frozenset({RESPONSE_CODE_APPROVED, "801", "802"}),
}
DEFAULT_APPROVED_CODES = frozenset({RESPONSE_CODE_APPROVED})

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def _local_name(node: etree._Element) -> str:
    return etree.QName(node).localname


def _elements(node: etree._Element) -> list[etree._Element]:
    # Skips comments and processing instructions
    return [child for child in node if isinstance(child.tag, str)]


def decode(xml: str | bytes, kind: TxnKind | str) -> NormalizedResponse:
    """
    Flatten the `<kindResponse>` element of a reply.

    Childless elements are stored under their own name; elements with
    children store each child as `parent_child`. Namespaces are ignored
    and unknown elements are passed through.

    When the response element is missing or empty, the `message` and
    `response` attributes of the `litleOnlineResponse` root are used
    instead. Vantiv answers that way when it rejects the request before
    processing any transaction (bad credentials, schema errors).

    Raises:
        MalformedResponse: If the reply is not XML or neither shape is present
    """
    kind = TxnKind(kind)

    if isinstance(xml, str):
        xml = xml.encode("utf-8")

    try:
        document = etree.fromstring(xml, parser=_PARSER)
    except etree.XMLSyntaxError as e:
        raise MalformedResponse(f"Reply is not valid XML: {e}") from e

    roots = document.xpath(
        "/descendant-or-self::*[local-name()=$root]",
        root=XML_RESPONSE_ROOT,
    )
    if not roots:
        raise MalformedResponse(f"Reply has no {XML_RESPONSE_ROOT} element")
    root = roots[0]

    parsed: dict[str, str] = {}
    response_name = f"{kind.value}Response"
    for node in _elements(root):
        if _local_name(node) != response_name:
            continue
        for field in _elements(node):
            children = _elements(field)
            if not children:
                parsed[_local_name(field)] = field.text or ""
            else:
                for child in children:
                    parsed[f"{_local_name(field)}_{_local_name(child)}"] = child.text or ""
        break

    if not parsed:
        for attribute in XML_RESPONSE_NODES:
            value = root.get(attribute)
            if value is None:
                raise MalformedResponse(
                    f"Reply has no {response_name} and no {attribute!r} attribute"
                )
            parsed[attribute] = value

        logger.info(
            "vantiv_response_root_status",
            kind=kind.value,
            response=parsed["response"],
            message=parsed["message"],
        )

    return NormalizedResponse(parsed)


def classify_success(kind: TxnKind | str, response: NormalizedResponse) -> bool:
    """True when the reply's response code is approved for `kind`."""
    approved = APPROVED_CODES.get(TxnKind(kind), DEFAULT_APPROVED_CODES)
    return response.response in approved
