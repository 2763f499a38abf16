"""Unit tests for VantivGateway against the in-process MockTransport."""

from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from vantiv_gateway import (
    AuthorizationHandle,
    Check,
    ConfigurationError,
    CreditCard,
    MalformedResponse,
    OperationNotSupported,
    Response,
    StoreResponse,
    StoredToken,
    TransactionOptions,
    TransportError,
    TxnKind,
    UnsupportedPaymentMethod,
    VantivGateway,
    VantivSettings,
)
from vantiv_gateway.models import NormalizedResponse
from vantiv_gateway.transport import HttpTransport, MockTransport
from xml_helpers import reply, strip_namespaces, transaction_of

DECLINED_CARD = CreditCard(
    brand="visa",
    number="4457010100000008",
    month="06",
    year="2021",
    verification_value="992",
)

TIMEOUT_CARD = CreditCard(number="4000000000000119", month="12", year="2030")


class TestGatewayConstruction:
    """Tests for building a gateway."""

    def test_missing_credentials_raise(self):
        """Test that blank credentials are rejected up front."""
        settings = VantivSettings(login="", password="secret", merchant_id=" ")

        with pytest.raises(ConfigurationError) as exc_info:
            VantivGateway(settings, transport=MockTransport())

        assert "login" in str(exc_info.value)
        assert "merchant_id" in str(exc_info.value)
        assert "password" not in str(exc_info.value)

    def test_default_transport_is_http(self, settings):
        gateway = VantivGateway(settings)

        assert isinstance(gateway.transport, HttpTransport)
        assert gateway.transport.url == "https://www.testlitle.com/sandbox/communicator/online"

    def test_supports_scrubbing(self, gateway):
        assert gateway.supports_scrubbing is True
        assert "[FILTERED]" in gateway.scrub("<password>secret</password>")

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_transport(self, settings, mock_transport):
        with patch.object(mock_transport, "close", new=AsyncMock()) as close:
            async with VantivGateway(settings, transport=mock_transport) as gateway:
                assert gateway.transport is mock_transport

        close.assert_awaited_once()


@pytest.mark.asyncio
class TestAuthorize:
    """Tests for authorizations and purchases."""

    async def test_approved_authorization(self, gateway, credit_card, billing_options):
        """Test an approved authorization returns a handle for follow-ups."""
        response = await gateway.authorize(10010, credit_card, billing_options)

        assert isinstance(response, Response)
        assert response.success is True
        assert response.message == "Approved"
        assert response.response_code == "000"
        assert response.auth_code == "11111"
        assert response.test is True
        assert response.authorization is not None
        assert response.authorization.txn_type == TxnKind.AUTHORIZATION
        assert response.authorization.amount == 10010
        assert response.authorization.transaction_id == response.params["litleTxnId"]

    async def test_avs_and_cvv_results(self, gateway, credit_card):
        response = await gateway.authorize(10010, credit_card)

        assert response.params["fraudResult_avsResult"] == "01"
        assert response.avs_result == "X"
        assert response.cvv_result == "M"

    async def test_decline_is_not_an_exception(self, gateway):
        """Test that a declined card returns success=False."""
        response = await gateway.authorize(10100, DECLINED_CARD, {"order_id": "2"})

        assert response.success is False
        assert response.response_code == "110"
        assert response.message == "Insufficient Funds"
        assert response.avs_result == "I"
        assert response.cvv_result == "P"

    @pytest.mark.parametrize(
        ("avs", "expected"),
        [("00", "Y"), ("34", "I"), ("13", "A"), ("40", "E"), ("99", None)],
    )
    async def test_avs_mapping(self, settings, credit_card, avs, expected):
        transport = MockTransport(behaviors={credit_card.number: {"type": "approved", "avs": avs}})
        gateway = VantivGateway(settings, transport=transport)

        response = await gateway.authorize(100, credit_card)

        assert response.avs_result == expected
        assert response.cvv_result is None

    async def test_dict_options(self, gateway, mock_transport, credit_card):
        options = {"order_id": "77", "billing_address": {"zip": "01803"}}
        await gateway.authorize(100, credit_card, options)

        txn = transaction_of(mock_transport.requests[-1])
        assert txn.get("id") == "77"
        assert txn.findtext("billToAddress/zip") == "01803"

    async def test_unknown_option_rejected(self, gateway, credit_card):
        with pytest.raises(ValidationError):
            await gateway.authorize(100, credit_card, {"orderid": "77"})

    async def test_purchase(self, gateway, credit_card):
        response = await gateway.purchase(10010, credit_card, TransactionOptions(order_id="3"))

        assert response.success is True
        assert response.authorization.txn_type == TxnKind.SALE
        assert response.auth_code == "11111"

    async def test_transport_error_propagates(self, gateway):
        with pytest.raises(TransportError):
            await gateway.authorize(100, TIMEOUT_CARD)

    async def test_malformed_reply_propagates(self, gateway, mock_transport, credit_card):
        with patch.object(mock_transport, "send", new=AsyncMock(return_value="Service Unavailable")):
            with pytest.raises(MalformedResponse):
                await gateway.authorize(100, credit_card)

    async def test_root_level_rejection(self, gateway, mock_transport, credit_card):
        """Test a reply without a transaction element is a failed response."""
        rejected = (
            '<litleOnlineResponse version="9.4" xmlns="http://www.litle.com/schema" '
            'response="1" message="System Error - Call Litle &amp; Co."/>'
        )
        with patch.object(mock_transport, "send", new=AsyncMock(return_value=rejected)):
            response = await gateway.authorize(100, credit_card)

        assert response.success is False
        assert response.message == "System Error - Call Litle & Co."
        assert response.authorization is None

    async def test_unsupported_payment_method(self, gateway):
        with pytest.raises(UnsupportedPaymentMethod):
            await gateway.authorize(100, {"number": "4457010000000009"})

    async def test_sends_xml_content_type(self, gateway, mock_transport, credit_card):
        with patch.object(
            mock_transport,
            "send",
            new=AsyncMock(
                return_value=reply(
                    "authorization", "<response>000</response><message>Approved</message>"
                )
            ),
        ) as send:
            response = await gateway.authorize(100, credit_card)

        xml_body, headers = send.await_args.args
        assert headers == {"Content-Type": "text/xml"}
        assert strip_namespaces(xml_body).tag == "litleOnlineRequest"
        # No litleTxnId in the reply, so there is nothing to follow up on
        assert response.authorization is None


@pytest.mark.asyncio
class TestFollowUps:
    """Tests for capture, refund and void chained from previous responses."""

    async def test_authorize_capture_refund_void(self, gateway, mock_transport, credit_card):
        """Test the full lifecycle of a card transaction."""
        auth = await gateway.authorize(10010, credit_card, {"order_id": "1"})
        capture = await gateway.capture(None, auth.authorization)
        refund = await gateway.refund(500, capture.authorization)
        void = await gateway.void(refund.authorization)

        assert [r.success for r in (auth, capture, refund, void)] == [True, True, True, True]
        assert capture.authorization.txn_type == TxnKind.CAPTURE
        assert refund.authorization.txn_type == TxnKind.CREDIT
        assert void.authorization.txn_type == TxnKind.VOID

        capture_txn = transaction_of(mock_transport.requests[1])
        assert capture_txn.tag == "capture"
        assert capture_txn.find("amount") is None
        assert capture_txn.findtext("litleTxnId") == auth.authorization.transaction_id

    async def test_partial_capture(self, gateway, mock_transport, credit_card):
        auth = await gateway.authorize(10010, credit_card)
        capture = await gateway.capture(5005, auth.authorization)

        assert capture.success is True
        assert capture.authorization.amount == 5005
        assert transaction_of(mock_transport.requests[-1]).findtext("amount") == "5005"

    async def test_void_authorization_is_reversal(self, gateway, mock_transport, credit_card):
        auth = await gateway.authorize(10010, credit_card)
        void = await gateway.void(auth.authorization)

        txn = transaction_of(mock_transport.requests[-1])
        assert void.success is True
        assert void.authorization.txn_type == TxnKind.AUTH_REVERSAL
        assert txn.tag == "authReversal"
        assert txn.findtext("amount") == "10010"

    async def test_void_of_sale(self, gateway, mock_transport, credit_card):
        sale = await gateway.purchase(10010, credit_card)
        void = await gateway.void(sale.authorization)

        assert void.success is True
        assert transaction_of(mock_transport.requests[-1]).tag == "void"

    async def test_echeck_sale_void_and_refund(self, gateway, mock_transport, check):
        sale = await gateway.purchase(2004, check, {"order_id": "42"})

        assert sale.success is True
        assert sale.authorization.txn_type == TxnKind.ECHECK_SALE

        refund = await gateway.refund(1000, sale.authorization)
        assert refund.success is True
        assert refund.authorization.txn_type == TxnKind.ECHECK_CREDIT
        assert transaction_of(mock_transport.requests[-1]).tag == "echeckCredit"

        void = await gateway.void(refund.authorization)
        assert void.success is True
        assert void.authorization.txn_type == TxnKind.ECHECK_VOID
        assert transaction_of(mock_transport.requests[-1]).tag == "echeckVoid"

    async def test_unknown_transaction_id(self, gateway):
        handle = AuthorizationHandle("123456789012345678", TxnKind.AUTHORIZATION, 100)

        response = await gateway.capture(None, handle)

        assert response.success is False
        assert response.response_code == "360"

    async def test_unreferenced_credit(self, gateway, mock_transport, credit_card):
        response = await gateway.refund(500, credit_card, {"order_id": "9"})

        assert response.success is True
        assert response.authorization.txn_type == TxnKind.CREDIT
        txn = transaction_of(mock_transport.requests[-1])
        assert txn.findtext("card/number") == credit_card.number

    async def test_unreferenced_credit_without_amount(self, gateway, mock_transport, credit_card):
        response = await gateway.refund(None, credit_card)

        assert response.success is True
        assert "<amount>" not in mock_transport.requests[-1]
        assert transaction_of(mock_transport.requests[-1]).find("amount") is None

    async def test_credit_is_deprecated_alias(self, gateway, credit_card):
        auth = await gateway.purchase(10010, credit_card)

        with pytest.warns(DeprecationWarning, match="use refund instead"):
            response = await gateway.credit(500, auth.authorization)

        assert response.success is True
        assert response.authorization.txn_type == TxnKind.CREDIT

    async def test_capture_of_card_not_supported(self, gateway, credit_card):
        with pytest.raises(OperationNotSupported):
            await gateway.capture(100, credit_card)

    async def test_token_string_cannot_be_voided(self, gateway):
        with pytest.raises(UnsupportedPaymentMethod):
            await gateway.void("1111000100000196")


@pytest.mark.asyncio
class TestStore:
    """Tests for token registration."""

    async def test_store_card(self, gateway, credit_card):
        response = await gateway.store(credit_card, {"order_id": "50"})

        assert isinstance(response, StoreResponse)
        assert response.success is True
        assert response.response_code == "801"
        assert response.token is not None
        assert response.token.endswith("0009")
        assert response.authorization is None
        assert response.params["bin"] == "445701"

    async def test_store_twice_is_previously_registered(self, gateway, credit_card):
        first = await gateway.store(credit_card)
        second = await gateway.store(credit_card)

        assert second.success is True
        assert second.response_code == "802"
        assert second.token == first.token

    async def test_store_check(self, gateway, mock_transport, check):
        response = await gateway.store(check)

        assert response.success is True
        assert response.token.endswith("9992")
        assert transaction_of(mock_transport.requests[-1]).find("echeckForToken") is not None

    async def test_store_registration(self, gateway, registration):
        response = await gateway.store(registration)

        assert response.success is True
        assert response.token.endswith(registration.id[-4:])

    async def test_store_invalid_card_fails(self, gateway):
        response = await gateway.store(CreditCard(number="4457119999999999"))

        assert response.success is False
        assert response.response_code == "820"
        assert response.token is None

    async def test_stored_token_authorizes(self, gateway, stored_token):
        response = await gateway.authorize(15000, stored_token)

        assert response.success is True
        assert response.authorization.txn_type == TxnKind.AUTHORIZATION

    async def test_stored_token_not_found(self, gateway):
        token = StoredToken.create("1111000100092332", month="11", year="2021")
        response = await gateway.authorize(15000, token)

        assert response.success is False
        assert response.response_code == "822"


@pytest.mark.asyncio
class TestVerify:
    """Tests for zero amount verification."""

    async def test_verify_authorizes_zero_then_reverses(self, gateway, mock_transport, credit_card):
        response = await gateway.verify(credit_card, {"order_id": "5"})

        assert response.success is True
        assert response.authorization.txn_type == TxnKind.AUTHORIZATION
        assert len(mock_transport.requests) == 2

        auth_txn = transaction_of(mock_transport.requests[0])
        void_txn = transaction_of(mock_transport.requests[1])
        assert auth_txn.tag == "authorization"
        assert auth_txn.findtext("amount") == "0"
        assert void_txn.tag == "authReversal"
        assert void_txn.findtext("litleTxnId") == response.authorization.transaction_id

    async def test_verify_declined_skips_void(self, gateway, mock_transport):
        response = await gateway.verify(DECLINED_CARD)

        assert response.success is False
        assert response.response_code == "110"
        assert len(mock_transport.requests) == 1

    async def test_verify_returns_authorization_when_void_fails(self, gateway, credit_card):
        """Test that an error from the void never replaces the auth response."""
        failing_void = AsyncMock(side_effect=TransportError("Simulated timeout"))
        with patch.object(gateway, "void", new=failing_void) as void:
            response = await gateway.verify(credit_card)

        void.assert_awaited_once()
        assert response.success is True
        assert response.authorization.txn_type == TxnKind.AUTHORIZATION

    async def test_verify_returns_authorization_when_void_declined(self, gateway, credit_card):
        declined = Response(
            success=False,
            message="No transaction found with specified litleTxnId",
            params=NormalizedResponse({"response": "360"}),
        )
        with patch.object(gateway, "void", new=AsyncMock(return_value=declined)):
            response = await gateway.verify(credit_card)

        assert response.success is True
        assert response.message == "Approved"

    async def test_verify_transport_error_on_authorize_propagates(self, gateway):
        with pytest.raises(TransportError):
            await gateway.verify(TIMEOUT_CARD)

    async def test_verify_check_not_supported(self, gateway, check: Check):
        with pytest.raises(OperationNotSupported):
            await gateway.verify(check)
