"""Tests for CancelPaymentUseCase."""

import pytest

from gateway_core.application.dtos import ProcessorResponse
from gateway_core.application.use_cases import CancelPaymentUseCase
from gateway_core.domain.entities import Transaction
from gateway_core.domain.exceptions import TransactionVoidException
from gateway_core.infrastructure.stub_gateway import StubPaymentGateway


@pytest.fixture
def transaction() -> Transaction:
    return Transaction(processor_key="pk1")


class TestCancelSuccess:
    def test_returns_processor_response_unchanged(self, config, ip_provider, transaction) -> None:
        response = ProcessorResponse(status="success", raw={"paymentId": "pk1"})
        use_case = CancelPaymentUseCase(
            StubPaymentGateway(cancel_response=response), config, ip_provider
        )

        assert use_case.execute(transaction) is response

    def test_submits_key_ip_and_locale(self, config, ip_provider, gateway, transaction) -> None:
        CancelPaymentUseCase(gateway, config, ip_provider).execute(transaction)

        (request,) = gateway.cancels
        assert request.payment_id == "pk1"
        assert request.ip == "85.34.78.112"
        assert request.locale == "tr"


class TestCancelFailure:
    def test_rejection_raises_with_processor_message(
        self, config, ip_provider, transaction
    ) -> None:
        use_case = CancelPaymentUseCase(
            StubPaymentGateway.rejecting("payment already refunded"), config, ip_provider
        )

        with pytest.raises(TransactionVoidException) as exc_info:
            use_case.execute(transaction)

        assert str(exc_info.value) == "payment already refunded"

    def test_transport_error_does_not_leak_detail(self, config, ip_provider, transaction) -> None:
        error = OSError("ssl handshake failed for secret-endpoint")
        gateway = StubPaymentGateway(error=error)
        use_case = CancelPaymentUseCase(gateway, config, ip_provider)

        with pytest.raises(TransactionVoidException) as exc_info:
            use_case.execute(transaction)

        assert str(exc_info.value) == TransactionVoidException.default_message
        assert exc_info.value.__cause__ is error
        assert len(gateway.cancels) == 1
