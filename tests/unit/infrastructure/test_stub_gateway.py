import pytest

from gateway_core.application.builders import build_cancel_request
from gateway_core.application.dtos import ProcessorResponse
from gateway_core.application.ports import PaymentGateway
from gateway_core.infrastructure.stub_gateway import StubPaymentGateway


@pytest.fixture
def cancel_request():
    return build_cancel_request("pk1", ip="127.0.0.1", locale="tr")


class TestStubPaymentGateway:
    def test_implements_payment_gateway_interface(self) -> None:
        assert isinstance(StubPaymentGateway(), PaymentGateway)

    def test_succeeds_by_default(self, cancel_request, config) -> None:
        response = StubPaymentGateway().cancel(cancel_request, config.options)

        assert response.is_success

    def test_records_requests(self, cancel_request, config) -> None:
        gateway = StubPaymentGateway()

        gateway.cancel(cancel_request, config.options)
        gateway.cancel(cancel_request, config.options)

        assert gateway.cancels == [cancel_request, cancel_request]
        assert gateway.charges == []

    def test_returns_configured_response(self, cancel_request, config) -> None:
        response = ProcessorResponse(status="failure", error_message="nope")

        result = StubPaymentGateway(cancel_response=response).cancel(cancel_request, config.options)

        assert result is response

    def test_raises_configured_error(self, cancel_request, config) -> None:
        gateway = StubPaymentGateway(error=TimeoutError("slow"))

        with pytest.raises(TimeoutError):
            gateway.cancel(cancel_request, config.options)

        assert gateway.cancels == [cancel_request]

    def test_rejecting_factory(self, cancel_request, config) -> None:
        response = StubPaymentGateway.rejecting("declined", "12").cancel(cancel_request, config.options)

        assert response.status == "failure"
        assert response.error_message == "declined"
        assert response.error_code == "12"
