from __future__ import annotations

from typing import TYPE_CHECKING

from gateway_core.application.dtos import SUCCESS_STATUS, ProcessorResponse
from gateway_core.application.ports import PaymentGateway

if TYPE_CHECKING:
    from gateway_core.application.config import ConnectionOptions
    from gateway_core.application.dtos import CancelRequest, ChargeRequest


class StubPaymentGateway(PaymentGateway):
    """In-memory gateway for tests and local runs.

    Implementation notes:
    - Records every request in ``charges`` / ``cancels`` in call order
    - Answers with the configured response, "success" by default
    - Raises the configured ``error`` instead, to simulate transport failures
    - NOT thread-safe
    """

    def __init__(
        self,
        charge_response: ProcessorResponse | None = None,
        cancel_response: ProcessorResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.charge_response = charge_response or ProcessorResponse(status=SUCCESS_STATUS)
        self.cancel_response = cancel_response or ProcessorResponse(status=SUCCESS_STATUS)
        self.error = error
        self.charges: list[ChargeRequest] = []
        self.cancels: list[CancelRequest] = []

    def charge(self, request: ChargeRequest, options: ConnectionOptions) -> ProcessorResponse:  # noqa: ARG002
        self.charges.append(request)
        if self.error is not None:
            raise self.error
        return self.charge_response

    def cancel(self, request: CancelRequest, options: ConnectionOptions) -> ProcessorResponse:  # noqa: ARG002
        self.cancels.append(request)
        if self.error is not None:
            raise self.error
        return self.cancel_response

    @classmethod
    def rejecting(cls, error_message: str, error_code: str | None = None) -> StubPaymentGateway:
        """A gateway whose processor refuses every charge and cancel."""
        response = ProcessorResponse(
            status="failure",
            error_message=error_message,
            error_code=error_code,
        )
        return cls(charge_response=response, cancel_response=response)
