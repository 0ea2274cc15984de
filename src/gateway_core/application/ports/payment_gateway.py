from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gateway_core.application.config import ConnectionOptions
    from gateway_core.application.dtos import CancelRequest, ChargeRequest, ProcessorResponse


class PaymentGateway(ABC):
    """Port for the external payment processor.

    Contract:
    - charge() and cancel() each perform exactly one processor call
    - A processor-side rejection is returned as a ProcessorResponse with a
      non-success status, never raised
    - Transport and protocol failures are raised; the use cases translate
      them into domain exceptions
    - Timeouts and signing are the implementation's concern
    """

    @abstractmethod
    def charge(self, request: ChargeRequest, options: ConnectionOptions) -> ProcessorResponse:
        """Create a payment on the processor.

        Args:
            request: Fully assembled charge request.
            options: Credentials and endpoint.

        Returns:
            The decoded processor response, successful or not.
        """

    @abstractmethod
    def cancel(self, request: CancelRequest, options: ConnectionOptions) -> ProcessorResponse:
        """Cancel (void) a previously created payment.

        Args:
            request: Cancel request naming the processor's payment id.
            options: Credentials and endpoint.

        Returns:
            The decoded processor response, successful or not.
        """
