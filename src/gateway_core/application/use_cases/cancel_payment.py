from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gateway_core.application.builders import build_cancel_request
from gateway_core.domain.exceptions import TransactionVoidException

if TYPE_CHECKING:
    from gateway_core.application.config import GatewayConfig
    from gateway_core.application.dtos import ProcessorResponse
    from gateway_core.application.ports import ClientIpProvider, PaymentGateway
    from gateway_core.domain.entities import Transaction

logger = logging.getLogger(__name__)


class CancelPaymentUseCase:
    """Voids a charge previously created on the processor."""

    def __init__(
        self,
        gateway: PaymentGateway,
        config: GatewayConfig,
        ip_provider: ClientIpProvider,
    ) -> None:
        self._gateway = gateway
        self._config = config
        self._ip_provider = ip_provider

    def execute(self, transaction: Transaction) -> ProcessorResponse:
        """Cancel the processor payment behind ``transaction``.

        Raises:
            TransactionVoidException: The gateway raised (cause chained) or the
                processor refused the cancel (message is the processor's).
        """
        request = build_cancel_request(
            transaction.processor_key,
            ip=self._ip_provider.client_ip(),
            locale=self._config.locale,
        )

        logger.info("submitting cancel payment_id=%s", request.payment_id)

        try:
            response = self._gateway.cancel(request, self._config.options)
        except Exception as e:
            logger.exception("cancel transport failure payment_id=%s", request.payment_id)
            raise TransactionVoidException() from e

        if not response.is_success:
            logger.warning(
                "cancel rejected payment_id=%s status=%s error_code=%s error_message=%s",
                request.payment_id,
                response.status,
                response.error_code,
                response.error_message,
            )
            raise TransactionVoidException(response.error_message, error_code=response.error_code)

        return response
