from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gateway_core.application.builders import build_charge_request
from gateway_core.domain.entities.credit_card import mask
from gateway_core.domain.exceptions import TransactionSaveException
from gateway_core.domain.services import validate_transaction_fields

if TYPE_CHECKING:
    from gateway_core.application.config import GatewayConfig
    from gateway_core.application.dtos import ProcessorResponse
    from gateway_core.application.ports import ClientIpProvider, PaymentGateway
    from gateway_core.domain.entities import CreditCard, Payable, TransactionAttributes

logger = logging.getLogger(__name__)


class ChargePaymentUseCase:
    """Charges a payable's stored card for a set of products.

    Responsibilities:
    - Validate transaction attributes before anything else
    - Assemble the charge request from the payable, card and products
    - Submit it once (no retries)
    - Classify the processor response as success or TransactionSaveException
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        config: GatewayConfig,
        ip_provider: ClientIpProvider | None = None,
    ) -> None:
        self._gateway = gateway
        self._config = config
        self._ip_provider = ip_provider

    def execute(
        self,
        payable: Payable,
        credit_card: CreditCard,
        attributes: TransactionAttributes,
    ) -> ProcessorResponse:
        """Execute the charge workflow.

        Args:
            payable: Whoever is being charged.
            credit_card: The payable's card stored on the processor.
            attributes: Products, currency, installment and paid price.

        Returns:
            The processor response, unchanged, when its status is "success".

        Raises:
            InvalidTransactionFields: Attributes failed validation; no call made.
            TransactionSaveException: The gateway raised (cause chained) or the
                processor rejected the charge (message is the processor's).
        """
        # Step 1: Validate before any side effect
        validate_transaction_fields(attributes)

        # Step 2: Assemble the request
        buyer_ip = self._ip_provider.client_ip() if self._ip_provider is not None else None
        request = build_charge_request(
            payable,
            credit_card,
            attributes,
            locale=self._config.locale,
            buyer_ip=buyer_ip,
        )

        logger.info(
            "submitting charge buyer_id=%s card=%s price=%s currency=%s installment=%s items=%d",
            request.buyer.id,
            mask(credit_card.token),
            request.price,
            request.currency,
            request.installment,
            len(request.basket_items),
        )

        # Step 3: Single processor call
        try:
            response = self._gateway.charge(request, self._config.options)
        except Exception as e:
            logger.exception("charge transport failure buyer_id=%s", request.buyer.id)
            raise TransactionSaveException() from e

        # Step 4: Classify the outcome
        if not response.is_success:
            logger.warning(
                "charge rejected buyer_id=%s status=%s error_code=%s error_message=%s",
                request.buyer.id,
                response.status,
                response.error_code,
                response.error_message,
            )
            raise TransactionSaveException(response.error_message, error_code=response.error_code)

        return response
