"""Use cases - The charge and cancel workflows."""

from gateway_core.application.use_cases.cancel_payment import CancelPaymentUseCase
from gateway_core.application.use_cases.charge_payment import ChargePaymentUseCase

__all__ = [
    "CancelPaymentUseCase",
    "ChargePaymentUseCase",
]
