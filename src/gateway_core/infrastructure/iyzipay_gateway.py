"""PaymentGateway implementation backed by the iyzipay SDK.

The SDK takes plain dictionaries using the processor's camelCase keys and
returns the raw HTTP response; this adapter owns both translations.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import iyzipay

from gateway_core.application.dtos import ProcessorResponse
from gateway_core.application.ports import PaymentGateway

if TYPE_CHECKING:
    from decimal import Decimal

    from gateway_core.application.config import ConnectionOptions
    from gateway_core.application.dtos import (
        AddressFragment,
        BasketItemFragment,
        BuyerFragment,
        CancelRequest,
        ChargeRequest,
    )


class IyzipayPaymentGateway(PaymentGateway):
    """Sends charge and cancel requests through ``iyzipay.Payment`` and ``iyzipay.Cancel``.

    Network errors from the SDK and undecodable bodies propagate as raised;
    the use cases turn them into domain exceptions.
    """

    def charge(self, request: ChargeRequest, options: ConnectionOptions) -> ProcessorResponse:
        raw = iyzipay.Payment().create(charge_payload(request), options_payload(options))
        return decode_response(raw)

    def cancel(self, request: CancelRequest, options: ConnectionOptions) -> ProcessorResponse:
        raw = iyzipay.Cancel().create(cancel_payload(request), options_payload(options))
        return decode_response(raw)


def options_payload(options: ConnectionOptions) -> dict[str, str]:
    return {
        "api_key": options.api_key,
        "secret_key": options.secret_key,
        "base_url": options.base_url,
    }


def charge_payload(request: ChargeRequest) -> dict[str, Any]:
    return {
        "locale": request.locale,
        "price": format_price(request.price),
        "paidPrice": format_price(request.paid_price),
        "currency": request.currency,
        "installment": request.installment,
        "paymentChannel": request.payment_channel,
        "paymentGroup": request.payment_group,
        "paymentCard": {
            "cardUserKey": request.payment_card.card_user_key,
            "cardToken": request.payment_card.card_token,
        },
        "buyer": _buyer_payload(request.buyer),
        "shippingAddress": _address_payload(request.shipping_address),
        "billingAddress": _address_payload(request.billing_address),
        "basketItems": [_basket_item_payload(item) for item in request.basket_items],
    }


def cancel_payload(request: CancelRequest) -> dict[str, str]:
    return {
        "locale": request.locale,
        "paymentId": request.payment_id,
        "ip": request.ip,
    }


def format_price(price: Decimal) -> str:
    """Render a price as a plain decimal string ("100", "12.50"), never in exponent form."""
    return format(price, "f")


def decode_response(raw: Any) -> ProcessorResponse:
    """Turn the SDK's HTTP response (anything with ``read()``) into a ProcessorResponse.

    Raises:
        ValueError: If the body is not a JSON object.
    """
    body = raw.read()
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    payload = json.loads(body)
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected processor response: {payload!r}")

    return ProcessorResponse(
        status=str(payload.get("status", "")),
        error_message=payload.get("errorMessage"),
        error_code=payload.get("errorCode"),
        error_group=payload.get("errorGroup"),
        raw=payload,
    )


def _buyer_payload(buyer: BuyerFragment) -> dict[str, str]:
    payload = {
        "id": buyer.id,
        "name": buyer.name,
        "surname": buyer.surname,
        "gsmNumber": buyer.gsm_number,
        "email": buyer.email,
        "identityNumber": buyer.identity_number,
        "registrationAddress": buyer.registration_address,
        "city": buyer.city,
        "country": buyer.country,
    }
    if buyer.ip is not None:
        payload["ip"] = buyer.ip
    return payload


def _address_payload(address: AddressFragment) -> dict[str, str]:
    return {
        "contactName": address.contact_name,
        "country": address.country,
        "address": address.address,
        "city": address.city,
    }


def _basket_item_payload(item: BasketItemFragment) -> dict[str, str]:
    return {
        "id": item.id,
        "name": item.name,
        "category1": item.category1,
        "itemType": item.item_type,
        "price": format_price(item.price),
    }
