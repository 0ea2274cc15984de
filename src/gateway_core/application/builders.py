"""Mapping from domain objects to processor request fragments.

Each fragment builder reads from a single domain source. Missing bill-field
keys raise KeyError: a Payable without them is a programming error in the
embedding application, not bad user input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gateway_core.application.dtos import (
    AddressFragment,
    BasketItemFragment,
    BuyerFragment,
    CancelRequest,
    ChargeRequest,
    PaymentCardFragment,
)
from gateway_core.domain.services import to_decimal, total_price
from gateway_core.domain.value_objects import (
    AddressType,
    Currency,
    PaymentChannel,
    PaymentGroup,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gateway_core.domain.entities import (
        CreditCard,
        Payable,
        Product,
        TransactionAttributes,
    )


def build_payment_card(payable: Payable, credit_card: CreditCard) -> PaymentCardFragment:
    return PaymentCardFragment(
        card_user_key=payable.bill_fields["processor_key"],
        card_token=credit_card.token,
    )


def build_buyer(payable: Payable, ip: str | None = None) -> BuyerFragment:
    """Build the buyer fragment.

    The registration address is always the billing address; the shipping
    address only appears in its own fragment.
    """
    bill_fields = payable.bill_fields
    billing_address = bill_fields[AddressType.BILLING.value]

    return BuyerFragment(
        id=str(payable.id),
        name=bill_fields["first_name"],
        surname=bill_fields["last_name"],
        email=bill_fields["email"],
        gsm_number=bill_fields["mobile_number"],
        identity_number=bill_fields["identity_number"],
        registration_address=billing_address["address"],
        city=billing_address["city"],
        country=billing_address["country"],
        ip=ip,
    )


def build_address(
    payable: Payable,
    address_type: AddressType | str = AddressType.SHIPPING,
) -> AddressFragment:
    """Build a shipping or billing address fragment.

    Raises:
        ValueError: If address_type is neither shipping_address nor billing_address.
    """
    bill_fields = payable.bill_fields
    record = bill_fields[AddressType(address_type).value]

    return AddressFragment(
        contact_name=f"{bill_fields['first_name']} {bill_fields['last_name']}",
        country=record["country"],
        address=record["address"],
        city=record["city"],
    )


def build_basket_items(products: Iterable[Product]) -> list[BasketItemFragment]:
    return [
        BasketItemFragment(
            id=str(product.key),
            name=product.name,
            category1=product.category,
            price=to_decimal(product.price),
            item_type=str(getattr(product.item_type, "value", product.item_type)),
        )
        for product in products
    ]


def build_charge_request(
    payable: Payable,
    credit_card: CreditCard,
    attributes: TransactionAttributes,
    locale: str,
    buyer_ip: str | None = None,
) -> ChargeRequest:
    """Assemble a full charge request from validated attributes.

    Both price and paid price are the products total; the attributes'
    paid_price is only an upper bound checked during validation.
    """
    products = list(attributes.products)
    total = total_price(products)

    return ChargeRequest(
        locale=locale,
        price=total,
        paid_price=total,
        currency=Currency.parse(attributes.currency).value,
        installment=int(to_decimal(attributes.installment)),
        payment_channel=PaymentChannel.WEB.value,
        payment_group=PaymentGroup.PRODUCT.value,
        payment_card=build_payment_card(payable, credit_card),
        buyer=build_buyer(payable, buyer_ip),
        shipping_address=build_address(payable, AddressType.SHIPPING),
        billing_address=build_address(payable, AddressType.BILLING),
        basket_items=tuple(build_basket_items(products)),
    )


def build_cancel_request(processor_key: str, ip: str, locale: str) -> CancelRequest:
    return CancelRequest(locale=locale, payment_id=processor_key, ip=ip)
