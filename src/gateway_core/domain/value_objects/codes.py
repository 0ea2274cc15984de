"""Fixed processor codes used when building requests."""

from enum import Enum


class Locale(str, Enum):
    TR = "tr"
    EN = "en"


class PaymentChannel(str, Enum):
    MOBILE = "MOBILE"
    WEB = "WEB"


class PaymentGroup(str, Enum):
    PRODUCT = "PRODUCT"
    LISTING = "LISTING"
    SUBSCRIPTION = "SUBSCRIPTION"


class BasketItemType(str, Enum):
    PHYSICAL = "PHYSICAL"
    VIRTUAL = "VIRTUAL"


class AddressType(str, Enum):
    """Which nested bill-fields record an address fragment is read from."""

    SHIPPING = "shipping_address"
    BILLING = "billing_address"
