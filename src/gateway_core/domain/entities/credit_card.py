from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CreditCard:
    """A card stored on the processor for a payable.

    Only the processor-issued token is needed to charge it; the card
    number never reaches this package.
    """

    token: str
    alias: str | None = None

    def __repr__(self) -> str:
        return f"CreditCard(token='{mask(self.token)}', alias={self.alias!r})"


def mask(secret: str, visible: int = 4) -> str:
    """Hide all but the last ``visible`` characters of a secret."""
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]
