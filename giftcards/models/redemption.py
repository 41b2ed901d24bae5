from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.utils import timezone


LOCKED_MESSAGE = 'Application is temporarily locked.'
CARD_NOT_ACTIVATED_MESSAGE = 'This gift card has not been activated yet.'
CARD_LIMIT_REACHED_MESSAGE = 'This gift card has reached its usage limit.'
CARD_EXPIRED_MESSAGE = 'This gift card has expired.'
PROMOTION_INACTIVE_MESSAGE = 'This promotion is not currently active.'
PROMOTION_EXPIRED_MESSAGE = 'This promotion has expired.'
NOT_FOUND_MESSAGE = 'Invalid code. Not found.'


@dataclass(frozen=True)
class RedemptionResult:
    success: bool
    message: str
    amount: Optional[Decimal] = None

    @classmethod
    def failed(cls, message):
        return cls(success=False, message=message)


def _find_by_code(items, code):
    for item in items:
        if item.code.lower() == code:
            return item
    return None


def redeem(code, cards, promotions, is_locked=False, now=None):
    """
    Resolves `code` against gift cards first, then promotions.

    The comparison is case-insensitive on the trimmed code. A matching card
    has its `times_used` incremented on success; promotions carry no counter.
    Crediting the balance is left to the caller. Failures are returned as
    results and never mutate anything.
    """
    if is_locked:
        return RedemptionResult.failed(LOCKED_MESSAGE)

    now = now or timezone.now()
    code = (code or '').strip().lower()

    card = _find_by_code(cards, code)
    if card is not None:
        if not card.is_paid:
            return RedemptionResult.failed(CARD_NOT_ACTIVATED_MESSAGE)
        if card.is_fully_redeemed():
            return RedemptionResult.failed(CARD_LIMIT_REACHED_MESSAGE)
        if card.is_expired(now):
            return RedemptionResult.failed(CARD_EXPIRED_MESSAGE)

        card.times_used += 1
        return RedemptionResult(
            success=True,
            message=f"${card.amount:.2f} has been added to your balance.",
            amount=card.amount,
        )

    promotion = _find_by_code(promotions, code)
    if promotion is not None:
        if not promotion.is_active:
            return RedemptionResult.failed(PROMOTION_INACTIVE_MESSAGE)
        if promotion.is_expired(now):
            return RedemptionResult.failed(PROMOTION_EXPIRED_MESSAGE)

        return RedemptionResult(
            success=True,
            message=f"Promotion redeemed! ${promotion.amount:.2f} added to your balance.",
            amount=promotion.amount,
        )

    return RedemptionResult.failed(NOT_FOUND_MESSAGE)
