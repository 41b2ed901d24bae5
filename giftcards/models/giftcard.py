import secrets
import string
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

CODE_CHARS = string.ascii_uppercase + string.digits
GIFTCARD_CODE_LENGTH = 10
PROMOTION_CODE_LENGTH = 8

STATUS_EXPIRED = 'Expired'
STATUS_FULLY_REDEEMED = 'Fully Redeemed'
STATUS_ACTIVE = 'Active'
STATUS_UNPAID = 'Unpaid'
STATUS_INACTIVE = 'Inactive'


def generate_code(length=GIFTCARD_CODE_LENGTH, taken=()):
    """Random code over A-Z0-9, regenerated until it is not in `taken`."""
    taken = {code.upper() for code in taken}
    while True:
        code = ''.join(secrets.choice(CODE_CHARS) for _ in range(length))
        if code not in taken:
            return code


def to_instant(value) -> Optional[datetime]:
    """Accepts a datetime or an ISO date/datetime string; naive values are taken in the current timezone."""
    if value is None or value == '':
        return None
    if isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            if day is None:
                raise ValueError(f"Invalid expiry date: {value!r}")
            parsed = datetime(day.year, day.month, day.day)
        value = parsed
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def is_expired(has_expiration, expiry_date, now=None) -> bool:
    if not has_expiration or not expiry_date:
        return False
    now = now or timezone.now()
    return to_instant(expiry_date) < now


@dataclass
class GiftCard:
    name: str
    amount: Decimal
    code: str
    usage_limit: int = 1
    times_used: int = 0
    is_paid: bool = False
    has_expiration: bool = False
    expiry_date: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=timezone.now)

    def __post_init__(self):
        self.expiry_date = to_instant(self.expiry_date) if self.has_expiration else None

    def __str__(self):
        return f"Giftcard {self.code} - Amount: {self.amount} - Used: {self.times_used}/{self.usage_limit}"

    def is_expired(self, now=None):
        return is_expired(self.has_expiration, self.expiry_date, now)

    def is_fully_redeemed(self):
        return self.times_used >= self.usage_limit

    def status(self, now=None):
        if self.is_expired(now):
            return STATUS_EXPIRED
        if self.is_fully_redeemed():
            return STATUS_FULLY_REDEEMED
        if self.is_paid:
            return STATUS_ACTIVE
        return STATUS_UNPAID

    def deletion_prompt(self):
        if 0 < self.times_used < self.usage_limit:
            return (
                f"This gift card has been used {self.times_used} time(s) but is not fully redeemed. "
                "Deleting it will remove it from your records. Are you sure?"
            )
        if self.is_paid and self.times_used == 0:
            return (
                "This gift card is marked as PAID and is unused. "
                "Are you sure you want to delete it? This action cannot be undone."
            )
        if self.is_fully_redeemed():
            return (
                "This gift card has been FULLY REDEEMED. "
                "Deleting it will remove it from your records. Are you sure?"
            )
        return "Are you sure you want to delete this gift card?"


@dataclass
class Promotion:
    """
    A promotional code. There is no usage counter: an active, unexpired
    promotion can be redeemed any number of times.
    """
    name: str
    amount: Decimal
    code: str
    is_active: bool = False
    has_expiration: bool = False
    expiry_date: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=timezone.now)

    def __post_init__(self):
        self.expiry_date = to_instant(self.expiry_date) if self.has_expiration else None

    def __str__(self):
        return f"Promotion {self.code} - Amount: {self.amount} - Active: {self.is_active}"

    def is_expired(self, now=None):
        return is_expired(self.has_expiration, self.expiry_date, now)

    def status(self, now=None):
        if self.is_expired(now):
            return STATUS_EXPIRED
        if self.is_active:
            return STATUS_ACTIVE
        return STATUS_INACTIVE

    def deletion_prompt(self):
        return "Are you sure you want to delete this promotion? This action cannot be undone."
