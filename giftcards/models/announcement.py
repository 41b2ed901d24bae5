import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from django.utils import timezone

from giftcards.models.giftcard import STATUS_ACTIVE, STATUS_EXPIRED, STATUS_INACTIVE, is_expired, to_instant


CATEGORY_CHOICES = [
    ('info', 'Info'),
    ('warning', 'Warning'),
    ('promo', 'Promo'),
]


def time_left(expiry_date, now=None):
    """Remaining time split into d/h/m/s; empty once the instant has passed."""
    now = now or timezone.now()
    difference = (to_instant(expiry_date) - now).total_seconds()
    if difference <= 0:
        return {}
    seconds = int(difference)
    return {
        'd': seconds // 86400,
        'h': (seconds // 3600) % 24,
        'm': (seconds // 60) % 60,
        's': seconds % 60,
    }


def format_countdown(expiry_date, now=None):
    parts = [f"{value}{unit}" for unit, value in time_left(expiry_date, now).items() if value > 0]
    if not parts:
        return "Expired"
    return "Expires in: " + " ".join(parts)


@dataclass
class Announcement:
    title: str
    message: str
    category: str = 'info'
    is_active: bool = False
    has_expiration: bool = False
    expiry_date: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=timezone.now)

    def __post_init__(self):
        self.expiry_date = to_instant(self.expiry_date) if self.has_expiration else None

    def __str__(self):
        return f"{self.title} ({self.category})"

    def is_expired(self, now=None):
        return is_expired(self.has_expiration, self.expiry_date, now)

    def status(self, now=None):
        if self.is_expired(now):
            return STATUS_EXPIRED
        if self.is_active:
            return STATUS_ACTIVE
        return STATUS_INACTIVE

    def is_visible(self, now=None):
        return self.is_active and not self.is_expired(now)

    def countdown(self, now=None):
        if not self.has_expiration or not self.expiry_date:
            return None
        return format_countdown(self.expiry_date, now)

    def deletion_prompt(self):
        return "Are you sure you want to delete this announcement? This action cannot be undone."
