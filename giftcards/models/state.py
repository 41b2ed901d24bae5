import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from giftcards.models.announcement import Announcement
from giftcards.models.giftcard import (
    GIFTCARD_CODE_LENGTH,
    PROMOTION_CODE_LENGTH,
    GiftCard,
    Promotion,
    generate_code,
)
from giftcards.models.redemption import redeem
from giftcards.models.security import SecuritySettings


logger = logging.getLogger("transactions")


class EntityNotFound(LookupError):
    pass


class StateChangeNotAllowed(Exception):
    pass


@dataclass
class Notification:
    message: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=timezone.now)


def _find(items, entity_id, label):
    for item in items:
        if str(item.id) == str(entity_id):
            return item
    raise EntityNotFound(f"{label} not found.")


def _matches(term, *values):
    term = (term or '').lower()
    return any(term in value.lower() for value in values)


@dataclass
class AppState:
    """
    Everything one session knows about: the three entity collections, the
    threat log and the scalar customer/security state. Collections are kept
    newest first.
    """
    cards: list = field(default_factory=list)
    promotions: list = field(default_factory=list)
    announcements: list = field(default_factory=list)
    threats: list = field(default_factory=list)
    settings: SecuritySettings = field(default_factory=SecuritySettings)
    balance: Decimal = Decimal('0.00')
    is_locked: bool = False
    failed_attempts: int = 0
    session_orders: list = field(default_factory=list)
    dismissed_announcements: set = field(default_factory=set)
    notified_card_ids: set = field(default_factory=set)
    notifications: list = field(default_factory=list)

    def existing_codes(self):
        return [card.code for card in self.cards] + [promo.code for promo in self.promotions]

    # ---------------------
    # Gift cards
    # ---------------------

    def add_card(self, name, amount, usage_limit=1, has_expiration=False, expiry_date=None):
        card = GiftCard(
            name=name,
            amount=Decimal(amount),
            code=generate_code(GIFTCARD_CODE_LENGTH, taken=self.existing_codes()),
            usage_limit=usage_limit,
            has_expiration=has_expiration,
            expiry_date=expiry_date,
        )
        self.cards.insert(0, card)
        logger.info("Gift card %s created for %s", card.code, card.amount)
        return card

    def get_card(self, card_id):
        return _find(self.cards, card_id, "Gift card")

    def toggle_card_paid(self, card_id, now=None):
        card = self.get_card(card_id)
        if card.is_expired(now) or card.is_fully_redeemed():
            raise StateChangeNotAllowed("Payment status of an expired or fully redeemed gift card cannot be changed.")

        card.is_paid = not card.is_paid
        if card.is_paid and card.id in self.session_orders and card.id not in self.notified_card_ids:
            self.notifications.append(Notification(message=f"Your gift card for ${card.amount:.2f} is now active!"))
            self.notified_card_ids.add(card.id)
        return card

    def delete_card(self, card_id, confirm):
        card = self.get_card(card_id)
        if not confirm(card.deletion_prompt()):
            return False
        self.cards.remove(card)
        logger.info("Gift card %s deleted", card.code)
        return True

    def search_cards(self, term=''):
        return [card for card in self.cards if _matches(term, card.name, card.code)]

    # ---------------------
    # Promotions
    # ---------------------

    def add_promotion(self, name, amount, has_expiration=False, expiry_date=None):
        promotion = Promotion(
            name=name,
            amount=Decimal(amount),
            code=generate_code(PROMOTION_CODE_LENGTH, taken=self.existing_codes()),
            has_expiration=has_expiration,
            expiry_date=expiry_date,
        )
        self.promotions.insert(0, promotion)
        logger.info("Promotion %s created for %s", promotion.code, promotion.amount)
        return promotion

    def get_promotion(self, promotion_id):
        return _find(self.promotions, promotion_id, "Promotion")

    def toggle_promotion_active(self, promotion_id, now=None):
        promotion = self.get_promotion(promotion_id)
        if promotion.is_expired(now):
            raise StateChangeNotAllowed("An expired promotion cannot be toggled.")
        promotion.is_active = not promotion.is_active
        return promotion

    def delete_promotion(self, promotion_id, confirm):
        promotion = self.get_promotion(promotion_id)
        if not confirm(promotion.deletion_prompt()):
            return False
        self.promotions.remove(promotion)
        return True

    def search_promotions(self, term=''):
        return [promo for promo in self.promotions if _matches(term, promo.name, promo.code)]

    # ---------------------
    # Announcements
    # ---------------------

    def add_announcement(self, title, message, category='info', has_expiration=False, expiry_date=None):
        announcement = Announcement(
            title=title,
            message=message,
            category=category,
            has_expiration=has_expiration,
            expiry_date=expiry_date,
        )
        self.announcements.insert(0, announcement)
        return announcement

    def get_announcement(self, announcement_id):
        return _find(self.announcements, announcement_id, "Announcement")

    def toggle_announcement_active(self, announcement_id, now=None):
        announcement = self.get_announcement(announcement_id)
        if announcement.is_expired(now):
            raise StateChangeNotAllowed("An expired announcement cannot be toggled.")
        announcement.is_active = not announcement.is_active
        return announcement

    def delete_announcement(self, announcement_id, confirm):
        announcement = self.get_announcement(announcement_id)
        if not confirm(announcement.deletion_prompt()):
            return False
        self.announcements.remove(announcement)
        return True

    def search_announcements(self, term=''):
        return [anno for anno in self.announcements if _matches(term, anno.title, anno.message)]

    def visible_announcements(self, now=None):
        return [
            anno for anno in self.announcements
            if anno.is_visible(now) and anno.id not in self.dismissed_announcements
        ]

    def dismiss_announcement(self, announcement_id):
        announcement = self.get_announcement(announcement_id)
        self.dismissed_announcements.add(announcement.id)
        return announcement

    # ---------------------
    # Customer
    # ---------------------

    def place_order(self, first_name, last_name, email, amount, delivery_date):
        # orders start unpaid until the payment is confirmed by an admin
        card = GiftCard(
            name=f"For {first_name} {last_name}",
            amount=Decimal(amount),
            code=generate_code(GIFTCARD_CODE_LENGTH, taken=self.existing_codes()),
            usage_limit=1,
            has_expiration=True,
            expiry_date=delivery_date,
        )
        self.cards.insert(0, card)
        self.session_orders.insert(0, card.id)
        logger.info("Order placed by %s: card %s for %s", email, card.code, card.amount)
        return card

    def orders(self):
        cards = {card.id: card for card in self.cards}
        return [cards[card_id] for card_id in self.session_orders if card_id in cards]

    def pop_notifications(self):
        notifications, self.notifications = self.notifications, []
        return notifications

    def redeem_code(self, code, now=None):
        result = redeem(code, self.cards, self.promotions, is_locked=self.is_locked, now=now)
        if result.success:
            self.balance += result.amount
        return result

    # ---------------------
    # Security
    # ---------------------

    def update_security_settings(self, **changes):
        self.settings = self.settings.merge(**changes)
        return self.settings

    def clear_threats(self, confirm):
        if not confirm("Are you sure you want to clear the entire threat log? This cannot be undone."):
            return False
        self.threats = []
        return True

    def reset_balance(self, confirm):
        if not confirm("WARNING: This will reset the customer's total balance to $0.00. Are you sure?"):
            return False
        self.balance = Decimal('0.00')
        return True

    def unlock(self):
        self.is_locked = False
