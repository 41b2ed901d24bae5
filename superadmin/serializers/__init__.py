from .announcement import AnnouncementSerializer
from .giftcard import GiftCardSerializer, PromotionSerializer
from .security import SecuritySettingsSerializer, ThreatSerializer
