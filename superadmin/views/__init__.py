from .announcement import AnnouncementViewSet
from .dashboard import AdminDashboardView
from .giftcard import GiftCardViewSet, PromotionViewSet
from .security import ResetBalanceView, SecuritySettingsView, ThreatLogView, UnlockView
