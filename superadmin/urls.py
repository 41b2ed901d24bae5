from django.urls import path
from django.urls import include
from rest_framework.routers import DefaultRouter
from superadmin.views import (
    AdminDashboardView,
    AnnouncementViewSet,
    GiftCardViewSet,
    PromotionViewSet,
    ResetBalanceView,
    SecuritySettingsView,
    ThreatLogView,
    UnlockView,
)


app_name = 'superadmin'
router = DefaultRouter()

router.register(r'giftcards', GiftCardViewSet, basename='admin-giftcard')
router.register(r'promotions', PromotionViewSet, basename='admin-promotion')
router.register(r'announcements', AnnouncementViewSet, basename='admin-announcement')

urlpatterns = [
    path('', include(router.urls)),

    path('dashboard/', AdminDashboardView.as_view(), name='admin-dashboard'),

    # anti-fraud
    path('security/settings/', SecuritySettingsView.as_view(), name='admin-security-settings'),
    path('security/threats/', ThreatLogView.as_view(), name='admin-threats'),
    path('security/unlock/', UnlockView.as_view(), name='admin-unlock'),
    path('security/reset-balance/', ResetBalanceView.as_view(), name='admin-reset-balance'),
]
