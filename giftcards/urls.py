from django.urls import path

from giftcards.views import (
    AnnouncementListView,
    CustomerDashboardView,
    DismissAnnouncementView,
    NotificationListView,
    OrdersView,
    RedeemCodeView,
)


app_name = 'giftcards'

urlpatterns = [
    path('', CustomerDashboardView.as_view(), name='customer-dashboard'),
    path('redeem/', RedeemCodeView.as_view(), name='redeem-code'),
    path('orders/', OrdersView.as_view(), name='orders'),
    path('announcements/', AnnouncementListView.as_view(), name='announcements'),
    path('announcements/<uuid:pk>/dismiss/', DismissAnnouncementView.as_view(), name='dismiss-announcement'),
    path('notifications/', NotificationListView.as_view(), name='notifications'),
]
