from common.mixins.response import StandardResponseView
from common.mixins.session_state import SessionStateMixin
from giftcards.models import EntityNotFound, ThreatMonitor
from giftcards.serializers import (
    AnnouncementSerializer,
    GiftCardSerializer,
    NotificationSerializer,
    PlaceOrderSerializer,
    RedeemCodeSerializer,
)
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status, generics
from ipware import get_client_ip
from services.services import lookup_location
import logging


logger = logging.getLogger("redemptions")


class CustomerDashboardView(SessionStateMixin, StandardResponseView):
    """
    API view with the customer's balance, the lock flag and the announcements to display.
    """
    permission_classes = [AllowAny]
    success_message = "Dashboard fetched successfully"

    def get(self, request):
        state = self.state
        return Response({
            "balance": f"{state.balance:.2f}",
            "is_locked": state.is_locked,
            "orders": len(state.orders()),
            "announcements": AnnouncementSerializer(state.visible_announcements(), many=True).data,
        })


class RedeemCodeView(SessionStateMixin, StandardResponseView):
    """
    API view to redeem a gift card or promotion code.
    Failures are reported in the body with success=false and count toward the threat threshold.
    """
    permission_classes = [AllowAny]

    def get_success_message(self):
        return self.result.message

    def get_locator(self):
        client_ip, is_routable = get_client_ip(self.request)

        def locate():
            if not client_ip or not is_routable:
                return None
            return lookup_location(client_ip)
        return locate

    def post(self, request, *args, **kwargs):
        serializer = RedeemCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        code = serializer.validated_data['code']

        state = self.state
        was_locked = state.is_locked
        self.result = state.redeem_code(code)

        monitor = ThreatMonitor(state)
        event = None
        if self.result.success:
            monitor.record_success()
            logger.info("Code %s redeemed for %s", code, self.result.amount)
        elif not was_locked:
            logger.info("Failed redemption of %s: %s", code, self.result.message)
            event = monitor.record_failure(locate=self.get_locator())

        self.save_state()

        return Response({
            "success": self.result.success,
            "message": self.result.message,
            "amount": f"{self.result.amount:.2f}" if self.result.amount is not None else None,
            "balance": f"{state.balance:.2f}",
            "is_locked": state.is_locked,
            "alert": bool(event and event.play_sound),
        }, status=status.HTTP_200_OK)


class OrdersView(SessionStateMixin, StandardResponseView, generics.ListCreateAPIView):
    """
    API view to list the gift cards ordered in this session, or place a new order.
    New orders are unpaid until an admin confirms the payment.
    """
    permission_classes = [AllowAny]
    success_message = "Orders fetched successfully"

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PlaceOrderSerializer
        return GiftCardSerializer

    def get_queryset(self):
        return self.state.orders()

    def perform_create(self, serializer):
        self.success_message = "Order placed successfully. Your gift card will be activated once payment is confirmed."
        serializer.save(state=self.state)
        self.save_state()


class AnnouncementListView(SessionStateMixin, StandardResponseView, generics.ListAPIView):
    """
    API view to list the active, unexpired announcements not dismissed in this session.
    """
    permission_classes = [AllowAny]
    serializer_class = AnnouncementSerializer
    success_message = "Announcements fetched successfully"

    def get_queryset(self):
        return self.state.visible_announcements()


class DismissAnnouncementView(SessionStateMixin, StandardResponseView):
    permission_classes = [AllowAny]
    success_message = "Announcement dismissed"

    def post(self, request, pk):
        try:
            self.state.dismiss_announcement(pk)
        except EntityNotFound as e:
            raise NotFound({"detail": str(e)})

        self.save_state()
        return Response(status=status.HTTP_200_OK)


class NotificationListView(SessionStateMixin, StandardResponseView):
    """
    API view returning pending notifications. Each notification is delivered once.
    """
    permission_classes = [AllowAny]
    success_message = "Notifications fetched successfully"

    def get(self, request):
        notifications = self.state.pop_notifications()
        self.save_state()
        return Response(NotificationSerializer(notifications, many=True).data)
