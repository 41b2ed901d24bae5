from common.mixins.response import StandardResponseView
from common.mixins.session_state import SessionStateMixin
from giftcards.models.giftcard import STATUS_ACTIVE
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


class AdminDashboardView(SessionStateMixin, StandardResponseView):
    permission_classes = [AllowAny]
    success_message = "Dashboard fetched successfully"

    def get(self, request):
        state = self.state
        return Response({
            "total_giftcards": len(state.cards),
            "total_giftcards_paid": len([card for card in state.cards if card.is_paid]),
            "total_giftcards_redeemed": len([card for card in state.cards if card.is_fully_redeemed()]),
            "total_promotions": len(state.promotions),
            "total_promotions_active": len([promo for promo in state.promotions if promo.status() == STATUS_ACTIVE]),
            "total_announcements": len(state.announcements),
            "total_threats": len(state.threats),
            "customer_balance": f"{state.balance:.2f}",
            "system_status": "LOCKED" if state.is_locked else "OPERATIONAL",
            "failed_attempts": state.failed_attempts,
        })
