from superadmin.serializers import GiftCardSerializer, PromotionSerializer
from superadmin.views.base import StateEntityViewSet
from rest_framework.decorators import action
import logging


logger = logging.getLogger('transactions')

class GiftCardViewSet(StateEntityViewSet):
    serializer_class = GiftCardSerializer
    success_message = "Gift cards fetched successfully"

    search_method = 'search_cards'
    get_method = 'get_card'
    delete_method = 'delete_card'
    toggle_method = 'toggle_card_paid'

    @action(detail=True, methods=['post'], url_path='toggle-paid')
    def toggle_paid(self, request, pk=None):
        self.success_message = "Payment status updated"
        response = self.toggle(request, pk)
        logger.info("Gift card %s marked paid=%s", response.data['code'], response.data['is_paid'])
        return response

class PromotionViewSet(StateEntityViewSet):
    serializer_class = PromotionSerializer
    success_message = "Promotions fetched successfully"

    search_method = 'search_promotions'
    get_method = 'get_promotion'
    delete_method = 'delete_promotion'
    toggle_method = 'toggle_promotion_active'

    @action(detail=True, methods=['post'], url_path='toggle-active')
    def toggle_active(self, request, pk=None):
        self.success_message = "Promotion status updated"
        return self.toggle(request, pk)
