from common.mixins.confirmation import ConfirmationMixin
from common.mixins.response import StandardResponseView
from common.mixins.session_state import SessionStateMixin
from superadmin.serializers import SecuritySettingsSerializer, ThreatSerializer
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
import logging


logger = logging.getLogger('security')

class SecuritySettingsView(SessionStateMixin, StandardResponseView):
    """
    Read or partially update the anti-fraud configuration.
    """
    permission_classes = [AllowAny]
    success_message = "Security settings fetched successfully"

    def get(self, request):
        return Response(SecuritySettingsSerializer(self.state.settings).data)

    def patch(self, request):
        self.success_message = "Security settings updated"
        serializer = SecuritySettingsSerializer(self.state.settings, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save(state=self.state)
        self.save_state()

        logger.info("Security settings updated: %s", serializer.validated_data)
        return Response(serializer.data)


class ThreatLogView(SessionStateMixin, ConfirmationMixin, StandardResponseView):
    """
    List the threat log (newest first) or clear it entirely.
    """
    permission_classes = [AllowAny]
    success_message = "Threat log fetched successfully"

    def get(self, request):
        return Response(ThreatSerializer(self.state.threats, many=True).data)

    def delete(self, request):
        self.state.clear_threats(self.confirmation_gate())
        self.save_state()
        logger.info("Threat log cleared")
        return Response(status=status.HTTP_204_NO_CONTENT)


class UnlockView(SessionStateMixin, StandardResponseView):
    permission_classes = [AllowAny]
    success_message = "Application unlocked"

    def post(self, request):
        self.state.unlock()
        self.save_state()
        logger.info("Application unlocked by admin")
        return Response({"is_locked": self.state.is_locked})


class ResetBalanceView(SessionStateMixin, ConfirmationMixin, StandardResponseView):
    permission_classes = [AllowAny]
    success_message = "Customer balance reset"

    def post(self, request):
        self.state.reset_balance(self.confirmation_gate())
        self.save_state()
        return Response({"balance": f"{self.state.balance:.2f}"})
