from rest_framework import status
from rest_framework.exceptions import APIException


class ConfirmationRequired(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Confirmation required.'
    default_code = 'confirmation_required'


class ConfirmationMixin:
    """
    Gate for destructive actions. The request confirms with ?confirm=true;
    otherwise the prompt is returned to the client and nothing is changed.
    """
    confirm_query_param = 'confirm'

    def is_confirmed(self):
        value = self.request.query_params.get(self.confirm_query_param, '')
        return value.lower() in ('1', 'true', 'yes')

    def confirmation_gate(self):
        def confirm(prompt):
            if self.is_confirmed():
                return True
            raise ConfirmationRequired({"detail": prompt})
        return confirm
