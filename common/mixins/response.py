from rest_framework.response import Response
from rest_framework.views import APIView


class StandardResponseView(APIView):
    """
    Wraps successful responses in the standard envelope:
    {"status": "success", "message": ..., "data": ...}.
    Errors are shaped by common.exceptions.standard_exception_handler.
    """
    success_message = "Request successful"

    def get_success_message(self):
        return self.success_message

    def finalize_response(self, request, response, *args, **kwargs):
        if (
            isinstance(response, Response)
            and not getattr(response, 'exception', False)
            and response.status_code < 400
            and response.status_code != 204
        ):
            response.data = {
                "status": "success",
                "message": self.get_success_message(),
                "data": response.data,
            }
        return super().finalize_response(request, response, *args, **kwargs)
