from rest_framework.views import exception_handler


def _first_message(data):
    if isinstance(data, dict):
        if 'detail' in data:
            return _first_message(data['detail'])
        for field, errors in data.items():
            return f"{field}: {_first_message(errors)}"
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def standard_exception_handler(exc, context):
    """
    DRF exception handler rendering errors as
    {"status": "error", "message": ..., "errors": ...}.
    """
    response = exception_handler(exc, context)
    if response is None:
        return response

    response.data = {
        "status": "error",
        "message": _first_message(response.data),
        "errors": response.data,
    }
    return response
