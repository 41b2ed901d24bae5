# pagination.py
from rest_framework.pagination import PageNumberPagination


# Standard Page Numbers (e.g., ?page=3)
class StandardResultsSetPagination(PageNumberPagination):
    page_size = 10
    page_size_query_param = 'page_size' # Allows client to specify page size like ?page_size=20
    max_page_size = 100
