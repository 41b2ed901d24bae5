from superadmin.serializers import AnnouncementSerializer
from superadmin.views.base import StateEntityViewSet
from rest_framework.decorators import action


class AnnouncementViewSet(StateEntityViewSet):
    serializer_class = AnnouncementSerializer
    success_message = "Announcements fetched successfully"

    search_method = 'search_announcements'
    get_method = 'get_announcement'
    delete_method = 'delete_announcement'
    toggle_method = 'toggle_announcement_active'

    @action(detail=True, methods=['post'], url_path='toggle-active')
    def toggle_active(self, request, pk=None):
        self.success_message = "Announcement status updated"
        return self.toggle(request, pk)
