from common.mixins.confirmation import ConfirmationMixin
from common.mixins.response import StandardResponseView
from common.mixins.session_state import SessionStateMixin
from common.pagination import StandardResultsSetPagination
from giftcards.models import EntityNotFound, StateChangeNotAllowed
from rest_framework import mixins, status, viewsets
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


class StateEntityViewSet(
    SessionStateMixin,
    ConfirmationMixin,
    StandardResponseView,
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    List/create/retrieve/delete over one collection of the session state.
    Subclasses name the state methods to use; ?search= filters the list.
    """
    permission_classes = [AllowAny]
    pagination_class = StandardResultsSetPagination

    search_method = None
    get_method = None
    delete_method = None
    toggle_method = None

    def get_queryset(self):
        search = self.request.query_params.get('search', '')
        return getattr(self.state, self.search_method)(search)

    def get_object(self):
        try:
            return getattr(self.state, self.get_method)(self.kwargs['pk'])
        except EntityNotFound as e:
            raise NotFound({"detail": str(e)})

    def perform_create(self, serializer):
        serializer.save(state=self.state)
        self.save_state()

    def perform_destroy(self, instance):
        getattr(self.state, self.delete_method)(instance.id, self.confirmation_gate())
        self.save_state()

    def toggle(self, request, pk=None):
        instance = self.get_object()
        try:
            getattr(self.state, self.toggle_method)(instance.id)
        except StateChangeNotAllowed as e:
            raise ValidationError({"detail": str(e)})

        self.save_state()
        return Response(self.get_serializer(instance).data, status=status.HTTP_200_OK)
