import uuid

from django.conf import settings
from django.core.cache import cache

from giftcards.models import AppState


STATE_SESSION_KEY = 'giftdesk_state_id'


class SessionStateMixin:
    """
    A DRF mixin binding the in-memory AppState of the current session to the view.
    The state lives in the cache under an id stored in the session, so it is lost
    when the session expires or the process restarts.
    """

    state_key_prefix = 'giftdesk:state'

    def get_state_key(self):
        session = self.request.session
        state_id = session.get(STATE_SESSION_KEY)
        if not state_id:
            state_id = uuid.uuid4().hex
            session[STATE_SESSION_KEY] = state_id
        return f"{self.state_key_prefix}:{state_id}"

    def load_state(self):
        state = cache.get(self.get_state_key())
        return state if state is not None else AppState()

    def save_state(self):
        cache.set(self.get_state_key(), self.state, timeout=settings.SESSION_COOKIE_AGE)

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.state = self.load_state()
