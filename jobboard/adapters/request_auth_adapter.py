"""
Concrete implementation of AuthPort for the HTTP layer.

The acting user is resolved per request (see routers/jobs.py) and bound to a
ContextVar, so a single shared JobStore sees the right user in each request.
"""

from contextvars import ContextVar

from jobboard.domain.models import ActingUser
from jobboard.ports.auth_port import AuthPort

_acting_user: ContextVar[ActingUser | None] = ContextVar("acting_user", default=None)


class RequestAuthAdapter(AuthPort):
    """Reads the acting user bound to the current request context."""

    def get_current_user(self) -> ActingUser | None:
        return _acting_user.get()

    @staticmethod
    def bind(user: ActingUser | None) -> None:
        _acting_user.set(user)
