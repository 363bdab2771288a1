"""
Tests for the ContextVar-backed acting user.
"""

import contextvars

from jobboard.adapters.request_auth_adapter import RequestAuthAdapter
from jobboard.domain.models import ActingUser


def _bind_and_read(user):
    RequestAuthAdapter.bind(user)
    return RequestAuthAdapter().get_current_user()


class TestRequestAuthAdapter:
    def test_unbound_context_has_no_user(self):
        ctx = contextvars.Context()

        assert ctx.run(RequestAuthAdapter().get_current_user) is None

    def test_bind_sets_current_user(self):
        user = ActingUser(id="U", name="Alice")

        assert contextvars.copy_context().run(_bind_and_read, user) == user

    def test_bind_none_clears_user(self):
        def scenario():
            RequestAuthAdapter.bind(ActingUser(id="U", name="Alice"))
            return _bind_and_read(None)

        assert contextvars.copy_context().run(scenario) is None

    def test_binding_does_not_leak_between_contexts(self):
        contextvars.copy_context().run(_bind_and_read, ActingUser(id="B", name="Bob"))

        assert contextvars.Context().run(RequestAuthAdapter().get_current_user) is None
