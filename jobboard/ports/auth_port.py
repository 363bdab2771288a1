from abc import ABC, abstractmethod

from jobboard.domain.models import ActingUser


class AuthPort(ABC):
    @abstractmethod
    def get_current_user(self) -> ActingUser | None:
        """The acting user, or None when nobody is authenticated."""
        ...
