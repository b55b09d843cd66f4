"""
Credential store interface.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple


class CredentialStore(ABC):
    """
    Two persisted string slots: `token` and `user` (the profile as JSON).

    They are read once when a session starts and written on login/logout.
    """

    @abstractmethod
    def load(self) -> Tuple[Optional[str], Optional[str]]:
        """Return `(token, user_json)`; either may be None."""
        pass

    @abstractmethod
    def save(self, token: str, user_json: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
