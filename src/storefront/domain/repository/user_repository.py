"""Abstract read-only repository for user identities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""
