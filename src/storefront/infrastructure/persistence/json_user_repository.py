"""JSON-file-backed, read-only implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._store.load():
            if raw["id"] == user_id:
                return User(
                    id=raw["id"],
                    name=raw.get("name", ""),
                    role=Role(raw.get("role", Role.CUSTOMER.value)),
                )
        return None
