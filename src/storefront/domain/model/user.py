"""User identity, supplied by the account service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    CUSTOMER = "customer"
    VENDOR = "vendor"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    role: Role = Role.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def is_vendor(self) -> bool:
        return self.role is Role.VENDOR
