"""Caller identity for HTTP requests.

Token issuance lives in the account service; by the time a request gets
here the gateway has put the authenticated user's ID in ``X-User-Id``.
"""

from __future__ import annotations

from flask import request

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository

USER_HEADER = "X-User-Id"


def current_caller(users: UserRepository) -> User:
    user_id = request.headers.get(USER_HEADER, "").strip()
    if not user_id:
        raise AuthenticationError("Not authorized, no user identity provided")
    user = users.get_by_id(user_id)
    if user is None:
        raise AuthenticationError("Not authorized, user not found")
    return user
