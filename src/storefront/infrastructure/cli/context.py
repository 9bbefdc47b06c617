"""Shared helpers for CLI commands: repositories and the acting user."""

from __future__ import annotations

import click

from storefront.domain.model.user import User
from storefront.infrastructure.bootstrap import Repositories, json_repositories


def repositories() -> Repositories:
    """Repositories stored on the click context, built on first use."""
    ctx = click.get_current_context()
    root = ctx.find_root()
    root.ensure_object(dict)
    repos = root.obj.get("repos")
    if repos is None:
        repos = root.obj["repos"] = json_repositories()
    return repos


def acting_user(user_id: str) -> User:
    user = repositories().users.get_by_id(user_id)
    if user is None:
        raise click.ClickException(f"User '{user_id}' not found")
    return user


user_option = click.option("--user", "user_id", required=True, help="ID of the acting user.")
