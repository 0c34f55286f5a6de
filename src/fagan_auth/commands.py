"""Command dispatch for the desktop shell.

Decodes a command name plus JSON payload into the service's inputs and
serializes what comes back. Command names and payload shapes follow the
shell's invoke handlers.

Argument keys are snake_case (``admin_username``); the camelCase spelling
Tauri's ``invoke`` sends by default (``adminUsername``) is accepted too.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Union

from .common.validators import require_mapping, require_str
from .core.exceptions import NotFoundError
from .users.service import AuthService

Result = Union[Dict[str, Any], List[Dict[str, Any]]]


@dataclass(frozen=True)
class LoginRequest:
    username: str
    password: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LoginRequest":
        return cls(username=require_str(payload, "username"), password=require_str(payload, "password"))


@dataclass(frozen=True)
class CreateUserRequest:
    """New secretary credentials. Any role sent along is ignored."""

    username: str
    password: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreateUserRequest":
        return cls(username=require_str(payload, "username"), password=require_str(payload, "password"))


def _login(auth: AuthService, payload: Mapping[str, Any]) -> Result:
    req = LoginRequest.from_payload(require_mapping(payload, "credentials"))
    return auth.login(req.username, req.password).to_dict()


def _create_secretary(auth: AuthService, payload: Mapping[str, Any]) -> Result:
    req = CreateUserRequest.from_payload(require_mapping(payload, "request"))
    admin_username = require_str(payload, "admin_username")
    return auth.create_secretary(req.username, req.password, admin_username).to_dict()


def _get_users(auth: AuthService, payload: Mapping[str, Any]) -> Result:
    return [u.to_dict() for u in auth.list_users()]


def _change_password(auth: AuthService, payload: Mapping[str, Any]) -> Result:
    return auth.change_password(
        require_str(payload, "user_id"),
        require_str(payload, "old_password"),
        require_str(payload, "new_password"),
    ).to_dict()


def _deactivate_secretary(auth: AuthService, payload: Mapping[str, Any]) -> Result:
    return auth.deactivate_secretary(
        require_str(payload, "user_id"),
        require_str(payload, "admin_username"),
    ).to_dict()


COMMANDS: Dict[str, Callable[[AuthService, Mapping[str, Any]], Result]] = {
    "login": _login,
    "create_secretary": _create_secretary,
    "get_users": _get_users,
    "change_password": _change_password,
    "deactivate_secretary": _deactivate_secretary,
}


def dispatch(auth: AuthService, command: str, payload: Mapping[str, Any] | None = None) -> Result:
    handler = COMMANDS.get(command)
    if handler is None:
        raise NotFoundError(f"Unknown command: {command}")
    return handler(auth, payload or {})
