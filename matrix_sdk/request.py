"""Request descriptors for the Matrix client-server API.

Every function here returns a `Request` describing one HTTP call. Nothing is
sent: a transport reads the descriptor, serializes `body` to JSON and sends
`method` with `headers` to `base_url + path`.

All functions use ONLY stdlib.
"""

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Any

MATRIX_API_PATH = "/_matrix/client/r0"


@unique
class Method(str, Enum):
    """HTTP verbs used by the builders."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Request:
    """One pending HTTP request against a homeserver.

    `base_url` is taken as given (e.g. https://matrix.org) and never validated.
    `path` always starts with / and may carry a literal query string.
    """

    method: Method
    base_url: str
    path: str
    headers: tuple[tuple[str, str], ...] = ()
    # body is left out of the hash; it is a dict
    body: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def url(self) -> str:
        """base_url and path joined as given."""
        return f"{self.base_url}{self.path}"

    def to_dict(self) -> dict:
        """Return a JSON-ready view of the descriptor."""
        return {
            "method": self.method.value,
            "base_url": self.base_url,
            "path": self.path,
            "headers": [[name, value] for name, value in self.headers],
            "body": self.body,
        }


def spec_versions(base_url: str) -> Request:
    """Get the versions of the Matrix specification supported by the server.

    Example:
        >>> spec_versions("https://matrix.org").path
        '/_matrix/client/versions'
    """
    return Request(Method.GET, base_url, "/_matrix/client/versions")


def server_discovery(base_url: str) -> Request:
    """Get the well-known discovery document of the domain."""
    return Request(Method.GET, base_url, "/.well-known/matrix/client")


def login(base_url: str) -> Request:
    """Get the login flows supported by the homeserver."""
    return Request(Method.GET, base_url, f"{MATRIX_API_PATH}/login")


def login_with_password(base_url: str, username: str, password: str) -> Request:
    """Log in with a user name and password.

    Args:
        base_url: Homeserver URL
        username: Local part or full Matrix ID of the user
        password: The user's password

    Returns:
        POST descriptor whose body is an m.login.password payload
    """
    return Request(
        Method.POST,
        base_url,
        f"{MATRIX_API_PATH}/login",
        body={
            "type": "m.login.password",
            "user": username,
            "password": password,
        },
    )


def logout(base_url: str, token: str) -> Request:
    """Invalidate the access token `token`.

    The token travels in the Authorization header, not in the query string.
    """
    return Request(
        Method.POST,
        base_url,
        f"{MATRIX_API_PATH}/logout",
        headers=(("Authorization", f"Bearer {token}"),),
    )


def register_guest(base_url: str) -> Request:
    """Register a guest account."""
    return Request(Method.POST, base_url, f"{MATRIX_API_PATH}/register?kind=guest")


def register_user(base_url: str, username: str, password: str) -> Request:
    """Register a full user account.

    Args:
        base_url: Homeserver URL
        username: Desired local part of the user ID
        password: Password for the new account

    Returns:
        POST descriptor authenticated with the m.login.dummy flow
    """
    return Request(
        Method.POST,
        base_url,
        f"{MATRIX_API_PATH}/register",
        body={
            "auth": {"type": "m.login.dummy"},
            "username": username,
            "password": password,
        },
    )


def room_discovery(base_url: str) -> Request:
    """List the public rooms of the homeserver's room directory."""
    return Request(Method.GET, base_url, f"{MATRIX_API_PATH}/publicRooms")
