"""Matrix SDK request builders.

Pure constructors for Matrix client-server API requests. Nothing in this
package performs network I/O; callers hand the returned descriptors to a
transport of their choice.

Usage:
    from matrix_sdk import login_with_password

    req = login_with_password("https://matrix.org", "alice", "secret")
    # req.method, req.url, req.headers, req.body
"""

# Descriptor
from matrix_sdk.request import (
    MATRIX_API_PATH,
    Method,
    Request,
)

# Endpoints
from matrix_sdk.request import (
    spec_versions,
    server_discovery,
    login,
    login_with_password,
    logout,
    register_guest,
    register_user,
    room_discovery,
)

# Config
from matrix_sdk.config import load_config

__all__ = [
    # Descriptor
    "MATRIX_API_PATH",
    "Method",
    "Request",
    # Endpoints
    "spec_versions",
    "server_discovery",
    "login",
    "login_with_password",
    "logout",
    "register_guest",
    "register_user",
    "room_discovery",
    # Config
    "load_config",
]
