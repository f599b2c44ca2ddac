"""
Request-building helpers shared by the test modules.
"""

import base64


def b64(content: bytes) -> str:
    """Encode content the way clients send it in the `data` field."""
    return base64.b64encode(content).decode("ascii")


def basic_header(email: str, password: str) -> str:
    """Build an `Authorization: Basic` header value."""
    raw = f"{email}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")
