"""
Exception hierarchy:

    CurliteError
    ├── ConfigurationError
    │   ├── InvalidMethod
    │   ├── InvalidJSONPayload
    │   └── MissingFormData
    └── InvalidURL
        ├── RelativeURLWithoutBase
        ├── InvalidIPv4Address
        ├── InvalidIPv6Address
        └── InvalidPort

Configuration errors abort the run before any network activity. URL errors
are reported to the user with a specific message.
"""

from __future__ import annotations


class CurliteError(Exception):
    pass


class ConfigurationError(CurliteError):
    pass


class InvalidMethod(ConfigurationError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid HTTP method: {token!r}.")
        self.token = token


class InvalidJSONPayload(ConfigurationError):
    def __init__(self, message: str, *, payload: str) -> None:
        super().__init__(f"Invalid JSON: {message}")
        self.payload = payload


class MissingFormData(ConfigurationError):
    pass


class InvalidURL(CurliteError):
    pass


class RelativeURLWithoutBase(InvalidURL):
    pass


class InvalidIPv4Address(InvalidURL):
    pass


class InvalidIPv6Address(InvalidURL):
    pass


class InvalidPort(InvalidURL):
    pass
