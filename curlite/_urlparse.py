from __future__ import annotations

import ipaddress
import re
import typing

import idna

from ._exceptions import (
    InvalidIPv4Address,
    InvalidIPv6Address,
    InvalidPort,
    InvalidURL,
    RelativeURLWithoutBase,
)

MAX_URL_LENGTH = 65536
MAX_PORT = 65535

ALLOWED_SCHEMES = ("http", "https")
SPECIAL_SCHEMES = {"ftp": 21, "http": 80, "https": 443, "ws": 80, "wss": 443}

INVALID_BASE_PROTOCOL = "The URL does not have a valid base protocol."
INVALID_IPV4_ADDRESS = "The URL contains an invalid IPv4 address."
INVALID_IPV6_ADDRESS = "The URL contains an invalid IPv6 address."
INVALID_PORT_NUMBER = "The URL contains an invalid port number."

URL_REGEX = re.compile(
    r"(?:(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?"
)

AUTHORITY_REGEX = re.compile(
    r"(?:(?P<userinfo>.*)@)?(?P<host>(\[.*\]|[^:@]*)):?(?P<port>.*)?"
)

IPv4_STYLE_HOSTNAME = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+$")
IPv6_STYLE_HOSTNAME = re.compile(r"^\[.*\]$")


class ParseResult(typing.NamedTuple):
    scheme: str
    userinfo: str
    host: str
    port: int | None
    path: str
    query: str | None
    fragment: str | None

    @property
    def netloc(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return host + (f":{self.port}" if self.port is not None else "")

    def __str__(self) -> str:
        authority = "".join([
            f"{self.userinfo}@" if self.userinfo else "",
            self.netloc,
        ])
        return "".join([
            f"{self.scheme}:",
            f"//{authority}" if authority else "",
            self.path,
            f"?{self.query}" if self.query is not None else "",
            f"#{self.fragment}" if self.fragment is not None else "",
        ])


def _validate_non_printable(value: str) -> None:
    for position, char in enumerate(value):
        if char.isascii() and not char.isprintable():
            raise InvalidURL(
                f"Invalid non-printable ASCII character in URL, {char!r} at position {position}."
            )


def urlparse(url: str) -> ParseResult:
    """Parse an absolute URL, raising an `InvalidURL` subclass on failure."""
    if len(url) > MAX_URL_LENGTH:
        raise InvalidURL("URL too long")

    url = url.strip()
    _validate_non_printable(url)

    url_dict = URL_REGEX.match(url).groupdict()  # type: ignore[union-attr]

    scheme = (url_dict["scheme"] or "").lower()
    if not scheme:
        raise RelativeURLWithoutBase("relative URL without a base")

    authority = url_dict["authority"]
    path = url_dict["path"] or ""

    if scheme in SPECIAL_SCHEMES and not authority:
        # "http:example.org" and "https:///example.org" both name example.org.
        rest = url[len(scheme) + 1 :].lstrip("/\\")
        if not rest or rest[0] in "?#":
            raise InvalidURL("empty host")
        return urlparse(f"{scheme}://{rest}")

    if authority is None:
        # Opaque URLs such as "mailto:someone@example.org".
        return ParseResult(scheme, "", "", None, path, url_dict["query"], url_dict["fragment"])

    authority_dict = AUTHORITY_REGEX.match(authority).groupdict()  # type: ignore[union-attr]

    host = encode_host(authority_dict["host"] or "")
    if not host and scheme in SPECIAL_SCHEMES:
        raise InvalidURL("empty host")

    return ParseResult(
        scheme,
        authority_dict["userinfo"] or "",
        host,
        normalize_port(authority_dict["port"], scheme),
        path or "/",
        url_dict["query"],
        url_dict["fragment"],
    )


def encode_host(host: str) -> str:
    if not host:
        return ""

    if host.startswith("[") and not IPv6_STYLE_HOSTNAME.match(host):
        raise InvalidIPv6Address(f"Invalid IPv6 address: {host!r}")

    if IPv4_STYLE_HOSTNAME.match(host):
        try:
            ipaddress.IPv4Address(host)
        except ipaddress.AddressValueError:
            raise InvalidIPv4Address(f"Invalid IPv4 address: {host!r}")
        return host

    if IPv6_STYLE_HOSTNAME.match(host):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ipaddress.AddressValueError:
            raise InvalidIPv6Address(f"Invalid IPv6 address: {host!r}")
        return host[1:-1]

    if host.isascii():
        return host.lower()

    try:
        return idna.encode(host.lower()).decode("ascii")
    except idna.IDNAError:
        raise InvalidURL(f"Invalid IDNA hostname: {host!r}")


def normalize_port(port: str | None, scheme: str) -> int | None:
    if not port:
        return None
    if not port.isdigit():
        raise InvalidPort(f"Invalid port: {port!r}")
    port_as_int = int(port)
    if port_as_int > MAX_PORT:
        raise InvalidPort(f"Invalid port: {port!r}")
    default = SPECIAL_SCHEMES.get(scheme)
    return None if port_as_int == default else port_as_int


def validate_url(url: str) -> str | None:
    """Return the user-facing problem with `url`, or `None` if it can be requested."""
    try:
        parsed = urlparse(url)
    except RelativeURLWithoutBase:
        return INVALID_BASE_PROTOCOL
    except InvalidIPv4Address:
        return INVALID_IPV4_ADDRESS
    except InvalidIPv6Address:
        return INVALID_IPV6_ADDRESS
    except InvalidPort:
        return INVALID_PORT_NUMBER
    except InvalidURL as exc:
        return f"Error: {exc}"

    if parsed.scheme not in ALLOWED_SCHEMES:
        return INVALID_BASE_PROTOCOL
    return None
