from .__version__ import __description__, __title__, __version__
from ._client import build_client, build_request, execute
from ._exceptions import (
    ConfigurationError,
    CurliteError,
    InvalidIPv4Address,
    InvalidIPv6Address,
    InvalidJSONPayload,
    InvalidMethod,
    InvalidPort,
    InvalidURL,
    MissingFormData,
    RelativeURLWithoutBase,
)
from ._forms import parse_params
from ._models import (
    HTTPFailure,
    Method,
    RequestSpec,
    ResponseOutcome,
    Success,
    TransportErrorKind,
    TransportFailure,
)
from ._urlparse import urlparse, validate_url
from .cli import main

_EXCLUDED_FROM_ALL = {"cli", "main"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
