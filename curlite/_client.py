from __future__ import annotations

import json
import logging
import time
import typing

import httpx

from .__version__ import __version__
from ._exceptions import InvalidJSONPayload, MissingFormData
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

logger = logging.getLogger("curlite.client")

DEFAULT_TIMEOUT = httpx.Timeout(30.0)
MAX_REDIRECTS = 10
USER_AGENT = f"curlite/{__version__}"


def build_client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
    return httpx.Client(
        timeout=DEFAULT_TIMEOUT,
        follow_redirects=True,
        max_redirects=MAX_REDIRECTS,
        headers={"User-Agent": USER_AGENT},
        trust_env=False,
        transport=transport,
    )


def build_request(spec: RequestSpec) -> dict[str, typing.Any]:
    """Turn a `RequestSpec` into keyword arguments for `httpx.Client.request`.

    Raises a `ConfigurationError` for a malformed ``--json`` payload or a
    POST without form data.
    """
    if spec.json_body is not None:
        try:
            payload = json.loads(spec.json_body)
        except json.JSONDecodeError as exc:
            raise InvalidJSONPayload(str(exc), payload=spec.json_body) from exc
        return {
            "method": "POST",
            "url": spec.url,
            "content": json.dumps(payload).encode("utf-8"),
            "headers": {"Content-Type": "application/json"},
        }

    if spec.method is Method.GET:
        return {"method": "GET", "url": spec.url}

    if spec.form_data is None:
        raise MissingFormData("POST requests need form data, pass it with -d.")
    return {"method": "POST", "url": spec.url, "data": parse_params(spec.form_data)}


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


def execute(spec: RequestSpec) -> ResponseOutcome:
    kwargs = build_request(spec)

    with build_client() as client:
        start_time = time.monotonic()
        logger.debug("%s %s", kwargs["method"], kwargs["url"])
        try:
            response = client.request(**kwargs)
        except httpx.ConnectError as exc:
            logger.debug("connect failed: %s", exc)
            return TransportFailure(TransportErrorKind.CONNECT, _describe(exc))
        except httpx.TimeoutException as exc:
            logger.debug("timed out: %s", exc)
            return TransportFailure(TransportErrorKind.TIMEOUT, _describe(exc))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("request failed: %s", exc)
            return TransportFailure(TransportErrorKind.OTHER, _describe(exc))

        elapsed_ms = (time.monotonic() - start_time) * 1000
        logger.debug(
            "%s %s %s (%.1fms)",
            response.http_version,
            response.status_code,
            response.reason_phrase,
            elapsed_ms,
        )

        if not response.is_success:
            return HTTPFailure(response.status_code)
        return Success(response.status_code, response.text)
