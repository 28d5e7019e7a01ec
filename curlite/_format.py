from __future__ import annotations

import json
import typing

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from ._models import (
    HTTPFailure,
    ResponseOutcome,
    Success,
    TransportErrorKind,
    TransportFailure,
)

JSON_HEADER = "Response body (JSON with sorted keys):"
TEXT_HEADER = "Response body:"
CONNECT_FAILED = (
    "Unable to connect to the server. Perhaps the network is offline "
    "or the server hostname cannot be resolved."
)


def _reject_constant(name: str) -> typing.NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def pretty_json(body: str) -> str | None:
    """Return `body` re-serialised with sorted keys, or `None` if it is not JSON."""
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        return None
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)


def failure_message(outcome: HTTPFailure | TransportFailure) -> str:
    if isinstance(outcome, HTTPFailure):
        return f"Request failed with status code: {outcome.status_code}."
    if outcome.kind in (TransportErrorKind.CONNECT, TransportErrorKind.TIMEOUT):
        return CONNECT_FAILED
    return f"Unable to complete the request: {outcome.detail}"


# ---------------------------------------------------------------------------
# Plain-text formatter (used with --no-color or when stdout is not a TTY)
# ---------------------------------------------------------------------------


def format_outcome_plain(outcome: ResponseOutcome) -> str:
    if not isinstance(outcome, Success):
        return failure_message(outcome)

    formatted = pretty_json(outcome.body)
    if formatted is not None:
        return "\n".join([JSON_HEADER, formatted])
    return "\n".join([TEXT_HEADER, outcome.body.strip()])


# ---------------------------------------------------------------------------
# Rich formatter
# ---------------------------------------------------------------------------


def print_outcome_rich(console: Console, outcome: ResponseOutcome) -> None:
    """Pretty-print an outcome using rich."""
    if not isinstance(outcome, Success):
        console.print(Text(failure_message(outcome), style="bold red"))
        return

    formatted = pretty_json(outcome.body)
    if formatted is not None:
        console.print(Text(JSON_HEADER, style="bold green"))
        console.print(Syntax(formatted, "json", theme="monokai"))
    else:
        console.print(Text(TEXT_HEADER, style="bold green"))
        console.print(Text(outcome.body.strip()))
