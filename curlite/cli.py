from __future__ import annotations

import dataclasses
import logging
import sys
import typing

import click
from rich.console import Console
from rich.text import Text

from . import _client
from .__version__ import __version__
from ._exceptions import ConfigurationError, InvalidMethod
from ._format import format_outcome_plain, print_outcome_rich
from ._models import Method, RequestSpec, Success
from ._urlparse import urlparse, validate_url

logger = logging.getLogger("curlite.cli")


# ---------------------------------------------------------------------------
# Method parameter (-X GET|POST, case-sensitive)
# ---------------------------------------------------------------------------


class MethodType(click.ParamType):
    name = "method"

    def convert(
        self,
        value: typing.Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Method:
        if isinstance(value, Method):
            return value
        try:
            return Method.parse(value)
        except InvalidMethod as exc:
            self.fail(str(exc), param, ctx)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def print_summary(spec: RequestSpec) -> None:
    click.echo(f"Requesting URL: {spec.url}")
    click.echo(f"Method: {spec.effective_method}")
    if spec.json_body is not None:
        click.echo(f"JSON: {spec.json_body}")
    elif spec.form_data is not None:
        click.echo(f"Data: {spec.form_data}")


def report_error(message: str, console: Console | None) -> None:
    if console is not None:
        console.print(Text(message, style="bold red"))
    else:
        click.echo(message)


# ---------------------------------------------------------------------------
# CLI command
# ---------------------------------------------------------------------------


@click.command(help="A minimal command line HTTP client.")
@click.argument("url")
@click.option("-d", "data", default=None, help="Form data to send, as key=value&key=value.")
@click.option(
    "-X",
    "method",
    type=MethodType(),
    default="GET",
    show_default=True,
    help="HTTP method.",
)
@click.option("--json", "json_body", default=None, help="JSON data to send. Implies POST.")
@click.option(
    "--no-color", is_flag=True, default=False, help="Disable colored output."
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output.")
@click.version_option(__version__, prog_name="curlite")
def main(
    url: str,
    data: str | None,
    method: Method,
    json_body: str | None,
    no_color: bool,
    verbose: bool,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="* %(name)s: %(message)s",
            stream=sys.stderr,
        )

    use_rich = not no_color and sys.stdout.isatty()
    console = Console() if use_rich else None

    spec = RequestSpec(url=url, method=method, form_data=data, json_body=json_body)
    print_summary(spec)

    problem = validate_url(spec.url)
    if problem is not None:
        logger.debug("rejected %r before sending", spec.url)
        report_error(problem, console)
        sys.exit(1)

    spec = dataclasses.replace(spec, url=str(urlparse(spec.url)))

    try:
        outcome = _client.execute(spec)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc

    if console is not None:
        print_outcome_rich(console, outcome)
    else:
        click.echo(format_outcome_plain(outcome))

    if not isinstance(outcome, Success):
        sys.exit(1)
