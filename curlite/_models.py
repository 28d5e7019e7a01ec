from __future__ import annotations

import enum
import typing
from dataclasses import dataclass

from ._exceptions import InvalidMethod


class Method(str, enum.Enum):
    GET = "GET"
    POST = "POST"

    @classmethod
    def parse(cls, token: str) -> Method:
        """Exact, case-sensitive lookup of a method token."""
        try:
            return cls(token)
        except ValueError:
            raise InvalidMethod(token) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RequestSpec:
    url: str
    method: Method = Method.GET
    form_data: str | None = None
    json_body: str | None = None

    @property
    def effective_method(self) -> Method:
        # A JSON body always goes out as POST.
        if self.json_body is not None:
            return Method.POST
        return self.method


class TransportErrorKind(enum.Enum):
    CONNECT = "connect"
    TIMEOUT = "timeout"
    OTHER = "other"


@dataclass(frozen=True)
class Success:
    status_code: int
    body: str


@dataclass(frozen=True)
class HTTPFailure:
    status_code: int


@dataclass(frozen=True)
class TransportFailure:
    kind: TransportErrorKind
    detail: str = ""


ResponseOutcome = typing.Union[Success, HTTPFailure, TransportFailure]
