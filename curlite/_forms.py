from __future__ import annotations


def parse_params(data: str) -> dict[str, str]:
    """Split a raw ``key=value&key=value`` string into form fields.

    Pairs without an ``=`` or with an empty key are skipped. Only the first
    ``=`` separates key from value, and a repeated key keeps its last value.
    """
    params: dict[str, str] = {}
    for pair in data.split("&"):
        key, sep, value = pair.partition("=")
        if not sep or not key:
            continue
        params[key] = value
    return params
