"""Token and diagnostic serialization to JSON-compatible dicts.

Used by the ``--json`` CLI output and by tools that want to cache or
inspect a scan without holding Token objects.

All output is deterministic (sorted keys).

Example:
    from minilang import recognize, tokenize
    from minilang.serialization import to_json

    tokens = tokenize("x = 1")
    print(to_json(tokens, recognize("x = 1")))

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from minilang.diagnostics import Diagnostic
from minilang.tokens import Token, TokenKind


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    """
    start, end = token.span
    return {
        "_type": "Token",
        "kind": token.kind.name,
        "text": token.text,
        "lineno": token.lineno,
        "col_offset": token.col,
        "offset": start,
        "end_offset": end,
        "source_file": token.source_file,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a Token from a dict produced by token_to_dict.

    Raises:
        ValueError: If ``_type`` is missing or not ``Token``, or the kind
            is unknown.
    """
    type_name = data.get("_type")
    if type_name != "Token":
        msg = f"Expected serialized Token, got _type={type_name!r}"
        raise ValueError(msg)

    kind_name = data.get("kind")
    try:
        kind = TokenKind[kind_name]
    except KeyError:
        msg = f"Unknown token kind: {kind_name!r}"
        raise ValueError(msg) from None

    return Token(
        kind=kind,
        text=data.get("text", ""),
        _lineno=data.get("lineno", 1),
        _col=data.get("col_offset", 1),
        _start_offset=data.get("offset", 0),
        _end_offset=data.get("end_offset", 0),
        _source_file=data.get("source_file"),
    )


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    """Convert a Diagnostic to a JSON-compatible dict."""
    return {
        "_type": "Diagnostic",
        "reason": diagnostic.reason,
        "message": diagnostic.message,
        "found": token_to_dict(diagnostic.found),
    }


def to_json(
    tokens: Iterable[Token],
    diagnostics: Iterable[Diagnostic] = (),
    *,
    indent: int | None = None,
) -> str:
    """Serialize a scan and its diagnostics to a JSON string.

    Args:
        tokens: Tokens in scan order.
        diagnostics: Diagnostics in report order.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON object with ``tokens`` and ``diagnostics`` arrays.
    """
    document = {
        "tokens": [token_to_dict(t) for t in tokens],
        "diagnostics": [diagnostic_to_dict(d) for d in diagnostics],
    }
    return json.dumps(document, sort_keys=True, indent=indent)
