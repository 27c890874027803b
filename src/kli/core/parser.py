"""Pure tokenizer turning a flat argument vector into a :class:`ParseResult`.

Every function in this module is a **pure** transformation — no I/O, no
side effects, and no failure mode: any token lands in exactly one of the
three buckets.

Rules, applied left to right with one token of lookahead:

1. ``--name=value`` / ``-name=value`` — split at the first ``=``; the value
   may be empty.  An explicit ``=`` always wins over lookahead.
2. ``--name value`` / ``-name value`` — the next token is consumed as the
   value when it does not itself start with ``-``.
3. ``--name`` / ``-name`` with nothing consumable after it — a flag.
4. Anything else — a positional.

Short options are never clustered: ``-la`` is one flag named ``la``.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from kli.core.models import ParseResult


def _is_option(token: str) -> bool:
    return token.startswith("-")


def _strip_prefix(token: str) -> str:
    """Drop the ``--`` or ``-`` prefix of an option token."""
    if token.startswith("--"):
        return token[2:]
    return token[1:]


def parse(tokens: Sequence[str]) -> ParseResult:
    """Tokenize *tokens* into options, flags, and positionals.

    Later occurrences of a name replace earlier ones, moving the name
    between :attr:`~ParseResult.options` and :attr:`~ParseResult.flags`
    when its form changes.
    """
    options: dict[str, str] = {}
    flags: set[str] = set()
    positionals: list[str] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]

        if not _is_option(token):
            positionals.append(token)
            i += 1
            continue

        body = _strip_prefix(token)
        if "=" in body:
            name, value = body.split("=", 1)
            options[name] = value
            flags.discard(name)
        elif i + 1 < len(tokens) and not _is_option(tokens[i + 1]):
            options[body] = tokens[i + 1]
            flags.discard(body)
            i += 1
        else:
            flags.add(body)
            options.pop(body, None)
        i += 1

    return ParseResult(
        options=MappingProxyType(options),
        flags=frozenset(flags),
        positionals=tuple(positionals),
    )
