"""Evaluator for coding expressions.

Codings tables describe each categorical variable with an expression naming
its categories in code order, e.g.::

    c("Other"=1, "Pacific"=2, "Maori"=3)
    c(No=0, Yes=1)

Names may be double-, single- or back-quoted, or bare identifiers. Codes are
numbers (an ``L`` suffix is accepted) or quoted strings. The pairs come back
in the order written.
"""

from __future__ import annotations

import re

_CALL_RE = re.compile(r"^\s*c\s*\((?P<body>.*)\)\s*$", re.DOTALL)
_QUOTED = r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'"
_ITEM_RE = re.compile(
    r"\s*(?P<name>" + _QUOTED + r"|`[^`]*`|[A-Za-z.][A-Za-z0-9._]*)"
    r"\s*=\s*"
    r"(?P<code>" + _QUOTED + r"|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?L?)"
    r"\s*(?P<sep>,|$)",
    re.DOTALL,
)
_ESCAPE_RE = re.compile(r"\\(.)")


class CodingExpressionError(ValueError):
    def __init__(self, expr: str, reason: str) -> None:
        self.expr = expr
        self.reason = reason
        super().__init__(f"invalid coding expression {expr!r}: {reason}")


def _unquote(token: str) -> str:
    if token[:1] in {'"', "'"}:
        return _ESCAPE_RE.sub(r"\1", token[1:-1])
    if token[:1] == "`":
        return token[1:-1]
    return token


def _parse_code(token: str) -> object:
    if token[:1] in {'"', "'"}:
        return _unquote(token)
    text = token.removesuffix("L")
    if any(marker in text for marker in (".", "e", "E")):
        return float(text)
    return int(text)


class RCodingExpressionEvaluator:
    pass

    def evaluate(self, expr: str) -> list[tuple[str, object]]:
        call = _CALL_RE.match(expr)
        if call is None:
            raise CodingExpressionError(expr, "expected c(...)")
        body = call.group("body")
        if not body.strip():
            return []
        pairs: list[tuple[str, object]] = []
        position = 0
        while position < len(body):
            item = _ITEM_RE.match(body, position)
            if item is None:
                raise CodingExpressionError(
                    expr, f"cannot parse category at {body[position:].strip()!r}"
                )
            label = _unquote(item.group("name"))
            pairs.append((label, _parse_code(item.group("code"))))
            position = item.end()
            if item.group("sep") == "," and not body[position:].strip():
                raise CodingExpressionError(expr, "trailing comma")
        return pairs
