"""Tests for the coding expression evaluator."""

import pytest

from simario.application.ports.services import CodingExpressionEvaluatorPort
from simario.infrastructure.expressions import (
    CodingExpressionError,
    RCodingExpressionEvaluator,
)


@pytest.fixture
def evaluator():
    return RCodingExpressionEvaluator()


class TestRCodingExpressionEvaluator:
    def test_implements_port(self, evaluator):
        assert isinstance(evaluator, CodingExpressionEvaluatorPort)

    def test_quoted_names_in_order(self, evaluator):
        pairs = evaluator.evaluate('c("Other"=1, "Pacific"=2, "Maori"=3)')

        assert pairs == [("Other", 1), ("Pacific", 2), ("Maori", 3)]

    def test_bare_and_backquoted_names(self, evaluator):
        assert evaluator.evaluate("c(No=0, Yes=1)") == [("No", 0), ("Yes", 1)]
        assert evaluator.evaluate("c(`Semi skilled`=3)") == [("Semi skilled", 3)]

    def test_single_quoted_names_with_escapes(self, evaluator):
        assert evaluator.evaluate(r"c('Don\'t know'=9)") == [("Don't know", 9)]

    def test_names_may_contain_separators(self, evaluator):
        pairs = evaluator.evaluate('c("a, b"=1, "c=d"=2)')

        assert pairs == [("a, b", 1), ("c=d", 2)]

    def test_code_types(self, evaluator):
        pairs = evaluator.evaluate('c(a=1L, b=2.5, c=-1, d="x", e=1e2)')

        assert pairs == [("a", 1), ("b", 2.5), ("c", -1), ("d", "x"), ("e", 100.0)]
        assert isinstance(pairs[0][1], int)
        assert isinstance(pairs[4][1], float)

    def test_whitespace_is_ignored(self, evaluator):
        assert evaluator.evaluate('  c ( "A" = 1 ,\n "B" = 2 )  ') == [
            ("A", 1),
            ("B", 2),
        ]

    def test_empty_call(self, evaluator):
        assert evaluator.evaluate("c()") == []

    @pytest.mark.parametrize(
        "expr, reason",
        [
            ("list(a=1)", "expected c(...)"),
            ("c(a=1, b)", "cannot parse category"),
            ("c(a=1,)", "trailing comma"),
            ("c(a=x)", "cannot parse category"),
        ],
    )
    def test_invalid_expressions(self, evaluator, expr, reason):
        with pytest.raises(CodingExpressionError) as excinfo:
            evaluator.evaluate(expr)

        assert excinfo.value.expr == expr
        assert reason in excinfo.value.reason
        assert isinstance(excinfo.value, ValueError)
