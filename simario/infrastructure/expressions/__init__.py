"""Coding expression evaluation."""

from .coding_expression import CodingExpressionError, RCodingExpressionEvaluator

__all__ = ["CodingExpressionError", "RCodingExpressionEvaluator"]
