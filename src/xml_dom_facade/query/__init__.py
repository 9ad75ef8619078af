"""XPath query evaluation for the XML DOM facade."""

from .evaluator import QueryEvaluator

__all__ = [
    "QueryEvaluator",
]
