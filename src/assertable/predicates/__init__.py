"""Predicate library: pure relations evaluated against wrapped values."""

from assertable.predicates.base import MISSING, PredicateOutcome, get_predicate, relation_names
from assertable.predicates.relations import evaluate, values_equal

__all__ = [
    "MISSING",
    "PredicateOutcome",
    "evaluate",
    "get_predicate",
    "relation_names",
    "values_equal",
]
