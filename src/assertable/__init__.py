"""Fluent, non-fatal assertions for test code."""

from assertable.assertions import (
    that,
    that_collection,
    that_map,
    that_number,
    that_sized,
    that_string,
    that_time,
)
from assertable.config import AssertConfig, get_config, load_config, set_config
from assertable.errors import ConfigurationError
from assertable.messages import format_failure
from assertable.predicates import MISSING, PredicateOutcome, evaluate
from assertable.reporting import FailureCollector, FailureReporter, RaisingReporter
from assertable.values import (
    Kind,
    MapEntry,
    WrappedValue,
    attach_decorator,
    construct,
    ignoring_case,
    ignoring_whitespaces,
)

__all__ = [
    "AssertConfig",
    "ConfigurationError",
    "FailureCollector",
    "FailureReporter",
    "Kind",
    "MISSING",
    "MapEntry",
    "PredicateOutcome",
    "RaisingReporter",
    "WrappedValue",
    "attach_decorator",
    "construct",
    "evaluate",
    "format_failure",
    "get_config",
    "ignoring_case",
    "ignoring_whitespaces",
    "load_config",
    "set_config",
    "that",
    "that_collection",
    "that_map",
    "that_number",
    "that_sized",
    "that_string",
    "that_time",
]
