"""Core logic for the Structural Toolkit.

The Gradio demo lives in `app.py`. This package contains small, independent
helpers that:
- clone and compare nested values
- flatten nested sequences
- debounce, memoize and curry callables
- convert strings to camelCase and parse query strings
"""
from .casing import to_camel_case
from .cloning import deep_clone
from .currying import Curried, curry
from .equality import deep_equal
from .flattening import flatten
from .memoization import memoize
from .query import parse_query
from .timing import debounce

__all__ = [
    "Curried",
    "curry",
    "debounce",
    "deep_clone",
    "deep_equal",
    "flatten",
    "memoize",
    "parse_query",
    "to_camel_case",
]
