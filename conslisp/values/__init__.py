"""
conslisp Values Package

The in-memory representation of S-expression data: symbols, strings,
numbers and cons cells, with list/pair classification and canonical
printing.
"""

from .values import (
    Value, Symbol, String, Number, Cons, NilType, Nil, Function,
    cons, sym, txt, num, nil, make_list, slice_to_list, vec_to_list,
    list_to_vec, iter_list, is_list, is_pair,
)
from .printer import display, format_number, format_string
from .errors import ValueModelError, NotAListError

__all__ = [
    # Value types
    "Value", "Symbol", "String", "Number", "Cons", "NilType", "Nil", "Function",

    # Construction
    "cons", "sym", "txt", "num", "nil", "make_list", "slice_to_list", "vec_to_list",

    # Inspection and conversion
    "is_list", "is_pair", "list_to_vec", "iter_list",

    # Printing
    "display", "format_number", "format_string",

    # Errors
    "ValueModelError", "NotAListError",
]
