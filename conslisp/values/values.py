"""
Value definitions for conslisp.

Parsed data is one of a closed set of immutable values:

    Symbol    a bare name
    String    text from a string literal
    Number    a double-precision float
    Cons      a (car, cdr) cell; chains of cells build lists and pairs
    Nil       the empty list and list terminator (a singleton)
    Function  a cons-shaped payload tagged as callable (reserved)

Whether a cons is a list or a dotted pair is never stored; it is recomputed
from the structure every time it is asked.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Sequence, Union

from .errors import NotAListError


def _display(value: Any) -> str:
    from .printer import display
    return display(value)


@dataclass(frozen=True)
class Symbol:
    name: str

    def __str__(self) -> str:
        return _display(self)


@dataclass(frozen=True)
class String:
    text: str

    def __str__(self) -> str:
        return _display(self)


@dataclass(frozen=True)
class Number:
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return _display(self)


class NilType:
    """The type of Nil. There is only ever one instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nil"

    def __str__(self) -> str:
        return "nil"


Nil = NilType()


@dataclass(frozen=True, eq=False, repr=False)
class Cons:
    """
    A cons cell.

    Equality and hashing walk the cdr chain in a loop so that long lists
    don't hit the recursion limit.
    """
    car: Any
    cdr: Any

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cons):
            return NotImplemented

        left, right = self, other
        while isinstance(left, Cons) and isinstance(right, Cons):
            if left is right:
                return True
            if left.car != right.car:
                return False
            left, right = left.cdr, right.cdr
        return left == right

    def __hash__(self) -> int:
        cars = []
        node = self
        while isinstance(node, Cons):
            cars.append(node.car)
            node = node.cdr
        return hash((Cons, tuple(cars), node))

    def __iter__(self) -> Iterator[Any]:
        return iter_list(self)

    def __repr__(self) -> str:
        return f"<Cons {_display(self)}>"

    def __str__(self) -> str:
        return _display(self)


@dataclass(frozen=True)
class Function:
    """Callable value; reserved for a later evaluator."""
    car: Any
    cdr: Any

    def __str__(self) -> str:
        return _display(self)


Value = Union[Symbol, String, Number, Cons, NilType, Function]


# ============================================================================
# Construction
# ============================================================================

def cons(car: Value, cdr: Value) -> Cons:
    """Build a cons cell. Nil in the cdr is not special-cased."""
    return Cons(car, cdr)


def sym(name: str) -> Value:
    """Make a symbol; the name ``nil`` reads as Nil."""
    if name == "nil":
        return Nil
    return Symbol(name)


def txt(text: str) -> String:
    return String(text)


def num(value: Union[int, float]) -> Number:
    return Number(float(value))


def nil() -> NilType:
    return Nil


def slice_to_list(items: Sequence[Value]) -> Value:
    """
    Build a proper list holding ``items`` in order.

    An empty sequence gives Nil.
    """
    result: Value = Nil
    for item in reversed(items):
        result = cons(item, result)
    return result


vec_to_list = slice_to_list


def make_list(*items: Value) -> Value:
    return slice_to_list(items)


# ============================================================================
# Classification
# ============================================================================

def is_list(value: Value) -> bool:
    """True for Nil and for any cons chain that ends in Nil."""
    while isinstance(value, Cons):
        value = value.cdr
    return value is Nil


def is_pair(value: Value) -> bool:
    """True for a cons whose cdr is an atom other than Nil, e.g. ``(a . b)``."""
    return (isinstance(value, Cons)
            and value.cdr is not Nil
            and not isinstance(value.cdr, Cons))


# ============================================================================
# Conversion
# ============================================================================

def iter_list(value: Value) -> Iterator[Value]:
    """
    Yield the elements of a proper list.

    Raises:
        NotAListError: If ``value`` is not a proper list
    """
    if not is_list(value):
        raise NotAListError(value)

    def walk(node):
        while isinstance(node, Cons):
            yield node.car
            node = node.cdr

    return walk(value)


def list_to_vec(value: Value) -> List[Value]:
    """
    Collect the elements of a proper list into a Python list.

    Raises:
        NotAListError: If ``value`` is a dotted pair, an improper chain or
            any other non-list value
    """
    return list(iter_list(value))
