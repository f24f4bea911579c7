"""
Canonical textual rendering of values.

    Symbol     foo
    String     "a \\"quoted\\" word"
    Number     3, 0.5
    Nil        nil
    list       (1 2 3)
    pair       (a . b), (1 . (2 . 3))
    Function   #<function>
"""

import math
from decimal import Decimal

from .values import Symbol, String, Number, Cons, NilType, Function, Value

STRING_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\t': '\\t',
    '\r': '\\r',
    '\0': '\\0',
}


def display(value: Value) -> str:
    """Render a value in canonical form."""
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, String):
        return format_string(value.text)
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, Cons):
        return format_cons(value)
    if isinstance(value, Function):
        return "#<function>"
    raise TypeError(f"not a conslisp value: {value!r}")


def format_number(value: float) -> str:
    """
    Shortest decimal text that reads back as ``value``.

    Integral values drop the fraction and exponent notation is never used,
    since the lexer only reads plain digit runs.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return repr(value)
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer():
        return str(int(value))

    text = repr(value)
    if 'e' in text:
        text = format(Decimal(text), 'f')
    return text


def format_string(text: str) -> str:
    parts = ['"']
    for char in text:
        if char in STRING_ESCAPES:
            parts.append(STRING_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7f:
            parts.append(f"\\x{ord(char):02x}")
        else:
            parts.append(char)
    parts.append('"')
    return ''.join(parts)


def format_cons(value: Cons) -> str:
    """
    Render a cons chain.

    A chain ending in Nil prints as a list. Any other chain is a pair at
    every link, so ``(1 . (2 . 3))`` nests one level per cell.
    """
    items = []
    node = value
    while isinstance(node, Cons):
        items.append(display(node.car))
        node = node.cdr

    if isinstance(node, NilType):
        return "(" + " ".join(items) + ")"

    return "(" + " . (".join(items) + " . " + display(node) + ")" * len(items)
