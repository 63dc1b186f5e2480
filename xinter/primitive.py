"""
The primitive value domain and the operators over it.

Values are plain Python objects: int for Integer, bool for Boolean,
str for Text. Since bool is a subclass of int, every check here
compares exact types so that true + 1 is a type mismatch, not 2.
Integers live in signed 64 bits and wrap on overflow.
"""
import operator
from typing import Union

VALUE = Union[int, bool, str]

_WIDTH = 1 << 64
_SIGN = 1 << 63

def wrap(n:int) -> int:
	""" Two's-complement wraparound into a signed 64-bit range """
	n &= _WIDTH - 1
	return n - _WIDTH if n & _SIGN else n

def decimal(digits:str) -> int:
	""" Read a digit run of any length, wrapping as it goes """
	n = 0
	for d in digits:
		n = (n * 10 + int(d)) & (_WIDTH - 1)
	return wrap(n)

def type_name(value:VALUE) -> str:
	return _TYPE_NAMES[type(value)]

_TYPE_NAMES = {int: "Integer", bool: "Boolean", str: "Text"}

def render(value:VALUE) -> str:
	""" The way values look when printed by log or echoed in calc mode. """
	if type(value) is bool: return "true" if value else "false"
	return str(value)

def _quotient(a:int, b:int) -> int:
	# Truncate toward zero; the caller has already excluded b == 0.
	q = abs(a) // abs(b)
	return q if (a < 0) == (b < 0) else -q

def _arithmetic(fn):
	return lambda a, b: wrap(fn(a, b))

# Each binary operator kind maps to its implementation and the one operand type it accepts.
binary_ops = {
	"PLUS": (_arithmetic(operator.add), int),
	"MINUS": (_arithmetic(operator.sub), int),
	"MULTIPLY": (_arithmetic(operator.mul), int),
	"DIVIDE": (_arithmetic(_quotient), int),
	"AND": (operator.and_, bool),
	"OR": (operator.or_, bool),
}

unary_ops = {
	"NOT": (operator.not_, bool),
}
