"""
These most-fundamental classes sit apart from the rest
so the scanner, the parser, and the error classes can all
share them without circular imports.

Positions are character offsets into the one line of text
being worked on. Nothing here outlives that line.
"""
import sys
from typing import NamedTuple, Any

PLUS = sys.intern("PLUS")
MINUS = sys.intern("MINUS")
MULTIPLY = sys.intern("MULTIPLY")
DIVIDE = sys.intern("DIVIDE")
EQUALS = sys.intern("EQUALS")
AND = sys.intern("AND")
OR = sys.intern("OR")
NOT = sys.intern("NOT")
LPAREN = sys.intern("LPAREN")
RPAREN = sys.intern("RPAREN")
NUMBER = sys.intern("NUMBER")
STRING = sys.intern("STRING")
BOOLEAN = sys.intern("BOOLEAN")
IDENTIFIER = sys.intern("IDENTIFIER")

PUNCTUATION = {
	"+": PLUS, "-": MINUS, "*": MULTIPLY, "/": DIVIDE, "=": EQUALS,
	"&": AND, "|": OR, "!": NOT, "(": LPAREN, ")": RPAREN,
}

KINDS = frozenset([
	PLUS, MINUS, MULTIPLY, DIVIDE, EQUALS, AND, OR, NOT, LPAREN, RPAREN,
	NUMBER, STRING, BOOLEAN, IDENTIFIER,
])

class Token(NamedTuple):
	kind: str
	value: Any
	span: slice = slice(0, 0)

	def __str__(self):
		if self.value is None: return self.kind
		return "%s(%r)" % (self.kind, self.value)

class Phrase:
	def left(self) -> int:
		""" Return the offset of the leftmost character of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> int:
		""" Return the offset just past the rightmost character of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> slice: return slice(self.left(), self.right())

class Nom(Phrase):
	""" Representing the occurrence of a name anywhere. """
	def __init__(self, token:Token):
		assert token.kind == IDENTIFIER, token
		self.text, self._span = token.value, token.span
	def __repr__(self): return "<Name %r>" % self.text
	def key(self): return self.text
	def left(self): return self._span.start
	def right(self): return self._span.stop
