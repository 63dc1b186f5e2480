"""
Everything that can go wrong with one line of input.

The scanner raises the LexError family; the parser and the tree-walker raise
the EvalError family. None of these are fatal to a session: whoever reads the
lines catches XinterError, complains, and carries on with the next line.
"""
from typing import Optional, Sequence
from boozetools.parsing.interface import ParseError
from .ontology import Token

class XinterError(Exception):
	span: Optional[slice] = None
	def describe(self) -> str: raise NotImplementedError(type(self))
	def __str__(self): return self.describe()

class LexError(XinterError):
	pass

class UnexpectedCharacter(LexError):
	def __init__(self, char:str, position:int):
		super().__init__(char, position)
		self.char, self.position = char, position
		self.span = slice(position, position+1)
	def describe(self): return "Unexpected character: %r" % self.char

class UnterminatedString(LexError):
	def __init__(self, position:int, stop:int):
		super().__init__(position)
		self.position = position
		self.span = slice(position, stop)
	def describe(self): return "Unterminated string literal"

class EvalError(XinterError):
	pass

class UndefinedVariable(EvalError):
	def __init__(self, name:str, span:Optional[slice]=None):
		super().__init__(name)
		self.name, self.span = name, span
	def describe(self): return "Undefined variable: %s" % self.name

class TypeMismatch(EvalError):
	def __init__(self, glyph:str, operand_types:Sequence[str], span:Optional[slice]=None):
		super().__init__(glyph, tuple(operand_types))
		self.glyph, self.operand_types, self.span = glyph, tuple(operand_types), span
	def describe(self):
		return "Operator %r does not apply to %s" % (self.glyph, " and ".join(self.operand_types))

class DivisionByZero(EvalError):
	def __init__(self, span:Optional[slice]=None):
		super().__init__()
		self.span = span
	def describe(self): return "Division by zero"

class NestingTooDeep(EvalError):
	def __init__(self, span:Optional[slice]=None):
		super().__init__()
		self.span = span
	def describe(self): return "Expression nested too deeply"

class UnexpectedToken(EvalError, ParseError):
	""" token is None when the line ran out before the grammar was satisfied. """
	def __init__(self, expected:str, token:Optional[Token], end:int):
		super().__init__(expected, token)
		self.expected, self.token = expected, token
		self.span = token.span if token is not None else slice(end, end+1)
	def describe(self):
		found = "end of input" if self.token is None else str(self.token)
		return "Expected %s but found %s" % (self.expected, found)
