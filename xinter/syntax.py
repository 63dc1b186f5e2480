"""
The set of parse-nodes in simple form.
The parser calls these constructors as it recognizes each production,
and hands each finished statement straight to the evaluator.
"""
from .ontology import Phrase, Nom, Token, PUNCTUATION

class ValueExpression(Phrase): pass

class Statement(Phrase): pass

class Literal(ValueExpression):
	def __init__(self, token:Token):
		self.value, self._span = token.value, token.span
	def __str__(self): return "<Literal %r>" % self.value
	def left(self): return self._span.start
	def right(self): return self._span.stop

class Lookup(ValueExpression):
	def __init__(self, nom:Nom): self.nom = nom
	def __str__(self): return "<ref:%s>" % self.nom.text
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()

class BinExp(ValueExpression):
	def __init__(self, lhs:ValueExpression, op:Token, rhs:ValueExpression):
		self.glyph, self.lhs, self.rhs = op.kind, lhs, rhs
	def __str__(self): return "(%s %s %s)" % (self.lhs, self.glyph, self.rhs)
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

class Negation(ValueExpression):
	glyph = "NOT"
	def __init__(self, bang:Token, arg:ValueExpression):
		self._start, self.arg = bang.span.start, arg
	def __str__(self): return "!%s" % self.arg
	def left(self): return self._start
	def right(self): return self.arg.right()

class Parenthesized(ValueExpression):
	""" Only here so diagnostics can underline the parentheses too. """
	def __init__(self, lparen:Token, inner:ValueExpression, rparen:Token):
		self.inner = inner
		self._span = slice(lparen.span.start, rparen.span.stop)
	def __str__(self): return str(self.inner)
	def left(self): return self._span.start
	def right(self): return self._span.stop

class Assignment(Statement):
	def __init__(self, target:Nom, expr:ValueExpression):
		self.target, self.expr = target, expr
	def __str__(self): return "%s = %s" % (self.target.text, self.expr)
	def left(self): return self.target.left()
	def right(self): return self.expr.right()

class LogStatement(Statement):
	def __init__(self, keyword:Nom, expr:ValueExpression):
		self._start, self.expr = keyword.left(), expr
	def __str__(self): return "log %s" % self.expr
	def left(self): return self._start
	def right(self): return self.expr.right()

class ExprStatement(Statement):
	def __init__(self, expr:ValueExpression): self.expr = expr
	def __str__(self): return str(self.expr)
	def left(self): return self.expr.left()
	def right(self): return self.expr.right()

_GLYPHS = {kind:char for char, kind in PUNCTUATION.items()}

def glyph_text(glyph:str) -> str:
	""" How an operator kind appears in source text, for messages. """
	return _GLYPHS.get(glyph, glyph)
