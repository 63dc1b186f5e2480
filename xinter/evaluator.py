"""
Direct interpretation of statements, one at a time, as the parser produces them.

Statements earlier in a line take full effect before later ones are parsed,
so an error partway along leaves the earlier assignments in place.
"""
import sys
from typing import Optional, Sequence, TextIO

from boozetools.support.foundation import Visitor

from . import syntax
from .ontology import Token
from .environment import Environment
from .errors import TypeMismatch, DivisionByZero, NestingTooDeep
from .front_end import Parser
from .primitive import VALUE, binary_ops, unary_ops, render, type_name

class Evaluator(Visitor):
	"""
	Statement-visitors perform the side effects and return nothing.
	Expression-visitors return a value and touch nothing.
	"""

	def __init__(self, env:Environment, *, calc_mode=False, debug_mode=False, out:Optional[TextIO]=None):
		self.env = env
		self.calc_mode = calc_mode
		self.debug_mode = debug_mode
		self.out = sys.stdout if out is None else out

	def _say(self, *args):
		print(*args, file=self.out)

	def visit_Assignment(self, stmt:syntax.Assignment):
		name = stmt.target.text
		value = self.env.assign(name, self.visit(stmt.expr))
		if self.debug_mode:
			self._say("Assigned: %s = %s" % (name, render(value)))

	def visit_LogStatement(self, stmt:syntax.LogStatement):
		self._say(render(self.visit(stmt.expr)))

	def visit_ExprStatement(self, stmt:syntax.ExprStatement):
		value = self.visit(stmt.expr)
		if self.calc_mode:
			self._say("Result:", render(value))

	@staticmethod
	def visit_Literal(expr:syntax.Literal) -> VALUE:
		return expr.value

	def visit_Lookup(self, expr:syntax.Lookup) -> VALUE:
		return self.env.resolve(expr.nom.text, expr.span())

	def visit_Parenthesized(self, expr:syntax.Parenthesized) -> VALUE:
		return self.visit(expr.inner)

	def visit_Negation(self, expr:syntax.Negation) -> VALUE:
		fn, typ = unary_ops[expr.glyph]
		arg = self.visit(expr.arg)
		if type(arg) is not typ:
			raise TypeMismatch(syntax.glyph_text(expr.glyph), [type_name(arg)], expr.span())
		return fn(arg)

	def visit_BinExp(self, expr:syntax.BinExp) -> VALUE:
		fn, typ = binary_ops[expr.glyph]
		lhs, rhs = self.visit(expr.lhs), self.visit(expr.rhs)
		if type(lhs) is not typ or type(rhs) is not typ:
			raise TypeMismatch(syntax.glyph_text(expr.glyph), [type_name(lhs), type_name(rhs)], expr.span())
		if expr.glyph == "DIVIDE" and rhs == 0:
			raise DivisionByZero(expr.span())
		return fn(lhs, rhs)


def evaluate(
		tokens:Sequence[Token],
		env:Environment,
		calc_mode:bool=False,
		debug_mode:bool=False,
		out:Optional[TextIO]=None,
):
	""" Run every statement in one line's worth of tokens against the given environment. """
	evaluator = Evaluator(env, calc_mode=calc_mode, debug_mode=debug_mode, out=out)
	tokens = list(tokens)
	parser = Parser(tokens, trace=evaluator.out if debug_mode else None)
	try:
		for statement in parser.statements():
			evaluator.visit(statement)
	except RecursionError:
		# Both the parser and the tree-walker recurse once or more per level of nesting.
		raise NestingTooDeep(slice(tokens[0].span.start, tokens[-1].span.stop)) from None
