import io
import itertools
import unittest

from xinter.environment import Environment
from xinter.evaluator import evaluate
from xinter.front_end import tokenize
from xinter.errors import UndefinedVariable, TypeMismatch, DivisionByZero, UnexpectedToken, NestingTooDeep
from xinter.primitive import render

def _run(line, env=None, **kwargs):
	if env is None: env = Environment()
	out = io.StringIO()
	evaluate(tokenize(line), env, out=out, **kwargs)
	return env, out.getvalue()

def _value_of(line, name="x"):
	env, _ = _run(line)
	return env.resolve(name)

class ArithmeticTests(unittest.TestCase):

	def test_precedence(self):
		self.assertEqual(14, _value_of("x = 2 + 3 * 4"))

	def test_parentheses(self):
		self.assertEqual(20, _value_of("x = (2 + 3) * 4"))

	def test_left_to_right(self):
		self.assertEqual(2, _value_of("x = 10 - 5 - 3"))
		self.assertEqual(2, _value_of("x = 100 / 10 / 5"))

	def test_division_truncates_toward_zero(self):
		for a, b, q in [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (1, 5, 0)]:
			with self.subTest(a=a, b=b):
				line = "x = (0 - %d + %d) / (0 - %d + %d)" % (max(0, -a), max(0, a), max(0, -b), max(0, b))
				self.assertEqual(q, _value_of(line))

	def test_division_by_zero(self):
		with self.assertRaises(DivisionByZero):
			_run("x = 5 / 0")
		with self.assertRaises(DivisionByZero):
			_run("x = 5 / (3 - 3)")

	def test_wraparound(self):
		self.assertEqual(-9223372036854775808, _value_of("x = 9223372036854775807 + 1"))
		self.assertEqual(9223372036854775807, _value_of("x = 0 - 9223372036854775807 - 2"))


class BooleanTests(unittest.TestCase):

	def test_and_or_not(self):
		for p, q in itertools.product([True, False], repeat=2):
			with self.subTest(p=p, q=q):
				self.assertEqual(p and q, _value_of("x = %s & %s" % (render(p), render(q))))
				self.assertEqual(p or q, _value_of("x = %s | %s" % (render(p), render(q))))
				self.assertEqual(not p, _value_of("x = !%s" % render(p)))

	def test_double_negation(self):
		self.assertIs(True, _value_of("x = !!true"))

	def test_both_sides_are_evaluated(self):
		with self.assertRaises(UndefinedVariable):
			_run("false & nowhere")
		with self.assertRaises(UndefinedVariable):
			_run("true | nowhere")


class TypeTests(unittest.TestCase):

	def test_no_coercion(self):
		for line in ['1 + true', 'true + 1', '"a" + "b"', '!1', 'true * 2', '1 & 1', '"x" | false', '!"x"']:
			with self.subTest(line):
				with self.assertRaises(TypeMismatch):
					_run(line)

	def test_mixed_tiers_are_type_errors(self):
		with self.assertRaises(TypeMismatch) as cm:
			_run("true | 1 * 2")
		self.assertEqual("|", cm.exception.glyph)
		self.assertEqual(("Boolean", "Integer"), cm.exception.operand_types)

	def test_strings_pass_through(self):
		self.assertEqual("hi there", _value_of('x = "hi there"'))


class StatementTests(unittest.TestCase):

	def test_assignment_then_log(self):
		env, out = _run("x = 5")
		self.assertEqual("", out)
		env, out = _run("log x", env)
		self.assertEqual("5\n", out)

	def test_log_renders_values(self):
		self.assertEqual("true\n", _run("log true")[1])
		self.assertEqual("false\n", _run("log !true")[1])
		self.assertEqual("hello\n", _run('log "hello"')[1])
		self.assertEqual("-4\n", _run("log 1 - 5")[1])

	def test_undefined_variable(self):
		with self.assertRaises(UndefinedVariable) as cm:
			_run("log y")
		self.assertEqual("y", cm.exception.name)
		self.assertEqual(slice(4, 5), cm.exception.span)

	def test_reassignment(self):
		env, _ = _run("x = 1")
		_run("x = x + 1", env)
		_run('x = "now text"', env)
		self.assertEqual("now text", env.resolve("x"))
		self.assertEqual(["x"], list(env))

	def test_several_statements(self):
		env, out = _run("x = 1 y = x + 1 log y")
		self.assertEqual("2\n", out)
		self.assertEqual(1, env.resolve("x"))

	def test_earlier_statements_stick_after_an_error(self):
		env = Environment()
		with self.assertRaises(UndefinedVariable):
			_run("a = 1 b = c", env)
		self.assertTrue(env.holds("a"))
		self.assertFalse(env.holds("b"))
		with self.assertRaises(UnexpectedToken):
			_run("d = 2 )", env)
		self.assertEqual(2, env.resolve("d"))

	def test_calc_mode_echoes_bare_expressions(self):
		self.assertEqual("Result: 3\n", _run("1 + 2", calc_mode=True)[1])
		self.assertEqual("", _run("1 + 2")[1])

	def test_calc_mode_leaves_other_statements_alone(self):
		self.assertEqual("", _run("x = 1", calc_mode=True)[1])
		self.assertEqual("2\n", _run("log 2", calc_mode=True)[1])
		self.assertEqual("2\nResult: true\n", _run("log 2 true", calc_mode=True)[1])

	def test_debug_mode_traces(self):
		_, out = _run("x = 1", debug_mode=True)
		self.assertIn("Parser advance: idx=0, curr_tok=IDENTIFIER('x')", out)
		self.assertIn("Parser advance: idx=3, curr_tok=<END>", out)
		self.assertIn("Assigned: x = 1", out)

	def test_deep_nesting_is_an_error(self):
		for line in ["x = " + "!" * 5000 + "true", "x = " + "(" * 5000 + "1" + ")" * 5000]:
			with self.subTest(line[:10]):
				with self.assertRaises(NestingTooDeep):
					_run(line)

	def test_deep_nesting_keeps_earlier_statements(self):
		env = Environment()
		with self.assertRaises(NestingTooDeep):
			_run("a = 1 b = " + "!" * 5000 + "true", env)
		self.assertEqual(1, env.resolve("a"))
		self.assertFalse(env.holds("b"))

	def test_empty_line_does_nothing(self):
		env, out = _run("", calc_mode=True)
		self.assertEqual(0, len(env))
		self.assertEqual("", out)


if __name__ == '__main__':
	unittest.main()
