import io
import unittest
from unittest import mock

from xinter.diagnostics import Report, Annotation
from xinter.errors import UndefinedVariable, UnexpectedToken, DivisionByZero
from xinter.front_end import parse_text

class ReportTests(unittest.TestCase):

	def test_ok_and_sick(self):
		report = Report(verbose=False)
		self.assertTrue(report.ok())
		report.problem_in_line("log y", UndefinedVariable("y", slice(4, 5)))
		self.assertTrue(report.sick())
		report.reset()
		self.assertTrue(report.ok())

	def test_complaint_names_the_problem(self):
		report = Report(verbose=False)
		report.problem_in_line("x = 1 / 0", DivisionByZero(slice(4, 9)), "history line 3")
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.complain_to_console()
		text = stderr.getvalue()
		self.assertIn("Division by zero", text)
		self.assertIn("(while replaying: history line 3)", text)

	def test_pointing_past_the_end(self):
		line = "(1 + 2"
		with self.assertRaises(UnexpectedToken) as cm:
			parse_text(line)
		report = Report(verbose=False)
		report.problem_in_line(line, cm.exception)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.complain_to_console()
		self.assertIn("Expected ')' but found end of input", stderr.getvalue())

	def test_no_span_no_picture(self):
		report = Report(verbose=False)
		report.problem_in_line("", UndefinedVariable("y"))
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.complain_to_console()
		self.assertIn("Undefined variable: y", stderr.getvalue())

	def test_pictures_carry_the_history_position(self):
		report = Report(verbose=False)
		report.problem_in_line("log y", UndefinedVariable("y", slice(4, 5)), number=12)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			report.complain_to_console()
		self.assertIn("    12 |", stderr.getvalue())

	def test_prefix_without_a_position_is_blank(self):
		self.assertEqual("     3 |", Annotation("x", slice(0, 1), number=3).prefix())
		self.assertEqual("       |", Annotation("x", slice(0, 1)).prefix())

	def test_info_only_when_verbose(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			Report(verbose=False).info("quiet")
			Report(verbose=1).info("loud")
		self.assertEqual("loud\n", stderr.getvalue())

	def test_silence_when_nothing_is_wrong(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			Report(verbose=False).complain_to_console()
		self.assertEqual("", stderr.getvalue())


if __name__ == '__main__':
	unittest.main()
