"""
The interactive side of things: read a line, decide whether it is one of the
reserved session commands, and otherwise hand it to the scanner and evaluator.

Nothing typed here can crash the process. A line that fails gets reported and
the session moves on; whatever that line assigned before failing stays assigned.
"""
import sys
from typing import Iterable, Optional, TextIO

from .diagnostics import Report
from .environment import Environment
from .errors import XinterError
from .evaluator import evaluate
from .front_end import tokenize

PROMPT = "Xinter ==> "

class Session:
	calc_mode: bool
	debug_mode: bool
	env: Environment
	history: list[str]

	def __init__(self, out:Optional[TextIO]=None, report:Optional[Report]=None):
		self.out = sys.stdout if out is None else out
		self.report = Report() if report is None else report
		self.calc_mode = False
		self.debug_mode = False
		self.env = Environment()
		self.history = []
		self._commands = {
			"calc": self._calc,
			"decalc": self._decalc,
			"dev": self._dev,
			"undev": self._undev,
			"run": self._run,
			"exit": self._exit,
		}

	def _say(self, text:str):
		print(text, file=self.out)

	def handle(self, line:str) -> bool:
		""" Deal with one line of input. Returns False when the session should end. """
		text = line.strip()
		if text in self._commands:
			return self._commands[text]()
		if text:
			self.history.append(text)
			self.execute(text, number=len(self.history))
		return True

	def execute(self, text:str, origin:Optional[str]=None, number:Optional[int]=None) -> bool:
		""" Tokenize and evaluate one line; report any failure. True means it went cleanly. """
		trace = self.out if self.debug_mode else None
		try:
			tokens = tokenize(text, trace)
			evaluate(tokens, self.env, self.calc_mode, self.debug_mode, self.out)
		except XinterError as ex:
			self.report.problem_in_line(text, ex, origin, number=number)
			self.report.complain_to_console()
			self.report.reset()
			return False
		else:
			return True

	def _calc(self):
		self.calc_mode = True
		self._say("Calc mode activated")
		return True

	def _decalc(self):
		self.calc_mode = False
		self._say("Calc mode deactivated")
		return True

	def _dev(self):
		self.debug_mode = True
		self._say("Developer mode activated")
		return True

	def _undev(self):
		self.debug_mode = False
		self._say("Developer mode deactivated")
		return True

	def _run(self):
		self._say("Running all commands...")
		for index, text in enumerate(self.history, 1):
			self.report.info("Replaying #%d: %s" % (index, text))
			self.execute(text, origin="history line %d" % index, number=index)
		self.report.info("Bound after replay:", ", ".join(sorted(self.env)))
		return True

	def _exit(self):
		self._say("Exiting")
		return False

	def feed(self, lines:Iterable[str]) -> bool:
		""" Handle lines until they run out or one of them is exit. False means exit was seen. """
		for line in lines:
			if not self.handle(line):
				return False
		return True

	def interact(self, stream:Optional[TextIO]=None):
		""" The read loop. End of input ends the session just like exit does. """
		stream = sys.stdin if stream is None else stream
		while True:
			self.out.write(PROMPT)
			self.out.flush()
			line = stream.readline()
			if not line:
				self._say("")
				return
			if not self.handle(line):
				return
