import sys, random
from typing import Any, Optional
from boozetools.support.failureprone import SourceText, illustration

from .errors import XinterError

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Gack', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', "Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'That line did not work out.',
		'Let us try another line.',
		'I have no idea what the right answer is.',
		'Nothing from that point on took effect.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the issues with a line, so the session can show them and carry on. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def problem_in_line(self, line:str, ex:XinterError, origin:Optional[str]=None, *, number:Optional[int]=None):
		intro = ex.describe()
		if ex.span is None: problem = []
		else: problem = [Annotation(line, ex.span, type(ex).__name__, number)]
		footer = ["(while replaying: %s)" % origin] if origin else ()
		self.issue(Pic(intro, problem, footer))

class Annotation:
	text: str
	slice: slice
	caption: str
	number: Optional[int]  # Position in the session history, if the line has one.
	def __init__(self, text:str, span:slice, caption:str="", number:Optional[int]=None):
		self.text = text
		self.slice = span
		self.caption = caption
		self.number = number
	def prefix(self) -> str:
		if self.number is None: return ' '*6 + ' |'
		return '% 6d |' % self.number
	def illustrate(self):
		# The extra space leaves room to point just past the end of the line.
		source = SourceText(self.text + " ")
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix=self.prefix(), caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
