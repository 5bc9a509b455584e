"""
Everything to do with telling the user what went wrong.

Each stage of the pipeline raises some flavor of CalculatorError.
The dispatcher catches those and files an issue here;
the shell decides whether to illustrate the issues on the console.
"""
import re, sys, random
from typing import Any, Sequence
from boozetools.support.failureprone import illustration

class CalculatorError(Exception):
	""" Aborts the current line of input, but never the session. """
	message = "Something went wrong"

def _outburst():
	particle = ["Oh, ", "Hmm, ", "Well, ", "", ""]
	oaths = ['Drat', 'Rats', 'Nuts', 'Fiddlesticks', 'Good Grief', 'Crud', 'Confound it', 'Great Scott']
	resignations = [
		'That line does not add up.',
		'I cannot make sense of that.',
		'The arithmetic gods are displeased.',
		'Let us try that again.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, oaths, resignations)))

class Annotation:
	line: str
	slice: slice
	caption: str
	def __init__(self, line:str, start:int, width:int=1, caption:str=""):
		self.line = line
		self.slice = slice(start, start+width)
		self.caption = caption
	def illustrate(self):
		width = self.slice.stop - self.slice.start
		return illustration(self.line, self.slice.start, width, prefix='     > ', caption=self.caption)

def _point_at(line:str, text:str, caption:str) -> Annotation:
	""" Annotate the first whole-word occurrence of text, falling back to any occurrence. """
	found = re.search(r"(?<!\w)%s(?!\w)" % re.escape(text), line) if text else None
	start = found.start() if found else max(line.find(text), 0)
	return Annotation(line, start, max(len(text), 1), caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	""" Collects the issues from one line (or several) of input. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	@property
	def issues(self) -> Sequence[Pic]: return tuple(self._issues)

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

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the dispatcher calls:

	def bad_expression(self, line:str, column:int, hint:str):
		intro = "I could not read that as an expression."
		problem = [Annotation(line, column, 1, "got confused here")]
		self.issue(Pic(intro, problem, [hint]))

	def unknown_variable(self, line:str, name:str):
		intro = "I don't see what '%s' refers to."%name
		problem = [_point_at(line, name, "never assigned")]
		footer = ["Names are made of letters only, and must be assigned before use."]
		self.issue(Pic(intro, problem, footer))

	def bad_identifier(self, line:str, name:str):
		intro = "Only letters may appear in a variable name."
		self.issue(Pic(intro, [_point_at(line, name, "this one")]))

	def bad_assignment(self, line:str, hint:str):
		intro = "That assignment does not work."
		self.issue(Pic(intro, [], [hint]))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
