"""
Collecting and explaining the things that went wrong.

Nothing here prints as it goes, except `info` in verbose mode.
Issues pile up in a Report until someone asks to hear about them.
"""
import sys, random
from typing import Any
from boozetools.support.failureprone import illustration

from .calculator import PostfixSyntaxError
from .registry import UnknownOperator, OperatorAlreadyDefined

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]
	minced_oaths = [
		'Drat', 'Rats', 'Fiddlesticks', 'Botheration', 'Good Grief',
		'Great Scott', 'Jeepers', 'Nuts', 'Shucks', 'Stack Underflow',
	]
	resignations = [
		'That did not add up.',
		'The arithmetic has failed me.',
		'I cannot make sense of this.',
		'Something does not compute.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Annotation:
	""" Points at one character of one expression. """
	def __init__(self, text:str, position:int, caption:str="", number:int=1):
		self.text = text
		self.position = position
		self.caption = caption
		self.number = number
	
	def illustrate(self):
		return illustration(self.text, self.position, 1, prefix='% 6d |' % self.number, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	_issues : list[Pic]
	
	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	def count(self): return len(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	def assert_no_issues(self, message):
		if self.sick():
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# Methods the calculator front-end is likely to call:
	
	def bad_syntax(self, text:str, ex:PostfixSyntaxError, number:int=1):
		intro = "This is not a well-formed postfix expression."
		if ex.position < len(text): caption = "confused here"
		else: caption = "ran out of input here"
		problem = [Annotation(text, ex.position, caption, number)]
		self.issue(Pic(intro, problem, [ex.message]))
	
	def unknown_operator(self, text:str, ex:UnknownOperator, known:list[str], number:int=1):
		intro = "I don't know an operator called %r."%ex.symbol
		problem = [Annotation(text, ex.position, "this one", number)]
		footer = [
			"Literals are 0, 2 and 4; everything else must be defined first.",
			"Operators defined so far: "+" ".join(known),
		]
		self.issue(Pic(intro, problem, footer))
	
	def already_defined(self, ex:OperatorAlreadyDefined):
		intro = "The symbol %r is already spoken for; operators cannot be redefined."%ex.symbol
		self.issue(Pic(intro, []))
	
	def failed_evaluation(self, text:str, ex:Exception, number:int=1):
		intro = "Evaluating expression %d went wrong: %s"%(number, ex)
		self.issue(Pic(intro, [], ["    "+text]))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
