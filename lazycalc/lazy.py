"""
Deferred computations, as built by the parser.

These are deliberately not memoized: each force runs the computation again,
side effects and all. A rule decides for itself whether, how often,
and in which order to force its operands.
"""
from typing import Callable

LAZY = Callable[[], int]
RULE = Callable[[LAZY, LAZY], int]

class Literal:
	""" A leaf: forcing it just yields the value. """
	def __init__(self, symbol:str, value:int):
		self.symbol = symbol
		self.value = value
	
	def __call__(self) -> int:
		return self.value
	
	def __str__(self):
		return self.symbol
	
	def __repr__(self):
		return "<Literal %s>"%self.symbol

class Application:
	"""
	An operator applied to two not-yet-values.
	The rule is captured at construction, so later changes
	to the registry cannot alter what this computes.
	"""
	def __init__(self, symbol:str, rule:RULE, left:LAZY, right:LAZY):
		self.symbol = symbol
		self.rule = rule
		self.left = left
		self.right = right
	
	def __call__(self) -> int:
		return self.rule(self.left, self.right)
	
	def __str__(self):
		return render(self)
	
	def __repr__(self):
		return "<Application %s>"%self

def render(it:LAZY) -> str:
	"""
	Fully parenthesized infix, e.g. ((4 + 2) * 2).
	Works from an explicit stack, so deeply nested expressions render fine.
	"""
	parts = []
	todo = [it]
	while todo:
		item = todo.pop()
		if isinstance(item, Application):
			todo.extend((")", item.right, " %s "%item.symbol, item.left, "("))
		else:
			parts.append(str(item))
	return "".join(parts)

def force(it:LAZY) -> int:
	""" Run a deferred computation once and hand back its value. """
	assert callable(it), type(it)
	return it()
