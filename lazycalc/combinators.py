"""
Rules that make use of laziness: they choose which operands to force, and how often.

None of these are installed by default. Use `install` to put the
usual table into a calculator, or `define` them one at a time.
"""
from typing import Callable
from .lazy import LAZY, RULE

def decimal(left:LAZY, right:LAZY) -> int:
	""" Two digits side by side: 4 ! 2 gives 42. """
	return left() * 10 + right()

def sequence(left:LAZY, right:LAZY) -> int:
	""" Force the left side for its effects, then yield the right. """
	left()
	return right()

def repeat(count:LAZY, body:LAZY) -> int:
	""" Force the body as many times as the count says. """
	for _ in range(count()):
		body()
	return 0

def guard(condition:LAZY, consequence:LAZY) -> int:
	""" Short-circuit: the consequence is never forced when the condition is zero. """
	return consequence() if condition() else 0

def constant(value:int) -> RULE:
	def rule(left:LAZY, right:LAZY) -> int:
		return value
	return rule

def emitter(write:Callable[[str], object], text:str) -> RULE:
	"""
	A rule with a side effect: every time it is forced, `write` gets called with `text`.
	Neither operand is forced. Handy for observing how often something runs.
	"""
	def rule(left:LAZY, right:LAZY) -> int:
		write(text)
		return 0
	return rule

EXTRAS = {
	"!": decimal,
	",": sequence,
	"$": repeat,
	"?": guard,
}

def install(calculator, table:dict[str, RULE]=EXTRAS):
	for symbol, rule in table.items():
		calculator.define(symbol, rule)
	return calculator
