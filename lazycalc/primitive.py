"""
The fixed literal alphabet and the built-in arithmetic operators.
"""
import operator

LITERALS = {
	"0": 0,
	"2": 2,
	"4": 4,
}

# Integer division is Python's floor division. Division by zero raises ZeroDivisionError when forced.
PRIMITIVE_BINARY = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : operator.floordiv,
}

def strict(op):
	""" Lift a plain binary function into a rule that forces left, then right, once each. """
	def rule(left, right):
		a = left()
		b = right()
		return op(a, b)
	rule.__name__ = getattr(op, "__name__", "rule")
	return rule

BUILT_IN_RULES = {symbol: strict(op) for symbol, op in PRIMITIVE_BINARY.items()}
