"""
The expression engine: postfix text in, deferred computation out.

Each character of the input is one token. Literals push a leaf;
anything else must name a registered operator, which consumes
the top two items of the stack and pushes an application.
Nothing gets evaluated until the caller forces the result.
"""
from .lazy import LAZY, RULE, Literal, Application, force
from .primitive import LITERALS, BUILT_IN_RULES
from .registry import Registry, CalculatorError, UnknownOperator

class PostfixSyntaxError(CalculatorError, SyntaxError):
	""" The token sequence does not describe exactly one expression. """
	def __init__(self, message:str, position:int):
		super().__init__(message)
		self.message = message
		self.position = position
	
	def __str__(self):
		return self.message

class LazyCalculator:
	""" One registry of operators, pre-loaded with the arithmetic built-ins. """
	
	def __init__(self):
		self.registry = Registry(reserved=LITERALS)
		for symbol, rule in BUILT_IN_RULES.items():
			self.registry.define(symbol, rule)
	
	def define(self, symbol:str, rule:RULE) -> RULE:
		return self.registry.define(symbol, rule)
	
	def parse(self, text:str) -> LAZY:
		assert isinstance(text, str), type(text)
		stack = []
		for position, symbol in enumerate(text):
			if symbol in LITERALS:
				stack.append(Literal(symbol, LITERALS[symbol]))
				continue
			try: rule = self.registry.lookup(symbol)
			except UnknownOperator as ex:
				ex.position = position
				raise
			if len(stack) < 2:
				raise PostfixSyntaxError("Operator %r needs two operands but finds %d."%(symbol, len(stack)), position)
			right = stack.pop()
			left = stack.pop()
			stack.append(Application(symbol, rule, left, right))
		if not stack:
			raise PostfixSyntaxError("There is no expression here.", len(text))
		if len(stack) > 1:
			raise PostfixSyntaxError("%d values are left over with no operator to combine them."%len(stack), len(text))
		return stack[0]
	
	def calculate(self, text:str) -> int:
		return force(self.parse(text))
