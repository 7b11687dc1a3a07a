"""
The table of operator symbols and their evaluation rules.
"""
from typing import Iterable
from .lazy import RULE

class CalculatorError(Exception):
	""" Common ancestor for everything the calculator itself complains about. """

class OperatorAlreadyDefined(CalculatorError, KeyError):
	def __init__(self, symbol:str):
		super().__init__(symbol)
		self.symbol = symbol
	
	def __str__(self):
		return "%r is already taken"%self.symbol

class UnknownOperator(CalculatorError, KeyError):
	def __init__(self, symbol:str, position:int=None):
		super().__init__(symbol)
		self.symbol = symbol
		self.position = position
	
	def __str__(self):
		return "no operator is defined for %r"%self.symbol

class Registry:
	"""
	Lightly enhanced dictionary: It does not like duplicate keys,
	nor keys that collide with the reserved (literal) symbols.
	There is no way to remove or replace an entry.
	"""
	_rules: dict[str, RULE]
	
	def __init__(self, reserved:Iterable[str]=()):
		self._reserved = frozenset(reserved)
		self._rules = {}
	
	def __contains__(self, symbol:str) -> bool:
		return symbol in self._rules
	
	def __len__(self):
		return len(self._rules)
	
	def symbols(self) -> list[str]:
		return sorted(self._rules)
	
	def define(self, symbol:str, rule:RULE) -> RULE:
		if not (isinstance(symbol, str) and len(symbol) == 1):
			raise ValueError("An operator symbol is exactly one character, not %r"%(symbol,))
		assert callable(rule), rule
		if symbol in self._rules or symbol in self._reserved:
			raise OperatorAlreadyDefined(symbol)
		self._rules[symbol] = rule
		return rule
	
	def lookup(self, symbol:str) -> RULE:
		try: return self._rules[symbol]
		except KeyError: raise UnknownOperator(symbol) from None
