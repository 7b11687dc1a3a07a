import unittest

from lazycalc import LazyCalculator, PostfixSyntaxError, UnknownOperator, OperatorAlreadyDefined, CalculatorError
from lazycalc.combinators import decimal, sequence, repeat, guard, constant, emitter

POMIDOR = "pomidor"

# Forty-two emissions glued together with forty-one sequencing commas.
MANY_EMISSIONS = (
	"42P42P42P42P42P42P42P42P42P42P42P42P42P42P42P4"
	"2P,,,,42P42P42P42P42P,,,42P,42P,42P42P,,,,42P,"
	",,42P,42P,42P,,42P,,,42P,42P42P42P42P42P42P42P"
	"42P,,,42P,42P,42P,,,,,,,,,,,,"
)

class BuiltInTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.calc = LazyCalculator()
	
	def test_literals(self):
		for symbol, value in [("0", 0), ("2", 2), ("4", 4)]:
			with self.subTest(symbol):
				self.assertEqual(value, self.calc.calculate(symbol))
	
	def test_arithmetic(self):
		for text, value in [("42+", 6), ("24-", -2), ("42*", 8), ("42/", 2)]:
			with self.subTest(text):
				self.assertEqual(value, self.calc.calculate(text))
	
	def test_left_associative(self):
		self.assertEqual(0, self.calc.calculate("42-2-"))
		self.assertEqual(0, self.calc.calculate("242--"))
	
	def test_chain(self):
		self.assertEqual(2, self.calc.calculate("22+2-2*2/0-"))
	
	def test_division_rounds_down(self):
		self.assertEqual(-1, self.calc.calculate("24-4/"))
	
	def test_division_by_zero_waits_until_forced(self):
		expr = self.calc.parse("40/")
		with self.assertRaises(ZeroDivisionError):
			expr()
	
	def test_rendering(self):
		self.assertEqual("((4 + 2) * 2)", str(self.calc.parse("42+2*")))
		self.assertEqual("0", str(self.calc.parse("0")))
	
	def test_rendering_deep_expression(self):
		text = "0" + "2+" * 5000
		self.assertEqual("(" * 5000 + "0" + " + 2)" * 5000, str(self.calc.parse(text)))

class MalformedInputTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.calc = LazyCalculator()
	
	def test_syntax_errors(self):
		for bogon in ["", "42", "4+", "424+"]:
			with self.subTest(bogon):
				with self.assertRaises(PostfixSyntaxError):
					self.calc.calculate(bogon)
	
	def test_syntax_error_is_a_syntax_error(self):
		with self.assertRaises(SyntaxError):
			self.calc.parse("2+")
		with self.assertRaises(CalculatorError):
			self.calc.parse("2+")
	
	def test_positions(self):
		for bogon, position in [("", 0), ("42", 2), ("4+", 1), ("424+", 4), ("42+4+4", 6)]:
			with self.subTest(bogon):
				with self.assertRaises(PostfixSyntaxError) as cm:
					self.calc.parse(bogon)
				self.assertEqual(position, cm.exception.position)
	
	def test_unknown_operator(self):
		with self.assertRaises(UnknownOperator) as cm:
			self.calc.calculate("02&")
		self.assertEqual("&", cm.exception.symbol)
		self.assertEqual(2, cm.exception.position)
	
	def test_unknown_operator_beats_underflow(self):
		with self.assertRaises(UnknownOperator):
			self.calc.parse("&")

class DefinitionTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.calc = LazyCalculator()
		self.buffer = []
		self.calc.define("!", decimal)
		self.calc.define(",", sequence)
		self.calc.define("P", emitter(self.buffer.append, POMIDOR))
	
	def test_new_operator(self):
		self.assertEqual(42, self.calc.calculate("42!"))
	
	def test_each_emission_happens_once(self):
		self.assertEqual(0, self.calc.calculate(MANY_EMISSIONS))
		self.assertEqual(42, len(self.buffer))
		self.assertEqual(42 * len(POMIDOR), len(''.join(self.buffer)))
	
	def test_parse_does_not_force(self):
		expr = self.calc.parse("42P42P,")
		self.assertEqual([], self.buffer)
		expr()
		self.assertEqual(2, len(self.buffer))
		expr()
		self.assertEqual(4, len(self.buffer))
	
	def test_repeat(self):
		self.calc.define("$", repeat)
		self.assertEqual(0, self.calc.calculate("42!42P$"))
		self.assertEqual([POMIDOR] * 42, self.buffer)
	
	def test_guard_short_circuits(self):
		self.calc.define("$", repeat)
		self.calc.define("?", guard)
		self.assertEqual(0, self.calc.calculate("042P?"))
		self.assertEqual(0, self.calc.calculate("042!42P$?"))
		self.assertEqual([], self.buffer)
		self.assertEqual(0, self.calc.calculate("242P?"))
		self.assertEqual([POMIDOR], self.buffer)
	
	def test_digit_one_can_be_an_operator(self):
		self.calc.define("1", constant(1))
		self.assertEqual(1, self.calc.calculate("021"))
	
	def test_order_of_forcing(self):
		seen = []
		def tap(symbol):
			def rule(left, right):
				seen.append(symbol)
				return 0
			return rule
		self.calc.define("a", tap("a"))
		self.calc.define("b", tap("b"))
		self.calc.define("c", tap("c"))
		self.calc.calculate("00a00b+00c+")
		self.assertEqual(["a", "b", "c"], seen)
	
	def test_redefinition_fails(self):
		for symbol in ["!", "+", "/", "0", "2", "4"]:
			with self.subTest(symbol):
				with self.assertRaises(OperatorAlreadyDefined):
					self.calc.define(symbol, lambda a, b: 0)
	
	def test_failed_redefinition_changes_nothing(self):
		expr = self.calc.parse("42!")
		with self.assertRaises(OperatorAlreadyDefined):
			self.calc.define("!", lambda a, b: -1)
		self.assertEqual(42, expr())
		self.assertEqual(42, self.calc.calculate("42!"))

if __name__ == '__main__':
	unittest.main()
