"""
This is a lazy postfix calculator.

{0}

For example:

    lazycalc 42+ 242--

will print 6 and then 0, one per line.

    lazycalc -x 42!

will print 42, because -x installs the extra combinators ! , $ and ?.

    lazycalc -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="lazycalc",
	description="Evaluate postfix expressions made of single-character tokens.",
)
parser.add_argument("expression", nargs="+", help="try 22+2-2*2/0- for example.")
parser.add_argument('-c', "--check", action="store_true", help="Parse the expressions but do not evaluate them.")
parser.add_argument('-v', "--verbose", action="count", help="Show each parsed expression in infix form.")
parser.add_argument('-x', "--extras", action="store_true", help="Define the extra combinators (! , $ ?) before evaluating.")

def run(args):
	from .calculator import LazyCalculator, PostfixSyntaxError
	from .registry import UnknownOperator, OperatorAlreadyDefined
	from .diagnostics import Report, TooManyIssues
	from . import combinators
	report = Report(verbose=args.verbose)
	calculator = LazyCalculator()
	try:
		if args.extras:
			try: combinators.install(calculator)
			except OperatorAlreadyDefined as ex:
				report.already_defined(ex)
				report.complain_to_console()
				return 1
		for number, text in enumerate(args.expression, 1):
			try:
				expr = calculator.parse(text)
			except PostfixSyntaxError as ex:
				report.bad_syntax(text, ex, number)
				continue
			except UnknownOperator as ex:
				report.unknown_operator(text, ex, calculator.registry.symbols(), number)
				continue
			if args.verbose:
				report.info("%d: %s"%(number, expr))
			if args.check:
				continue
			try:
				value = expr()
			except (ArithmeticError, RecursionError) as ex:
				report.failed_evaluation(text, ex, number)
				continue
			print(value)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.ok():
		if args.check:
			print("Looks plausible to me.", file=sys.stderr)
		return 0
	report.complain_to_console()
	return 1

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
