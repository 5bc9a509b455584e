"""
This is a calculator for whole numbers of any size.

{0}

Type an expression such as `(2+3)*4` to see its value,
or an assignment such as `x = 42` to remember a number by name.
Type /help for more, or /exit to leave.
"""
import sys, argparse
from typing import Iterable, Iterator

HELP = """
The program performs all major arithmetic operations:
    + : addition of two operands
    - : subtraction of two operands
    * : multiplication of two operands
    / : division between two operands, rounding toward zero
    ^ : power operator
    (): parentheses to group operations in higher priority
    [Supports sign { - or + } at the beginning. ex: -(34+5-7)]
    [Space between numbers and variables is not allowed : 54 43 + 45 -> Invalid expression]
    [Equations can't end with an operator : (4 + 2 +  ) -> Invalid expression]
    [Variables are made of letters only, and are assigned like : n = 42]
""".strip()

parser = argparse.ArgumentParser(
	prog="smartcalc",
	description="Calculator for arbitrarily large integers, with variables.",
)
parser.add_argument('-c', "--command", action="append", metavar="LINE", help="Execute this line instead of reading the console. May be given more than once.")
parser.add_argument('-v', "--verbose", action="count", help="Explain what went wrong with each bad line, and show the postfix form of each expression.")
parser.add_argument('-q', "--quiet", action="store_true", help="Do not say goodbye.")

def console_lines() -> Iterator[str]:
	while True:
		try: yield input()
		except EOFError: return

def command(text:str, quiet:bool=False) -> bool:
	""" Handle a slash-command. Returns True when it's time to stop. """
	if text == "/help":
		print(HELP)
	elif text == "/exit":
		if not quiet: print("Bye!")
		return True
	else:
		print("Unknown command")
	return False

def session(lines:Iterable[str], quiet:bool=False, verbose:int=0):
	from .calculator import execute
	from .diagnostics import Report
	from .environment import Environment
	env = Environment()
	report = Report(verbose=verbose)
	for line in lines:
		text = line.strip()
		if not text:
			continue
		if text.startswith("/"):
			if command(text, quiet): break
			continue
		try:
			result = execute(text, env, report)
		except ArithmeticError as ex:
			print(ex)
		else:
			if result is not None:
				print(result)
		if report.sick():
			if verbose: report.complain_to_console()
			report.reset()

def run(args):
	if args.command:
		session(args.command, quiet=True, verbose=args.verbose)
	else:
		session(console_lines(), quiet=args.quiet, verbose=args.verbose)

def main():
	args = parser.parse_args()
	if not args.command and sys.stdin.isatty():
		print(__doc__.strip().format(parser.format_usage()))
	exit(run(args))
