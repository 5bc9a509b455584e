"""
The one entry point the shell needs: execute a line, get back what to print.

A line with an = sign in it is an assignment.
Anything else is an expression, which goes through the
scanner, the shunting-yard, and the postfix evaluator in turn.
"""
import re
from typing import Optional

from .diagnostics import CalculatorError, Report
from .environment import Environment
from .number import parse_literal
from .scanner import scan, InvalidExpression
from .shunting import to_postfix
from .evaluator import evaluate, UnknownVariable

IDENTIFIER = re.compile(r"[a-zA-Z]+")

class InvalidIdentifier(CalculatorError):
	message = "Invalid identifier"

class InvalidAssignment(CalculatorError):
	message = "Invalid assignment"

def assign(line:str, env:Environment):
	if line.count("=") > 1:
		raise InvalidAssignment("Only one = sign per assignment, please.")
	name, source = (part.strip() for part in line.split("=", 1))
	if not IDENTIFIER.fullmatch(name):
		raise InvalidIdentifier(name)
	value = parse_literal(source)
	if value is None:
		value = env.get(source)
	if value is None:
		raise InvalidAssignment("The right side must be a number or an assigned variable, not %r."%source)
	env.set(name, value)

def equation(line:str, env:Environment, report:Report) -> int:
	infix = scan(line)
	postfix = to_postfix(infix)
	report.info("postfix:", " ".join(postfix))
	return evaluate(postfix, env)

def execute(line:str, env:Environment, report:Report) -> Optional[str]:
	"""
	Returns the decimal text of a result, or the message for whatever went wrong,
	or None after a successful assignment. Details of any problem go to the report.
	Arithmetic errors such as division by zero are not caught here.
	"""
	try:
		if "=" in line:
			assign(line, env)
		else:
			return str(equation(line, env, report))
	except InvalidExpression as ex:
		report.bad_expression(line, ex.column, ex.hint)
		return ex.message
	except UnknownVariable as ex:
		report.unknown_variable(line, ex.name)
		return ex.message
	except InvalidIdentifier as ex:
		report.bad_identifier(line, ex.args[0])
		return ex.message
	except InvalidAssignment as ex:
		report.bad_assignment(line, ex.args[0])
		return ex.message
