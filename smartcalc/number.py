"""
The number type is Python's own int, which is already arbitrary-precision.
What lives here are the few places the calculator's arithmetic
disagrees with Python's operators, plus the literal syntax.

Importing this module lifts the interpreter-wide limit on int-to-decimal
conversions (sys.set_int_max_str_digits), for every caller in the process.
Arbitrary precision would otherwise stop at a few thousand digits of text.
"""
import re
import sys
import operator
from typing import Optional

if hasattr(sys, "set_int_max_str_digits"):
	sys.set_int_max_str_digits(0)

LITERAL = re.compile(r"[+-]?\d+")

def parse_literal(text:str) -> Optional[int]:
	""" Decimal integer text, optionally signed, in any script's digits; or None. """
	if LITERAL.fullmatch(text):
		return int(text)

def divide(left:int, right:int) -> int:
	""" Integer division that truncates toward zero, unlike the // operator. """
	if right == 0:
		raise ZeroDivisionError("Division by zero")
	quotient = abs(left) // abs(right)
	return quotient if (left < 0) == (right < 0) else -quotient

def power(left:int, right:int) -> int:
	"""
	Exponentiation goes by way of floating point and truncates back to an integer.
	That is exact for modest magnitudes and approximate beyond about 2**53.
	Too-large results raise OverflowError.
	"""
	try:
		return int(float(left) ** float(right))
	except ZeroDivisionError:
		raise ZeroDivisionError("Division by zero") from None
	except OverflowError:
		raise OverflowError("Power too large to compute") from None

PRIMITIVE_BINARY = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : divide,
	"^" : power,
}
