"""
Postfix evaluation over an operand stack.

The stack starts with an implicit zero, so that a leading sign
(which the scanner writes as an ordinary binary operator)
applies to nothing in particular: `-5` means `0 - 5`.
"""
from typing import Iterable

from .diagnostics import CalculatorError
from .environment import Environment
from .number import PRIMITIVE_BINARY, parse_literal

class UnknownVariable(CalculatorError):
	message = "Unknown variable"
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name

def resolve(token:str, env:Environment) -> int:
	value = parse_literal(token)
	if value is None:
		value = env.get(token)
	if value is None:
		raise UnknownVariable(token)
	return value

def evaluate(postfix:Iterable[str], env:Environment) -> int:
	stack = [0]
	for token in postfix:
		if token in PRIMITIVE_BINARY:
			assert len(stack) >= 2, "operand stack underflow at %r"%token
			right = stack.pop()
			left = stack.pop()
			stack.append(PRIMITIVE_BINARY[token](left, right))
		else:
			stack.append(resolve(token, env))
	return stack[-1]
