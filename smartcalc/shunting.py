"""
Dijkstra's shunting-yard, rearranging infix tokens into postfix order.

All operators associate to the left, including ^.
The input must have come through the scanner, which guarantees balanced
parentheses and an operand at either end.
"""
from typing import Iterable

PRECEDENCE = {
	"+" : 1,
	"-" : 1,
	"*" : 2,
	"/" : 2,
	"^" : 3,
}

def to_postfix(infix:Iterable[str]) -> list[str]:
	postfix, stack = [], []
	for token in infix:
		if token in PRECEDENCE:
			rank = PRECEDENCE[token]
			while stack and stack[-1] != "(" and PRECEDENCE[stack[-1]] >= rank:
				postfix.append(stack.pop())
			stack.append(token)
		elif token == "(":
			stack.append(token)
		elif token == ")":
			top = stack.pop()
			while top != "(":
				postfix.append(top)
				top = stack.pop()
		else:
			postfix.append(token)
	while stack:
		postfix.append(stack.pop())
	return postfix
