"""
Turns one line of text into a list of tokens, or else refuses it.

This is a small finite-state machine. The state says what sort of thing
the scanner most recently saw, which decides what may legally come next.
Letters and digits collect in a buffer that gets flushed as a single token
once something else comes along. Runs of + and - collapse into one pending
sign, which is written out just before whatever follows it.

The scanner does not care whether an operand is a number or a name.
Something like `a1` gets through here and fails later, at look-up time.
"""
from enum import Enum, auto

from .diagnostics import CalculatorError

class InvalidExpression(CalculatorError):
	message = "Invalid expression"
	def __init__(self, column:int, hint:str):
		super().__init__(column, hint)
		self.column, self.hint = column, hint

class State(Enum):
	AFTER_SIGN = auto()      # Also the initial state: as if a + were pending.
	AFTER_OPERATOR = auto()  # One of * / ^
	AFTER_OPEN = auto()
	IN_OPERAND = auto()
	AFTER_CLOSE = auto()

OPERAND_COMPLETE = frozenset([State.IN_OPERAND, State.AFTER_CLOSE])

SIGNS = "+-"
OPERATORS = "*/^"

class Scanner:
	def __init__(self, text:str):
		self._text = text
		self._tokens = []
		self._buffer = []
		self._state = State.AFTER_SIGN
		self._sign = "+"
		self._depth = 0
		self._space = False
		self._column = 0

	@property
	def state(self) -> State: return self._state

	def scan(self) -> list[str]:
		for self._column, c in enumerate(self._text):
			if c == ' ': self._space = True
			elif c == '(': self._open()
			elif c == ')': self._close()
			elif c in SIGNS: self._sign_char(c)
			elif c in OPERATORS: self._operator(c)
			elif c.isalnum(): self._operand(c)
			else: self._fail("The character %r has no meaning here."%c)
		self._column = len(self._text)
		if self._state not in OPERAND_COMPLETE:
			self._fail("An expression cannot end with an operator or an open parenthesis.")
		self._flush_buffer()
		if self._depth:
			self._fail("There are %d unclosed parentheses."%self._depth)
		return self._tokens

	def _fail(self, hint:str):
		raise InvalidExpression(self._column, hint)

	def _flush_sign(self):
		# A leading + sign needs no token.
		if self._tokens or self._sign == "-":
			self._tokens.append(self._sign)

	def _flush_buffer(self):
		if self._state is State.IN_OPERAND:
			self._tokens.append(''.join(self._buffer))
			self._buffer.clear()

	def _open(self):
		if self._state is State.IN_OPERAND:
			self._fail("An open parenthesis cannot directly follow a number or a name.")
		if self._state is State.AFTER_SIGN:
			self._flush_sign()
		self._tokens.append("(")
		self._depth += 1
		self._state = State.AFTER_OPEN

	def _close(self):
		if self._state not in OPERAND_COMPLETE:
			self._fail("A close parenthesis must follow an operand.")
		if not self._depth:
			self._fail("There is no open parenthesis for this to close.")
		self._flush_buffer()
		self._tokens.append(")")
		self._depth -= 1
		self._space = False
		self._state = State.AFTER_CLOSE

	def _sign_char(self, c:str):
		if self._state is State.AFTER_SIGN:
			if c == "-":
				self._sign = "+" if self._sign == "-" else "-"
		elif self._state in OPERAND_COMPLETE:
			self._flush_buffer()
			self._sign = c
			self._state = State.AFTER_SIGN
		else:
			self._fail("A sign cannot follow %s."%self._describe())

	def _operator(self, c:str):
		if self._state not in OPERAND_COMPLETE:
			self._fail("The %s operator needs an operand before it."%c)
		self._flush_buffer()
		self._tokens.append(c)
		self._state = State.AFTER_OPERATOR

	def _operand(self, c:str):
		# A space may separate an operand from an operator, but not from another operand.
		if self._state in OPERAND_COMPLETE and self._space:
			self._fail("Operands need an operator between them.")
		if self._state is State.AFTER_SIGN:
			self._flush_sign()
		self._buffer.append(c)
		self._space = False
		self._state = State.IN_OPERAND

	def _describe(self):
		if self._state is State.AFTER_OPEN: return "an open parenthesis"
		return "another operator"

def scan(text:str) -> list[str]:
	""" Tokens of a well-formed infix expression; raises InvalidExpression otherwise. """
	return Scanner(text).scan()
