import unittest

from smartcalc.scanner import scan, Scanner, State, InvalidExpression

class ScannerTests(unittest.TestCase):
	""" What the scanner accepts, and what it makes of it. """

	def test_simple_tokens(self):
		self.assertEqual(["2", "+", "3", "*", "4"], scan("2+3*4"))
		self.assertEqual(["(", "2", "+", "3", ")", "*", "4"], scan("(2 + 3) * 4"))
		self.assertEqual(["abc", "^", "12"], scan("abc ^ 12"))

	def test_fragments_accumulate(self):
		self.assertEqual(["12345"], scan("12345"))
		self.assertEqual(["a1"], scan("a1"))

	def test_sign_runs_collapse(self):
		for text, expect in [
			("--5", ["5"]),
			("-+5", ["-", "5"]),
			("---5", ["-", "5"]),
			("+5", ["5"]),
			("++ +5", ["5"]),
			("-5", ["-", "5"]),
			("8 - -3", ["8", "+", "3"]),
			("8 -- -3", ["8", "-", "3"]),
			("8 + - + 3", ["8", "-", "3"]),
			("8+++3", ["8", "+", "3"]),
			("-(3+4)", ["-", "(", "3", "+", "4", ")"]),
		]:
			with self.subTest(text):
				self.assertEqual(expect, scan(text))

	def test_nested_parentheses(self):
		self.assertEqual(["(", "(", "1", ")", ")"], scan("((1))"))
		self.assertEqual(["2", "*", "(", "(", "1", "+", "x", ")", "-", "y", ")"], scan("2*((1+x)-y)"))

	def test_spaces_around_operators(self):
		self.assertEqual(["5", "+", "4"], scan("5 +   4"))
		self.assertEqual(["(", "5", ")"], scan("( 5 )"))

	def test_rejects(self):
		for text in [
			"(4 + 2 + )",
			"5 4 + ",
			"54 43 + 45",
			"2 +",
			"2 *",
			"(",
			"(2",
			"2)",
			"())",
			"()",
			"*2",
			"2**3",
			"2*-3",
			"2/+3",
			"(-5)",
			"x(1)",
			"5 (1)",
			"(2) 3",
			"(1)x y",
			"2 % 3",
			"2\t+3",
			"",
			"-",
		]:
			with self.subTest(text):
				with self.assertRaises(InvalidExpression):
					scan(text)

	def test_failure_column(self):
		with self.assertRaises(InvalidExpression) as cm:
			scan("12 $ 3")
		self.assertEqual(3, cm.exception.column)
		with self.assertRaises(InvalidExpression) as cm:
			scan("(1+2")
		self.assertEqual(4, cm.exception.column)
		self.assertIn("unclosed", cm.exception.hint)

	def test_juxtaposed_groups(self):
		for text, expect in [
			("(1)(2)", ["(", "1", ")", "(", "2", ")"]),
			("(1) (2)", ["(", "1", ")", "(", "2", ")"]),
			("(2)3", ["(", "2", ")", "3"]),
			("(1)(2)+3", ["(", "1", ")", "(", "2", ")", "+", "3"]),
		]:
			with self.subTest(text):
				self.assertEqual(expect, scan(text))

	def test_final_state(self):
		sut = Scanner("(1)")
		sut.scan()
		self.assertIs(State.AFTER_CLOSE, sut.state)
		sut = Scanner("1 + x")
		sut.scan()
		self.assertIs(State.IN_OPERAND, sut.state)


if __name__ == '__main__':
	unittest.main()
