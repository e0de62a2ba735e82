import unittest
from abnftools.support.symtab import NameSpace
from abnftools.grammar import patterns as P
from abnftools.grammar.matching import GrammarContext, match

a, b, c, d = (P.terminal(x, False) for x in 'abcd')

def context(**rules):
	table = NameSpace()
	for name, pattern in rules.items(): table[name] = pattern
	return GrammarContext(table)

class TestTerminals(unittest.TestCase):
	def test_00_terminal(self):
		result = match(P.terminal('abc', False), 'xABCx', 1, context())
		self.assertTrue(result.success)
		self.assertEqual(4, result.position)

	def test_01_case_sensitive_terminal(self):
		self.assertTrue(match(P.terminal('aB', True), 'aB', 0, context()).success)
		result = match(P.terminal('aB', True), 'ab', 0, context())
		self.assertFalse(result.success)
		self.assertEqual("Expected 'aB' but found 'ab'", result.message)

	def test_02_case_folding_is_ascii_only(self):
		self.assertTrue(match(P.terminal('k', False), 'K', 0, context()).success)
		self.assertFalse(match(P.terminal('k', False), '\u212a', 0, context()).success) # KELVIN SIGN

	def test_03_end_of_input(self):
		result = match(P.terminal('abc', False), 'ab', 0, context())
		self.assertEqual((False, 0), (result.success, result.position))
		self.assertEqual("Expected 'abc' but reached end of input", result.message)

	def test_04_char_range(self):
		ctx = context()
		self.assertEqual(1, match(P.char_range(0x41, 0x5A), 'Q', 0, ctx).position)
		result = match(P.char_range(0x41, 0x5A), 'a', 0, ctx)
		self.assertEqual("Expected character in range ['A'-'Z' (41-5A)] but found 'a' (61)", result.message)
		result = match(P.char_range(0, 0x1F), '', 0, ctx)
		self.assertEqual("Expected character in range [0-1F] but reached end of input", result.message)

	def test_05_char_value(self):
		ctx = context()
		self.assertTrue(match(P.char_value(0x0A), '\n', 0, ctx).success)
		result = match(P.char_value(0x0A), 'x', 0, ctx)
		self.assertEqual("Expected character A but found 'x' (78)", result.message)

class TestComposites(unittest.TestCase):
	def test_00_sequence(self):
		ctx = context()
		self.assertEqual(3, match(P.sequence((a, b, c)), 'abc', 0, ctx).position)
		result = match(P.sequence((a, b, c)), 'abx', 0, ctx)
		self.assertEqual((False, 2), (result.success, result.position))
		self.assertEqual(2, result.furthest_position)
		self.assertTrue(match(P.sequence(()), '', 0, ctx).success)

	def test_01_alternation_takes_first_success(self):
		result = match(P.alternation((a, P.sequence((a, b)))), 'ab', 0, context())
		self.assertEqual((True, 1), (result.success, result.position))

	def test_02_alternation_reports_furthest_failure(self):
		pattern = P.alternation((P.sequence((a, b)), P.sequence((a, c, d)), c))
		result = match(pattern, 'acx', 0, context())
		self.assertFalse(result.success)
		self.assertEqual(2, result.furthest_position)
		self.assertEqual("Expected 'd' but found 'x'", result.furthest_message)

	def test_03_alternation_ties_go_to_the_first(self):
		result = match(P.alternation((P.terminal('x', False), P.terminal('y', False))), 'z', 0, context())
		self.assertEqual("Expected 'x' but found 'z'", result.furthest_message)

	def test_04_repetition_bounds(self):
		ctx = context()
		self.assertEqual(3, match(P.repetition(a, None, None), 'aaab', 0, ctx).position)
		self.assertEqual(2, match(P.repetition(a, 0, 2), 'aaa', 0, ctx).position)
		self.assertEqual(0, match(P.repetition(a, 0, 1), 'b', 0, ctx).position)
		self.assertTrue(match(P.repetition(a, 2, None), 'aa', 0, ctx).success)

	def test_05_repetition_too_few(self):
		result = match(P.repetition(a, 2, None), 'ab', 0, context())
		self.assertFalse(result.success)
		self.assertEqual(0, result.position)
		self.assertEqual(1, result.furthest_position)
		self.assertEqual("Expected 'a' but found 'b'", result.furthest_message)

	def test_06_repetition_impossible_bounds(self):
		result = match(P.repetition(a, 3, 2), 'aaa', 0, context())
		self.assertFalse(result.success)
		self.assertEqual("Expected at least 3 occurrences but found 2", result.message)

	def test_07_zero_width_repetition_terminates(self):
		optional_a = P.repetition(a, 0, 1)
		result = match(P.repetition(optional_a, None, None), 'b', 0, context())
		self.assertEqual((True, 0), (result.success, result.position))
		result = match(P.repetition(optional_a, 5, None), 'aab', 0, context())
		self.assertEqual((True, 2), (result.success, result.position))

class TestRules(unittest.TestCase):
	def test_00_reference(self):
		ctx = context(pair=P.sequence((a, P.rule_reference('B'))), b=b)
		self.assertTrue(match(P.rule_reference('PAIR'), 'ab', 0, ctx).success)
		self.assertEqual(0, ctx.depth())

	def test_01_undefined(self):
		result = match(P.rule_reference('nope'), 'x', 0, context())
		self.assertEqual("Undefined rule 'nope'", result.message)

	def test_02_right_recursion_is_fine(self):
		ctx = context(list=P.alternation((P.sequence((a, P.rule_reference('list'))), a)))
		result = match(P.rule_reference('list'), 'aaaa', 0, ctx)
		self.assertEqual((True, 4), (result.success, result.position))
		self.assertIsNone(ctx.left_recursion)

	def test_03_left_recursion(self):
		ctx = context(expr=P.alternation((P.sequence((P.rule_reference('expr'), P.terminal('+', False), a)), a)))
		result = match(P.rule_reference('expr'), 'a+a', 0, ctx)
		self.assertIsNotNone(ctx.left_recursion)
		self.assertEqual(0, ctx.left_recursion.position)
		self.assertTrue(ctx.left_recursion.message.startswith("Left recursion detected in rule 'expr'"))
		self.assertEqual(0, ctx.depth())

	def test_04_indirect_left_recursion(self):
		ctx = context(x=P.sequence((P.rule_reference('y'), a)), y=P.sequence((P.rule_reference('x'), b)))
		result = match(P.rule_reference('x'), 'ba', 0, ctx)
		self.assertFalse(result.success)
		self.assertIn("x -> y -> x", result.message)

	def test_05_frames_pop_on_exception(self):
		class Explosive(Exception): pass
		ctx = context(r=a)
		with self.assertRaises(Explosive):
			with ctx.entering('r', 0):
				self.assertTrue(ctx.is_in_recursion_chain('R', 0))
				raise Explosive
		self.assertEqual(0, ctx.depth())
		self.assertFalse(ctx.is_in_recursion_chain('r', 0))

	def test_06_deepest_failure_is_remembered(self):
		ctx = context()
		match(P.alternation((P.sequence((a, b, c)), a)), 'abx', 0, ctx)
		self.assertEqual(2, ctx.deepest.position)
		self.assertEqual("Expected 'c' but found 'x'", ctx.deepest.message)


if __name__ == '__main__':
	unittest.main()
