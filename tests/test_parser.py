import unittest
from abnftools.scanning.abnf import scan
from abnftools.parsing.ast import VOCAB
from abnftools.parsing.parser import parse_rule_list, repetition_bounds
from abnftools.parsing.interface import AbnfSyntaxError, LanguageError

alternation = VOCAB['alternation']
concatenation = VOCAB['concatenation']
repetition = VOCAB['repetition']
group = VOCAB['group']
option = VOCAB['option']
literal = VOCAB['literal']
prose_val = VOCAB['prose_val']
number_val = VOCAB['number_val']
rule_ref = VOCAB['rule_ref']
rule = VOCAB['rule']

def parse(text):
	return parse_rule_list(scan(text)).rules

def only_expression(text):
	rules = parse(text)
	assert len(rules) == 1, rules
	return rules[0].expr

class TestRepetitionBounds(unittest.TestCase):
	def test_bounds(self):
		for text, expect in [('*', (None, None)), ('1*', (1, None)), ('*5', (None, 5)), ('2*4', (2, 4))]:
			with self.subTest(text=text):
				self.assertEqual(expect, repetition_bounds(text))

class TestParser(unittest.TestCase):
	def test_00_nothing(self):
		self.assertEqual((), parse(''))
		self.assertEqual((), parse('\n ; nothing but a comment\n\n'))

	def test_01_one_rule(self):
		self.assertEqual((rule('a', literal('x', False), False),), parse('a = "x"'))

	def test_02_alternation_binds_loosest(self):
		self.assertEqual(
			alternation((rule_ref('b'), concatenation((rule_ref('c'), rule_ref('d'))))),
			only_expression('a = b / c d'),
		)

	def test_03_repetitions(self):
		self.assertEqual(
			concatenation((
				repetition(1, 3, rule_ref('x')),
				repetition(2, 2, rule_ref('y')),
				repetition(None, None, rule_ref('z')),
				repetition(None, 4, literal('w', False)),
			)),
			only_expression('r = 1*3x 2y *z *4"w"'),
		)

	def test_04_group_and_option(self):
		self.assertEqual(
			concatenation((
				group(alternation((literal('a', False), literal('b', False)))),
				option(literal('c', False)),
			)),
			only_expression('r = ("a" / "b") [ "c" ]'),
		)

	def test_05_terminal_values(self):
		self.assertEqual(
			concatenation((
				number_val('%x41-5A'),
				number_val('%x41.42'),
				literal('aB', True),
				literal('cD', True),
				literal('eF', False),
				prose_val('some prose'),
			)),
			only_expression('r = %x41-5A %x41.42 %s"aB" \'cD\' %i"eF" <some prose>'),
		)

	def test_06_continuation_lines(self):
		rules = parse('r = a\n    / b ; comment\n    c\n\ns =\n  d\n')
		self.assertEqual(2, len(rules))
		self.assertEqual(alternation((rule_ref('a'), concatenation((rule_ref('b'), rule_ref('c'))))), rules[0].expr)
		self.assertEqual(rule('s', rule_ref('d'), False), rules[1])

	def test_07_continuation_inside_brackets(self):
		self.assertEqual(
			group(concatenation((rule_ref('a'), rule_ref('b')))),
			only_expression('r = (\n  a\n  b\n  )'),
		)

	def test_08_consecutive_rules(self):
		rules = parse('a = b\nc = d\r\ne = f')
		self.assertEqual(['a', 'c', 'e'], [r.name for r in rules])

	def test_09_incremental(self):
		rules = parse('r = a\nr =/ b')
		self.assertEqual([False, True], [r.incremental for r in rules])
		self.assertEqual(rule_ref('b'), rules[1].expr)

	def test_10_syntax_errors(self):
		for text, message, line, column in [
			('r = ', "Expected an element but found end of input", 1, 5),
			('= a', "Expected a rule definition but found '='", 1, 1),
			('r = (a', "Expected ')' but found end of input", 1, 7),
			('r = [a\n\nb = c]', "Expected ']' but found line break", 1, 7),
			('r = a )', "Expected end of rule 'r' but found ')'", 1, 7),
			('r = a\nx = / b', "Expected an element but found '/'", 2, 5),
			('r = a @', "Expected end of rule 'r' but found other '@'", 1, 7),
		]:
			with self.subTest(text=text):
				with self.assertRaises(AbnfSyntaxError) as cm:
					parse(text)
				self.assertEqual(message, cm.exception.message)
				self.assertEqual((line, column), (cm.exception.line, cm.exception.column))

	def test_11_errors_are_value_errors(self):
		with self.assertRaises(ValueError):
			parse('r')
		assert issubclass(AbnfSyntaxError, LanguageError)


if __name__ == '__main__':
	unittest.main()
