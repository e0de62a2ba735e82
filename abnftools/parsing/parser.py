"""
Recursive descent over ABNF tokens.

The grammar of ABNF, as this parser sees it (compare RFC 5234 section 4):

	rulelist      = *( rule / trivia / line-break )
	rule          = rulename "=" [ "/" ] alternation line-break-or-end
	alternation   = concatenation *( "/" concatenation )
	concatenation = repetition *repetition
	repetition    = [ repeat / specific-count ] element
	element       = rulename / group / option / char-val / num-val / prose-val / integer
	group         = "(" alternation ")"
	option        = "[" alternation "]"

Trivia may appear between any two tokens, and a line break may appear
wherever the cursor judges it to be a continuation line rather than a
rule boundary.
"""
from typing import Iterable

from ..scanning import interface as T
from ..scanning.abnf import literal_value
from .ast import VOCAB
from .cursor import TokenCursor
from .interface import AbnfSyntaxError

ELEMENT_START = frozenset([
	T.RULE_NAME, T.OPEN_PAREN, T.OPEN_BRACKET, T.CHAR_VAL, T.CASE_SENSITIVE_CHAR_VAL,
	T.NUM_VAL, T.VALUE_RANGE, T.PROSE_VAL,
])
REPETITION_START = ELEMENT_START | {T.INTEGER, T.REPEAT}

def repetition_bounds(text:str) -> tuple:
	""" Decode a repeat token, e.g. "1*3" -> (1, 3), "*" -> (None, None). None means unbounded. """
	low, high = text.split('*')
	return (int(low) if low else None), (int(high) if high else None)

def parse_rule_list(tokens:Iterable[T.Token]):
	return Parser(tokens).parse_rule_list()

class Parser:
	def __init__(self, tokens:Iterable[T.Token]):
		self.__cursor = TokenCursor(tokens)

	def __error(self, message):
		token = self.__cursor.current()
		return AbnfSyntaxError(message+" but found "+token.describe(), token.line, token.column)

	def parse_rule_list(self):
		cursor = self.__cursor
		rules = []
		while not cursor.match(T.END_OF_INPUT):
			if cursor.is_at_rule_start():
				rules.append(self.parse_rule())
			elif cursor.match(T.WHITESPACE, T.COMMENT, T.LINE_BREAK):
				cursor.advance()
			else:
				raise self.__error("Expected a rule definition")
		return VOCAB['rule_list'](tuple(rules))

	def parse_rule(self):
		cursor = self.__cursor
		cursor.skip_trivia()
		name = cursor.expect(T.RULE_NAME).text
		cursor.skip_trivia()
		cursor.expect(T.EQUAL)
		incremental = cursor.match(T.SLASH)
		if incremental: cursor.advance()
		cursor.skip_trivia()
		cursor.skip_continuation_lines()
		expr = self.parse_alternation()
		cursor.skip_trivia()
		cursor.skip_continuation_lines()
		if cursor.is_at_rule_boundary():
			cursor.advance()
		elif not cursor.match(T.END_OF_INPUT):
			raise self.__error("Expected end of rule %r"%name)
		return VOCAB['rule'](name, expr, incremental)

	def __at_end_of_rule(self) -> bool:
		return self.__cursor.is_at_rule_boundary() or self.__cursor.match(T.END_OF_INPUT)

	def parse_alternation(self):
		cursor = self.__cursor
		options = [self.parse_concatenation()]
		while True:
			cursor.skip_trivia()
			cursor.skip_continuation_lines()
			if self.__at_end_of_rule() or not cursor.match(T.SLASH):
				break
			cursor.advance()
			cursor.skip_trivia()
			cursor.skip_continuation_lines()
			options.append(self.parse_concatenation())
		if len(options) == 1: return options[0]
		return VOCAB['alternation'](tuple(options))

	def parse_concatenation(self):
		cursor = self.__cursor
		elements = [self.parse_repetition()]
		while True:
			cursor.skip_trivia()
			cursor.skip_continuation_lines()
			if self.__at_end_of_rule() or not cursor.match(*REPETITION_START):
				break
			elements.append(self.parse_repetition())
		if len(elements) == 1: return elements[0]
		return VOCAB['concatenation'](tuple(elements))

	def parse_repetition(self):
		cursor = self.__cursor
		if cursor.match(T.REPEAT):
			low, high = repetition_bounds(cursor.advance().text)
			cursor.skip_trivia()
			return VOCAB['repetition'](low, high, self.parse_element())
		if cursor.match(T.INTEGER) and cursor.peek(1).kind in ELEMENT_START:
			# A specific repetition such as 3DIGIT: the count abuts the element.
			count = int(cursor.advance().text)
			return VOCAB['repetition'](count, count, self.parse_element())
		return self.parse_element()

	def parse_element(self):
		cursor = self.__cursor
		kind = cursor.current().kind
		if kind == T.RULE_NAME:
			return VOCAB['rule_ref'](cursor.advance().text)
		if kind == T.OPEN_PAREN:
			return VOCAB['group'](self.__bracketed(T.OPEN_PAREN, T.CLOSE_PAREN))
		if kind == T.OPEN_BRACKET:
			return VOCAB['option'](self.__bracketed(T.OPEN_BRACKET, T.CLOSE_BRACKET))
		if kind == T.CHAR_VAL:
			return VOCAB['literal'](literal_value(cursor.advance()), False)
		if kind == T.CASE_SENSITIVE_CHAR_VAL:
			return VOCAB['literal'](literal_value(cursor.advance()), True)
		if kind in (T.NUM_VAL, T.VALUE_RANGE, T.INTEGER):
			return VOCAB['number_val'](cursor.advance().text)
		if kind == T.PROSE_VAL:
			return VOCAB['prose_val'](cursor.advance().text[1:-1])
		raise self.__error("Expected an element")

	def __bracketed(self, opener, closer):
		cursor = self.__cursor
		cursor.expect(opener)
		cursor.skip_trivia()
		cursor.skip_continuation_lines()
		inner = self.parse_alternation()
		cursor.skip_trivia()
		cursor.skip_continuation_lines()
		cursor.expect(closer)
		return inner
