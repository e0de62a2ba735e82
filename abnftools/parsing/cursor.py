"""
Lookahead over a finished token sequence.

ABNF lets a rule's definition run across several physical lines, so a line
break is not necessarily the end of a rule. The cursor answers the question
"does this line break end the rule?" by looking past it:

	* Another line break (a blank line) or the end of input: yes.
	* A rule name followed by "=": yes, a new rule begins there.
	* Anything else: no, it's a continuation line.
"""
from typing import Iterable

from ..scanning import interface as T
from .interface import AbnfSyntaxError

class TokenCursor:
	def __init__(self, tokens:Iterable[T.Token]):
		self.__tokens = list(tokens)
		if not self.__tokens or self.__tokens[-1].kind != T.END_OF_INPUT:
			last = self.__tokens[-1] if self.__tokens else None
			line, column = (last.line, last.column + len(last.text)) if last else (1, 1)
			self.__tokens.append(T.Token(T.END_OF_INPUT, '', line, column))
		self.position = 0

	def current(self) -> T.Token:
		return self.peek(0)

	def peek(self, offset:int=0) -> T.Token:
		""" Any offset past the end sees the end-of-input token. """
		return self.__tokens[min(self.position + offset, len(self.__tokens) - 1)]

	def advance(self) -> T.Token:
		""" Consume the current token, and return it. The end-of-input token is never consumed. """
		token = self.current()
		if self.position < len(self.__tokens) - 1:
			self.position += 1
		return token

	def match(self, *kinds) -> bool:
		return self.current().kind in kinds

	def expect(self, kind:str) -> T.Token:
		token = self.current()
		if token.kind != kind:
			raise AbnfSyntaxError("Expected %s but found %s"%(_expectation(kind), token.describe()), token.line, token.column)
		return self.advance()

	def skip_trivia(self):
		""" Skip whitespace and comments, but NOT line breaks, which are significant. """
		while self.match(*T.TRIVIA):
			self.advance()

	def __skip_trivia_from(self, offset:int) -> int:
		while self.peek(offset).kind in T.TRIVIA:
			offset += 1
		return offset

	def __rule_start_at(self, offset:int) -> bool:
		offset = self.__skip_trivia_from(offset)
		if self.peek(offset).kind != T.RULE_NAME:
			return False
		offset = self.__skip_trivia_from(offset + 1)
		return self.peek(offset).kind == T.EQUAL

	def is_at_rule_start(self) -> bool:
		""" True if the upcoming tokens are a rule name and then "=", perhaps with trivia. """
		return self.__rule_start_at(0)

	def is_at_rule_boundary(self) -> bool:
		""" True if the cursor rests on a line break which ends the current rule. """
		if not self.match(T.LINE_BREAK):
			return False
		offset = self.__skip_trivia_from(1)
		if self.peek(offset).kind in (T.END_OF_INPUT, T.LINE_BREAK):
			return True
		return self.__rule_start_at(offset)

	def skip_continuation_lines(self):
		""" Advance past line breaks which do not end the rule, along with the trivia after them. """
		while self.match(T.LINE_BREAK) and not self.is_at_rule_boundary():
			self.advance()
			self.skip_trivia()

def _expectation(kind:str) -> str:
	if kind == T.END_OF_INPUT: return "end of input"
	if kind == T.LINE_BREAK: return "line break"
	if len(kind) == 1: return repr(kind)
	return kind
