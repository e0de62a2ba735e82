"""
A small table-driven scanner.

A `Definition` is an ordered table of lexeme rules, each a regular expression
paired with a token kind. Scanning proceeds by longest match: at each position
every rule is tried, the longest lexeme wins, and among equally long lexemes
the rule declared first wins. Nothing gets dropped on the floor: if no rule
matches, the single offending character becomes a token of the "stuck" kind,
and it is left for the parser to complain about.
"""
import re
from typing import Iterator

from .interface import Token, END_OF_INPUT, OTHER

class Definition:
	def __init__(self, name="Scanner Definition", *, stuck=OTHER):
		self.name = name
		self.__rules = []
		self.__stuck = stuck

	def token(self, kind:str, pattern:str):
		""" Every match of the pattern becomes a token of the given kind, with the matched text. """
		assert kind != END_OF_INPUT
		self.__rules.append((kind, re.compile(pattern)))

	def longest_match(self, text:str, position:int) -> tuple[str, int]:
		""" Return (kind, end) for the longest lexeme at position, or the stuck-kind for one character. """
		best_kind, best_end = None, position
		for kind, rx in self.__rules:
			m = rx.match(text, position)
			# Strictly longer only: earlier rules win ties, and zero-width matches never count.
			if m is not None and m.end() > best_end:
				best_kind, best_end = kind, m.end()
		if best_kind is None: return self.__stuck, position + 1
		return best_kind, best_end

	def scan(self, text:str) -> "IterableScanner":
		return IterableScanner(text, self)


class Scanner:
	"""
	Keeps track of where we are, in two coordinate systems:
	offsets (left, right) into the text, and the line and column
	where the current lexeme begins.
	"""
	def __init__(self, text:str, definition:Definition):
		self.__text = text
		self.__size = len(text)
		self.__definition = definition
		self.left = self.right = 0
		self.line, self.column = 1, 1

	def has_more(self):
		return self.right < self.__size

	def scan_one_item(self) -> Token:
		self.__advance_position()
		self.left = self.right
		kind, self.right = self.__definition.longest_match(self.__text, self.left)
		return Token(kind, self.match(), self.line, self.column)

	def __advance_position(self):
		""" Bring line and column up to date with everything consumed so far. """
		for c in self.__text[self.left:self.right]:
			if c == '\n':
				self.line += 1
				self.column = 1
			else:
				self.column += 1
		self.left = self.right

	def end_token(self) -> Token:
		self.__advance_position()
		return Token(END_OF_INPUT, '', self.line, self.column)

	def match(self):
		""" Return the actual matched text """
		return self.__text[self.left:self.right]


class IterableScanner(Scanner):
	"""
	Iterating over a scanner yields every token in order,
	and finally a single end-of-input token.
	"""
	def __iter__(self) -> Iterator[Token]:
		while self.has_more():
			yield self.scan_one_item()
		yield self.end_token()
