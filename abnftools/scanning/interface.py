"""
Scanning Interface Definitions.

A token is a 4-tuple: the kind (one of the string constants below), the exact
text it covers, and the 1-based line and column where that text begins.
"""
from typing import NamedTuple

RULE_NAME = 'rulename'
WHITESPACE = 'whitespace'
COMMENT = 'comment'
LINE_BREAK = 'line-break'
REPEAT = 'repeat' # e.g. *, 1*, *5, 1*5
INTEGER = 'integer' # e.g. 3, which may also be a specific repetition
CHAR_VAL = 'char-val' # "quoted", or %i"quoted": case-insensitive
CASE_SENSITIVE_CHAR_VAL = 'case-sensitive-char-val' # 'quoted', or %s"quoted"
PROSE_VAL = 'prose-val' # <anything but a close-angle>
NUM_VAL = 'num-val' # e.g. %x41 or %d13.10
VALUE_RANGE = 'value-range' # e.g. %x41-5A
EQUAL = '='
SLASH = '/'
OPEN_PAREN = '('
CLOSE_PAREN = ')'
OPEN_BRACKET = '['
CLOSE_BRACKET = ']'
OTHER = 'other' # Any character no other rule claims.
END_OF_INPUT = '<END>' # An agreed artificial "end-of-text" token kind.

TRIVIA = frozenset([WHITESPACE, COMMENT])

class Token(NamedTuple):
	kind: str
	text: str
	line: int
	column: int

	def describe(self) -> str:
		""" For error messages: what kind of thing this is, and what it looks like. """
		if self.kind == END_OF_INPUT: return "end of input"
		if self.kind == LINE_BREAK: return "line break"
		if self.kind == self.text: return repr(self.text)
		return "%s %r"%(self.kind, self.text)
