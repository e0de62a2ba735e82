"""
The lexical structure of ABNF (RFC 5234, with the RFC 7405 string prefixes).

Line breaks are NOT whitespace here: they are how the parser tells one rule
from the next, so they come out as tokens in their own right.
"""
import re
from typing import Iterator

from . import interface as T
from .engine import Definition

ABNF = Definition("ABNF")
ABNF.token(T.WHITESPACE, r'[ \t]+')
ABNF.token(T.COMMENT, r';[^\r\n]*')
ABNF.token(T.LINE_BREAK, r'\r\n|\n|\r')
ABNF.token(T.RULE_NAME, r'[A-Za-z][A-Za-z0-9-]*')
ABNF.token(T.REPEAT, r'[0-9]*\*[0-9]*')
ABNF.token(T.INTEGER, r'[0-9]+')
ABNF.token(T.CHAR_VAL, r'(?:%[iI])?"[^"]*"')
ABNF.token(T.CASE_SENSITIVE_CHAR_VAL, r"'[^']*'|%[sS]\"[^\"]*\"")
ABNF.token(T.PROSE_VAL, r'<[^>]*>')
ABNF.token(T.VALUE_RANGE, r'%[bBdDxX][0-9A-Fa-f]+-[0-9A-Fa-f]+')
ABNF.token(T.NUM_VAL, r'%[bBdDxX][0-9A-Fa-f]+(?:\.[0-9A-Fa-f]+)*')
for _punctuation in (T.EQUAL, T.SLASH, T.OPEN_PAREN, T.CLOSE_PAREN, T.OPEN_BRACKET, T.CLOSE_BRACKET):
	ABNF.token(_punctuation, re.escape(_punctuation))

def scan(text:str) -> Iterator[T.Token]:
	""" Yield the tokens of some ABNF text, ending with a single end-of-input token. """
	return iter(ABNF.scan(text))

def literal_value(token:T.Token) -> str:
	""" The characters between the quotes of a char-val token, sans any %s or %i prefix. """
	text = token.text
	if text.startswith('%'): text = text[2:]
	return text[1:-1]
