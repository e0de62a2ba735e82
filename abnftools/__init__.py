"""
ABNF Tools: compile RFC 5234 grammars, then check strings against them.

	>>> import abnftools
	>>> g = abnftools.parse_and_compile('greeting = "hello" 1*SP name\nname = 1*ALPHA\n', core_rules=True)
	>>> g.validate("Hello   world").success
	True
	>>> print(g.validate("hello").format_error("hello"))
	Line 1, Column 6: Expected character ' ' (20) but reached end of input
"""

from .parsing.interface import LanguageError, AbnfSyntaxError, CompileError
from .scanning.abnf import scan
from .parsing.parser import parse_rule_list
from .grammar.compiler import to_grammar
from .grammar.grammar import Grammar, ValidationResult

def parse_and_compile(text:str, *, strict=False, core_rules=False) -> Grammar:
	"""
	The whole pipeline in one call: scan, parse, and compile ABNF text.
	Raises AbnfSyntaxError or CompileError; both are LanguageError, hence ValueError.
	"""
	return to_grammar(parse_rule_list(scan(text)), strict=strict, core_rules=core_rules)
