"""
The executable form of a grammar: a tree of pattern terms.

This is smaller than the syntax tree. Groups vanish, options become
repetitions of at most one, and numeric values become the characters they
denote. The only node that refers outside its own tree is `rule_reference`,
which is resolved by name against the grammar's rule table at match time.
"""

from ..support.treelang import RankedAlphabet

PATTERN = RankedAlphabet("Pattern", "Text", "Codepoint", "Count", "Flag")
PATTERN.primitive("Text", str)
PATTERN.primitive("Codepoint", int)
PATTERN.primitive("Count", int)
PATTERN.primitive("Flag", bool)

PATTERN.symbol("terminal", "Pattern", value="Text", case_sensitive="Flag")
PATTERN.symbol("char_range", "Pattern", min="Codepoint", max="Codepoint")
PATTERN.symbol("char_value", "Pattern", value="Codepoint")
PATTERN.symbol("rule_reference", "Pattern", name="Text")
PATTERN.symbol("sequence", "Pattern", elements="Pattern*")
PATTERN.symbol("alternation", "Pattern", alternatives="Pattern*")
PATTERN.symbol("repetition", "Pattern", element="Pattern", min="Count?", max="Count?")

terminal = PATTERN['terminal']
char_range = PATTERN['char_range']
char_value = PATTERN['char_value']
rule_reference = PATTERN['rule_reference']
sequence = PATTERN['sequence']
alternation = PATTERN['alternation']
repetition = PATTERN['repetition']

def describe_char(value:int) -> str:
	""" Printable ASCII shows as the character and its hex code; all else as hex alone. """
	if 32 <= value <= 126: return "%r (%X)"%(chr(value), value)
	return "%X"%value

def describe_range(low:int, high:int) -> str:
	if 32 <= low and high <= 126: return "%r-%r (%X-%X)"%(chr(low), chr(high), low, high)
	return "%X-%X"%(low, high)
