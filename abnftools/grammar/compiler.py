"""
Translate an ABNF syntax tree into executable patterns, one rule at a time.

The translation is structural and nearly total. It fails only for prose
values, which describe a language in English rather than in ABNF, and for
numeric values that do not decode.
"""
import warnings

from ..parsing.ast import VOCAB
from ..parsing.interface import CompileError
from ..support.symtab import NameSpace
from ..support.treelang import StrictPass
from . import patterns as P
from .grammar import Grammar

BASES = {'b': 2, 'd': 10, 'x': 16}
DIGITS = {2: frozenset('01'), 10: frozenset('0123456789'), 16: frozenset('0123456789abcdefABCDEF')}

def decode_number(raw:str):
	"""
	Decode a numeric value such as %x41, %d13.10 or %x41-5A into a pattern:
	a single character, a fixed sequence of characters, or a range of characters.
	"""
	if len(raw) < 3 or raw[0] != '%' or raw[1].lower() not in BASES:
		raise CompileError("Invalid number value format", raw)
	base = BASES[raw[1].lower()]
	rest = raw[2:]

	def code(digits:str) -> int:
		if not digits or not DIGITS[base].issuperset(digits):
			raise CompileError("Invalid digits for base %d"%base, raw)
		return int(digits, base)

	if '-' in rest:
		parts = rest.split('-')
		if len(parts) != 2:
			raise CompileError("Invalid range format", raw)
		low, high = map(code, parts)
		if low > high:
			raise CompileError("Range is empty", raw)
		return P.char_range(low, high)
	if '.' in rest:
		return P.sequence(tuple(P.char_value(code(part)) for part in rest.split('.')))
	return P.char_value(code(rest))


class ToPattern(StrictPass):
	""" One method per syntax symbol, each returning the corresponding pattern. """
	def alternation(self, node): return P.alternation(tuple(map(self, node.options)))
	def concatenation(self, node): return P.sequence(tuple(map(self, node.elements)))
	def repetition(self, node): return P.repetition(self(node.element), node.min, node.max)
	def group(self, node): return self(node.inner)
	def option(self, node): return P.repetition(self(node.inner), 0, 1)
	def literal(self, node): return P.terminal(node.value, node.case_sensitive)
	def rule_ref(self, node): return P.rule_reference(node.name)
	def number_val(self, node): return decode_number(node.raw)
	def prose_val(self, node):
		raise CompileError("Prose values are not supported for validation", "<%s>"%node.value)

TO_PATTERN = ToPattern()

def compile_rules(rule_list, *, strict=False, parent:NameSpace=None) -> NameSpace:
	"""
	Build the rule table. A later definition of the same name (case-insensitively)
	replaces the earlier one, with a warning; unless `strict`, in which case it's an error.
	A definition with "=/" adds alternatives to whatever the name already means.
	"""
	assert type(rule_list) is VOCAB['rule_list']
	table = NameSpace(parent)
	for rule in rule_list.rules:
		pattern = TO_PATTERN(rule.expr)
		if rule.incremental:
			if rule.name not in table:
				raise CompileError("Incremental alternative for undefined rule", rule.name)
			combined = P.alternation(_alternatives(table[rule.name]) + _alternatives(pattern))
			if table.is_local(rule.name): table.replace(rule.name, combined)
			else: table[rule.name] = combined
		elif table.is_local(rule.name):
			if strict:
				raise CompileError("Rule is defined more than once", rule.name)
			warnings.warn("Rule %r is defined more than once; the last definition wins."%rule.name, stacklevel=3)
			table.replace(rule.name, pattern)
		else:
			table[rule.name] = pattern
	return table

def _alternatives(pattern) -> tuple:
	if type(pattern) is P.alternation: return pattern.alternatives
	return (pattern,)

def to_grammar(rule_list, *, strict=False, core_rules=False) -> Grammar:
	""" Compile a rule-list, optionally on top of the RFC 5234 core rules. """
	if core_rules:
		from .core import CORE_RULES
		parent = CORE_RULES
	else:
		parent = None
	return Grammar(compile_rules(rule_list, strict=strict, parent=parent))
