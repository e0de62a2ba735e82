"""
A compiled grammar, and the verdicts it hands down.

A Grammar is immutable once built: the rule table belongs to it, and every
call to `validate` gets a fresh GrammarContext for its own bookkeeping.
"""
from typing import NamedTuple, Optional

from ..support.failureprone import SourceText, find_line_column
from ..support.symtab import NameSpace
from . import patterns as P
from .matching import GrammarContext, match

class ValidationResult(NamedTuple):
	"""
	On failure, error_position is a 0-based offset into the input. It is the
	furthest point any attempt reached, so it's usually where the user went wrong.
	"""
	success: bool
	error_position: int
	error_message: str

	@staticmethod
	def succeeded() -> "ValidationResult":
		return ValidationResult(True, 0, '')

	@staticmethod
	def failed(position:int, message:str) -> "ValidationResult":
		return ValidationResult(False, position, message)

	def line_column(self, text:str) -> tuple[int, int]:
		if self.success or not text: return 1, 1
		return find_line_column(text, self.error_position)

	def format_error(self, text:str) -> str:
		if self.success: return ''
		return "Line %d, Column %d: %s"%(*self.line_column(text), self.error_message)

	def format_error_with_position(self) -> str:
		if self.success: return ''
		return "Position %d: %s"%(self.error_position + 1, self.error_message)

	def complaint(self, text:str, filename:str=None) -> str:
		""" The error message with the offending line quoted and a caret beneath the spot. """
		if self.success: return ''
		position = min(self.error_position, len(text))
		return SourceText(text, filename).complaint(slice(position, position+1), self.error_message)


class Grammar:
	def __init__(self, rules:NameSpace):
		self.__rules = rules

	@property
	def rule_names(self) -> list[str]:
		return list(self.__rules.names())

	@property
	def first_rule(self) -> Optional[str]:
		""" The first rule defined in the grammar text proper; core rules don't count. """
		return next(iter(self.__rules.spelling.values()), None)

	def try_get_rule(self, name:str):
		""" The compiled pattern for a rule, or None. Names are case-insensitive. """
		return self.__rules.get(name)

	def validate(self, text:str, start_rule:str=None) -> ValidationResult:
		"""
		Does the whole of `text` match `start_rule`? Without a start rule, use the first one.
		Never raises for a merely-invalid input: the answer is in the ValidationResult.
		"""
		if start_rule is None: start_rule = self.first_rule
		if start_rule is None or start_rule not in self.__rules:
			return ValidationResult.failed(0, "Start rule %r not found in grammar"%start_rule)
		context = GrammarContext(self.__rules)
		result = match(P.rule_reference(start_rule), text, 0, context)
		deepest = context.deepest
		if context.left_recursion is not None:
			# Left recursion taints the whole grammar, whatever else happened to match.
			return ValidationResult.failed(context.left_recursion.position, context.left_recursion.message)
		if not result.success:
			if deepest is not None and deepest.position > result.furthest_position:
				return ValidationResult.failed(deepest.position, deepest.message)
			return ValidationResult.failed(result.furthest_position, result.furthest_message)
		if result.position < len(text):
			if deepest is not None and deepest.position > result.position:
				return ValidationResult.failed(deepest.position, deepest.message)
			remaining = text[result.position:]
			return ValidationResult.failed(
				result.position,
				"Matched successfully but %d character(s) remaining: %r"%(len(remaining), remaining)
			)
		return ValidationResult.succeeded()
