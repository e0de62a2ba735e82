"""
The pattern-matching engine: a backtracking interpreter over pattern trees.

Each kind of pattern knows how to try itself against the input at some
position, and answers with a MatchResult. There is no memoization, so a
sufficiently perverse grammar can take exponential time. That's the price
of simplicity, and it's a price most real grammars never charge.

Two ideas make the diagnostics worth reading:

	1. Every failure carries the furthest position reached by any attempt
	   that contributed to it, and the message from that attempt. An
	   alternation that fails passes along whichever of its alternatives got
	   furthest, so the user hears about the most specific problem rather than
	   about the last thing tried.
	2. The GrammarContext, which exists for exactly one validation, remembers
	   the deepest failure seen anywhere. Even a successful match may have
	   abandoned a deeper attempt along the way, and if the match then falls
	   short of the end of the input, that deeper failure is the real story.

Left recursion would send a naive interpreter into an infinite descent.
The context keeps a stack of (rule, position) frames; arriving at a rule
already active at the same position means the rule has called itself without
consuming anything, and the reference fails instead of recursing.
"""
from typing import NamedTuple, Optional

from ..support.symtab import NameSpace, fold
from ..support.treelang import StrictPass
from .patterns import describe_char, describe_range

class MatchResult(NamedTuple):
	success: bool
	position: int
	message: str
	furthest_position: int
	furthest_message: str

def matched(position:int) -> MatchResult:
	return MatchResult(True, position, '', position, '')

def failed(position:int, message:str) -> MatchResult:
	return MatchResult(False, position, message, position, message)

def failed_beyond(position:int, deeper:MatchResult) -> MatchResult:
	""" A failure at `position` whose real cause is whatever `deeper` got furthest with. """
	return MatchResult(False, position, deeper.furthest_message, deeper.furthest_position, deeper.furthest_message)


class GrammarContext:
	"""
	All the mutable state of a single validation. Never share one between validations:
	the grammar itself is read-only, so threads may share a grammar but not a context.
	"""
	def __init__(self, rules:NameSpace):
		self.__rules = rules
		self.__stack = []
		self.__active = set()
		self.deepest : Optional[MatchResult] = None
		self.left_recursion : Optional[MatchResult] = None

	def lookup(self, name:str):
		return self.__rules.get(name)

	def is_in_recursion_chain(self, name:str, position:int) -> bool:
		return (fold(name), position) in self.__active

	def entering(self, name:str, position:int) -> "RuleFrame":
		""" Use in a `with` statement: the frame comes off the stack however the block exits. """
		return RuleFrame(self, (fold(name), position))

	def push(self, frame):
		self.__stack.append(frame)
		self.__active.add(frame)

	def pop(self):
		self.__active.discard(self.__stack.pop())

	def depth(self) -> int:
		return len(self.__stack)

	def fail(self, position:int, message:str) -> MatchResult:
		""" Make a fresh failure, noting it if it's the deepest so far. Ties go to the first seen. """
		result = failed(position, message)
		if self.deepest is None or position > self.deepest.position:
			self.deepest = result
		return result

	def fail_left_recursion(self, name:str, position:int) -> MatchResult:
		key = (fold(name), position)
		names = [n for n, p in self.__stack]
		chain = names[self.__stack.index(key):] + [fold(name)]
		result = self.fail(position, "Left recursion detected in rule %r (%s)"%(name, " -> ".join(chain)))
		if self.left_recursion is None:
			self.left_recursion = result
		return result


class RuleFrame:
	def __init__(self, context:GrammarContext, frame:tuple):
		self.__context = context
		self.__frame = frame
	def __enter__(self):
		self.__context.push(self.__frame)
		return self
	def __exit__(self, exc_type, exc_val, exc_tb):
		self.__context.pop()


_ASCII_FOLD = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')

class PatternMatcher(StrictPass):
	"""
	Call as match(pattern, text, position, context) -> MatchResult.
	The matcher itself holds no state, so a single instance serves everyone.
	"""

	def terminal(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		end = position + len(p.value)
		if end > len(text):
			return context.fail(position, "Expected %r but reached end of input"%p.value)
		found = text[position:end]
		if p.case_sensitive: same = found == p.value
		else: same = found.translate(_ASCII_FOLD) == p.value.translate(_ASCII_FOLD)
		if same: return matched(end)
		return context.fail(position, "Expected %r but found %r"%(p.value, found))

	def char_range(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		expect = "Expected character in range [%s]"%describe_range(p.min, p.max)
		if position >= len(text):
			return context.fail(position, expect+" but reached end of input")
		if p.min <= ord(text[position]) <= p.max:
			return matched(position + 1)
		return context.fail(position, expect+" but found "+describe_char(ord(text[position])))

	def char_value(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		expect = "Expected character %s"%describe_char(p.value)
		if position >= len(text):
			return context.fail(position, expect+" but reached end of input")
		if ord(text[position]) == p.value:
			return matched(position + 1)
		return context.fail(position, expect+" but found "+describe_char(ord(text[position])))

	def rule_reference(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		pattern = context.lookup(p.name)
		if pattern is None:
			return context.fail(position, "Undefined rule %r"%p.name)
		if context.is_in_recursion_chain(p.name, position):
			return context.fail_left_recursion(p.name, position)
		with context.entering(p.name, position):
			return self(pattern, text, position, context)

	def sequence(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		for element in p.elements:
			result = self(element, text, position, context)
			if not result.success:
				return result
			position = result.position
		return matched(position)

	def alternation(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		best = None
		for alternative in p.alternatives:
			result = self(alternative, text, position, context)
			if result.success:
				return result
			if best is None or result.furthest_position > best.furthest_position:
				best = result
		if best is None:
			return context.fail(position, "No alternatives provided")
		return best

	def repetition(self, p, text:str, position:int, context:GrammarContext) -> MatchResult:
		least = p.min or 0
		cursor, count, stopped_by = position, 0, None
		while p.max is None or count < p.max:
			result = self(p.element, text, cursor, context)
			if not result.success:
				stopped_by = result
				break
			if result.position == cursor:
				# Zero-width: it could repeat forever, so any minimum is as good as met.
				return matched(cursor)
			count += 1
			cursor = result.position
		if count >= least:
			return matched(cursor)
		if stopped_by is not None:
			return failed_beyond(position, stopped_by)
		return context.fail(position, "Expected at least %d occurrences but found %d"%(least, count))

match = PatternMatcher()
