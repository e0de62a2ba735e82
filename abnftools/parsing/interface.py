"""
Exception types for turning ABNF text into a grammar.

Both kinds abort the whole job: there is no such thing as a partial grammar.
Trouble with the INPUT being validated is another matter entirely;
that comes back as an ordinary ValidationResult, never as an exception.
"""

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class AbnfSyntaxError(LanguageError):
	"""
	Raised for malformed ABNF text.
	Parameters are:
		a description of what was expected and what was found instead;
		the 1-based line and column of the offending token.
	"""
	def __init__(self, message:str, line:int, column:int):
		super().__init__("At line %d, column %d: %s"%(line, column, message))
		self.message, self.line, self.column = message, line, column

class CompileError(LanguageError):
	"""
	Raised for a well-formed rule-list which nevertheless cannot become a working grammar,
	such as one with prose values or bogus numeric values. `raw` is the offending text.
	"""
	def __init__(self, message:str, raw:str):
		super().__init__("%s: %s"%(message, raw))
		self.message, self.raw = message, raw
