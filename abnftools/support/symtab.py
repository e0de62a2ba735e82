"""
A symbol table for rule names.

ABNF rule names are case-insensitive: "DIGIT", "digit" and "Digit" all name
the same rule. A `NameSpace` folds its keys accordingly, but remembers how
each name was first spelled so that listings look like the grammar text.

Namespaces chain: a grammar's own rules live in one namespace whose parent
may hold the RFC 5234 core rules. Names in the child shadow those in the parent.

The usual patterns of interaction are:

* adding a name, expecting it not already to exist locally;
* looking up a name, expecting it surely to have an already-associated symbol;
* replacing a name's definition, knowing full well that it exists.

When an expectation is falsified, we raise an exception. Why? Because it's Python.
"""

from typing import Optional, Generic, TypeVar, Iterator

class NoSuchSymbol(KeyError):
	pass

class SymbolAlreadyExists(KeyError):
	pass

T = TypeVar("T")

def fold(name:str) -> str:
	""" Rule names are ASCII, so ASCII case-folding is all there is. """
	return name.lower()

class NameSpace(Generic[T]):
	"""
	NameSpace bears some resemblance to chainmap with a few extra attributes.
	The "local" is the set of names defined in this space, keyed by folded name.
	The "parent" works like a static link.
	"""
	def __init__(self, parent:Optional["NameSpace[T]"]=None):
		self.local : dict[str, T] = {}
		self.spelling : dict[str, str] = {}
		self.parent : Optional[NameSpace[T]] = parent

	def get(self, key, default=None) -> Optional[T]:
		try: return self[key]
		except NoSuchSymbol: return default

	def replace(self, key, value:T):
		""" Suppose you need to replace a symbol. Fine. But you're going to know it. """
		folded = fold(key)
		if folded in self.local:
			self.local[folded] = value
		else:
			raise NoSuchSymbol(key)

	def is_local(self, key) -> bool:
		return fold(key) in self.local

	def __getitem__(self, key) -> T:
		folded = fold(key)
		if folded in self.local:
			return self.local[folded]
		elif self.parent is not None:
			return self.parent[key]
		else:
			raise NoSuchSymbol(key)

	def __contains__(self, key):
		return fold(key) in self.local or (self.parent is not None and key in self.parent)

	def __setitem__(self, key, value:T):
		folded = fold(key)
		if folded in self.local:
			raise SymbolAlreadyExists(key)
		else:
			self.local[folded] = value
			self.spelling[folded] = key

	def names(self) -> Iterator[str]:
		""" Every visible name, in order of definition, locals first; shadowed names appear once. """
		yield from self.spelling.values()
		if self.parent is not None:
			for name in self.parent.names():
				if fold(name) not in self.local: yield name
