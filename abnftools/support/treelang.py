"""
Trees for grammars and patterns.

Both the syntax tree of an ABNF rule-list and the compiled pattern tree are
algebraic data types: a handful of constructors, each with a fixed set of
typed fields. A `RankedAlphabet` declares those constructors, and each one
becomes a small immutable class derived from `BaseTerm`.

Consumers of a tree are `TreePass` objects. A pass is callable: it dispatches
on the name of the term's symbol to a method of the same name. A `StrictPass`
refuses to guess about symbols it does not know, which is about as close as
Python gets to an exhaustive match.
"""

import abc

class RankedAlphabet:
	"""
	A set of symbols, each with a fixed number of named, typed fields.

	Fields are typed by category. A category holds the symbols declared into
	it, plus any plain Python types admitted with `primitive`. A field's
	category may carry one of the suffixes ? * + with their usual
	regular-expression meaning; the starred forms expect a tuple.
	The symbol's name is positional-only, so a field may be called `name` too.
	"""

	def __init__(self, *categories:str):
		assert all(c.isidentifier() for c in categories)
		self.__members = {c:set() for c in categories}
		self.__symbols = {}

	def __getitem__(self, name):
		return self.__symbols[name]

	def __contains__(self, name):
		return name in self.__symbols

	def primitive(self, category, *python_types):
		""" Admit plain Python values (e.g. str, int) as members of a category. """
		assert all(isinstance(t, type) for t in python_types)
		self.__members[category].update(python_types)

	def __checker(self, declaration:str):
		suffix = declaration[-1] if declaration[-1] in '?*+' else ''
		admits = self.__members[declaration[:len(declaration)-len(suffix)]]
		def one(x): return type(x) in admits
		if suffix == '?': return lambda x: x is None or one(x)
		if suffix == '*': return lambda xs: isinstance(xs, tuple) and all(map(one, xs))
		if suffix == '+': return lambda xs: isinstance(xs, tuple) and len(xs) > 0 and all(map(one, xs))
		return one

	def symbol(self, name:str, /, *categories:str, **fields) -> type:
		"""
		Declare a new symbol, returning its class. Keyword arguments give the
		fields in order, each mapped to its category declaration. The new
		symbol joins each of the positional categories.
		"""
		assert name not in self.__symbols
		assert name.isidentifier() # Passes dispatch on this name.
		it = self.__symbols[name] = type(name, (BaseTerm,), {
			"__slots__": tuple(fields),
			"_checks_": tuple(map(self.__checker, fields.values())),
			"_label_": '<%s/%d>'%(name, len(fields)),
		})
		for c in categories: self.__members[c].add(it)
		return it


class BaseTerm:
	"""
	Base class of every declared symbol. Terms are immutable, and compare
	equal when they have the same symbol and equal fields, so two separately
	built trees of the same shape are interchangeable. Under `python -O` the
	field checks are skipped.
	"""
	__slots__ = ()
	_checks_: tuple
	_label_: str

	def __init__(self, *args):
		if __debug__:
			if len(args) != len(self.__slots__):
				raise TypeError("%s takes %d field(s) but got %d"%(self._label_, len(self.__slots__), len(args)))
			for field, value, check in zip(self.__slots__, args, self._checks_):
				if not check(value):
					raise TypeError("%s: field %r will not accept %r"%(self._label_, field, value))
		for field, value in zip(self.__slots__, args):
			object.__setattr__(self, field, value)

	def __setattr__(self, key, value): raise TypeError("%s is immutable"%self._label_)
	def __delattr__(self, key): raise TypeError("%s is immutable"%self._label_)

	def __iter__(self):
		return (getattr(self, f) for f in self.__slots__)

	def __eq__(self, other):
		return type(self) is type(other) and tuple(self) == tuple(other)

	def __hash__(self):
		return hash((type(self).__name__, *self))

	def __str__(self): return self._label_

	def __repr__(self):
		return "%s(%s)"%(type(self).__name__, ", ".join(map(repr, self)))


class TreePass(abc.ABC):
	"""
	A pass is called with a term and any further arguments, and hands them
	all to its method named after the term's symbol. Recursion into subterms
	is up to each method, which keeps the dispatch itself dead simple.
	"""
	@abc.abstractmethod
	def _unhandled_(self, term, *args, **kwargs):
		raise NotImplementedError(type(self))

	def __call__(self, term, *args, **kwargs):
		return getattr(self, type(term).__name__, self._unhandled_)(term, *args, **kwargs)


class StrictPass(TreePass):
	def _unhandled_(self, term, *args, **kwargs):
		""" A strict pass has a method for every symbol it may meet. Anything else is a bug. """
		what = str(term) if isinstance(term, BaseTerm) else str(type(term))
		raise RuntimeError("class %s neglects to handle symbol %s"%(type(self).__name__, what))
