"""
The abstract syntax of an ABNF rule-list.

The shape follows RFC 5234 section 4 closely. Two points bear mention:
	* The parser never builds a one-option alternation or a one-element
	  concatenation. Those collapse to the inner expression.
	* A `number_val` keeps its raw text (e.g. "%x41-5A"). Decoding it is
	  the compiler's job, since that is where it can fail.
"""

from ..support.treelang import RankedAlphabet

VOCAB = RankedAlphabet("Expression", "Rule", "Text", "Count", "Flag")
VOCAB.primitive("Text", str)
VOCAB.primitive("Count", int)
VOCAB.primitive("Flag", bool)

VOCAB.symbol("alternation", "Expression", options="Expression+")
VOCAB.symbol("concatenation", "Expression", elements="Expression+")
VOCAB.symbol("repetition", "Expression", min="Count?", max="Count?", element="Expression")
VOCAB.symbol("group", "Expression", inner="Expression")
VOCAB.symbol("option", "Expression", inner="Expression")
VOCAB.symbol("literal", "Expression", value="Text", case_sensitive="Flag")
VOCAB.symbol("prose_val", "Expression", value="Text")
VOCAB.symbol("number_val", "Expression", raw="Text")
VOCAB.symbol("rule_ref", "Expression", name="Text")

# An incremental rule is one defined with "=/", which adds alternatives to an existing rule.
VOCAB.symbol("rule", "Rule", name="Text", expr="Expression", incremental="Flag")
VOCAB.symbol("rule_list", rules="Rule*")
