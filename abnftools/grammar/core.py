"""
The core rules of RFC 5234, Appendix B.1, ready to serve as a parent namespace.

They are written here in ABNF and compiled once, at import time, by the same
machinery that handles any other grammar. Each is spelled out in terms of
character values rather than in terms of the others, so that a grammar which
redefines, say, DIGIT does not quietly change the meaning of HEXDIG.
"""
from ..scanning.abnf import scan
from ..parsing.parser import parse_rule_list
from .compiler import compile_rules

CORE_TEXT = r"""
ALPHA   = %x41-5A / %x61-7A   ; A-Z / a-z
BIT     = "0" / "1"
CHAR    = %x01-7F             ; any 7-bit US-ASCII character, excluding NUL
CR      = %x0D                ; carriage return
CRLF    = %x0D.0A             ; Internet standard newline
CTL     = %x00-1F / %x7F      ; controls
DIGIT   = %x30-39             ; 0-9
DQUOTE  = %x22                ; " (Double Quote)
HEXDIG  = %x30-39 / "A" / "B" / "C" / "D" / "E" / "F"
HTAB    = %x09                ; horizontal tab
LF      = %x0A                ; linefeed
LWSP    = *(%x20 / %x09 / %x0D.0A (%x20 / %x09))
        ; Use of this linear-white-space rule permits lines containing only
        ; white space that are no longer legal in mail headers and have caused
        ; interoperability problems in other contexts.
OCTET   = %x00-FF             ; 8 bits of data
SP      = %x20
VCHAR   = %x21-7E             ; visible (printing) characters
WSP     = %x20 / %x09         ; white space
"""

CORE_RULES = compile_rules(parse_rule_list(scan(CORE_TEXT)), strict=True)
