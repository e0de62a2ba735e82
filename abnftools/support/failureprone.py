"""
Where did it go wrong? This module answers in terms people can use.

Scanning and matching both work in terms of plain integer offsets into a
string. People, on the other hand, like line and column numbers, and they like
to see the offending line with a caret under the interesting part. This module
bridges that gap without bothering the core algorithms about line-breaks.

The convention here is the one the matcher reports against: a line feed (\n)
ends a line, and a carriage return (\r) takes up no room at all. So a DOS-style
text gets the same line and column numbers as its Unix-style twin.
"""

import bisect, sys

def find_line_column(text:str, position:int) -> tuple[int, int]:
	"""
	Convert a 0-based character offset into a 1-based (line, column) pair.
	Offsets past the end of the text are treated as the end of the text.
	"""
	line, column = 1, 1
	for c in text[:max(0, position)]:
		if c == '\n':
			line += 1
			column = 1
		elif c != '\r':
			column += 1
	return line, column

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	"""
	Two lines: the given line of text, then a row of carets beneath the span
	of interest. Tabs in the lead-in are kept so the carets line up.
	"""
	lead_in = prefix + single_line[:start]
	padding = ''.join('\t' if c == '\t' else ' ' for c in lead_in)
	carets = '^' * max(1, min(width, len(single_line) - start))
	return "%s%s\n%s%s %s"%(prefix, single_line.rstrip(), padding, carets, caption)

class SourceText:
	""" Some text, perhaps from a file, which knows how to point at parts of itself. """
	def __init__(self, content:str, filename:str=None):
		self.content, self.filename = content, filename
		self.__starts = None

	def __line_starts(self) -> list:
		# Computed on first need: most texts never have anything to complain about.
		if self.__starts is None:
			self.__starts = [0] + [i+1 for i, c in enumerate(self.content) if c == '\n']
		return self.__starts

	def find_row_col(self, index:int):
		""" 1-based row; 0-based column counted in characters of the row, ignoring carriage returns. """
		starts = self.__line_starts()
		row = bisect.bisect_right(starts, index) - 1
		column = sum(1 for c in self.content[starts[row]:index] if c != '\r')
		return row+1, column

	def line_of_text(self, row):
		""" Argument is 1-based. The result has no line-break characters. """
		starts = self.__line_starts()
		first = starts[max(0, row - 1)]
		line = self.content[first:].split('\n', 1)[0]
		return line.replace('\r', '')

	def _format_message(self, row, col, message):
		where = "At" if self.filename is None else "%s:"%self.filename
		return "%s line %d, column %d: %s"%(where, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str):
		row, col = self.find_row_col(a_slice.start)
		picture = illustration(self.line_of_text(row), col, a_slice.stop - a_slice.start, prefix=' >>> ')
		return self._format_message(row, col, message) + "\n" + picture

	def complain(self, a_slice:slice, message:str):
		print(self.complaint(a_slice, message), file=sys.stderr)
