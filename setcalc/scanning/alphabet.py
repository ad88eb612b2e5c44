"""
The alphabet of the expression language is small and fixed. Checking it happens while reading,
one character at a time, before anything else looks at the line: a bad character anywhere means
nothing gets evaluated at all.
"""

from typing import NamedTuple, TextIO

from ..support.foundation import GrowableStack
from ..support.interfaces import InvalidInputError

VALID_SYMBOLS = frozenset("0123456789" "-,U()[]^\\")
IGNORED = frozenset(" \t\r")
END_OF_LINE = '\n'

def is_valid_symbol(ch:str) -> bool:
	return ch in VALID_SYMBOLS

class Expression(NamedTuple):
	""" The validated characters of a line, each with its offset in the raw line. """
	characters: GrowableStack
	offsets: GrowableStack

	def text(self) -> str: return ''.join(self.characters)
	def __len__(self): return len(self.characters)

def read_expression(line:str) -> Expression:
	"""
	Spaces (and tabs) are skipped. A newline ends the expression; so does the end of the text.
	Anything else must be in the alphabet, or InvalidInputError is raised at once.
	"""
	characters, offsets = GrowableStack(), GrowableStack()
	for offset, ch in enumerate(line):
		if ch in IGNORED: continue
		if ch == END_OF_LINE: break
		if not is_valid_symbol(ch): raise InvalidInputError(offset, ch)
		characters.push(ch)
		offsets.push(offset)
	return Expression(characters, offsets)

def read_line(stream:TextIO) -> str:
	""" One line, newline included if there was one. End-of-stream gives the empty string. """
	return stream.readline()
