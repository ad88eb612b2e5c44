"""
This module is all about easing over the process to display where things go wrong.

SetCalc reads exactly one line, so there is no business here about line-breaking conventions,
row and column numbers, or which file a thing came from. An error knows the offset of the
offending character within the raw line; that is as much location data as you get, and it's
plenty to draw a picture.

The picture is the usual one: show the line, and underneath it put a caret under the
character in question with a short caption.
"""

import sys
from typing import Optional

def illustration(single_line:str, start:int, width:int=1, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	return prefix + single_line.rstrip() + '\n' + blanks + '^'*underline_width + " " + caption

class SourceLine:
	""" Wrapper for the raw input line: participates in half-respectable error-display with context. """
	def __init__(self, content:str):
		self.content = content.rstrip('\r\n')

	def complaint(self, position:Optional[int], message:str) -> str:
		if position is None or position >= len(self.content):
			return "At end of line: %s\n >>> %s"%(message, self.content)
		reference = "At column %d: %s"%(position + 1, message)
		return "%s\n%s"%(reference, illustration(self.content, position, prefix=' >>> '))

	def complain(self, position:Optional[int], message:str):
		print(self.complaint(position, message), file=sys.stderr)
