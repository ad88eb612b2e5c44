"""
Walk a validated expression once, left to right, and yield tokens.

A token is a (kind, semantic, position) triple: the kind is the punctuation character itself for
parentheses and operators, or SET for a complete set literal (whose semantic value is the
SetValue). The position is the offset in the raw line, for error reports.

Set literals are recognized whole. That means the brackets and commas never reach the scheduler,
and the count of elements in each literal is simply the length of the SetValue.

Of note, the minus sign is in the alphabet but no rule here consumes it, so it is skipped wherever
it appears. `[-3]` is the set containing 3. Negative literals are not part of the language.
"""

from typing import NamedTuple, Any, Iterator

from ..support.foundation import GrowableStack
from ..support.interfaces import OPEN, CLOSE, UNION, INTERSECTION, DIFFERENCE, SET, StructuralMismatchError
from ..evaluation.algebra import SetValue
from .alphabet import Expression

DIGITS = frozenset("0123456789")
PUNCTUATION = frozenset([OPEN, CLOSE, UNION, INTERSECTION, DIFFERENCE])
MINUS, COMMA, OPEN_BRACKET, CLOSE_BRACKET = '-', ',', '[', ']'

class Token(NamedTuple):
	kind: str
	semantic: Any
	position: int

def tokenize(expression:Expression) -> Iterator[Token]:
	chars, offsets = expression.characters, expression.offsets
	size, i = len(chars), 0
	while i < size:
		ch = chars[i]
		if ch in PUNCTUATION:
			yield Token(ch, None, offsets[i])
			i += 1
		elif ch == OPEN_BRACKET:
			value, after = scan_set_literal(expression, i)
			yield Token(SET, value, offsets[i])
			i = after
		elif ch == MINUS:
			i += 1
		elif ch in DIGITS:
			raise StructuralMismatchError(offsets[i], "Number outside of a set literal")
		elif ch == COMMA:
			raise StructuralMismatchError(offsets[i], "Comma outside of a set literal")
		else:
			raise StructuralMismatchError(offsets[i], "Unbalanced close-bracket")

def scan_set_literal(expression:Expression, start:int) -> tuple[SetValue, int]:
	"""
	`start` indexes an open-bracket. Returns the literal's value and the index just past its
	close-bracket. Each element is a maximal run of digits; elements are separated by single commas.
	"""
	chars, offsets = expression.characters, expression.offsets
	size, i = len(chars), start + 1
	elements = GrowableStack()
	want_element = True # True after the open-bracket and after each comma.
	while i < size:
		ch = chars[i]
		if ch == MINUS:
			i += 1
		elif ch in DIGITS:
			if not want_element: raise StructuralMismatchError(offsets[i], "Expected a comma")
			run = GrowableStack()
			while i < size and chars[i] in DIGITS:
				run.push(chars[i])
				i += 1
			elements.push(int(''.join(run)))
			want_element = False
		elif ch == COMMA:
			if want_element: raise StructuralMismatchError(offsets[i], "Expected a number")
			want_element = True
			i += 1
		elif ch == CLOSE_BRACKET:
			if want_element and not elements.empty(): raise StructuralMismatchError(offsets[i], "Expected a number")
			return SetValue(elements), i + 1
		else:
			raise StructuralMismatchError(offsets[i], "Unexpected %r inside a set literal"%ch)
	raise StructuralMismatchError(offsets[start], "Unterminated set literal")
