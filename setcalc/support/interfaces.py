"""
This file aggregates the exception types and abstract classes which SetCalc deals in.

There are two quite different kinds of failure here, and it matters to keep them apart:

* A user can type something that isn't an expression. That is a SetCalcError: it carries the
  offset where things went wrong, so the application can point at the offending character.
* The machinery can break its own invariants. That is a StackUnderflow: it should never occur
  given a well-formed expression, and nobody should catch it to soldier on.
"""

from abc import ABC, abstractmethod
from typing import Optional

OPEN, CLOSE = '(', ')'
UNION, INTERSECTION, DIFFERENCE = 'U', '^', '\\'
SET = 'set' # Token kind for a complete set literal.

class SetCalcError(ValueError):
	""" Base class of all exceptions arising from what the user typed. """
	position: Optional[int]
	message: str

class InvalidInputError(SetCalcError):
	"""
	Raised while reading a line if a character falls outside the alphabet.
	Parameters are:
		the offset of the character within the raw line.
		the character itself.
	"""
	def __init__(self, position:int, character:str):
		super().__init__(position, character)
		self.position, self.character = position, character
		self.message = "Invalid character %r"%character

	def __str__(self): return "%s at offset %d"%(self.message, self.position)

class StructuralMismatchError(SetCalcError):
	"""
	Raised for expressions built entirely of valid characters which nevertheless do not
	hang together: unbalanced parentheses, malformed set literals, a missing operand...
	The position may be None if the problem is with the expression as a whole.
	"""
	def __init__(self, position:Optional[int], message:str):
		super().__init__(position, message)
		self.position, self.message = position, message

	def __str__(self):
		if self.position is None: return self.message
		return "%s at offset %d"%(self.message, self.position)

class StackUnderflow(AssertionError):
	""" Something popped an empty stack. Given a well-formed expression, this must never occur. """


class EvaluationErrorListener:
	"""
	Implement this interface to report/respond to structural errors found while scheduling.
	Every default raises StructuralMismatchError, so the evaluation stops at the first one.
	An override which returns normally is in trouble: there is no sensible recovery
	mid-expression, and the scheduler will go on to break its own invariants.
	"""

	def unbalanced_close(self, position:int):
		""" A close-parenthesis turned up with no matching open-parenthesis. """
		raise StructuralMismatchError(position, "Unbalanced close-parenthesis")

	def unclosed_open(self, position:int):
		""" The expression ended while a parenthesis was still open. """
		raise StructuralMismatchError(position, "Unclosed parenthesis")

	def missing_operand(self, position:int):
		""" An operator or close-parenthesis arrived where a set was expected. """
		raise StructuralMismatchError(position, "Expected a set")

	def missing_operator(self, position:int):
		""" A set or open-parenthesis arrived where an operator was expected. """
		raise StructuralMismatchError(position, "Expected an operator")

	def empty_expression(self):
		raise StructuralMismatchError(None, "Empty expression")


class OperandStore(ABC):
	"""
	The evaluator pushes and pops whole set-values. How they are kept in the meantime is
	this object's business: see module `evaluation.operands` for the two ways on offer.
	"""

	@abstractmethod
	def push_set(self, elements):
		""" Push one complete set. `elements` is any iterable of int, taken in order. """

	@abstractmethod
	def pop_set(self):
		""" Pop the most recently completed set, as a SetValue, in its original order. """

	@abstractmethod
	def __len__(self):
		""" The number of complete sets currently held. """
