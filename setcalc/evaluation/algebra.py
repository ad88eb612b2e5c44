"""
The set algebra proper: a value type for sets, the three binary operations, and the
`evaluate` primitive which applies one operator to the top two sets of an operand store.

A word on what "set" means here:
---------------------------------
A SetValue is an ordered sequence of integers, and a set literal is taken exactly as written.
The literal `[1,1,2]` is a three-element SetValue; nothing deduplicates it on the way in.
The operations then differ in what they promise:

	union (U): everything in the left, then each element of the right which is not a member of
		the left. Membership is checked against the left operand alone, not against the result
		under construction, so a value repeated in the right but absent from the left comes
		through as many times as it was repeated.
	difference (\\): the elements of the left with no equal element anywhere in the right.
	intersection (^): the elements common to both, each value at most once, whatever the
		repetitions in either input.

The final answer is sorted but otherwise left alone, so duplicates can survive to the output
wherever the operator definitions above let them.
"""

import sys
from typing import Iterable, Callable

from ..support.foundation import GrowableStack
from ..support.interfaces import UNION, INTERSECTION, DIFFERENCE, OperandStore

VERBOSE = False

class SetValue(tuple):
	""" An immutable, ordered, not-necessarily-deduplicated run of integers. """
	__slots__ = ()
	def __new__(cls, elements:Iterable[int]=()):
		return super().__new__(cls, elements)
	def __repr__(self):
		return "SetValue(%s)"%format_set(self)

def format_set(elements:Iterable[int]) -> str:
	""" Renders as `[v1,v2,...]` with no spaces; an empty set is `[]`. """
	return '[' + ','.join(map(str, elements)) + ']'

def union(left:SetValue, right:SetValue) -> SetValue:
	result = GrowableStack(left)
	for item in right:
		if item not in left: result.push(item)
	return SetValue(result)

def difference(left:SetValue, right:SetValue) -> SetValue:
	return SetValue(item for item in left if item not in right)

def intersection(left:SetValue, right:SetValue) -> SetValue:
	scratch = GrowableStack()
	for item in left:
		if item in right and item not in scratch: scratch.push(item)
	return SetValue(scratch)

OPERATIONS: dict[str, Callable[[SetValue, SetValue], SetValue]] = {
	UNION: union,
	DIFFERENCE: difference,
	INTERSECTION: intersection,
}

# Higher binds tighter. Anything not an operator (i.e. an open-parenthesis) ranks below them all,
# so it never gets popped by the precedence rule.
PRECEDENCE = {UNION: 1, DIFFERENCE: 1, INTERSECTION: 2}

def is_operator(symbol:str) -> bool: return symbol in OPERATIONS
def priority(symbol:str) -> int: return PRECEDENCE.get(symbol, -1)

def evaluate(operands:OperandStore, op:str) -> SetValue:
	"""
	Pop the right operand (it was pushed last), then the left, apply the operator,
	and push the result back. The result is also returned, for the convenience of tracing.
	"""
	right = operands.pop_set()
	left = operands.pop_set()
	result = OPERATIONS[op](left, right)
	if VERBOSE: print("%s %s %s -> %s"%(format_set(left), op, format_set(right), format_set(result)), file=sys.stderr)
	operands.push_set(result)
	return result
