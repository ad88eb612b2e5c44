"""
Two ways to keep completed sets on a stack while the scheduler decides what to do with them.

The obvious way is a stack whose elements are whole SetValues. That's the ValueStack, and
it's what everything uses unless asked otherwise.

The other way is the "tagged run" encoding: flatten every set onto one stack of plain integers,
writing the elements in order and then one more integer giving how many there were. To read back
the most recent set, pop the count, then pop that many elements. Repeating the rule from the
top is the only way to tell adjacent sets apart, which is why an off-by-one anywhere
corrupts everything beneath it. The TaggedRunStack keeps that bookkeeping in one place.
"""

from typing import Iterable

from ..support.foundation import GrowableStack
from ..support.interfaces import OperandStore, StackUnderflow
from .algebra import SetValue

class ValueStack(OperandStore):
	def __init__(self):
		self.__stack: GrowableStack[SetValue] = GrowableStack()

	def push_set(self, elements:Iterable[int]):
		self.__stack.push(SetValue(elements))

	def pop_set(self) -> SetValue:
		return self.__stack.pop()

	def __len__(self): return len(self.__stack)

class TaggedRunStack(OperandStore):
	"""
	Sets flattened onto a single GrowableStack[int], each followed by its own count.
	`raw()` exposes the flattened integers, bottom to top, for inspection.
	"""
	def __init__(self):
		self.__cells: GrowableStack[int] = GrowableStack()
		self.__nr_sets = 0

	def push_set(self, elements:Iterable[int]):
		count = 0
		for item in elements:
			self.__cells.push(item)
			count += 1
		self.__cells.push(count)
		self.__nr_sets += 1

	def pop_set(self) -> SetValue:
		if not self.__nr_sets: raise StackUnderflow("no complete set to pop")
		count = self.__cells.pop()
		buffer = GrowableStack(capacity=count)
		for _ in range(count): buffer.push(self.__cells.pop())
		self.__nr_sets -= 1
		# The buffer came off in reverse push order.
		return SetValue(reversed(list(buffer)))

	def raw(self) -> list[int]:
		return list(self.__cells)

	def __len__(self): return self.__nr_sets
