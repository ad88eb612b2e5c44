"""
Small is beautiful. Everything else in SetCalc stands on the one container defined here.

The GrowableStack is a dynamic array with a stack-shaped interface. Python's own list already
grows in amortized constant time, of course, but here the growth policy is part of the contract:
the buffer is a fixed row of slots, and a push that would overflow it reallocates to (at least)
double the capacity and copies the live elements across. That keeps the cost model explicit and
makes `capacity()` a meaningful question to ask.

The same class serves every element type the evaluator needs: characters for the expression and
the operator stack, integers for the tagged-run encoding, and whole set-values for the operand
stack. It's parameterized with a TypeVar so the checker can tell them apart.

Popping an empty stack is not an ordinary error. Callers are expected to track sizes correctly,
so an underflow means some invariant upstream has already been broken. It raises StackUnderflow,
which deliberately does not descend from the user-facing error hierarchy.
"""

from typing import TypeVar, Generic, Iterable, Iterator, Optional, Callable

from .interfaces import StackUnderflow

T = TypeVar("T")

GROWTH_FACTOR = 2
INITIAL_CAPACITY = 4

class GrowableStack(Generic[T]):
	""" Amortized-doubling dynamic array exposing push/pop/top/size/empty/sort. """

	def __init__(self, initial:Iterable[T]=(), *, capacity:int=0):
		self.__buffer: list[Optional[T]] = [None] * capacity
		self.__size = 0
		for item in initial: self.push(item)

	def capacity(self) -> int: return len(self.__buffer)
	def size(self) -> int: return self.__size
	def empty(self) -> bool: return self.__size == 0
	def __len__(self): return self.__size

	def reserve(self, size:int):
		"""
		Make sure there is room for at least `size` elements. If there is not, the buffer is
		replaced with a larger one: double the requested size, or INITIAL_CAPACITY if that's bigger.
		Live elements are copied across; the dead slots of the old buffer go with it.
		"""
		if size > len(self.__buffer):
			new_buffer = [None] * max(size * GROWTH_FACTOR, INITIAL_CAPACITY)
			new_buffer[:self.__size] = self.__buffer[:self.__size]
			self.__buffer = new_buffer

	def push(self, value:T):
		self.reserve(self.__size + 1)
		self.__buffer[self.__size] = value
		self.__size += 1

	def pop(self) -> T:
		if self.__size == 0: raise StackUnderflow("pop from an empty stack")
		self.__size -= 1
		value, self.__buffer[self.__size] = self.__buffer[self.__size], None
		return value

	def top(self) -> T:
		""" Check `empty()` first. Peeking at an empty stack is the same failure as popping one. """
		if self.__size == 0: raise StackUnderflow("top of an empty stack")
		return self.__buffer[self.__size - 1]

	def clear(self):
		for i in range(self.__size): self.__buffer[i] = None
		self.__size = 0

	def sort(self, key:Callable=None):
		""" In-place ascending sort of the live elements only. """
		self.__buffer[:self.__size] = sorted(self.__buffer[:self.__size], key=key)

	def __iter__(self) -> Iterator[T]:
		""" Bottom to top, which is also push order. """
		for i in range(self.__size): yield self.__buffer[i]

	def __getitem__(self, index:int) -> T:
		if index < 0: index += self.__size
		if not 0 <= index < self.__size: raise IndexError(index)
		return self.__buffer[index]

	def __contains__(self, item) -> bool:
		return any(item == x for x in self)

	def __repr__(self):
		return "%s(%r)"%(type(self).__name__, list(self))
