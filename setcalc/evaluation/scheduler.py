"""
Operator-precedence scheduling, in the classic shunting-yard manner.

Sets go straight to the operand store. Operators and open-parentheses go on an operator stack,
where they wait until it is their turn. The one primitive is "pop-and-evaluate": pop an operator
and hand it to `algebra.evaluate`, which combines the two most recently completed sets.

When is it an operator's turn? When something arrives which cannot bind tighter:
	* another operator of lower or equal precedence, which makes same-priority operators
	  group left to right;
	* a close-parenthesis, which flushes everything back to its matching open-parenthesis;
	* the end of the expression, which flushes everything.

So at any moment, inside each open parenthesis, the waiting operators are in strictly increasing
precedence from bottom to top, and none of them has seen its right operand evaluated yet.

Because the evaluator pops two sets per operator, the scheduler also insists that sets and operators
alternate properly. Anything else is reported to the error listener before it can become a
stack underflow.
"""

from typing import Iterable, Optional

from ..support.foundation import GrowableStack
from ..support.interfaces import OPEN, CLOSE, SET, OperandStore, EvaluationErrorListener
from .algebra import SetValue, evaluate, is_operator, priority

class Scheduler:
	def __init__(self, operands:OperandStore, on_error:EvaluationErrorListener):
		self.operands = operands
		self.operators: GrowableStack[str] = GrowableStack()
		self.__positions: GrowableStack[int] = GrowableStack() # Runs parallel to the operator stack.
		self.__on_error = on_error
		self.__want_operand = True
		self.__seen_anything = False

	def __push_operator(self, symbol:str, position:int):
		self.operators.push(symbol)
		self.__positions.push(position)

	def __pop_operator(self) -> tuple[str, int]:
		return self.operators.pop(), self.__positions.pop()

	def pop_and_evaluate(self) -> SetValue:
		op, _ = self.__pop_operator()
		return evaluate(self.operands, op)

	def feed(self, kind:str, semantic, position:int):
		self.__seen_anything = True
		if kind == SET:
			if not self.__want_operand: self.__on_error.missing_operator(position)
			self.operands.push_set(semantic)
			self.__want_operand = False
		elif kind == OPEN:
			if not self.__want_operand: self.__on_error.missing_operator(position)
			self.__push_operator(OPEN, position)
		elif kind == CLOSE:
			if self.__want_operand: self.__on_error.missing_operand(position)
			while True:
				if self.operators.empty(): return self.__on_error.unbalanced_close(position)
				if self.operators.top() == OPEN: break
				self.pop_and_evaluate()
			self.__pop_operator()
		elif is_operator(kind):
			if self.__want_operand: self.__on_error.missing_operand(position)
			while not self.operators.empty() and priority(self.operators.top()) >= priority(kind):
				self.pop_and_evaluate()
			self.__push_operator(kind, position)
			self.__want_operand = True
		else:
			raise ValueError("Unknown token kind %r"%kind)

	def finish(self, position:Optional[int]=None) -> SetValue:
		"""
		Flush the operator stack and return the single set which remains. `position` is where the
		end of the expression is considered to be, for the sake of error reports.
		"""
		if not self.__seen_anything: self.__on_error.empty_expression()
		if self.__want_operand: self.__on_error.missing_operand(position)
		while not self.operators.empty():
			if self.operators.top() == OPEN: self.__on_error.unclosed_open(self.__positions.top())
			self.pop_and_evaluate()
		result = self.operands.pop_set()
		assert not len(self.operands), "Operands left over after evaluation"
		return result

	def run(self, tokens:Iterable, end:Optional[int]=None) -> SetValue:
		""" Feed every (kind, semantic, position) token, then finish. """
		for kind, semantic, position in tokens: self.feed(kind, semantic, position)
		return self.finish(end)
