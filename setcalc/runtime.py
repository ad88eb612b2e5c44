"""
This module provides a (maybe) convenient runtime interface to the most common use case:
one line of text in, one sorted set out.

1. `evaluate_line` is the whole pipeline as a plain function: read, tokenize, schedule, finalize.
2. `Application` wraps that with reasonable default error reporting, suitable for a command line.
"""

import sys
from typing import Optional

from .support.foundation import GrowableStack
from .support.interfaces import SetCalcError, EvaluationErrorListener, OperandStore
from .support.failureprone import SourceLine
from .scanning.alphabet import read_expression
from .scanning.tokenizer import tokenize
from .evaluation.algebra import SetValue, format_set
from .evaluation.operands import ValueStack, TaggedRunStack
from .evaluation.scheduler import Scheduler

ERROR_MARKER = '[error]'

def finalize(result:SetValue) -> GrowableStack:
	""" Sort the remaining set ascending. Duplicates are not removed here. """
	values = GrowableStack(result)
	values.sort()
	return values

def format_result(values) -> str:
	return format_set(values)

def evaluate_line(line:str, *, operands:OperandStore=None, on_error:EvaluationErrorListener=None) -> GrowableStack:
	"""
	Evaluate one line of input and return the sorted answer.
	Raises InvalidInputError before any evaluation if a character is out of the alphabet,
	or StructuralMismatchError (by way of `on_error`) if the expression does not hang together.
	"""
	expression = read_expression(line)
	if operands is None: operands = ValueStack()
	if on_error is None: on_error = EvaluationErrorListener()
	scheduler = Scheduler(operands, on_error)
	return finalize(scheduler.run(tokenize(expression), end=len(line.split('\n', 1)[0].rstrip('\r'))))

class Application(EvaluationErrorListener):
	"""
	Reasonable default behavior for the command line: on success the answer is printed after a blank
	line; on failure the error marker goes to standard error and nothing goes to standard output.
	With `verbose` set, failures also get an illustrated complaint pointing at the trouble.
	"""

	source: SourceLine
	exception: Optional[SetCalcError]

	def __init__(self, *, tagged_runs=False, verbose=False):
		self.tagged_runs = tagged_runs
		self.verbose = verbose
		self.exception = None

	@staticmethod
	def log_error(*parts):
		""" Simple place to override if you'd rather use a logging framework. """
		print(*parts, file=sys.stderr)

	def make_operand_store(self) -> OperandStore:
		return TaggedRunStack() if self.tagged_runs else ValueStack()

	def evaluate(self, line:str) -> Optional[str]:
		""" Returns the formatted answer, or None after reporting a failure. """
		self.source = SourceLine(line)
		self.exception = None
		try:
			values = evaluate_line(line, operands=self.make_operand_store(), on_error=self)
		except SetCalcError as ex:
			self.exception = ex
			self.log_error(ERROR_MARKER)
			if self.verbose: self.log_error(self.source.complaint(ex.position, ex.message))
			return None
		return format_result(values)

	def main(self, line:str, out=None) -> bool:
		""" Evaluate and print. Returns True on success. """
		answer = self.evaluate(line)
		if answer is None: return False
		print(file=out or sys.stdout)
		print(answer, file=out or sys.stdout)
		return True
