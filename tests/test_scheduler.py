import unittest
from setcalc.evaluation.scheduler import Scheduler
from setcalc.evaluation.operands import ValueStack, TaggedRunStack
from setcalc.support.interfaces import EvaluationErrorListener, StructuralMismatchError, SET


def tokens(*items):
	""" Sets given as lists, everything else as its punctuation; positions are just the index. """
	for position, item in enumerate(items):
		if isinstance(item, list): yield SET, item, position
		else: yield item, None, position


class Recorder(EvaluationErrorListener):
	""" Remembers which hook fired before letting the default raise. """
	def __init__(self):
		self.fired = None

	def unbalanced_close(self, position):
		self.fired = 'unbalanced_close', position
		super().unbalanced_close(position)

	def unclosed_open(self, position):
		self.fired = 'unclosed_open', position
		super().unclosed_open(position)

	def missing_operand(self, position):
		self.fired = 'missing_operand', position
		super().missing_operand(position)

	def missing_operator(self, position):
		self.fired = 'missing_operator', position
		super().missing_operator(position)

	def empty_expression(self):
		self.fired = 'empty_expression', None
		super().empty_expression()


class TestScheduler(unittest.TestCase):
	def run_both(self, *items):
		""" Both operand stores must agree; return the common answer. """
		answers = [Scheduler(store, EvaluationErrorListener()).run(tokens(*items)) for store in (ValueStack(), TaggedRunStack())]
		self.assertEqual(answers[0], answers[1])
		return answers[0]

	def test_01_single_set(self):
		self.assertEqual((3, 1, 2), self.run_both([3, 1, 2]))

	def test_02_intersection_binds_tighter(self):
		# [1] U [2] ^ [2] is [1] U ([2] ^ [2]), not ([1] U [2]) ^ [2]
		self.assertEqual((1, 2), self.run_both([1], 'U', [2], '^', [2]))
		self.assertEqual((1, 2, 3), self.run_both([1, 2], 'U', [3], '^', [3, 4], '^', [3]))

	def test_03_equal_precedence_groups_left_to_right(self):
		# ([1,2,3] \ [2]) U [2] is [1,3,2]; the other grouping would give [1,3].
		self.assertEqual((1, 3, 2), self.run_both([1, 2, 3], '\\', [2], 'U', [2]))
		# ([1,2] U [3]) \ [1] is [2,3]; the other grouping would give [1,2,3].
		self.assertEqual((2, 3), self.run_both([1, 2], 'U', [3], '\\', [1]))

	def test_04_parentheses(self):
		self.assertEqual((2, 3), self.run_both('(', [1, 2], 'U', [3], ')', '^', [2, 3]))
		self.assertEqual((1, 2, 3), self.run_both([1, 2, 3], '\\', '(', [2], '\\', [2], ')'))
		self.assertEqual((5,), self.run_both('(', '(', [5], ')', ')'))

	def test_05_operator_stack_drains(self):
		scheduler = Scheduler(ValueStack(), EvaluationErrorListener())
		for kind, semantic, position in tokens('(', [1], 'U', [2], '^', [2]):
			scheduler.feed(kind, semantic, position)
		self.assertEqual(['(', 'U', '^'], list(scheduler.operators))
		scheduler.feed(')', None, 6)
		self.assertTrue(scheduler.operators.empty())
		self.assertEqual((1, 2), scheduler.finish())

	def test_06_structural_errors(self):
		for items, expect in [
			(('(', [1]), ('unclosed_open', 0)),
			(([1], ')'), ('unbalanced_close', 1)),
			(([1], 'U', '(', [2], ')', ')'), ('unbalanced_close', 5)),
			(('U', [1]), ('missing_operand', 0)),
			(([1], 'U', '^', [2]), ('missing_operand', 2)),
			(('(', ')'), ('missing_operand', 1)),
			(([1], [2]), ('missing_operator', 1)),
			(([1], '(', [2], ')'), ('missing_operator', 1)),
			((), ('empty_expression', None)),
		]:
			with self.subTest(items=items):
				recorder = Recorder()
				with self.assertRaises(StructuralMismatchError):
					Scheduler(ValueStack(), recorder).run(tokens(*items))
				self.assertEqual(expect, recorder.fired)

	def test_07_dangling_operator_reports_end(self):
		recorder = Recorder()
		with self.assertRaises(StructuralMismatchError):
			Scheduler(ValueStack(), recorder).run(tokens([1], 'U'), end=9)
		self.assertEqual(('missing_operand', 9), recorder.fired)


if __name__ == '__main__':
	unittest.main()
