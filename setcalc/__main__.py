"""
Evaluate one line of set algebra and print the sorted result.

Sets are written like [1,2,3] or []. The operators are U (union), ^ (intersection)
and \\ (difference); ^ binds tighter than the other two, and parentheses group.
The expression is read from STDIN unless given with --expression.
"""

import sys, argparse

from setcalc import runtime
from setcalc.evaluation import algebra
from setcalc.scanning.alphabet import read_line

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m setcalc', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('-e', '--expression', help='evaluate this expression instead of reading a line from STDIN')
	parser.add_argument('--tagged-runs', action='store_true', help='keep operand sets flattened on one integer stack, each followed by its count')
	parser.add_argument('--strict-exit', action='store_true', help='exit with status 1 on bad input, rather than the traditional 0')
	parser.add_argument('-v', '--verbose', action='store_true', help='trace each operation, and point at the trouble on bad input')
	return parser.parse_args(argv)

def main(args) -> int:
	if args.verbose: algebra.VERBOSE = True
	line = read_line(sys.stdin) if args.expression is None else args.expression
	app = runtime.Application(tagged_runs=args.tagged_runs, verbose=args.verbose)
	if app.main(line): return 0
	return 1 if args.strict_exit else 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
