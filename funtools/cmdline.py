"""
Exercise the funtools helpers from the console.

{0}

For example:

    funtools factorial 10

will tie the knot on an anonymous factorial and print 3628800.

    funtools absurd

will forge an impossible value and show what happens when it is eliminated.

    funtools -h

will explain all the arguments.
"""
import sys, argparse

def _natural(text:str) -> int:
	value = int(text)
	if value < 0: raise argparse.ArgumentTypeError("%r is negative."%text)
	return value

def _absurd(reason=None):
	from .never import Never, absurd, unreachable
	if reason: unreachable(reason)
	# Only an escape hatch can make one of these. Here is the escape hatch.
	forged = object.__new__(Never)
	forged.inner = forged
	return absurd(forged)

def _recipe(name):
	def demo(*operands):
		from . import recipes
		return getattr(recipes, name)(*operands)
	return demo

parser = argparse.ArgumentParser(
	prog="funtools",
	description="Demonstrations of fixed-point combinators and the uninhabited type.",
)
parser.add_argument('-v', "--verbose", action="count", help="Narrate each step on the console.")
commands = parser.add_subparsers(dest="command", required=True)

_fact = commands.add_parser("factorial", help="N! via fix")
_fact.add_argument("n", type=_natural)
_fact.set_defaults(demo=_recipe("factorial"), operands=("n",))

_pow = commands.add_parser("power", help="BASE ** EXP via fix2")
_pow.add_argument("base", type=int)
_pow.add_argument("exp", type=_natural)
_pow.set_defaults(demo=_recipe("power"), operands=("base", "exp"))

_sum = commands.add_parser("sum", help="0 + 1 + ... + N via fix3")
_sum.add_argument("n", type=_natural)
_sum.set_defaults(demo=_recipe("summation"), operands=("n",))

_abs = commands.add_parser("absurd", help="eliminate a forged impossible value")
_abs.add_argument("reason", nargs="?", help="mark an unreachable branch with this reason instead")
_abs.set_defaults(demo=_absurd, operands=("reason",))

def run(args):
	from .diagnostics import Report, Unreachable
	report = Report(verbose=args.verbose)
	operands = tuple(getattr(args, name) for name in args.operands)
	report.info("Running %s%r"%(args.command, operands))
	try: result = args.demo(*operands)
	except Unreachable:
		report.info("As promised, that was unreachable.")
		return 1
	except RecursionError:
		report.too_deep(args.command, operands)
		report.complain_to_console()
		return 1
	print(result)
	report.info("Done.")
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
