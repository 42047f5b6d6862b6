"""
The uninhabited type and its eliminator.

A `Never` can only be made out of another `Never`. With no base case to
start from, no such value exists, so any function demanding one is a
function nobody can call. That makes `absurd` the perfect adapter: it
promises any result type at all, and keeps the promise vacuously.

Typical use is on the error side of something that cannot fail::

	def fetch[E](on_error: Callable[[E], Row]) -> Row: ...
	row = fetch(absurd)   # here E is Never

or to close off the fallthrough of an exhaustive match.
"""
import typing
from typing import Optional
from .diagnostics import Unreachable, trace_absurdity

class Never:
	""" Wrap(Never): the one constructor of a type with no base case. """
	__slots__ = ("inner",)
	inner: "Never"

	def __init__(self, inner:"Never"):
		assert isinstance(inner, Never), type(inner)
		self.inner = inner

	def __repr__(self): return "<Never>"

def absurd[T](never:Never) -> T:
	"""
	From a value that cannot exist, conclude anything at all.

	A well-typed program never gets here. Peel the wrappers the way the
	recursive definition would, but in a loop and watching for a forged
	cycle, then complain and raise `Unreachable`.
	"""
	depth, seen, it = 0, set(), never
	while isinstance(it, Never) and id(it) not in seen:
		seen.add(id(it))
		depth += 1
		it = getattr(it, "inner", None)
	reason = "absurd() received a %s."%type(never).__name__
	raise Unreachable(trace_absurdity(reason, depth))

def unreachable(reason:Optional[str]=None) -> typing.Never:
	""" Mark a branch that cannot happen. Reaching it anyway is a bug. """
	raise Unreachable(trace_absurdity(reason))
