"""
Fixed-point combinators: self-reference without a name to refer by.

Each combinator takes a function whose first parameter stands for the
function being defined, and ties the knot::

	fact = fix(lambda self, n: 1 if n == 0 else n * self(n - 1))
	fact(5)   # 120

The knot is re-tied on every call rather than once up front. That costs a
fresh closure per level of recursion and buys nothing else, but it keeps
each call independent of every other.
"""
from functools import wraps
from typing import Callable

def fix[A, R](f:Callable[[Callable[[A], R], A], R]) -> Callable[[A], R]:
	@wraps(f)
	def fixed(a:A) -> R:
		return f(fix(f), a)
	return fixed

def fix2[A, B, R](f:Callable[[Callable[[A, B], R], A, B], R]) -> Callable[[A, B], R]:
	@wraps(f)
	def fixed(a:A, b:B) -> R:
		return f(fix2(f), a, b)
	return fixed

def fix3[A, B, C, R](f:Callable[[Callable[[A, B, C], R], A, B, C], R]) -> Callable[[A, B, C], R]:
	@wraps(f)
	def fixed(a:A, b:B, c:C) -> R:
		return f(fix3(f), a, b, c)
	return fixed
