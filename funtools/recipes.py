"""
A few recursive functions written without ever naming themselves.
The command line shows them off, and the tests check the combinators against them.
"""
from .fixpoint import fix, fix2, fix3

def factorial(n:int) -> int:
	return fix(lambda self, k: 1 if k <= 0 else k * self(k - 1))(n)

def power(base, exp:int):
	# Square-and-multiply, so the depth grows with the bit-length of the exponent.
	return fix2(lambda self, b, e: (
		1 if e == 0
		else self(b * b, e // 2) if e % 2 == 0
		else b * self(b, e - 1)
	))(base, exp)

def summation(n:int) -> int:
	""" 0 + 1 + ... + n, carried along in an accumulator. """
	return fix3(lambda self, i, stop, acc: acc if i > stop else self(i + 1, stop, acc + i))(0, n, 0)
