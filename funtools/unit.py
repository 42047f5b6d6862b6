"""
The unit value, and a way to get there from anything.

The empty tuple plays unit: there is exactly one of it, and it says nothing.
"""
from typing import Any

type Unit = tuple[()]

UNIT: Unit = ()

def void(_anything:Any) -> Unit:
	""" Throw away a value; keep the fact that it was computed. """
	return UNIT
