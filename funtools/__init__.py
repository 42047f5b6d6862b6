"""
Small helpers for writing Python the functional way:

* `Never` and `absurd`: the uninhabited type and its eliminator.
* `void`: forget a value, keep unit.
* `fix`, `fix2`, `fix3`: let an anonymous function call itself.
"""
from .diagnostics import Unreachable
from .never import Never, absurd, unreachable
from .unit import Unit, UNIT, void
from .fixpoint import fix, fix2, fix3

__all__ = [
	"Never", "absurd", "unreachable", "Unreachable",
	"Unit", "UNIT", "void",
	"fix", "fix2", "fix3",
]
