"""
Console complaints for when something that cannot happen, happens anyway.

Nothing here runs on a healthy path. The eliminator for the uninhabited type
and its statement-form cousin come here to explain themselves before raising.
"""
import sys, random, inspect, linecache
from pathlib import Path
from typing import Any, Optional, Sequence
from boozetools.support.failureprone import illustration

_PACKAGE_FOLDER = Path(__file__).parent
_TRACE_LIMIT = 5

class Unreachable(AssertionError):
	""" Raised when control arrives somewhere the types said it never could. """
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Blasted Thing',
		'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat',
		'Fiddlesticks', 'Gack', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', "Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'That was supposed to be impossible.',
		'Somebody forged a value that cannot exist.',
		'The proof has a hole in it.',
		'I cannot continue.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects complaints on behalf of the command line. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def too_deep(self, what:str, argument:Any):
		intro = "Recursion went too deep while computing %s of %r."%(what, argument)
		self.issue(Pic(intro, [], ["Hint: Python's stack is finite; try a smaller argument."]))

class Annotation:
	path: Optional[Path]
	line: int
	column: int
	width: int
	caption: str

	def __init__(self, path:Optional[Path], line:int, column:int=0, width:int=1, caption:str=""):
		self.path = path
		self.line = line
		self.column = column
		self.width = max(width, 1)
		self.caption = caption

	@classmethod
	def from_frame(cls, frame_info:inspect.FrameInfo, caption:str=""):
		positions = frame_info.positions
		if positions is None or positions.col_offset is None:
			column, width = 0, 1
		elif positions.end_lineno == positions.lineno and positions.end_col_offset is not None:
			column, width = positions.col_offset, positions.end_col_offset - positions.col_offset
		else:
			column, width = positions.col_offset, 1
		return cls(Path(frame_info.filename), frame_info.lineno, column, width, caption)

	def illustrate(self):
		single_line = _fetch(self.path, self.line)
		return illustration(single_line, self.column, self.width, prefix='% 6d |' % self.line, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		# Consecutive annotations in one file share a single heading.
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _fetch(path:Optional[Path], line:int) -> str:
	if path is None: return ""
	return linecache.getline(str(path), line).rstrip("\r\n")

def _is_ours(frame_info:inspect.FrameInfo) -> bool:
	return Path(frame_info.filename).parent == _PACKAGE_FOLDER

def caller_annotations(stack:Sequence[inspect.FrameInfo]) -> list[Annotation]:
	""" Innermost foreign frames, outermost first, the way a traceback reads. """
	foreign = [fi for fi in stack if not _is_ours(fi)][:_TRACE_LIMIT]
	foreign.reverse()
	return [Annotation.from_frame(fi) for fi in foreign]

def trace_absurdity(reason:Optional[str], depth:int=0) -> str:
	"""
	Bemoan an absurdity with the caller's stack and return the message
	the subsequent exception ought to carry.
	"""
	intro = "Absurd thing happened:"
	footer = []
	if reason: footer.append("Reason: "+reason)
	if depth: footer.append("The impossible value was wrapped %d deep."%depth)
	stack = inspect.stack()
	try: anns = caller_annotations(stack)
	finally: del stack
	_bemoan([Pic(intro, anns, footer)])
	return _outburst()+" "+(reason or "Absurd thing happened.")

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
