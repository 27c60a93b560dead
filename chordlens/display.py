"""Terminal output for the chord monitor.

Provides a persistent status line showing the sounding notes and the chord
they form, and a plain-text rendering of the voicing reference table.

Log messages from the ``chordlens`` loggers scroll above the status line
without disruption.

```python
tracker = chordlens.tracker.ActiveNoteTracker()
display = chordlens.display.StatusDisplay()
display.start()
tracker.subscribe(display.update)
```

The status line looks like::

	Chord: C Major  Inversion: 1st  Bass: E4  Notes: E4 G4 C5

The voicing table looks like::

	C       D       E       F       G       A       B
	-       -       -       -       -       1       1
	...
"""

import logging
import sys
import typing

import chordlens.pitch
import chordlens.tracker
import chordlens.voicings


_CELL_WIDTH = 8
_LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class DisplayLogHandler (logging.Handler):

	"""Route ``chordlens`` log records above the status line."""

	def __init__ (self, display: "StatusDisplay") -> None:

		super().__init__()
		self._display = display
		self.setFormatter(logging.Formatter(_LOG_FORMAT))

	def emit (self, record: logging.LogRecord) -> None:

		try:
			self._display.write_above(self.format(record))
		except Exception:
			self.handleError(record)


class StatusDisplay:

	"""Live-updating status line showing the tracker state.

	Subscribe ``update`` to an ``ActiveNoteTracker``; every published state
	redraws the line in place on stderr. While active, records from the
	``chordlens`` loggers go through a ``DisplayLogHandler`` instead of
	propagating to the root handlers, which would write over the line.
	"""

	def __init__ (self, stream: typing.Optional[typing.TextIO] = None) -> None:

		"""Prepare an inactive display.

		Parameters:
			stream: Where to draw; defaults to ``sys.stderr``.
		"""

		self.stream: typing.TextIO = stream if stream is not None else sys.stderr
		self._active: bool = False
		self._handler = DisplayLogHandler(self)
		self._propagate: bool = True
		self._last_line: str = ""

	def start (self) -> None:

		"""Attach the log handler and draw the idle prompt."""

		if self._active:
			return

		self._active = True
		self._last_line = ""

		package_logger = logging.getLogger("chordlens")
		self._propagate = package_logger.propagate
		package_logger.propagate = False
		package_logger.addHandler(self._handler)

		self.update(chordlens.tracker.TrackerState())

	def stop (self) -> None:

		"""Erase the status line and hand logging back to the root handlers."""

		if not self._active:
			return

		self.stream.write("\r\033[K")
		self.stream.flush()
		self._active = False

		package_logger = logging.getLogger("chordlens")
		package_logger.removeHandler(self._handler)
		package_logger.propagate = self._propagate

	def update (self, state: chordlens.tracker.TrackerState) -> None:

		"""Redraw the status line for a tracker state, if the text changed."""

		if not self._active:
			return

		line = format_status(state)

		if line == self._last_line:
			return

		self._last_line = line
		self.stream.write(f"\r\033[K{line}")
		self.stream.flush()

	def write_above (self, text: str) -> None:

		"""Print a line of text and redraw the status line beneath it."""

		if not self._active:
			return

		self.stream.write(f"\r\033[K{text}\n{self._last_line}")
		self.stream.flush()


def format_status (state: chordlens.tracker.TrackerState) -> str:

	"""Build the status string for a tracker state.

	Example:
		```python
		format_status(tracker.process(144, 60, 100))  # "Chord: -  Notes: C4"
		```
	"""

	if state.is_empty:
		return "Play some notes..."

	parts: typing.List[str] = []

	if state.chord is None:
		parts.append("Chord: -")
	else:
		parts.append(f"Chord: {state.chord.name()}")
		parts.append(f"Inversion: {state.chord.inversion}")
		parts.append(f"Bass: {state.chord.bass_note}")

	parts.append("Notes: " + " ".join(state.labels.values()))

	return "  ".join(parts)


def format_voicing_table (quality: str) -> str:

	"""Render the voicing reference table for a quality as aligned text.

	Each cell shows the slot label (``1`` for the first voicing, ``-`` for
	hidden slots) followed on the next line by its chord tones.
	"""

	header = "".join(root.ljust(_CELL_WIDTH) for root in chordlens.pitch.WHOLE_NOTES)
	lines = [header.rstrip()]

	for row in chordlens.voicings.voicing_table(quality):

		lines.append("".join(cell.label().ljust(_CELL_WIDTH) for cell in row).rstrip())
		lines.append("".join(("" if cell.hidden else cell.notes).ljust(_CELL_WIDTH) for cell in row).rstrip())

	return "\n".join(lines)
