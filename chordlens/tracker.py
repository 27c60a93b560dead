"""Active-note tracking.

``ActiveNoteTracker`` owns the set of currently sounding MIDI notes. Each
decoded ``(status, note, velocity)`` triple is applied in arrival order; after
every change the chord is re-identified and a new immutable ``TrackerState``
is published to subscribers.

Each tracker is independent, so several can run side by side (one per input
port, or one per test) without sharing notes.

Example:
	```python
	tracker = ActiveNoteTracker()
	tracker.subscribe(lambda state: print(state.chord))

	tracker.process(144, 60, 100)
	tracker.process(144, 64, 100)
	state = tracker.process(144, 67, 100)

	state.chord.name()   # "C Major"
	state.labels         # {60: "C4", 64: "E4", 67: "G4"}
	```

It also plugs straight into a mido input port::

	chordlens.midi_utils.select_input_device("My Keyboard", tracker.handle_message)
"""

import dataclasses
import logging
import threading
import types
import typing

import chordlens.chords
import chordlens.constants
import chordlens.midi_utils
import chordlens.pitch


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class TrackerState:

	"""
	Snapshot of the sounding notes and everything derived from them.

	Attributes:
		notes: The active MIDI notes.
		chord: The identified chord, or ``None``.
		labels: Display label per active note (e.g. ``{60: "C4"}``).
		colors: Octave-brightened ``"#rrggbb"`` colour per active note.
	"""

	notes: typing.FrozenSet[int] = frozenset()
	chord: typing.Optional[chordlens.chords.ChordMatch] = None
	labels: typing.Mapping[int, str] = dataclasses.field(default_factory=lambda: types.MappingProxyType({}))
	colors: typing.Mapping[int, str] = dataclasses.field(default_factory=lambda: types.MappingProxyType({}))

	@property
	def is_empty (self) -> bool:

		"""True when no notes are sounding."""

		return not self.notes


StateCallback = typing.Callable[[TrackerState], typing.Any]


class ActiveNoteTracker:

	"""Apply note-on/note-off events and publish chord state.

	Only the transition handler mutates the note set. Readers get frozen
	``TrackerState`` snapshots, built from the post-change set and swapped in
	as a single assignment, so an empty set never carries a stale chord.
	"""

	def __init__ (self, base_color: str = chordlens.constants.DEFAULT_KEY_COLOR) -> None:

		"""Start with no notes sounding.

		Parameters:
			base_color: ``"#rrggbb"`` colour that active keys are brightened from.
		"""

		self.base_color = base_color

		self._notes: typing.Set[int] = set()
		self._state = TrackerState()
		self._listeners: typing.List[StateCallback] = []

		# mido delivers input callbacks on its own thread. Re-entrant so a
		# subscriber may call back into the tracker.
		self._lock = threading.RLock()

	@property
	def state (self) -> TrackerState:

		"""The most recently published snapshot."""

		return self._state

	@property
	def notes (self) -> typing.FrozenSet[int]:

		"""The active notes as an immutable set."""

		return self._state.notes

	def subscribe (self, callback: StateCallback) -> None:

		"""
		Register a callback that receives each new ``TrackerState``.
		"""

		self._listeners.append(callback)

	def unsubscribe (self, callback: StateCallback) -> None:

		"""
		Unregister a previously subscribed callback.

		Raises ``ValueError`` if the callback is not subscribed.
		"""

		if callback not in self._listeners:
			raise ValueError("Callback not subscribed to tracker")

		self._listeners.remove(callback)

	def process (self, status: int, note: int, velocity: int) -> TrackerState:

		"""Apply one decoded MIDI triple and return the resulting state.

		A note-on (144) with velocity above 0 adds the note. A note-off (128),
		or a note-on with velocity 0, removes it. Any other status byte is
		ignored and subscribers are not called.

		Parameters:
			status: MIDI status byte.
			note: MIDI note number (0-127).
			velocity: MIDI velocity (0-127).

		Returns:
			The state after the event.
		"""

		triple = (status, note, velocity)

		with self._lock:

			if chordlens.midi_utils.is_note_on(triple):
				self._notes.add(note)

			elif chordlens.midi_utils.is_note_off(triple):
				self._notes.discard(note)

			else:
				return self._state

			state = self._publish()
			self._notify(state)

		return state

	def handle_message (self, message: typing.Any) -> None:

		"""Feed a ``mido.Message`` into the tracker.

		Suitable as the ``callback`` of a mido input port. Messages other than
		note-on and note-off are ignored.
		"""

		triple = chordlens.midi_utils.message_to_triple(message)

		if triple is None:
			return

		self.process(*triple)

	def reset (self) -> TrackerState:

		"""
		Release every note (all-notes-off) and publish the empty state.
		"""

		with self._lock:
			self._notes.clear()
			state = self._publish()
			self._notify(state)

		return state

	def _notify (self, state: TrackerState) -> None:

		"""Call every subscriber with *state*. Caller holds the lock, so states arrive in publish order."""

		for callback in list(self._listeners):
			callback(state)

	def _publish (self) -> TrackerState:

		"""Rebuild the snapshot from the current note set. Caller holds the lock."""

		previous = self._state.chord

		if not self._notes:
			self._state = TrackerState()

		else:
			notes = frozenset(self._notes)

			self._state = TrackerState(
				notes = notes,
				chord = chordlens.chords.identify(notes),
				labels = types.MappingProxyType({n: chordlens.pitch.note_label(n) for n in sorted(notes)}),
				colors = types.MappingProxyType({n: chordlens.pitch.octave_color(n, self.base_color) for n in sorted(notes)}),
			)

		if self._state.chord != previous:
			logger.debug(f"Chord changed: {self._state.chord.name() if self._state.chord else None}")

		return self._state
