"""Chord templates and chord identification.

This module holds the closed chord template table and the identifier that
matches a set of sounding MIDI notes against it.

Module-level constants:
- `CHORD_PATTERNS`: Maps each chord quality to its inversion patterns. Pattern 0
  is root position, pattern 1 first inversion, and so on. Declaration order is
  significant: it decides which quality wins when an interval signature fits
  more than one.
- `QUALITIES`: The quality names in declaration order.
- `INVERSION_LABELS`: Labels for inversion indices 0-3.

Identification only ever looks at pitch classes, so some note sets are
ambiguous. ``{G, C, D}`` is both G sus4 and C sus2; the identifier tries roots
in ascending pitch-class order and qualities in table order, and the first hit
wins (C Sus2 here). The order is fixed, so ambiguous sets always resolve the same way.

Example:
	```python
	match = identify({64, 67, 72})
	match.name()       # "C Major"
	match.inversion    # "1st"
	match.bass_note    # "E4"
	```
"""

import dataclasses
import typing

import chordlens.pitch


CHORD_PATTERNS: typing.Dict[str, typing.List[typing.List[int]]] = {
	"Major": [
		[0, 4, 7],
		[4, 7, 12],
		[7, 12, 16],
	],
	"Minor": [
		[0, 3, 7],
		[3, 7, 12],
		[7, 12, 15],
	],
	"Diminished": [
		[0, 3, 6],
		[3, 6, 9],
	],
	"Augmented": [
		[0, 4, 8],
		[4, 8, 12],
	],
	"Major 7th": [
		[0, 4, 7, 11],
		[4, 7, 11, 12],
		[7, 11, 12, 16],
		[11, 12, 16, 19],
	],
	"Minor 7th": [
		[0, 3, 7, 10],
		[3, 7, 10, 12],
		[7, 10, 12, 15],
		[10, 12, 15, 19],
	],
	"Dominant 7th": [
		[0, 4, 7, 10],
		[4, 7, 10, 12],
		[7, 10, 12, 16],
		[10, 12, 16, 19],
	],
	"Sus4": [
		[0, 5, 7],
		[5, 7, 12],
	],
	"Sus2": [
		[0, 2, 7],
		[2, 7, 12],
	],
	"6th": [
		[0, 4, 7, 9],
		[4, 7, 9, 12],
		[7, 9, 12, 16],
	],
	"9th": [
		[0, 4, 7, 10, 14],
		[4, 7, 10, 14, 16],
		[7, 10, 14, 16, 19],
	],
}

QUALITIES: typing.Tuple[str, ...] = tuple(CHORD_PATTERNS)

INVERSION_LABELS: typing.Tuple[str, ...] = ("Root", "1st", "2nd", "3rd")


@dataclasses.dataclass(frozen=True)
class ChordMatch:

	"""
	A chord recognised from the sounding notes.

	Attributes:
		root_name: Pitch class name of the root (e.g. ``"C"``).
		quality: Quality name from ``CHORD_PATTERNS`` (e.g. ``"Minor 7th"``).
		inversion: ``"Root"``, ``"1st"``, ``"2nd"`` or ``"3rd"``.
		bass_note: Label of the lowest sounding MIDI note (e.g. ``"E4"``).
	"""

	root_name: str
	quality: str
	inversion: str
	bass_note: str


	def name (self) -> str:

		"""
		Return a human-friendly chord name, e.g. ``"C Major"``.
		"""

		return f"{self.root_name} {self.quality}"


def _inversion_label (pattern: typing.List[int], root_pc: int, lowest_pc: int) -> str:

	"""Label which chord tone sits in the bass.

	Falls back to ``"Root"`` when the bass interval is not in the pattern.
	"""

	if lowest_pc == root_pc:
		return INVERSION_LABELS[0]

	bass_interval = (lowest_pc - root_pc + 12) % 12

	if bass_interval not in pattern:
		return INVERSION_LABELS[0]

	index = pattern.index(bass_interval)

	if index >= len(INVERSION_LABELS):
		return INVERSION_LABELS[0]

	return INVERSION_LABELS[index]


def identify (notes: typing.Iterable[int]) -> typing.Optional[ChordMatch]:

	"""Identify the chord formed by a set of MIDI notes.

	Each distinct pitch class is tried as the root, lowest first. The notes are
	rotated to start at that root, reduced to a 0-based interval signature, and
	compared with every pattern of every quality in table order. The first
	match is returned; there is no search for a "best" chord.

	Parameters:
		notes: The sounding MIDI note numbers. Order and duplicates do not matter.

	Returns:
		A ``ChordMatch``, or ``None`` when fewer than two distinct pitch classes
		are sounding or no pattern matches.

	Example:
		```python
		identify({60, 64, 67})  # C Major, Root, bass C4
		identify({60, 61})      # None
		```
	"""

	snapshot = frozenset(notes)
	pcs = sorted({chordlens.pitch.pitch_class(note) for note in snapshot})

	if len(pcs) < 2:
		return None

	for i, root_pc in enumerate(pcs):

		rotated = pcs[i:] + [pc + 12 for pc in pcs[:i]]
		first = rotated[0]
		normalized = [(pc - first + 12) % 12 for pc in rotated]

		for quality, inversions in CHORD_PATTERNS.items():
			for pattern in inversions:

				if normalized != pattern:
					continue

				lowest = min(snapshot)

				return ChordMatch(
					root_name = chordlens.pitch.NOTE_NAMES[root_pc],
					quality = quality,
					inversion = _inversion_label(pattern, root_pc, chordlens.pitch.pitch_class(lowest)),
					bass_note = chordlens.pitch.note_label(lowest),
				)

	return None


def chord_name (notes: typing.Iterable[int]) -> typing.Optional[str]:

	"""
	Return the name of the chord formed by *notes* (e.g. ``"A Minor"``), or ``None``.
	"""

	match = identify(notes)

	if match is None:
		return None

	return match.name()
