"""Voicing slots for the chord reference table.

A voicing is a plain integer slot in a per-root, per-quality sequence. Each
whole-note root starts at a fixed offset that reflects the physical layout of
the instrument, and the quality's intervals are stacked upward one octave at a
time until the ceiling of 60 is reached::

	voicings_for_note("C", "Major")
	# [-11, -7, -4, 1, 5, 8, 13, 17, 20, ... 49, 53, 56]

Only four qualities have their own voicing intervals: Major, Minor,
Diminished and Sus4 (short names ``Maj``, ``Min``, ``Dim``, ``Sus``). Every
other quality from the chord template table is laid out with the Major
intervals.

The "first voicing" of a sequence is its highest slot below 2; the reference
table shows it as voicing ``1`` and hides the slots beneath it.

Example:
	```python
	voicings = voicings_for_note("C", "Maj")
	first_voicing(voicings)           # 1
	chord_tones("C", 1, "Maj")        # ["E", "G", "C"]
	chord_notes("C", 5, "Maj")        # "G C E"
	```
"""

import dataclasses
import typing

import chordlens.chords
import chordlens.constants
import chordlens.pitch


NOT_FOUND = "-"

# Indexed like chordlens.pitch.WHOLE_NOTES: C, D, E, F, G, A, B.
ROOT_OFFSETS: typing.Tuple[int, ...] = (-11, -9, -7, -6, -4, -2, 0)

VOICING_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"Major": [0, 4, 7],
	"Minor": [0, 3, 7],
	"Diminished": [0, 3, 6],
	"Sus4": [0, 5, 7],
}

QUALITY_ALIASES: typing.Dict[str, str] = {
	"Maj": "Major",
	"Min": "Minor",
	"Dim": "Diminished",
	"Sus": "Sus4",
}


def _canonical_quality (quality: str) -> str:

	return QUALITY_ALIASES.get(quality, quality)


def root_offset (root_name: str) -> typing.Optional[int]:

	"""
	Return the base offset for a whole-note root, or ``None`` for any other name.
	"""

	if root_name not in chordlens.pitch.WHOLE_NOTES:
		return None

	return ROOT_OFFSETS[chordlens.pitch.WHOLE_NOTES.index(root_name)]


def quality_intervals (quality: str) -> typing.List[int]:

	"""Return the voicing intervals for a quality.

	Qualities outside Major, Minor, Diminished and Sus4 fall back to the Major
	intervals.
	"""

	return list(VOICING_INTERVALS.get(_canonical_quality(quality), VOICING_INTERVALS["Major"]))


def generate_voicings (base_offset: int, intervals: typing.Sequence[int]) -> typing.List[int]:

	"""Stack intervals upward from a base offset, one octave per block.

	Parameters:
		base_offset: Starting slot for the root.
		intervals: Semitone intervals of the chord (e.g. ``[0, 4, 7]``).

	Returns:
		Every ``offset + interval`` that does not exceed the ceiling, block by
		block in interval order.

	Example:
		```python
		generate_voicings(0, [0, 4, 7])[:6]  # [0, 4, 7, 12, 16, 19]
		```
	"""

	ceiling = chordlens.constants.VOICING_CEILING
	voicings: typing.List[int] = []
	current = base_offset

	while current <= ceiling:

		for interval in intervals:
			value = current + interval
			if value <= ceiling:
				voicings.append(value)

		current += 12

	return voicings


def voicings_for_note (root_name: str, quality: str) -> typing.List[int]:

	"""Return every voicing slot for a root and quality.

	Parameters:
		root_name: Whole-note root (``"C"`` to ``"B"``).
		quality: Any template-table quality or short alias.

	Returns:
		The generated slots, or an empty list for a root without a base offset
		(sharps, unknown names).
	"""

	base_offset = root_offset(root_name)

	if base_offset is None:
		return []

	return generate_voicings(base_offset, quality_intervals(quality))


def first_voicing (voicings: typing.Iterable[int]) -> typing.Optional[int]:

	"""
	Return the highest voicing below 2, or ``None`` when there is none.
	"""

	below = [v for v in voicings if v < chordlens.constants.FIRST_VOICING_REFERENCE]

	if not below:
		return None

	return max(below)


def first_voicing_for_note (root_name: str, quality: str) -> typing.Optional[int]:

	return first_voicing(voicings_for_note(root_name, quality))


def first_voicing_map () -> typing.Dict[str, typing.Dict[str, typing.Optional[int]]]:

	"""
	Return the first voicing of every whole-note root for every template-table quality.
	"""

	return {
		root: {quality: first_voicing_for_note(root, quality) for quality in chordlens.chords.QUALITIES}
		for root in chordlens.pitch.WHOLE_NOTES
	}


def voicings_for_quality (quality: str) -> typing.Dict[str, typing.List[int]]:

	"""
	Return the voicing slots of every whole-note root for one quality.
	"""

	return {root: voicings_for_note(root, quality) for root in chordlens.pitch.WHOLE_NOTES}


def chord_tones (root_name: str, voicing: typing.Optional[int], quality: str) -> typing.Union[typing.List[str], str]:

	"""Return the chord tones a voicing slot plays, lowest first.

	The slot's position in the root's sequence picks one of three layouts,
	repeating every three slots: ``(index + 1) % 3`` gives 0 for root position
	(root, third, fifth), 1 for first inversion (third, fifth, root) and 2 for
	second inversion (fifth, root, third).

	Parameters:
		root_name: Whole-note root (``"C"`` to ``"B"``).
		voicing: A slot from ``voicings_for_note(root_name, quality)``.
		quality: ``"Maj"``, ``"Min"``, ``"Dim"`` or ``"Sus"`` (long names accepted).

	Returns:
		Three note names, or ``NOT_FOUND`` (``"-"``) when the slot is not part of
		the sequence or the root or quality is unknown.

	Example:
		```python
		chord_tones("C", -4, "Maj")  # ["C", "E", "G"]
		chord_tones("C", 1, "Maj")   # ["E", "G", "C"]
		chord_tones("C", 5, "Maj")   # ["G", "C", "E"]
		chord_tones("C", 2, "Maj")   # "-"
		```
	"""

	if voicing is None or root_name not in chordlens.pitch.NOTE_NAMES:
		return NOT_FOUND

	canonical = _canonical_quality(quality)

	if canonical not in VOICING_INTERVALS:
		return NOT_FOUND

	voicings = voicings_for_note(root_name, canonical)

	if voicing not in voicings:
		return NOT_FOUND

	layout = (voicings.index(voicing) + 1) % 3

	root_pc = chordlens.pitch.NOTE_NAMES.index(root_name)
	_, third_interval, fifth_interval = VOICING_INTERVALS[canonical]

	root = chordlens.pitch.NOTE_NAMES[root_pc]
	third = chordlens.pitch.NOTE_NAMES[(root_pc + third_interval) % 12]
	fifth = chordlens.pitch.NOTE_NAMES[(root_pc + fifth_interval) % 12]

	if layout == 0:
		return [root, third, fifth]

	if layout == 1:
		return [third, fifth, root]

	return [fifth, root, third]


def chord_notes (root_name: str, voicing: typing.Optional[int], quality: str) -> str:

	"""
	Return the chord tones of a voicing slot as text, e.g. ``"E G C"``.

	Empty for a missing slot (``None``), ``"-"`` for a slot that is not found.
	"""

	if voicing is None:
		return ""

	tones = chord_tones(root_name, voicing, quality)

	if tones == NOT_FOUND:
		return NOT_FOUND

	return " ".join(tones)


@dataclasses.dataclass(frozen=True)
class VoicingCell:

	"""
	One cell of the voicing reference table.

	Attributes:
		voicing: The slot, or ``None`` past the end of a shorter column.
		is_first: The slot is the column's first voicing (shown as ``1``).
		hidden: The slot lies below the first voicing (shown as ``-``).
		notes: Chord tones of the slot as text.
	"""

	voicing: typing.Optional[int]
	is_first: bool
	hidden: bool
	notes: str


	def label (self) -> str:

		"""
		Return the text shown for the slot itself.
		"""

		if self.hidden or self.voicing is None:
			return NOT_FOUND

		if self.is_first:
			return "1"

		return str(self.voicing)


def voicing_table (quality: str) -> typing.List[typing.List[VoicingCell]]:

	"""Lay out the voicing reference table for one quality.

	One column per whole-note root (``C`` to ``B``), one row per slot index,
	as many rows as the longest column.

	Parameters:
		quality: ``"Maj"``, ``"Min"``, ``"Dim"`` or ``"Sus"`` (long names accepted).

	Returns:
		Rows of ``VoicingCell``, seven cells per row.
	"""

	columns = voicings_for_quality(quality)
	firsts = {root: first_voicing(voicings) for root, voicings in columns.items()}
	row_count = max(len(voicings) for voicings in columns.values())

	rows: typing.List[typing.List[VoicingCell]] = []

	for i in range(row_count):

		row: typing.List[VoicingCell] = []

		for root in chordlens.pitch.WHOLE_NOTES:
			voicings = columns[root]
			voicing = voicings[i] if i < len(voicings) else None
			first = firsts[root]

			row.append(VoicingCell(
				voicing = voicing,
				is_first = voicing is not None and voicing == first,
				hidden = voicing is not None and first is not None and voicing < first,
				notes = chord_notes(root, voicing, quality),
			))

		rows.append(row)

	return rows
