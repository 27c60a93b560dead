"""Pitch class arithmetic and note naming.

Every MIDI note number maps to a pitch class (0-11) and an octave. Pitch
classes are named in a single fixed order, ``C, C#, D, ... B``, and that
order is the pitch-class index used everywhere else in the package.

Octaves follow the C4 = 60 (Middle C) convention::

	note_label(60)   # "C4"
	note_label(64)   # "E4"
	note_label(21)   # "A0"

Module-level constants:
- `NOTE_NAMES`: The twelve pitch class names, indexed by pitch class
- `WHOLE_NOTES`: The seven natural note names, in ascending order
- `NOTE_NAME_TO_PC`: Maps note names (including flat spellings) to pitch classes
"""

import typing

import chordlens.constants


NOTE_NAMES: typing.Tuple[str, ...] = (
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
)

WHOLE_NOTES: typing.Tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}


def pitch_class (note: int) -> int:

	"""Return the pitch class (0-11) of a MIDI note."""

	return note % 12


def octave (note: int) -> int:

	"""Return the octave number of a MIDI note (C4 = 60)."""

	return note // 12 - 1


def pitch_class_name (note: int) -> str:

	"""Return the octave-free name of a MIDI note.

	Example:
		```python
		pitch_class_name(60)  # "C"
		pitch_class_name(73)  # "C#"
		```
	"""

	return NOTE_NAMES[pitch_class(note)]


def note_label (note: int) -> str:

	"""Return the note name with its octave, e.g. ``"C4"`` for MIDI 60."""

	return f"{pitch_class_name(note)}{octave(note)}"


def note_name_to_pc (name: str) -> int:

	"""Validate a note name and return its pitch class (0-11).

	Parameters:
		name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Raises:
		ValueError: If the name is not recognised.
	"""

	if name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[name]


def octave_color (note: int, base_color: str = chordlens.constants.DEFAULT_KEY_COLOR) -> str:

	"""Brighten a base colour according to the octave a note sounds in.

	Each RGB channel is multiplied by ``1 + octave * 0.3``, rounded, and
	clamped to 0-255, so higher notes light up brighter keys.

	Parameters:
		note: MIDI note number.
		base_color: Colour as ``"#rrggbb"``.

	Returns:
		The scaled colour as lowercase ``"#rrggbb"``.

	Raises:
		ValueError: If ``base_color`` is not a ``#rrggbb`` string.

	Example:
		```python
		octave_color(60, "#404040")  # "#8d8d8d" (octave 4: x2.2)
		```
	"""

	if len(base_color) != 7 or not base_color.startswith("#"):
		raise ValueError(f"Expected a colour like '#rrggbb', got {base_color!r}")

	value = int(base_color[1:], 16)
	# Octaves count from C4 = 60, as in the labels. Under C3 = 60 numbering
	# every key would come out one brightness step darker.
	multiplier = 1 + octave(note) * chordlens.constants.OCTAVE_BRIGHTNESS_STEP

	channels = []

	for shift in (16, 8, 0):
		scaled = int(((value >> shift) & 255) * multiplier + 0.5)
		channels.append(max(0, min(255, scaled)))

	return "#{:02x}{:02x}{:02x}".format(*channels)
