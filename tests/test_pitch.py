import pytest

import chordlens.pitch


def test_pitch_class_name_cycles_every_octave () -> None:

	"""A note and the same note any number of octaves away share a name."""

	for note in range(128):
		for k in range(-10, 11):
			other = note + 12 * k
			if 0 <= other <= 127:
				assert chordlens.pitch.pitch_class_name(note) == chordlens.pitch.pitch_class_name(other)


def test_pitch_class_name_order () -> None:

	"""Pitch classes 0-11 are named C through B with sharps."""

	names = [chordlens.pitch.pitch_class_name(60 + i) for i in range(12)]

	assert names == ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def test_note_label_middle_c () -> None:

	"""MIDI 60 is Middle C, labelled C4."""

	assert chordlens.pitch.note_label(60) == "C4"
	assert chordlens.pitch.note_label(64) == "E4"
	assert chordlens.pitch.note_label(72) == "C5"


def test_note_label_extremes () -> None:

	"""The lowest and highest MIDI notes get sensible labels."""

	assert chordlens.pitch.note_label(0) == "C-1"
	assert chordlens.pitch.note_label(127) == "G9"


def test_octave_and_pitch_class () -> None:

	"""Octave and pitch class split a note number."""

	assert chordlens.pitch.pitch_class(61) == 1
	assert chordlens.pitch.octave(61) == 4
	assert chordlens.pitch.octave(59) == 3


def test_note_name_to_pc_accepts_flats () -> None:

	"""Flat spellings resolve to the same pitch class as their sharps."""

	assert chordlens.pitch.note_name_to_pc("Bb") == chordlens.pitch.note_name_to_pc("A#") == 10
	assert chordlens.pitch.note_name_to_pc("C") == 0


def test_note_name_to_pc_rejects_unknown () -> None:

	"""Unknown note names raise ValueError."""

	with pytest.raises(ValueError, match="H"):
		chordlens.pitch.note_name_to_pc("H")


def test_octave_color_scales_with_octave () -> None:

	"""Each octave adds 30% brightness per channel."""

	# Octave 4: x2.2. 0x40 = 64 -> 140.8 -> 141 (0x8d).
	assert chordlens.pitch.octave_color(60, "#404040") == "#8d8d8d"

	# Octave 0: unchanged.
	assert chordlens.pitch.octave_color(12, "#404040") == "#404040"


def test_octave_color_clamps_to_255 () -> None:

	"""Channels never exceed 255."""

	assert chordlens.pitch.octave_color(100, "#E67E22") == "#ffff69"


def test_octave_color_rejects_bad_colour () -> None:

	"""A colour that is not #rrggbb raises ValueError."""

	with pytest.raises(ValueError):
		chordlens.pitch.octave_color(60, "orange")
