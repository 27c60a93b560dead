import mido

import chordlens.midi_utils
import chordlens.tracker
import conftest


def test_message_to_triple_note_on () -> None:

	"""A channel 1 note-on decodes to status 144."""

	message = mido.Message("note_on", note=60, velocity=100)

	assert chordlens.midi_utils.message_to_triple(message) == (144, 60, 100)


def test_message_to_triple_note_off_and_channel () -> None:

	"""Note-off is 128; the channel is carried in the status byte."""

	assert chordlens.midi_utils.message_to_triple(mido.Message("note_off", note=60, velocity=0)) == (128, 60, 0)
	assert chordlens.midi_utils.message_to_triple(mido.Message("note_on", channel=1, note=60, velocity=1)) == (145, 60, 1)


def test_message_to_triple_ignores_other_messages () -> None:

	"""Only note messages are decoded."""

	assert chordlens.midi_utils.message_to_triple(mido.Message("control_change", control=1, value=10)) is None
	assert chordlens.midi_utils.message_to_triple(mido.Message("clock")) is None


def test_note_on_and_off_predicates () -> None:

	"""Velocity 0 note-ons count as note-offs."""

	assert chordlens.midi_utils.is_note_on((144, 60, 1))
	assert not chordlens.midi_utils.is_note_on((144, 60, 0))
	assert chordlens.midi_utils.is_note_off((144, 60, 0))
	assert chordlens.midi_utils.is_note_off((128, 60, 64))
	assert not chordlens.midi_utils.is_note_off((176, 60, 0))


def test_select_input_device_by_name (patch_midi: None) -> None:

	"""A named, available device is opened with the callback attached."""

	tracker = chordlens.tracker.ActiveNoteTracker()

	name, midi_in = chordlens.midi_utils.select_input_device("Dummy MIDI", tracker.handle_message)

	assert name == "Dummy MIDI"
	assert isinstance(midi_in, conftest.FakeMidiIn)

	midi_in.inject(mido.Message("note_on", note=60, velocity=100))

	assert tracker.notes == frozenset({60})


def test_select_input_device_falls_back (patch_midi: None) -> None:

	"""An unknown name falls back to the first available input."""

	name, midi_in = chordlens.midi_utils.select_input_device("Missing Keyboard")

	assert name == "Dummy MIDI"
	assert midi_in is not None


def test_select_input_device_auto_single (patch_midi: None) -> None:

	"""With no name and one input, that input is used."""

	name, midi_in = chordlens.midi_utils.select_input_device(None)

	assert name == "Dummy MIDI"
	assert midi_in is conftest.current_fake_input()


def test_select_input_device_none_available (patch_midi: None) -> None:

	"""No inputs at all gives (None, None)."""

	conftest.fake_input_names[:] = []

	assert chordlens.midi_utils.select_input_device("Dummy MIDI") == (None, None)


def test_select_input_device_prompts_for_many (patch_midi: None, monkeypatch) -> None:

	"""With several inputs and no name, the user picks one by number."""

	conftest.fake_input_names[:] = ["Keys A", "Keys B"]
	answers = iter(["x", "5", "2"])
	monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

	name, midi_in = chordlens.midi_utils.select_input_device(None)

	assert name == "Keys B"
	assert midi_in.name == "Keys B"
