"""Constants for chordlens.

MIDI channel-voice status bytes (channel 1), the voicing table bounds, and
the default key colour used by the active-note tracker.

- `MIDI_NOTE_OFF = 128` — note-off status byte
- `MIDI_NOTE_ON = 144` — note-on status byte (velocity 0 counts as a note-off)
- `VOICING_CEILING = 60` — highest voicing slot that can be generated
- `FIRST_VOICING_REFERENCE = 2` — the first voicing is the highest slot below this
"""

MIDI_NOTE_OFF = 128
MIDI_NOTE_ON = 144

VOICING_CEILING = 60
FIRST_VOICING_REFERENCE = 2

DEFAULT_KEY_COLOR = "#E67E22"

# 30% brighter per octave
OCTAVE_BRIGHTNESS_STEP = 0.3
