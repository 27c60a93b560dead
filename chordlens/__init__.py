"""
chordlens - live chord recognition for MIDI keyboards.

chordlens listens to note-on and note-off messages, keeps track of which
notes are sounding, and names the chord they form: root, quality, inversion
and bass note. It also generates the voicing reference table, a fixed set of
playable slots for every whole-note root in the Major, Minor, Diminished and
Sus4 qualities.

- **Chord recognition.** ``identify()`` matches the sounding pitch classes
  against eleven chord qualities (triads, sevenths, sus, 6th and 9th) and
  works out the inversion from the lowest note.
- **Live tracking.** ``ActiveNoteTracker`` applies decoded MIDI triples or
  ``mido`` messages and publishes an immutable state after every change:
  notes, chord, note labels and octave-brightened key colours.
- **Voicing table.** ``voicings_for_note()``, ``first_voicing()`` and
  ``chord_tones()`` enumerate slots and the chord tones each one plays.
- **Terminal monitor.** ``python -m chordlens`` opens a MIDI input and shows
  a live status line; settings come from ``config.yaml``.

Minimal example:

    ```python
    import chordlens

    tracker = chordlens.ActiveNoteTracker()

    for note in (64, 67, 72):
        state = tracker.process(144, note, 100)

    print(state.chord)
    # ChordMatch(root_name='C', quality='Major', inversion='1st', bass_note='E4')
    ```

Package-level exports: ``ActiveNoteTracker``, ``ChordMatch``, ``identify``,
``voicings_for_note``, ``first_voicing``, ``chord_tones``.
"""

import chordlens.chords
import chordlens.tracker
import chordlens.voicings


ActiveNoteTracker = chordlens.tracker.ActiveNoteTracker
ChordMatch = chordlens.chords.ChordMatch
identify = chordlens.chords.identify
voicings_for_note = chordlens.voicings.voicings_for_note
first_voicing = chordlens.voicings.first_voicing
chord_tones = chordlens.voicings.chord_tones
