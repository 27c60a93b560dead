
import logging
import typing

import mido

import chordlens.constants

logger = logging.getLogger(__name__)

MidiTriple = typing.Tuple[int, int, int]


def message_to_triple(message: typing.Any) -> typing.Optional[MidiTriple]:
    """
    Decode a mido note message into a ``(status, note, velocity)`` triple.

    The status byte carries the channel, so a note-on on channel 1 (mido
    channel 0) is 144 and on channel 2 is 145. Only note messages are
    decoded; anything else returns None.
    """
    if message.type not in ('note_on', 'note_off'):
        return None

    status, note, velocity = message.bytes()[:3]
    return status, note, velocity


def select_input_device(device_name: typing.Optional[str] = None, callback: typing.Optional[typing.Callable] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:
    """
    Select and open a MIDI input device.

    If `device_name` is provided, attempts to open that specific device. When the
    precise name is not found, falls back to the first available input and logs
    a warning, which is useful for cross-platform script portability.

    If `device_name` is None, auto-discovers available devices:
    - If exactly one device exists, it is selected automatically.
    - If multiple devices exist, prompts the user to choose one from the console.
    - If no devices exist, logs an error and returns None.

    `callback` receives every incoming `mido.Message` on mido's input thread.

    Returns:
        A tuple of (device_name, midi_in_object) or (None, None) on failure.
    """
    try:
        inputs = mido.get_input_names()
        logger.info(f"Available MIDI inputs: {inputs}")

        if not inputs:
            logger.error("No MIDI input devices found.")
            return None, None

        # Explicit device requested
        if device_name is not None:
            target = device_name

            if target not in inputs:
                logger.warning(f"MIDI input device '{target}' not found.")
                target = inputs[0]
                logger.warning(f"Fallback to: {target}")

            midi_in = mido.open_input(target, callback=callback)
            logger.info(f"Opened MIDI input: {target}")
            return target, midi_in

        # Auto-discover: one device - use it
        if len(inputs) == 1:
            selected_name = inputs[0]
            midi_in = mido.open_input(selected_name, callback=callback)
            logger.info(f"One MIDI input found - using '{selected_name}'")
            return selected_name, midi_in

        # Auto-discover: multiple devices - prompt user
        print("\nAvailable MIDI input devices:\n")
        for i, name in enumerate(inputs, 1):
            print(f"  {i}. {name}")
        print()

        while True:
            try:
                choice = int(input(f"Select a device (1-{len(inputs)}): "))
                if 1 <= choice <= len(inputs):
                    break
            except (ValueError, EOFError):
                pass
            print(f"Enter a number between 1 and {len(inputs)}.")

        selected_name = inputs[choice - 1]
        midi_in = mido.open_input(selected_name, callback=callback)
        logger.info(f"Opened MIDI input: {selected_name}")

        print(f"\nTip: To skip this prompt, set the device name in config.yaml:\n")
        print(f"  midi:\n    device_name: \"{selected_name}\"\n")

        return selected_name, midi_in

    except Exception as e:
        logger.error(f"Failed to open MIDI input: {e}")
        return None, None


def is_note_on(triple: MidiTriple) -> bool:
    """Return True for a channel 1 note-on with non-zero velocity."""
    status, _, velocity = triple
    return status == chordlens.constants.MIDI_NOTE_ON and velocity > 0


def is_note_off(triple: MidiTriple) -> bool:
    """Return True for a channel 1 note-off, or a note-on with velocity 0."""
    status, _, velocity = triple
    return status == chordlens.constants.MIDI_NOTE_OFF or (status == chordlens.constants.MIDI_NOTE_ON and velocity == 0)
