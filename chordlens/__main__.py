import logging
import os
import time
import typing

import yaml

import chordlens.constants
import chordlens.display
import chordlens.midi_utils
import chordlens.tracker
import chordlens.voicings


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def main (config_path: str = 'config.yaml') -> None:

	"""
	Main entry point: watch a MIDI input and show the chord being played.
	"""

	logger.info("chordlens starting...")

	config = load_config(config_path)

	device_name: typing.Optional[str] = (config.get('midi') or {}).get('device_name')
	base_color = (config.get('display') or {}).get('base_color') or chordlens.constants.DEFAULT_KEY_COLOR
	table_quality = (config.get('voicings') or {}).get('quality')

	if table_quality:
		print(chordlens.display.format_voicing_table(table_quality))
		print()

	tracker = chordlens.tracker.ActiveNoteTracker(base_color=base_color)

	name, midi_in = chordlens.midi_utils.select_input_device(device_name, tracker.handle_message)

	if midi_in is None:
		logger.error("No MIDI input available. Exiting.")
		return

	display = chordlens.display.StatusDisplay()
	tracker.subscribe(display.update)
	display.start()

	logger.info(f"Listening on {name}")

	try:
		while True:
			time.sleep(1)
	except KeyboardInterrupt:
		logger.info("Stopping...")
	finally:
		display.stop()
		midi_in.close()


if __name__ == "__main__":
	main()
