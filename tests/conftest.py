import typing

import mido
import pytest


class FakeMidiIn:

	"""Minimal MIDI input stub for tests."""

	def __init__ (self, name: str, callback: typing.Optional[typing.Callable] = None) -> None:

		"""Store the port name and the callback for injecting test messages."""

		self.name = name
		self.callback = callback
		self.closed = False

	def close (self) -> None:

		"""Mark the fake device closed."""

		self.closed = True

	def inject (self, message: mido.Message) -> None:

		"""Simulate receiving a MIDI message by calling the stored callback."""

		if self.callback is not None:
			self.callback(message)


# Module-level reference so tests can access the most recently created FakeMidiIn.
_current_fake_input: typing.Optional[FakeMidiIn] = None

# Input names reported by the patched mido; tests may replace the list contents.
fake_input_names: typing.List[str] = ["Dummy MIDI"]


def _fake_get_input_names () -> typing.List[str]:

	"""Return the configured list of MIDI input names."""

	return list(fake_input_names)


def _fake_open_input (name: str, callback: typing.Optional[typing.Callable] = None) -> FakeMidiIn:

	"""Return a fake MIDI input regardless of the name."""

	global _current_fake_input
	fake = FakeMidiIn(name, callback=callback)
	_current_fake_input = fake
	return fake


def current_fake_input () -> typing.Optional[FakeMidiIn]:

	"""Return the most recently opened fake input."""

	return _current_fake_input


@pytest.fixture
def patch_midi (monkeypatch: pytest.MonkeyPatch) -> typing.Iterator[None]:

	"""Patch mido to use fake MIDI inputs for all tests that need it."""

	global _current_fake_input
	_current_fake_input = None
	fake_input_names[:] = ["Dummy MIDI"]

	monkeypatch.setattr(mido, "get_input_names", _fake_get_input_names)
	monkeypatch.setattr(mido, "open_input", _fake_open_input)

	yield

	fake_input_names[:] = ["Dummy MIDI"]
