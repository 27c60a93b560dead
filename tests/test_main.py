import chordlens.__main__
import conftest


def test_load_config_missing_file (tmp_path) -> None:

	"""A missing config file yields an empty dict."""

	assert chordlens.__main__.load_config(str(tmp_path / "nope.yaml")) == {}


def test_load_config_reads_yaml (tmp_path) -> None:

	"""Settings are read from YAML."""

	path = tmp_path / "config.yaml"
	path.write_text("midi:\n  device_name: Keys\ndisplay:\n  base_color: '#112233'\n")

	config = chordlens.__main__.load_config(str(path))

	assert config["midi"]["device_name"] == "Keys"
	assert config["display"]["base_color"] == "#112233"


def test_load_config_empty_file (tmp_path) -> None:

	"""An empty file is treated as no settings."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert chordlens.__main__.load_config(str(path)) == {}


def test_main_exits_without_input (patch_midi: None, tmp_path, capsys) -> None:

	"""With no MIDI input available main() prints the table and returns."""

	conftest.fake_input_names[:] = []

	path = tmp_path / "config.yaml"
	path.write_text("voicings:\n  quality: Min\n")

	chordlens.__main__.main(str(path))

	out = capsys.readouterr().out

	assert out.startswith("C")
	assert conftest.current_fake_input() is None
