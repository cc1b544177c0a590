"""Tests for the command-line interface."""

import numpy as np
import pytest
from typer.testing import CliRunner

from loopscribe.cli import app

from loop_audio import SR, planted_loop, to_wav_bytes

runner = CliRunner()


@pytest.fixture
def loop_file(tmp_path):
    audio = planted_loop(int(8.0 * SR), 128, kicks=(0, 8, 16, 24), hihats=range(4, 128, 8))
    path = tmp_path / "loop.wav"
    path.write_bytes(to_wav_bytes(audio))
    return path


class TestAnalyzeCommand:

    def test_writes_code_and_midi(self, loop_file, tmp_path):
        """Analyze should write the notation and a MIDI file."""
        code_path = tmp_path / "loop.txt"
        midi_path = tmp_path / "loop.mid"
        result = runner.invoke(
            app,
            ["analyze", str(loop_file), "-t", "120", "-o", str(code_path), "--midi", str(midi_path)],
        )

        assert result.exit_code == 0, result.output
        code = code_path.read_text(encoding="utf-8")
        assert code.startswith("// 16 beat drum loop @ 120 BPM")
        assert code.rstrip().endswith(").slow(16).cpm(120)")
        assert midi_path.exists()

    def test_json_output(self, loop_file):
        """--json should print the pattern statistics."""
        result = runner.invoke(app, ["analyze", str(loop_file), "--tempo", "120", "--json"])

        assert result.exit_code == 0, result.output
        assert '"kicks": 4' in result.output
        assert '"hihats": 16' in result.output
        assert '"bars": 4' in result.output

    def test_too_long(self, tmp_path):
        """Over-long loops should exit with an error."""
        path = tmp_path / "long.wav"
        path.write_bytes(to_wav_bytes(np.zeros(int(8.5 * SR), dtype=np.float32)))

        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "too long" in result.output

    def test_missing_file(self, tmp_path):
        """A missing input file should exit with an error."""
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.wav")])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestInfoCommand:

    def test_info(self, loop_file):
        """Info should report duration, sample rate and tempo."""
        result = runner.invoke(app, ["info", str(loop_file)])

        assert result.exit_code == 0, result.output
        assert "Duration: 8.00 seconds" in result.output
        assert f"Sample rate: {SR} Hz" in result.output
        assert "Estimated tempo" in result.output
