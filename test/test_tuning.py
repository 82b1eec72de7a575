import math

import numpy as np
import pytest

from tonalkit import tuning, tuningnp
from tonalkit.config import config
from tonalkit.pitch import Pitch


def test_mtof_a4():
    assert tuning.mtof(69) == 440.0
    assert tuning.mtof(81) == pytest.approx(880.0)
    assert tuning.mtof(57) == pytest.approx(220.0)
    assert tuning.mtof(60) == pytest.approx(261.6255653, abs=1e-6)


def test_ftom():
    assert tuning.ftom(440) == 69.0
    assert tuning.ftom(880) == pytest.approx(81.0)
    assert tuning.ftom(450) == pytest.approx(69.389, abs=1e-3)


def test_roundtrip():
    for freq in np.geomspace(20, 20000, 200):
        freq = float(freq)
        assert tuning.mtof(tuning.ftom(freq)) == pytest.approx(freq, abs=1e-3)
    for midi in np.linspace(0, 127, 255):
        midi = float(midi)
        assert tuning.ftom(tuning.mtof(midi)) == pytest.approx(midi, abs=1e-9)


def test_ftom_nonpositive():
    with pytest.raises(ValueError):
        tuning.ftom(0)


def test_reference_freq():
    tuning.set_reference_freq(442)
    assert config['A4'] == 442
    assert tuning.get_reference_freq() == 442
    assert tuning.mtof(69) == 442
    assert tuning.ftom(442) == 69


def test_reference_freq_validated():
    with pytest.raises(ValueError):
        config['A4'] = 1


def test_reference_freq_change_warns(monkeypatch):
    warnings = []
    monkeypatch.setattr(tuning.logger, 'warning', lambda *args: warnings.append(args))
    tuning.set_reference_freq(442)
    assert not warnings
    tuning.mtof(60)
    tuning.set_reference_freq(442)
    assert not warnings
    tuning.set_reference_freq(435)
    assert len(warnings) == 1


def test_converter():
    cnv = tuning.Converter(a4=435)
    assert cnv.mtof(69) == 435
    assert cnv.ftom(435) == 69
    assert tuning.mtof(69) == 440
    cnv.set_reference_freq(432)
    assert cnv.a4 == 432
    assert config['A4'] == 440


def test_converter_follows_config():
    cnv = tuning.Converter()
    config['A4'] = 443
    assert cnv.mtof(69) == 443


def test_freqround():
    assert tuning.freqround(445) == 440.0
    assert tuning.freqround(460) == pytest.approx(466.1637615)


def test_numpy_mtof():
    midis = np.array([57, 69, 81], dtype=float)
    freqs = tuningnp.mtof(midis)
    assert freqs.dtype == np.float64
    assert np.allclose(freqs, [220, 440, 880])
    assert tuningnp.mtof(midis, a4=442)[1] == 442


def test_numpy_ftom():
    freqs = np.array([220, 440, 880], dtype=float)
    assert np.allclose(tuningnp.ftom(freqs), [57, 69, 81])


def test_numpy_preserves_float32():
    midis = np.arange(0, 128, dtype=np.float32)
    freqs = tuningnp.mtof(midis)
    assert freqs.dtype == np.float32
    expected = np.array([tuning.mtof(float(m)) for m in midis], dtype=np.float32)
    assert np.allclose(freqs, expected, rtol=1e-6)
    back = tuningnp.ftom(freqs)
    assert back.dtype == np.float32
    assert np.allclose(back, midis, atol=1e-4)


def test_numpy_does_not_modify_input():
    midis = np.array([60, 61], dtype=np.longdouble)
    tuningnp.mtof(midis)
    assert list(midis) == [60, 61]


def test_numpy_ints():
    freqs = tuningnp.mtof(np.array([69, 81]))
    assert freqs.dtype == np.float64
    assert math.isclose(freqs[1], 880)


def test_semitonefreqs():
    freqs = tuningnp.semitonefreqs(21, 108)
    assert len(freqs) == 88
    assert freqs[48] == pytest.approx(440)


def test_default_reference_freq():
    assert config.default['A4'] == 440.0
    assert config['A4'] == 440.0
    assert tuning.get_reference_freq() == 440.0
    assert Pitch(69).frequency == 440.0


def test_mtof_extended_precision():
    midis = np.linspace(0, 127, 2001)
    expected = tuningnp.mtof(midis)
    for midi, freq in zip(midis, expected):
        assert tuning.mtof(float(midi)) == float(freq)
    assert isinstance(tuning.mtof(60), float)


def test_numpy_conversion_marks_reference_used(monkeypatch):
    warnings = []
    monkeypatch.setattr(tuning.logger, 'warning', lambda *args: warnings.append(args))
    tuningnp.mtof(np.array([60, 61]))
    tuning.set_reference_freq(435)
    assert len(warnings) == 1


def test_numpy_explicit_reference_leaves_global_unused(monkeypatch):
    warnings = []
    monkeypatch.setattr(tuning.logger, 'warning', lambda *args: warnings.append(args))
    tuningnp.ftom(np.array([440.0]), a4=442)
    tuning.set_reference_freq(435)
    assert not warnings
