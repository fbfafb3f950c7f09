import numpy as np
import pytest

from soundcanvas.audio_data import (
    PREVIEW_SAMPLE_COUNT,
    AudioData,
    AudioDataProvider,
    LiveAudioData,
    PreviewAudioData,
)
from soundcanvas.generators import generate


def test_audio_data_defaults():
    data = AudioData()
    assert data.frequency == 440.0
    assert data.amplitude == 1.0
    assert data.waveform == ()
    assert data.is_playing is False


def test_audio_data_holds_fields():
    data = AudioData(frequency=880.0, amplitude=0.8, waveform=[0.5, -0.5], is_playing=False)
    assert isinstance(data, AudioDataProvider)
    assert data.frequency == 880.0
    assert data.amplitude == 0.8
    assert len(data.waveform) == 2
    assert data.is_playing is False


def test_audio_data_from_generated_buffer():
    waveform = generate("harmonic", 432.0, 0.7, sample_rate=1000.0, duration=0.1)
    data = AudioData.from_samples(waveform, frequency=432.0)
    assert data.frequency == 432.0
    assert data.amplitude == pytest.approx(float(np.abs(waveform).max()))
    assert data.is_playing is True


@pytest.mark.parametrize(
    "samples,amplitude,playing",
    [([0.5, -0.8], 0.8, True), ([], 0.0, False), ([0.005, -0.01], 0.01, False)],
)
def test_from_samples_measures_peak_and_playing_state(samples, amplitude, playing):
    data = AudioData.from_samples(samples)
    assert data.amplitude == amplitude
    assert data.is_playing is playing


def test_live_data_notifies_changed_fields_only():
    live = LiveAudioData()
    events = []
    live.subscribe(lambda name, value: events.append(name))

    live.ingest_samples([0.2, -0.4])
    assert events == ["waveform", "amplitude", "is_playing"]
    assert live.amplitude == 0.4
    assert live.is_playing is True

    events.clear()
    live.ingest_samples([0.2, -0.4])
    assert events == []

    live.frequency = 880.0
    assert events == ["frequency"]


def test_live_data_unsubscribe_and_stop():
    live = LiveAudioData()
    events = []
    unsubscribe = live.subscribe(lambda name, value: events.append((name, value)))
    live.ingest_samples([0.9])
    assert live.subscriber_count == 1

    unsubscribe()
    assert live.subscriber_count == 0
    events.clear()
    live.stop()
    assert events == []
    assert live.is_playing is False


def test_live_snapshot_is_immutable_copy():
    live = LiveAudioData(frequency=220.0)
    live.ingest_samples([0.3, -0.1])
    snapshot = live.snapshot()
    assert snapshot == AudioData(frequency=220.0, amplitude=0.3, waveform=(0.3, -0.1), is_playing=True)

    live.ingest_samples([0.0])
    assert snapshot.amplitude == 0.3


def test_callback_errors_propagate():
    live = LiveAudioData()

    def explode(name, value):
        raise RuntimeError("listener failed")

    live.subscribe(explode)
    with pytest.raises(RuntimeError):
        live.frequency = 100.0


def test_preview_defaults():
    preview = PreviewAudioData()
    assert preview.frequency == 440.0
    assert preview.amplitude == 0.5
    assert preview.is_playing is True
    assert preview.waveform == ()


def test_preview_update_is_repeatable_for_a_given_instant():
    preview = PreviewAudioData()
    first = preview.update(now=12.5)
    second = preview.update(now=12.5)
    assert len(first) == PREVIEW_SAMPLE_COUNT
    assert first == second
    assert max(abs(v) for v in first) <= 0.5


def test_preview_phase_comes_from_clock():
    preview = PreviewAudioData(frequency=2.0, amplitude=1.0, clock=lambda: 0.0)
    events = []
    preview.subscribe(lambda name, value: events.append(name))

    waveform = preview.update()
    assert waveform[0] == 0.0
    assert events == ["waveform"]
    np.testing.assert_allclose(waveform, preview.render(now=0.0))
    assert not np.allclose(preview.render(now=1.0), waveform)
