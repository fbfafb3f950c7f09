"""SoundCanvas waveform synthesis core and audio data model."""

from .version import __version__, get_version
from .generators import (
    SignalSpec,
    SignalValidationError,
    WaveformResult,
    WaveShape,
    generate,
    generate_waveform,
)
from .audio_data import AudioData, AudioDataProvider, LiveAudioData, PreviewAudioData

__all__ = [
    "__version__",
    "get_version",
    "SignalSpec",
    "SignalValidationError",
    "WaveformResult",
    "WaveShape",
    "generate",
    "generate_waveform",
    "AudioData",
    "AudioDataProvider",
    "LiveAudioData",
    "PreviewAudioData",
]
