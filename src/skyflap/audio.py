"""
audio.py: Short synthesized cues played through pygame.mixer.
"""

import logging
import math
from array import array
from typing import Callable, Dict

import pygame

from .constants import AUDIO_CUE_DURATION, AUDIO_SAMPLE_RATE
from .interfaces import AudioCue, AudioSink, NullAudio

logger = logging.getLogger(__name__)

SILENCE = 0.00001


def _triangle(phase: float) -> float:
    return 1.0 - 4.0 * abs(phase - 0.5)


def _sine(phase: float) -> float:
    return math.sin(2 * math.pi * phase)


def _sawtooth(phase: float) -> float:
    return 2.0 * phase - 1.0


def synthesize(wave: Callable[[float], float], start_hz: float, end_hz: float,
               gain: float, decay: float, sample_rate: int = AUDIO_SAMPLE_RATE,
               duration: float = AUDIO_CUE_DURATION) -> array:
    """
    Renders one cue as signed 16-bit mono samples: an exponential pitch
    sweep from start_hz to end_hz with a gain decaying to silence after
    `decay` seconds.
    """
    samples = array("h")
    phase = 0.0
    count = int(sample_rate * duration)
    for n in range(count):
        t = n / sample_rate
        freq = start_hz * (end_hz / start_hz) ** min(t / duration, 1.0)
        amp = gain * (SILENCE / gain) ** (t / decay) if t < decay else 0.0
        samples.append(int(wave(phase) * amp * 32767))
        phase = (phase + freq / sample_rate) % 1.0
    return samples


CUE_SETTINGS = {
    AudioCue.FLAP: (_triangle, 300.0, 300.0, 0.1, 0.2),
    AudioCue.SCORED: (_sine, 600.0, 600.0, 0.08, 0.1),
    AudioCue.GAME_OVER: (_sawtooth, 200.0, 100.0, 0.2, 0.3),
}


class MixerAudio:
    """Plays pre-rendered cues; pygame.mixer mixes them asynchronously."""

    def __init__(self):
        sample_rate, _, channels = pygame.mixer.get_init()
        self.sounds: Dict[AudioCue, pygame.mixer.Sound] = {}
        for cue, (wave, start_hz, end_hz, gain, decay) in CUE_SETTINGS.items():
            mono = synthesize(wave, start_hz, end_hz, gain, decay, sample_rate)
            if channels > 1:
                frames = array("h")
                for sample in mono:
                    frames.extend([sample] * channels)
                mono = frames
            self.sounds[cue] = pygame.mixer.Sound(buffer=mono.tobytes())

    def play(self, cue: AudioCue) -> None:
        self.sounds[cue].play()


def open_audio() -> AudioSink:
    """Returns mixer-backed audio, or a silent sink if no device is usable."""
    try:
        pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16, channels=1)
        return MixerAudio()
    except pygame.error as e:
        logger.warning("Audio unavailable, running silent: %s", e)
        return NullAudio()
