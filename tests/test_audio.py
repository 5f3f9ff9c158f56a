import logging

import pytest

pygame = pytest.importorskip("pygame")

from skyflap.audio import CUE_SETTINGS, MixerAudio, open_audio, synthesize  # noqa: E402
from skyflap.interfaces import AudioCue, NullAudio  # noqa: E402


def test_every_cue_has_a_tone():
    assert set(CUE_SETTINGS) == set(AudioCue)


@pytest.mark.parametrize("cue", list(AudioCue))
def test_cue_fits_in_16_bits_and_fades_out(cue):
    wave, start_hz, end_hz, gain, decay = CUE_SETTINGS[cue]
    samples = synthesize(wave, start_hz, end_hz, gain, decay, sample_rate=8000)
    assert len(samples) == int(8000 * 0.3)
    assert max(abs(s) for s in samples) <= int(gain * 32767) + 1
    assert all(s == 0 for s in samples[-10:])


@pytest.fixture
def dummy_mixer(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.mixer.quit()


def test_mixer_failure_falls_back_to_silence(monkeypatch, caplog):
    def broken_init(*args, **kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "init", broken_init)
    with caplog.at_level(logging.WARNING, logger="skyflap.audio"):
        audio = open_audio()
    assert isinstance(audio, NullAudio)
    audio.play(AudioCue.FLAP)
    assert "running silent" in caplog.text


def test_open_audio_uses_mixer(dummy_mixer):
    audio = open_audio()
    assert isinstance(audio, MixerAudio)
    for cue in AudioCue:
        audio.play(cue)


@pytest.mark.parametrize("channels", [1, 2])
def test_cue_buffers_match_mixer_channels(dummy_mixer, channels):
    pygame.mixer.init(frequency=22050, size=-16, channels=channels)
    rate, _, actual_channels = pygame.mixer.get_init()
    audio = MixerAudio()
    for cue in AudioCue:
        raw = audio.sounds[cue].get_raw()
        assert len(raw) == int(rate * 0.3) * 2 * actual_channels
