import os
import uuid
import wave

import pygame
import pytest

from towerengine import audio
from towerengine.errors import EngineError


@pytest.fixture(scope="module")
def mixer():
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    if not pygame.mixer.get_init():
        pygame.mixer.init(frequency=22050, size=-16, channels=1)
    return pygame.mixer.get_init()


@pytest.fixture
def sound_name(mixer, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "Resource" / "audios"
    folder.mkdir(parents=True)
    name = uuid.uuid4().hex + ".wav"
    rate = 22050
    with wave.open(str(folder / name), "wb") as fh:
        fh.setnchannels(1)
        fh.setsampwidth(2)
        fh.setframerate(rate)
        fh.writeframes(b"\x00\x00" * int(rate * 2.5))
    return name


def test_play_sample_sets_loop_and_volume(sound_name):
    inst = audio.play_sample(sound_name, loop=True, volume=0.5)
    assert inst.loop is True
    assert inst.gain == 0.5


def test_sample_length_in_whole_seconds(sound_name):
    inst = audio.play_sample(sound_name)
    assert audio.get_sample_length(inst) == 2


def test_change_position_within_sample(sound_name):
    inst = audio.play_sample(sound_name, position=1.0)
    assert 0 < inst.position < inst.length


def test_change_position_past_end_raises(sound_name):
    with pytest.raises(EngineError, match="failed to change sample position to 10.000000 s"):
        audio.play_sample(sound_name, position=10.0)


def test_negative_volume_raises(sound_name):
    inst = audio.play_sample(sound_name)
    with pytest.raises(EngineError) as info:
        audio.change_sample_volume(inst, -1)
    assert str(info.value) == "failed to change sample volume to -1.000000"
    assert inst.gain == 1.0


def test_stop_sample_leaves_it_stopped(sound_name):
    inst = audio.play_sample(sound_name)
    audio.stop_sample(inst)
    assert inst.playing is False


def test_play_audio_missing_raises(mixer, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(EngineError, match="failed to load audio: Resource/audios/"):
        audio.play_audio(uuid.uuid4().hex + ".wav")


def test_play_bgm_missing_raises(mixer, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(EngineError, match="failed to load audio"):
        audio.play_bgm(uuid.uuid4().hex + ".wav")


def test_volume_settings_are_independent():
    custom = audio.VolumeSettings(bgm=0.25)
    assert custom.bgm == 0.25
    assert custom.sfx == audio.VolumeSettings().sfx