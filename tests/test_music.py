from unittest import mock

import pygame
import pytest

from arcadeforge.sound import MAX_VOLUME, VOLUME_STEP
from arcadeforge.tetris.music import TetrisMusic


@pytest.fixture
def mixer():
    with mock.patch.object(pygame.mixer, "init") as init, mock.patch.object(
        pygame.mixer, "music"
    ) as music:
        yield init, music


def test_starts_playing_on_creation(mixer):
    _, music = mixer
    player = TetrisMusic("tune.wav")
    music.load.assert_called_once_with("tune.wav")
    music.play.assert_called_once_with(-1)
    assert player.playing is True
    assert player.paused is False


def test_load_failure_raises(mixer):
    _, music = mixer
    music.load.side_effect = pygame.error("missing")
    with pytest.raises(RuntimeError):
        TetrisMusic("missing.wav")


def test_audio_failure_raises(mixer):
    init, _ = mixer
    init.side_effect = pygame.error("no device")
    with pytest.raises(RuntimeError):
        TetrisMusic("tune.wav")


def test_toggle_stops_and_restarts(mixer):
    _, music = mixer
    player = TetrisMusic("tune.wav")
    player.toggle()
    assert player.playing is False
    music.stop.assert_called_once()
    player.toggle()
    assert player.playing is True
    assert music.play.call_count == 2


def test_toggle_pause_alternates(mixer):
    _, music = mixer
    player = TetrisMusic("tune.wav")
    player.toggle_pause()
    assert player.paused is True
    music.pause.assert_called_once()
    player.toggle_pause()
    assert player.paused is False
    music.unpause.assert_called_once()


def test_toggle_pause_ignored_when_stopped(mixer):
    _, music = mixer
    player = TetrisMusic("tune.wav")
    player.toggle()
    player.toggle_pause()
    assert player.paused is False
    music.pause.assert_not_called()


def test_volume_starts_at_maximum_and_cannot_rise(mixer):
    player = TetrisMusic("tune.wav")
    assert player.volume == MAX_VOLUME
    assert player.volume_up() == MAX_VOLUME


def test_volume_down_then_up_round_trip(mixer):
    _, music = mixer
    player = TetrisMusic("tune.wav")
    assert player.volume_down() == MAX_VOLUME - VOLUME_STEP
    music.set_volume.assert_called_with((MAX_VOLUME - VOLUME_STEP) / MAX_VOLUME)
    assert player.volume_up() == MAX_VOLUME


def test_volume_never_negative(mixer):
    player = TetrisMusic("tune.wav")
    levels = [player.volume_down() for _ in range(40)]
    assert min(levels) >= 0
    assert levels[-1] == levels[-2]


def test_handle_key_dispatch(mixer):
    player = TetrisMusic("tune.wav")
    assert player.handle_key(pygame.K_9) is True
    assert player.paused is True
    assert player.handle_key(pygame.K_0) is True
    assert player.playing is False
    assert player.handle_key(pygame.K_KP_MINUS) is True
    assert player.volume == MAX_VOLUME - VOLUME_STEP
    assert player.handle_key(pygame.K_a) is False


def test_close_is_idempotent(mixer):
    _, music = mixer
    player = TetrisMusic("tune.wav")
    player.close()
    player.close()
    music.unload.assert_called_once()
    assert player.playing is False