import pygame
import pytest

from arcade_pong.audio import NullAudio
from arcade_pong.platform import Platform, PlatformInitError, PygameInput, init_platform


def test_display_failure_is_fatal(monkeypatch):
    def no_video():
        raise pygame.error("No available video device")

    monkeypatch.setattr(pygame.display, "init", no_video)
    with pytest.raises(PlatformInitError, match="No available video device"):
        init_platform({"audio": False})


def test_missing_sound_asset_is_fatal(monkeypatch, tmp_path):
    monkeypatch.setattr(pygame.mixer, "init", lambda **kwargs: None)
    with pytest.raises(PlatformInitError, match="hit.wav"):
        init_platform({"audio": True, "assets_dir": str(tmp_path)})


def test_silent_platform_uses_null_audio():
    platform = init_platform({"audio": False})
    try:
        assert isinstance(platform.audio, NullAudio)
        assert pygame.display.get_surface().get_size() == (1080, 720)
        assert pygame.display.get_caption()[0] == "SDL Pong"
        assert isinstance(platform.input.poll(), list)
    finally:
        platform.shutdown()


def test_shutdown_is_idempotent():
    platform = Platform()
    platform.shutdown()
    platform.shutdown()
    assert platform.closed is True


def test_pygame_input_translates_queue(monkeypatch):
    queue = [pygame.event.Event(pygame.QUIT), pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)]
    monkeypatch.setattr(pygame.event, "get", lambda: queue)
    kinds = [e.kind.name for e in PygameInput().poll()]
    assert kinds == ["QUIT", "KEY_DOWN"]
