import pytest

from arcadeforge.input import MAX_KEYS, KeyCodeError, KeyState


def test_press_and_release():
    keys = KeyState()
    keys.press(273)
    assert keys.is_held(273)
    keys.release(273)
    assert not keys.is_held(273)


def test_keys_start_released():
    keys = KeyState()
    assert not any(keys.is_held(code) for code in range(MAX_KEYS))


def test_keys_are_independent():
    keys = KeyState()
    keys.press(275)
    assert keys.is_held(275)
    assert not keys.is_held(276)


def test_reset_releases_all():
    keys = KeyState()
    for code in (13, 271, 276):
        keys.press(code)
    keys.reset()
    assert not any(keys.is_held(code) for code in (13, 271, 276))


def test_release_of_unpressed_key_keeps_it_released():
    keys = KeyState()
    keys.release(100)
    assert not keys.is_held(100)


@pytest.mark.parametrize("code", [MAX_KEYS, MAX_KEYS + 1, -1])
def test_out_of_range_key_raises(code):
    keys = KeyState()
    with pytest.raises(KeyCodeError):
        keys.press(code)
    with pytest.raises(KeyCodeError):
        keys.is_held(code)


def test_last_valid_key_accepted():
    keys = KeyState()
    keys.press(MAX_KEYS - 1)
    assert keys.is_held(MAX_KEYS - 1)


def test_unbounded_state_accepts_large_codes():
    keys = KeyState(max_keys=None)
    keys.press(1073741906)
    assert keys.is_held(1073741906)
    with pytest.raises(KeyCodeError):
        keys.press(-5)