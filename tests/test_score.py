import pytest

from arcadeforge.tetris.score import Score, load_high_score, save_high_score


def test_missing_file_counts_as_zero(tmp_path):
    assert load_high_score(tmp_path / "absent.txt") == 0


def test_empty_file_counts_as_zero(tmp_path):
    path = tmp_path / "score.txt"
    path.write_text("")
    assert load_high_score(path) == 0


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "score.txt"
    save_high_score(path, 4500)
    assert load_high_score(path) == 4500


def test_only_leading_digits_are_read(tmp_path):
    path = tmp_path / "score.txt"
    path.write_text("123abc456")
    assert load_high_score(path) == 123


def test_only_first_twenty_characters_are_read(tmp_path):
    path = tmp_path / "score.txt"
    path.write_text("1" * 25)
    assert load_high_score(path) == int("1" * 20)


def test_save_rejects_negative(tmp_path):
    with pytest.raises(ValueError):
        save_high_score(tmp_path / "score.txt", -1)


def test_score_loads_high_from_file(tmp_path):
    path = tmp_path / "score.txt"
    save_high_score(path, 700)
    score = Score(path)
    assert score.high == 700
    assert score.current == 0
    assert score.new_high is False


def test_add_below_high_keeps_flag_clear(tmp_path):
    path = tmp_path / "score.txt"
    save_high_score(path, 700)
    score = Score(path)
    assert score.add(300) == 300
    assert score.new_high is False
    assert score.commit_high_score() is False
    assert load_high_score(path) == 700


def test_beating_high_score_is_committed(tmp_path):
    path = tmp_path / "score.txt"
    save_high_score(path, 200)
    score = Score(path)
    score.add(100)
    score.add(200)
    assert score.new_high is True
    assert score.commit_high_score() is True
    assert score.high == score.current
    assert load_high_score(path) == score.current


def test_reset_keeps_high(tmp_path):
    path = tmp_path / "score.txt"
    score = Score(path)
    score.add(500)
    score.commit_high_score()
    score.reset()
    assert score.current == 0
    assert score.new_high is False
    assert score.high == 500


def test_add_rejects_negative(tmp_path):
    score = Score(tmp_path / "score.txt")
    with pytest.raises(ValueError):
        score.add(-5)