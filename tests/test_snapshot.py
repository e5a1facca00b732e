"""
Testing save/load
- Save games in a temp folder, read them back, and compare.
- Hand-written files check the errors for broken or impossible snapshots.
"""

import json

import pytest

from secretcode.errors import SnapshotDataError, SnapshotError, SnapshotFormatError
from secretcode.game import Game
from secretcode.snapshot import from_snapshot, load_game, save_game, to_snapshot


def _same_game(a: Game, b: Game) -> None:
    assert a.rules == b.rules
    assert a.reveal_secret(force_reveal=True) == b.reveal_secret(force_reveal=True)
    assert a.history == b.history
    assert a.is_won == b.is_won
    assert a.surrendered == b.surrendered


def _valid_document() -> dict:
    return {
        "code_length": 4,
        "allowed_colors": "rygbmc",
        "max_attempts": 3,
        "history": [
            {"guess": "rbgr", "exact": 2, "partial": 2, "attempt_number": 1},
        ],
        "is_won": False,
        "secret": "rrgb",
        "surrendered": False,
    }


def _write(tmp_path, document) -> str:
    path = tmp_path / "snapshot.json"
    text = document if isinstance(document, str) else json.dumps(document)
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_round_trip_in_progress(game, tmp_path):
    game.make_guess("mmmm")
    game.make_guess("rbgr")
    path = tmp_path / "game.json"

    game.save(path)
    loaded = Game.load(path)

    _same_game(game, loaded)
    assert loaded.status == "in_progress"


@pytest.mark.parametrize("finish", ["won", "surrendered", "exhausted"])
def test_round_trip_finished_games(make_game, tmp_path, finish):
    game = make_game("rygb", max_attempts=2)
    if finish == "won":
        game.make_guess("rygb")
    elif finish == "surrendered":
        game.make_guess("cccc")
        game.surrender()
    else:
        game.make_guess("cccc")
        game.make_guess("mmmm")
    path = tmp_path / "game.json"

    save_game(game, path)
    loaded = load_game(path)

    _same_game(game, loaded)
    assert loaded.status == finish
    assert loaded.is_over is True


def test_loaded_game_resumes_where_it_stopped(game, tmp_path):
    game.make_guess("mmmm")
    path = tmp_path / "game.json"
    game.save(path)

    loaded = Game.load(path)
    feedback = loaded.make_guess("rrgb")

    assert feedback.attempt_number == 2
    assert loaded.is_won is True


def test_saved_file_is_readable_json_with_stable_names(game, tmp_path):
    game.make_guess("rbgr")
    path = tmp_path / "game.json"
    game.save(path)

    text = path.read_text(encoding="utf-8")
    data = json.loads(text)

    assert "\n  " in text  # indented
    assert set(data) == {
        "code_length", "allowed_colors", "max_attempts", "history",
        "is_won", "secret", "surrendered",
    }
    assert data["history"] == [{"guess": "rbgr", "exact": 2, "partial": 2, "attempt_number": 1}]
    assert data["secret"] == "rrgb"


def test_to_and_from_snapshot_without_files(game):
    game.make_guess("rbgr")

    _same_game(game, from_snapshot(to_snapshot(game)))


def test_loads_pascal_case_files(tmp_path):
    document = {
        "CodeLength": 4,
        "AllowedColors": "rygbmc",
        "MaxAttempts": 9,
        "History": [{"Guess": "mmmm", "Exact": 0, "Partial": 0, "AttemptNumber": 1}],
        "IsWon": False,
        "Secret": "rygb",
        "Surrendered": False,
    }

    game = load_game(_write(tmp_path, document))

    assert game.max_attempts == 9
    assert game.history[0].guess == "mmmm"
    assert game.reveal_secret(force_reveal=True) == "rygb"


def test_load_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_game(tmp_path / "nope.json")


def test_save_into_missing_folder_raises_oserror(game, tmp_path):
    with pytest.raises(OSError):
        save_game(game, tmp_path / "missing" / "game.json")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "not json at all",
        "null",
        "[1, 2, 3]",
        '{"code_length": 4}',
        '{"code_length": "four", "allowed_colors": "rygbmc", "max_attempts": 9, "secret": "rygb"}',
        '{"code_length": 4, "allowed_colors": "rygbmc", "max_attempts": 9, "secret": "rygb", '
        '"history": [{"guess": "rygb"}]}',
    ],
)
def test_malformed_files_raise_format_error(tmp_path, text):
    with pytest.raises(SnapshotFormatError):
        load_game(_write(tmp_path, text))


def _broken(**changes) -> dict:
    document = _valid_document()
    document.update(changes)
    return document


def _entry(guess, exact, partial, attempt_number):
    return {"guess": guess, "exact": exact, "partial": partial, "attempt_number": attempt_number}


@pytest.mark.parametrize(
    "document",
    [
        _broken(code_length=0),
        _broken(max_attempts=0),
        _broken(allowed_colors="rrgb"),
        _broken(secret="rrg"),
        _broken(secret="rrgx"),
        _broken(history=[_entry("mmmm", 0, 0, n) for n in range(1, 5)]),
        _broken(history=[_entry("mmmm", 0, 0, 2)]),
        _broken(history=[_entry("mmm", 0, 0, 1)]),
        _broken(history=[_entry("rbgr", 3, 2, 1)]),
        _broken(is_won=True),
        _broken(history=[_entry("rrgb", 4, 0, 1)], is_won=False),
        _broken(history=[_entry("rrgb", 4, 0, 1), _entry("mmmm", 0, 0, 2)], is_won=False),
        _broken(history=[_entry("rrgg", 4, 0, 1)], is_won=True),
    ],
)
def test_impossible_games_raise_data_error(tmp_path, document):
    with pytest.raises(SnapshotDataError):
        load_game(_write(tmp_path, document))


def test_snapshot_errors_share_a_base(tmp_path):
    with pytest.raises(SnapshotError):
        load_game(_write(tmp_path, "{"))
    with pytest.raises(ValueError):
        load_game(_write(tmp_path, _broken(secret="zzzz")))


def test_valid_document_loads(tmp_path):
    game = load_game(_write(tmp_path, _valid_document()))

    assert game.history[0].exact == 2
    assert game.attempts_left == 2
    assert game.status == "in_progress"


def test_non_utf8_file_raises_format_error(tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{\x00")

    with pytest.raises(SnapshotFormatError):
        load_game(path)


def test_file_with_byte_order_mark_loads(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps(_valid_document()).encode("utf-8"))

    game = load_game(path)

    assert game.reveal_secret(force_reveal=True) == "rrgb"
    assert len(game.history) == 1
