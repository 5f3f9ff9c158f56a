import sqlite3

import pytest

from skyflap.game_engine import GameEngine
from skyflap.score_db import HighScoreDatabase
from skyflap.state_machine import InputEvent


def test_defaults_to_zero(tmp_path):
    db = HighScoreDatabase(str(tmp_path / "scores.db"))
    assert db.get_high_score() == 0
    db.close()


def test_best_score_is_kept_across_connections(tmp_path):
    path = str(tmp_path / "scores.db")
    db = HighScoreDatabase(path)
    db.set_high_score(12)
    db.set_high_score(5)
    assert db.get_high_score() == 12
    db.close()

    reopened = HighScoreDatabase(path)
    assert reopened.get_high_score() == 12
    reopened.close()


def test_engine_records_high_score(tmp_path, audio, rng):
    db = HighScoreDatabase(str(tmp_path / "scores.db"))
    engine = GameEngine(480, 600, store=db, audio=audio, rng=rng)
    engine.dispatch(InputEvent.START)
    engine.world.progression.score = 7
    engine.world.bird.y = 0
    engine.step()
    assert db.get_high_score() == 7
    assert engine.world.new_high_score
    db.close()


def test_unreadable_file_closes_connection(tmp_path, monkeypatch):
    path = tmp_path / "scores.db"
    path.write_bytes(b"definitely not sqlite " * 64)

    opened = []
    real_connect = sqlite3.connect

    def tracking_connect(*args, **kwargs):
        conn = real_connect(*args, **kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr(sqlite3, "connect", tracking_connect)
    with pytest.raises(sqlite3.DatabaseError):
        HighScoreDatabase(str(path))

    assert len(opened) == 1
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")
