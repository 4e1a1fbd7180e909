"""
Tests for DatabaseManager, schema initialization and seeding.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool

from cinema_api.database.connection import DatabaseManager, is_memory_database
from cinema_api.database.models import Movie
from cinema_api.database.init_db import (
    SAMPLE_MOVIES,
    SAMPLE_USERS,
    init_database,
    seed_database,
    verify_schema,
)


@pytest.fixture
def manager():
    """Fresh in-memory database with the schema created."""
    db_manager = DatabaseManager("sqlite://")
    init_database(db_manager=db_manager)
    yield db_manager
    db_manager.close()


class TestQuery:

    def test_bound_parameters(self, manager):
        manager.query(
            "INSERT INTO users (firstname, lastname, email, city, language) "
            "VALUES (:f, :l, :e, :c, :lang)",
            {"f": "Robert'); DROP TABLE users;--", "l": "Tables", "e": "bobby@example.com", "c": "x", "lang": "y"},
        )

        rows = manager.query("SELECT firstname FROM users WHERE email = :e", {"e": "bobby@example.com"})
        assert rows == [{"firstname": "Robert'); DROP TABLE users;--"}]
        assert verify_schema(manager)

    def test_statement_without_rows(self, manager):
        assert manager.query("DELETE FROM movies WHERE id = :id", {"id": 1}) == []

    def test_no_params(self, manager):
        assert manager.query("SELECT COUNT(*) AS n FROM movies") == [{"n": 0}]


class TestSessionScope:

    def test_rolls_back_on_error(self, manager):
        with pytest.raises(IntegrityError):
            with manager.session_scope() as session:
                session.add(Movie(title="Kept?", director="d", year=2000, color=True, duration=10))
                session.add(Movie(title=None, director="d", year=2000, color=True, duration=10))
        assert manager.query("SELECT COUNT(*) AS n FROM movies") == [{"n": 0}]


class TestInitialization:

    def test_verify_schema_missing_tables(self):
        db_manager = DatabaseManager("sqlite://")
        try:
            assert verify_schema(db_manager) is False
        finally:
            db_manager.close()

    def test_reset_clears_rows(self, manager):
        seed_database(manager)
        init_database(reset=True, db_manager=manager)
        assert manager.query("SELECT COUNT(*) AS n FROM users") == [{"n": 0}]

    def test_seed_only_fills_empty_tables(self, manager):
        assert seed_database(manager) == (len(SAMPLE_MOVIES), len(SAMPLE_USERS))
        assert seed_database(manager) == (0, 0)
        assert manager.query("SELECT COUNT(*) AS n FROM movies") == [{"n": len(SAMPLE_MOVIES)}]


class TestPooling:

    @pytest.mark.parametrize("database,expected", [
        (None, True), ("", True), (":memory:", True),
        ("data/cinema.db", False), ("/tmp/x.db", False),
    ])
    def test_is_memory_database(self, database, expected):
        assert is_memory_database(database) is expected

    def test_memory_database_shares_one_connection(self):
        db_manager = DatabaseManager("sqlite://")
        try:
            assert isinstance(db_manager.engine.pool, StaticPool)
        finally:
            db_manager.close()

    def test_file_database_pools_connections(self, tmp_path):
        db_file = tmp_path / "nested" / "cinema.db"
        db_manager = DatabaseManager(f"sqlite:///{db_file}")
        try:
            assert not isinstance(db_manager.engine.pool, StaticPool)
            assert db_file.parent.is_dir()
        finally:
            db_manager.close()

    def test_overlapping_sessions_keep_their_writes(self, tmp_path):
        """A session closing must not discard another session's pending write."""
        db_manager = DatabaseManager(f"sqlite:///{tmp_path / 'cinema.db'}")
        init_database(db_manager=db_manager)
        try:
            writer = db_manager.get_session()
            writer.add(Movie(title="Stalker", director="Andrei Tarkovsky", year=1979, color=True, duration=162))
            writer.flush()

            with db_manager.session_scope() as reader:
                reader.query(Movie).all()

            writer.commit()
            writer.close()

            assert db_manager.query("SELECT title FROM movies") == [{"title": "Stalker"}]
        finally:
            db_manager.close()
