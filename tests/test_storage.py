"""Testes do upsert de vídeos."""
import sqlite3
import unittest
from unittest.mock import MagicMock

import psycopg2
import psycopg2.extras

from yt_scraper.errors import ReadError, WriteError
from yt_scraper.models import VideoRecord
from yt_scraper.storage import (
    SELECT_VIDEOS_SQL, UPSERT_VIDEO_SQL, cursor_executor, persist, read_videos, video_params,
)

CREATE_VIDEOS_SQL = """
    CREATE TABLE videos (
        id TEXT PRIMARY KEY, channel TEXT, title TEXT, description TEXT,
        published_at TEXT, views INTEGER, likes INTEGER, dislikes INTEGER,
        comment_count INTEGER, topics TEXT, tags TEXT
    )
"""


def sqlite_executor(conn):
    """Adapta o SQL com placeholders psycopg2 (%s) para o sqlite3 (?)."""
    def execute(sql, params):
        conn.execute(sql.replace("%s", "?"), params)
        conn.commit()
    return execute


class RecordingExecutor:
    def __init__(self, fail_on_id=None):
        self.statements = []
        self.fail_on_id = fail_on_id

    def __call__(self, sql, params):
        if params[0] == self.fail_on_id:
            raise RuntimeError("duplicate key / connection lost")
        self.statements.append((sql, params))


def make_video(vid="v1", **overrides):
    fields = dict(
        id=vid, channel_title="Canal", title="Título", description="Desc",
        published_at="2023-01-01T00:00:00Z", view_count=10, like_count=2,
        dislike_count=1, comment_count=3, topics=("Music", "Pop_music"), tags=("a", "b"),
    )
    fields.update(overrides)
    return VideoRecord(**fields)


class TestVideoParams(unittest.TestCase):

    def test_column_order_and_serialization(self):
        self.assertEqual(video_params(make_video()), (
            "v1", "Canal", "Título", "Desc", "2023-01-01T00:00:00Z",
            10, 2, 1, 3, "Music;Pop_music", "a;b",
        ))

    def test_empty_lists_serialize_to_empty_string(self):
        params = video_params(make_video(topics=(), tags=()))
        self.assertEqual(params[-2:], ("", ""))


class TestPersist(unittest.TestCase):

    def test_one_statement_per_record_in_order(self):
        execute = RecordingExecutor()
        written = persist([make_video("a"), make_video("b"), make_video("c")], execute)
        self.assertEqual(written, 3)
        self.assertEqual([p[0] for _, p in execute.statements], ["a", "b", "c"])
        self.assertTrue(all(sql == UPSERT_VIDEO_SQL for sql, _ in execute.statements))

    def test_empty_input_writes_nothing(self):
        execute = RecordingExecutor()
        self.assertEqual(persist([], execute), 0)
        self.assertEqual(execute.statements, [])

    def test_first_failure_aborts_remaining(self):
        execute = RecordingExecutor(fail_on_id="b")
        with self.assertRaises(WriteError) as ctx:
            persist([make_video("a"), make_video("b"), make_video("c")], execute)
        self.assertEqual(ctx.exception.video_id, "b")
        self.assertEqual([p[0] for _, p in execute.statements], ["a"])

    def test_logs_written_count(self):
        with self.assertLogs("yt_scraper.storage", level="INFO") as logs:
            persist([make_video("a")], RecordingExecutor())
        self.assertIn("1 vídeo(s) gravados", logs.output[0])


class TestUpsertSemantics(unittest.TestCase):

    def setUp(self):
        self.conn = sqlite3.connect(":memory:")
        self.conn.execute(CREATE_VIDEOS_SQL)
        self.execute = sqlite_executor(self.conn)

    def tearDown(self):
        self.conn.close()

    def fetch(self, vid):
        cur = self.conn.execute(
            "SELECT channel, title, description, published_at, views, likes, dislikes,"
            " comment_count, topics, tags FROM videos WHERE id = ?", (vid,))
        return cur.fetchone()

    def test_same_record_twice_is_idempotent(self):
        video = make_video()
        persist([video], self.execute)
        persist([video], self.execute)
        self.assertEqual(self.conn.execute("SELECT COUNT(*) FROM videos").fetchone()[0], 1)

    def test_conflict_updates_only_mutable_fields(self):
        persist([make_video()], self.execute)
        persist([make_video(
            channel_title="Outro", title="Novo", description="Nova", published_at="2024-01-01",
            view_count=99, like_count=9, dislike_count=0, comment_count=4,
            topics=("Gaming",), tags=(),
        )], self.execute)
        self.assertEqual(self.fetch("v1"), (
            "Canal", "Título", "Desc", "2023-01-01T00:00:00Z",
            99, 9, 0, 4, "Gaming", "",
        ))

    def test_rows_written_before_failure_remain(self):
        execute = self.execute

        def failing(sql, params):
            if params[0] == "b":
                raise sqlite3.OperationalError("disk I/O error")
            execute(sql, params)

        with self.assertRaises(WriteError):
            persist([make_video("a"), make_video("b")], failing)
        self.assertIsNotNone(self.fetch("a"))
        self.assertIsNone(self.fetch("b"))


class TestCursorExecutor(unittest.TestCase):

    def test_executes_on_fresh_cursor(self):
        conn = MagicMock()
        cursor = conn.cursor.return_value.__enter__.return_value
        cursor_executor(conn)("SELECT 1", ("x",))
        cursor.execute.assert_called_once_with("SELECT 1", ("x",))


class TestReadVideos(unittest.TestCase):

    def test_returns_rows_as_dicts(self):
        conn = MagicMock()
        cursor = conn.cursor.return_value.__enter__.return_value
        cursor.fetchall.return_value = [{"id": "v1", "views": 10}]
        self.assertEqual(read_videos(conn), [{"id": "v1", "views": 10}])
        cursor.execute.assert_called_once_with(SELECT_VIDEOS_SQL)
        self.assertIs(conn.cursor.call_args.kwargs["cursor_factory"], psycopg2.extras.RealDictCursor)

    def test_database_error_is_read_error(self):
        conn = MagicMock()
        conn.cursor.return_value.__enter__.return_value.execute.side_effect = psycopg2.OperationalError("gone")
        with self.assertRaises(ReadError):
            read_videos(conn)


if __name__ == "__main__":
    unittest.main()
