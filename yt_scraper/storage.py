# -*- coding: utf-8 -*-
"""Gravação (upsert) e leitura dos vídeos no PostgreSQL."""
import logging
from typing import Any, Callable, Dict, Iterable, List, Sequence

import psycopg2
import psycopg2.extras

from .config import VIDEOS_TABLE
from .errors import ReadError, WriteError
from .models import VideoRecord
from .normalize import join_field

logger = logging.getLogger(__name__)

Executor = Callable[[str, Sequence[Any]], Any]

# channel/title/description/published_at só são gravados na primeira inserção
UPSERT_VIDEO_SQL = f"""
    INSERT INTO {VIDEOS_TABLE} (id, channel, title, description, published_at,
                                views, likes, dislikes, comment_count, topics, tags)
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
    ON CONFLICT (id) DO UPDATE SET
        views = EXCLUDED.views,
        likes = EXCLUDED.likes,
        dislikes = EXCLUDED.dislikes,
        comment_count = EXCLUDED.comment_count,
        topics = EXCLUDED.topics,
        tags = EXCLUDED.tags
"""

SELECT_VIDEOS_SQL = f"SELECT * FROM {VIDEOS_TABLE}"


def video_params(video: VideoRecord) -> tuple:
    return (
        video.id,
        video.channel_title,
        video.title,
        video.description,
        video.published_at,
        video.view_count,
        video.like_count,
        video.dislike_count,
        video.comment_count,
        join_field(video.topics),
        join_field(video.tags),
    )


def persist(videos: Iterable[VideoRecord], execute: Executor) -> int:
    """
    Um upsert por vídeo, em sequência e sem transação englobando o lote.

    O primeiro erro interrompe o restante e vira WriteError; o que já foi gravado
    permanece.
    """
    written = 0
    for video in videos:
        try:
            execute(UPSERT_VIDEO_SQL, video_params(video))
        except Exception as exc:
            raise WriteError(f"falha ao gravar vídeo {video.id}: {exc}", video_id=video.id) from exc
        written += 1

    logger.info("%d vídeo(s) gravados em %s", written, VIDEOS_TABLE)
    return written


def connect(dsn: str):
    """Conexão psycopg2 em autocommit: cada upsert é confirmado isoladamente."""
    try:
        conn = psycopg2.connect(dsn)
    except psycopg2.Error as exc:
        raise WriteError(f"não foi possível conectar ao banco: {exc}") from exc
    conn.autocommit = True
    return conn


def cursor_executor(conn) -> Executor:
    def execute(sql: str, params: Sequence[Any]) -> None:
        with conn.cursor() as cur:
            cur.execute(sql, params)

    return execute


def read_videos(conn) -> List[Dict[str, Any]]:
    """Todas as linhas da tabela de vídeos, como dicts."""
    try:
        with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
            cur.execute(SELECT_VIDEOS_SQL)
            return [dict(row) for row in cur.fetchall()]
    except psycopg2.Error as exc:
        raise ReadError(f"falha ao ler {VIDEOS_TABLE}: {exc}") from exc
