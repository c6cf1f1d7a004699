# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

import aiohttp

from .config import TIMEOUT_SECS, ScraperConfig
from .storage import Executor, connect, cursor_executor, persist
from .youtube_api import search_list_video_ids, videos_list_details

logger = logging.getLogger(__name__)


async def sync_channel(
    session: aiohttp.ClientSession,
    execute: Executor,
    config: ScraperConfig,
) -> int:
    """
    Fluxo: search.list (IDs) → videos.list (detalhes) → upsert no banco.

    Tudo em sequência; o primeiro FetchError/WriteError aborta a execução.
    Retorna quantos vídeos foram gravados.
    """
    # 1) search.list (vídeos do canal)
    video_ids = await search_list_video_ids(
        session, config.api_key, config.channel_id,
        max_videos=config.max_videos, api_url=config.api_url,
    )
    logger.info("canal %s: %d vídeo(s) encontrados", config.channel_id, len(video_ids))
    if not video_ids:
        return 0

    # 2) videos.list (detalhes)
    videos = await videos_list_details(session, config.api_key, video_ids, api_url=config.api_url)
    logger.info("canal %s: %d vídeo(s) com detalhes", config.channel_id, len(videos))

    # 3) upsert
    return persist(videos, execute)


async def run(config: ScraperConfig) -> int:
    """Abre sessão HTTP e conexão com o banco e executa `sync_channel`."""
    config.validate()
    timeout = aiohttp.ClientTimeout(total=None, connect=TIMEOUT_SECS)
    conn = connect(config.dsn)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await sync_channel(session, cursor_executor(conn), config)
    finally:
        conn.close()
