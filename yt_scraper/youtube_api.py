"""Wrappers assíncronos para `search.list` e `videos.list` da YouTube Data API v3."""

import logging
from typing import Any, Dict, List, Optional, Sequence

import aiohttp
from pydantic import ValidationError

from .config import BATCH_SIZE_IDS, VIDEO_PARTS, YOUTUBE_API_URL
from .errors import FetchError
from .http_client import http_get_json
from .models import VideoRecord
from .schemas import SearchListResponse, VideoListResponse
from .utils import chunked

logger = logging.getLogger(__name__)


async def search_list_video_ids(
    session: aiohttp.ClientSession,
    api_key: str,
    channel_id: str,
    *,
    max_videos: int,
    api_url: str = YOUTUBE_API_URL,
) -> List[str]:
    """Lista até `max_videos` IDs de vídeos de um canal, página a página."""
    url = f"{api_url}/search"
    video_ids: List[str] = []
    page_token: Optional[str] = None

    while len(video_ids) < max_videos:
        params: Dict[str, Any] = {
            "part": "id",
            "channelId": channel_id,
            "type": "video",
            "maxResults": min(BATCH_SIZE_IDS, max_videos - len(video_ids)),
            "key": api_key,
        }
        if page_token:
            params["pageToken"] = page_token

        data = await http_get_json(session, url, params)
        try:
            page = SearchListResponse.model_validate(data)
        except ValidationError as exc:
            raise FetchError(f"search.list: resposta malformada ({exc.error_count()} erros)", url=url) from exc

        page_ids = [it.id.video_id for it in page.items if it.id.video_id]
        video_ids.extend(page_ids[: max_videos - len(video_ids)])
        logger.debug("search.list canal=%s: +%d (total %d)", channel_id, len(page_ids), len(video_ids))

        page_token = page.next_page_token
        # página vazia com token ainda presente: encerra para não girar em falso
        if not page_token or not page_ids:
            break

    return video_ids


async def videos_list_details(
    session: aiohttp.ClientSession,
    api_key: str,
    video_ids: Sequence[str],
    *,
    parts: str = VIDEO_PARTS,
    api_url: str = YOUTUBE_API_URL,
) -> List[VideoRecord]:
    """Busca detalhes de vídeos em lotes de até 50 IDs via `videos.list`."""
    if not video_ids:
        return []

    url = f"{api_url}/videos"
    out: List[VideoRecord] = []
    for chunk in chunked(video_ids, BATCH_SIZE_IDS):
        params = {"id": ",".join(chunk), "part": parts, "key": api_key}
        data = await http_get_json(session, url, params)
        try:
            resp = VideoListResponse.model_validate(data)
        except ValidationError as exc:
            raise FetchError(f"videos.list: resposta malformada ({exc.error_count()} erros)", url=url) from exc

        for item in resp.items:
            if not item.id:
                logger.warning("videos.list: item sem id ignorado")
                continue
            out.append(VideoRecord.from_api_item(item))

    # auditoria: IDs pedidos que a API não devolveu
    returned = {rec.id for rec in out}
    missing = [vid for vid in video_ids if vid not in returned]
    if missing:
        logger.warning("videos.list não retornou %d vídeo(s): %s", len(missing), ",".join(missing))
    return out
