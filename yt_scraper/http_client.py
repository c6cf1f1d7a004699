# -*- coding: utf-8 -*-
import json
import logging
from typing import Any, Dict

import aiohttp

from .errors import FetchError

logger = logging.getLogger(__name__)


async def http_get_json(session: aiohttp.ClientSession, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """GET único, sem retries: qualquer falha vira FetchError."""
    try:
        async with session.get(url, params=params) as r:
            if r.status != 200:
                body = await r.text(errors="replace")
                raise FetchError(
                    f"GET {url} falhou: HTTP {r.status} {body[:200]}",
                    url=url, status=r.status)
            data = await r.json(content_type=None)
    except aiohttp.ClientError as exc:
        raise FetchError(f"GET {url} falhou: {exc}", url=url) from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FetchError(f"GET {url}: corpo não é JSON válido", url=url) from exc

    if not isinstance(data, dict):
        raise FetchError(f"GET {url}: resposta não é um objeto JSON", url=url)
    logger.debug("GET %s -> %d itens", url, len(data.get("items") or []))
    return data
