"""Constantes e configuração injetada da sincronização de vídeos do YouTube."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"
TIMEOUT_SECS = 30
BATCH_SIZE_IDS = 50              # videos.list e search.list aceitam até 50
VIDEO_PARTS = "id,snippet,statistics,topicDetails"
# quantos vídeos coletar por canal (via search.list)
DEFAULT_MAX_VIDEOS = 500
LIST_SEPARATOR = ";"             # topics/tags gravados como texto delimitado
VIDEOS_TABLE = "videos"


def _dsn_from_parts(env: Mapping[str, str]) -> Optional[str]:
    """Monta um DSN libpq a partir de DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME."""
    keys = {
        "host": "DB_HOST",
        "port": "DB_PORT",
        "user": "DB_USER",
        "password": "DB_PASSWORD",
        "dbname": "DB_NAME",
    }
    parts = [f"{k}={env[v]}" for k, v in keys.items() if env.get(v)]
    if not parts:
        return None
    return " ".join(parts)


@dataclass(frozen=True)
class ScraperConfig:
    """Credenciais e alvo de uma execução, passados explicitamente ao pipeline."""

    api_key: str
    channel_id: str
    dsn: Optional[str] = None
    max_videos: int = DEFAULT_MAX_VIDEOS
    api_url: str = YOUTUBE_API_URL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ScraperConfig":
        env = os.environ if env is None else env
        raw_max = env.get("YT_MAX_VIDEOS")
        try:
            max_videos = int(raw_max) if raw_max else DEFAULT_MAX_VIDEOS
        except ValueError as exc:
            raise ConfigError(f"YT_MAX_VIDEOS inválido: {raw_max!r}") from exc
        return cls(
            api_key=env.get("YOUTUBE_API_KEY", ""),
            channel_id=env.get("YOUTUBE_CHANNEL_ID", ""),
            dsn=env.get("DATABASE_URL") or _dsn_from_parts(env),
            max_videos=max_videos,
            api_url=env.get("YOUTUBE_API_URL", YOUTUBE_API_URL),
        )

    def validate(self) -> "ScraperConfig":
        if not self.api_key:
            raise ConfigError("É necessário fornecer a API key (YOUTUBE_API_KEY).")
        if not self.channel_id:
            raise ConfigError("É necessário fornecer o channel id (YOUTUBE_CHANNEL_ID).")
        if self.max_videos < 0:
            raise ConfigError("max_videos não pode ser negativo.")
        return self.require_database()

    def require_database(self) -> "ScraperConfig":
        """Só o DSN: basta para o relatório, que não consulta a API."""
        if not self.dsn:
            raise ConfigError("É necessário fornecer DATABASE_URL ou DB_HOST/DB_NAME/...")
        return self

    def __repr__(self) -> str:
        # não expor a API key nem a senha do banco em logs
        return (
            f"ScraperConfig(channel_id={self.channel_id!r}, "
            f"max_videos={self.max_videos}, api_url={self.api_url!r})"
        )
