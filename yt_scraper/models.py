# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
from typing import Tuple

from .normalize import extract_topics, parse_or_zero
from .schemas import VideoItem


@dataclass(frozen=True)
class VideoRecord:
    """Metadados normalizados de um vídeo, chave `id`. Imutável após criado."""

    id: str
    channel_title: str = ""
    title: str = ""
    description: str = ""
    published_at: str = ""
    view_count: int = 0
    like_count: int = 0
    dislike_count: int = 0
    comment_count: int = 0
    topics: Tuple[str, ...] = field(default_factory=tuple)
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_api_item(cls, item: VideoItem) -> "VideoRecord":
        """Mapeia um item de `videos.list` para o registro interno."""
        snippet, stats = item.snippet, item.statistics
        return cls(
            id=item.id,
            channel_title=snippet.channel_title,
            title=snippet.title,
            description=snippet.description,
            published_at=snippet.published_at,
            view_count=parse_or_zero(stats.view_count),
            like_count=parse_or_zero(stats.like_count),
            dislike_count=parse_or_zero(stats.dislike_count),
            comment_count=parse_or_zero(stats.comment_count),
            topics=tuple(extract_topics(item.topic_details.topic_categories)),
            tags=tuple(snippet.tags),
        )
