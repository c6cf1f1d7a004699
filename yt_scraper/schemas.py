"""
Modelos Pydantic das respostas de `search.list` e `videos.list`.

Só os campos usados pelo pipeline são declarados. Todos têm default: objetos ou
listas ausentes (ou `null`) viram vazios em vez de erro. Um corpo com tipos
incompatíveis (ex.: `items` que não é lista) levanta `ValidationError`.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class BaseYouTubeModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


def _drop_nulls(value: Any) -> Any:
    # um `null` isolado dentro da lista não invalida o vídeo
    if isinstance(value, list):
        return [v for v in value if v is not None]
    return value


# ===================== search.list =====================


class ResourceId(BaseYouTubeModel):
    kind: str = ""
    video_id: str = ""


class SearchResult(BaseYouTubeModel):
    id: ResourceId = Field(default_factory=ResourceId)


class SearchListResponse(BaseYouTubeModel):
    items: List[SearchResult] = Field(default_factory=list)
    next_page_token: str = ""


# ===================== videos.list =====================


class Snippet(BaseYouTubeModel):
    title: str = ""
    description: str = ""
    published_at: str = ""
    channel_title: str = ""
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def drop_null_tags(cls, value: Any) -> Any:
        return _drop_nulls(value)


class Statistics(BaseYouTubeModel):
    """Contadores chegam como strings decimais; a conversão fica em `normalize`."""

    view_count: Optional[str] = None
    like_count: Optional[str] = None
    dislike_count: Optional[str] = None
    comment_count: Optional[str] = None

    @field_validator("view_count", "like_count", "dislike_count", "comment_count", mode="before")
    @classmethod
    def stringify_counts(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class TopicDetails(BaseYouTubeModel):
    topic_categories: List[str] = Field(default_factory=list)

    @field_validator("topic_categories", mode="before")
    @classmethod
    def drop_null_topics(cls, value: Any) -> Any:
        return _drop_nulls(value)


class VideoItem(BaseYouTubeModel):
    id: str = ""
    snippet: Snippet = Field(default_factory=Snippet)
    statistics: Statistics = Field(default_factory=Statistics)
    topic_details: TopicDetails = Field(default_factory=TopicDetails)


class VideoListResponse(BaseYouTubeModel):
    items: List[VideoItem] = Field(default_factory=list)
