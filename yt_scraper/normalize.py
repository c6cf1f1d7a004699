# -*- coding: utf-8 -*-
"""Funções puras que normalizam campos soltos da API."""
from typing import Iterable, List, Optional

from .config import LIST_SEPARATOR


def parse_or_zero(value: Optional[str]) -> int:
    """Inteiro decimal não negativo ou 0 (ausente, vazio, sinal, lixo)."""
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        return 0
    return int(value)


def extract_topic(uri: str) -> str:
    """'https://en.wikipedia.org/wiki/Music' -> 'Music'."""
    return uri.rsplit("/", 1)[-1]


def extract_topics(uris: Iterable[str]) -> List[str]:
    topics = []
    for uri in uris:
        topic = extract_topic(uri)
        if topic:
            topics.append(topic)
    return topics


def join_field(values: Iterable[str], sep: str = LIST_SEPARATOR) -> str:
    return sep.join(values)
