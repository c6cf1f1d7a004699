# -*- coding: utf-8 -*-
"""
Relatório de tópicos e tags a partir das linhas já gravadas na tabela `videos`.

Cada termo (um tópico ou uma tag) acumula as views dos vídeos onde aparece e
quantas vezes aparece; `effectiveness` é a média de views por ocorrência.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from .config import LIST_SEPARATOR

REPORT_COLUMNS = ("topics", "tags")
REPORT_METRICS = ("views", "frequency", "effectiveness")
DEFAULT_TOP_N = 10


@dataclass(frozen=True)
class TermStats:
    name: str
    views: int
    frequency: int

    @property
    def effectiveness(self) -> float:
        return self.views / self.frequency


def aggregate_terms(rows: Iterable[Mapping[str, Any]], column: str) -> List[TermStats]:
    """Agrupa as linhas pelos termos da coluna delimitada (`topics` ou `tags`)."""
    totals: Dict[str, List[int]] = {}
    for row in rows:
        views = row.get("views") or 0
        for term in (row.get(column) or "").split(LIST_SEPARATOR):
            if not term:
                continue
            acc = totals.setdefault(term, [0, 0])
            acc[0] += views
            acc[1] += 1
    return [TermStats(name, views, freq) for name, (views, freq) in totals.items()]


def top_terms(stats: Iterable[TermStats], metric: str, limit: int = DEFAULT_TOP_N) -> List[TermStats]:
    """Os `limit` maiores pela métrica; empates mantêm a ordem de aparição."""
    if metric not in REPORT_METRICS:
        raise ValueError(f"métrica desconhecida: {metric!r}")
    return sorted(stats, key=lambda s: getattr(s, metric), reverse=True)[:limit]


def build_report(rows: Iterable[Mapping[str, Any]], limit: int = DEFAULT_TOP_N) -> Dict[str, Dict[str, List[TermStats]]]:
    """{coluna: {métrica: top N}} para topics e tags."""
    rows = list(rows)
    report = {}
    for column in REPORT_COLUMNS:
        stats = aggregate_terms(rows, column)
        report[column] = {metric: top_terms(stats, metric, limit) for metric in REPORT_METRICS}
    return report


def format_report(report: Mapping[str, Mapping[str, List[TermStats]]]) -> str:
    lines = []
    for column, by_metric in report.items():
        for metric, stats in by_metric.items():
            lines.append(f"== {column} por {metric} ==")
            for s in stats:
                lines.append(f"{s.name}\tviews={s.views}\tfrequency={s.frequency}\teffectiveness={s.effectiveness:.1f}")
    return "\n".join(lines)
