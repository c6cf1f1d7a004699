"""Interface de linha de comando para executar a sincronização ou o relatório."""

import asyncio
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import ScraperConfig
from .errors import ScraperError
from .logging_config import setup_logging
from .pipeline import run
from .report import DEFAULT_TOP_N, build_report, format_report
from .storage import connect, read_videos

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Monta o parser de argumentos da CLI."""
    p = argparse.ArgumentParser(
        description="Sincroniza os vídeos de um canal do YouTube com o PostgreSQL")
    p.add_argument("--api-key",
                   help="YouTube Data API v3 Key (ou env YOUTUBE_API_KEY)")
    p.add_argument("--channel-id",
                   help="ID do canal (ou env YOUTUBE_CHANNEL_ID)")
    p.add_argument("--max-videos", type=int,
                   help="quantos vídeos buscar (ou env YT_MAX_VIDEOS, default 500)")
    p.add_argument("--dsn",
                   help="DSN do PostgreSQL (ou env DATABASE_URL / DB_HOST, DB_NAME, ...)")
    p.add_argument("--report", action="store_true",
                   help="não sincroniza; imprime o ranking de tópicos e tags já gravados")
    p.add_argument("--top", type=int, default=DEFAULT_TOP_N,
                   help="quantos termos por ranking no relatório")
    p.add_argument("--log-level", default="INFO")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def config_from_args(args: argparse.Namespace) -> ScraperConfig:
    """Valores da linha de comando têm prioridade sobre o ambiente."""
    config = ScraperConfig.from_env()
    overrides = {
        "api_key": args.api_key,
        "channel_id": args.channel_id,
        "max_videos": args.max_videos,
        "dsn": args.dsn,
    }
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def run_report(config: ScraperConfig, top: int = DEFAULT_TOP_N) -> str:
    """Lê a tabela de vídeos e monta o ranking de tópicos e tags."""
    conn = connect(config.require_database().dsn)
    try:
        rows = read_videos(conn)
    finally:
        conn.close()
    logger.info("relatório sobre %d vídeo(s)", len(rows))
    return format_report(build_report(rows, top))


def main(argv: Optional[List[str]] = None) -> int:
    """Ponto de entrada da CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, verbose=args.verbose)

    try:
        config = config_from_args(args)
        if args.report:
            print(run_report(config, args.top))
            return 0
        written = asyncio.run(run(config.validate()))
    except ScraperError as exc:
        logger.error("execução abortada: %s", exc)
        return 1

    logger.info("sincronização concluída: %d vídeo(s)", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
