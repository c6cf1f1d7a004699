"""Exceções da sincronização. Qualquer uma delas aborta a execução inteira."""

from typing import Optional


class ScraperError(Exception):
    """Base de todos os erros do pacote."""


class ConfigError(ScraperError):
    """Credencial, canal ou conexão ausentes/inválidos."""


class FetchError(ScraperError):
    """Falha de transporte, status HTTP diferente de 200 ou corpo malformado."""

    def __init__(self, message: str, *, url: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class WriteError(ScraperError):
    """Falha ao executar o upsert de um vídeo."""

    def __init__(self, message: str, *, video_id: str = ""):
        super().__init__(message)
        self.video_id = video_id


class ReadError(ScraperError):
    """Falha ao ler a tabela de vídeos para o relatório."""
