"""
Модуль конфигурации краулера LinkScout.
Используется Pydantic для описания схемы и проверки данных; значения
приходят из опций командной строки, файлов конфигурации нет.
"""
from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["CrawlerConfig", "DEFAULT_SEED_URL", "DEFAULT_USER_AGENT"]

DEFAULT_SEED_URL: Final[str] = "https://ecosio.com"

# Сайты отклоняют запросы без браузерного User-Agent.
DEFAULT_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    request_timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    concurrency: int = Field(16, ge=1, description="Число одновременно обрабатываемых страниц.")
    drain_timeout: float = Field(120.0, gt=0, description="Ожидание завершения всех задач (секунд).")
    cancel_timeout: float = Field(20.0, gt=0, description="Ожидание после отмены задач (секунд).")

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v
