"""
Модуль для загрузки и валидации конфигурации jscrawler.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска: читается один раз и общая для всех задач."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(15.0, gt=0, description="Таймаут на один запрос (секунд).")
    threads: int = Field(50, ge=1, description="Число одновременных загрузок.")
    complete: bool = Field(False, description="Приводить ссылки к абсолютным URL.")
    output: Optional[Path] = Field(None, description="Файл для дозаписи результатов.")
    verbose: bool = Field(False, description="Диагностика в stderr.")
    silent: bool = Field(False, description="Не печатать баннер.")

    @field_validator("output", mode="before")
    def _empty_output_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON файл и возвращает «сырой» mapping без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Собирает CrawlerConfig из файла (если указан) и явных переопределений.
    Значения из ``overrides`` имеют приоритет над файлом.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update(overrides)
    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config", "read_config_file"]
