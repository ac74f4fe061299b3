# === FILE: link_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации LinkScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import urlsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s %(message)s"


class ConfigurationError(Exception):
    """Фатальная ошибка запуска: проверка ссылок не начинается."""


class CheckerConfig(BaseModel):
    """Конфигурация для одного запуска проверки ссылок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_url: str = Field(..., description="Стартовый URL; без http(s) получает https://.")
    verbose: bool = Field(False, description="Печатать каждую проверяемую ссылку.")
    timeout: Optional[float] = Field(30.0, gt=0, description="Таймаут на один запрос (секунд); None — без таймаута.")
    scan_timeout: Optional[float] = Field(None, gt=0, description="Таймаут всей проверки (секунд).")
    log_file: Optional[Path] = Field(None, description="Файл для логов (только stdout, если не указан).")
    log_format: str = Field(DEFAULT_LOG_FORMAT, min_length=1, description="Формат строк лога.")

    @field_validator("start_url", mode="before")
    def _add_scheme(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v.startswith("http"):
                # a bare "example.com" would otherwise parse as a path
                v = "https://" + v
        return v

    @field_validator("start_url")
    def _check_parsable(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"not an http(s) URL with a host: {v!r}")
        _ = parts.port
        return v

    @field_validator("timeout", mode="before")
    def _zero_disables_timeout(cls, v: Any) -> Any:
        return None if v == 0 else v


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


def load_config(path: Union[str, Path]) -> dict[str, Any]:
    """
    Читает YAML или JSON и возвращает словарь настроек.
    При отсутствии файла бросает FileNotFoundError.
    """
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def build_config(
    start_url: str,
    config_path: Union[str, Path, None] = None,
    **overrides: Any,
) -> CheckerConfig:
    """
    Собирает CheckerConfig: значения из файла, поверх них — опции командной строки.
    Опции со значением None не переопределяют файл.
    Любая ошибка превращается в ConfigurationError.
    """
    data: dict[str, Any] = {}
    try:
        if config_path is not None:
            data.update(load_config(config_path))
        data.update({k: v for k, v in overrides.items() if v is not None})
        data["start_url"] = start_url
        return CheckerConfig(**data)
    except (OSError, ValueError, TypeError) as exc:
        # pydantic.ValidationError is a ValueError
        raise ConfigurationError(str(exc)) from exc


__all__ = ["CheckerConfig", "ConfigurationError", "ValidationError", "build_config", "load_config"]
