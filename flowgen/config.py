"""Настройки конфигурации."""

import json
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from flowgen.constants import DEFAULT_OUT_FILE, DEFAULT_OUT_PACKAGE
from flowgen.errors import ConfigError


class FlowConfig(BaseSettings):
    """Конфигурация генератора (flowconfig.json + переменные FLOWGEN_*)."""

    model_config = SettingsConfigDict(
        env_prefix="FLOWGEN_", case_sensitive=False, extra="ignore"
    )

    # Пути (обязательно)
    dir_name: str = Field(min_length=1)
    out_dir: str = Field(min_length=1)

    # Вывод
    out_file: str = Field(default=DEFAULT_OUT_FILE, min_length=1)
    out_package: str = Field(default=DEFAULT_OUT_PACKAGE, pattern=r"^[A-Za-z_]\w*$")

    # Сканирование
    exclude: list[str] = Field(default_factory=list)
    strict_parse: bool = Field(default=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Значения из файла важнее окружения, .env не читаем
        return (init_settings, env_settings)


def load_config(path: str | Path) -> FlowConfig:
    """
    Прочитать и провалидировать JSON-конфигурацию.

    Raises:
        ConfigError: файл не читается, невалидный JSON или поля
    """
    config_path = Path(path)

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"unable to read config file {config_path}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid config format in {config_path}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"invalid config format in {config_path}: expected a JSON object"
        )

    try:
        return FlowConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid config values in {config_path}") from e
