from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Niveles de log del navegador, tal como los reporta WebDriver."""

    ALL = "ALL"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    SEVERE = "SEVERE"
    OFF = "OFF"

    @classmethod
    def parse(cls, value: str | LogLevel) -> LogLevel:
        if isinstance(value, LogLevel):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"nivel de log desconocido: {value!r}") from None


class LogEntry(BaseModel):
    """
    Entrada de log del navegador (consola JS, red, etc.).
    'timestamp' se normaliza a datetime UTC; WebDriver lo entrega en milisegundos.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.ALL
    message: str = ""
    timestamp: Optional[datetime] = None
    source: Optional[str] = Field(default=None)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _from_epoch_millis(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return datetime.fromtimestamp(v / 1000.0, tz=timezone.utc)
        return v

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> LogEntry:
        """Construye la entrada desde el dict crudo de WebDriver (niveles desconocidos -> ALL)."""
        try:
            level = LogLevel.parse(raw.get("level", "ALL"))
        except ValueError:
            level = LogLevel.ALL
        return cls(
            level=level,
            message=str(raw.get("message") or ""),
            timestamp=raw.get("timestamp"),
            source=raw.get("source"),
        )
