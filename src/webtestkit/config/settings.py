from __future__ import annotations

import math
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


# -----------------------------
# Modelos auxiliares
# -----------------------------
class WaitSettings(BaseModel):
    timeout: float
    poll_frequency: float


class BrowserSettings(BaseModel):
    page_load_timeout: float
    maximize_window: bool
    headless: bool
    download_dir: Path


# -----------------------------
# Settings principal
# -----------------------------
class Settings(BaseSettings):
    """
    Config central de webtestkit.
    Lee variables WEBTESTKIT_* del entorno (o de un .env); los argumentos
    explícitos de helpers y waits siempre tienen prioridad.
    """

    model_config = SettingsConfigDict(env_prefix="WEBTESTKIT_", case_sensitive=False)

    # --- Timeouts ---
    page_load_timeout: float = Field(default=60.0)
    wait_timeout: float = Field(default=10.0)
    poll_frequency: float = Field(default=0.5)

    # --- Navegador ---
    maximize_window: bool = Field(default=True)
    headless: bool = Field(default=False)
    download_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()) / "webtestkit-downloads",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_format: Optional[str] = Field(default=None)

    @field_validator("page_load_timeout", "wait_timeout", "poll_frequency")
    @classmethod
    def _positive(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError("el timeout debe ser finito y mayor que 0")
        return v

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().lower()
        if v not in ("json", "console"):
            raise ValueError("log_format inválido (esperado: json | console)")
        return v

    # ---------- API pública ----------
    @property
    def wait(self) -> WaitSettings:
        return WaitSettings(timeout=self.wait_timeout, poll_frequency=self.poll_frequency)

    @property
    def browser(self) -> BrowserSettings:
        return BrowserSettings(
            page_load_timeout=self.page_load_timeout,
            maximize_window=self.maximize_window,
            headless=self.headless,
            download_dir=self.download_dir,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Instancia compartida de Settings (se lee el entorno una sola vez)."""
    return Settings()
