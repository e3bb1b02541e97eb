"""Excepciones centralizadas de webtestkit."""
from __future__ import annotations

from typing import Any, Dict, Optional


class WebTestKitError(Exception):
    """
    Excepción base de la librería.

    Atributos:
        message: Mensaje de error legible
        code: Código de error único
        details: Información adicional opcional
        cause: Excepción original que causó el error (también en __cause__)
    """

    code: str = "WEBTESTKIT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la excepción a un diccionario (útil para reportes de tests)."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        if self.cause is not None:
            result["error"]["cause"] = type(self.cause).__name__
        return result


class WebDriverWaitError(WebTestKitError):
    """Una espera excedió su timeout (o falló mientras esperaba)."""
    code = "WAIT_EXCEEDED"


class DriverProcessError(WebTestKitError, RuntimeError):
    """No se pudo determinar de forma unívoca el proceso del driver."""
    code = "DRIVER_PROCESS"


class InvalidUrlError(WebTestKitError, ValueError):
    """La URL base no es absoluta o no se puede parsear."""
    code = "INVALID_URL"


class WebHelperClosedError(WebTestKitError, RuntimeError):
    """Se usó un helper después de cerrarlo."""
    code = "HELPER_CLOSED"
