"""What services hand back to the CLI.

Services never raise a :class:`ConfigError` at their caller. They return a
failed :class:`ServiceResult` with the error's stable ``code``, and the
offending file under ``detail["path"]`` when there is one. Skipped imports
are ``warnings`` on an otherwise successful result.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from bombadil.config.errors import ConfigError


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_config_error(cls, exc: ConfigError) -> ServiceError:
        detail: dict[str, Any] = {}
        path = getattr(exc, "path", None)
        if path is not None:
            detail["path"] = str(path)
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when a ConfigError stopped the operation.
        op: Operation name, selects the renderer (``"show_settings"`` ...).
        data: Payload on success.
        warnings: One message per skipped import.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: ConfigError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_config_error(exc))
