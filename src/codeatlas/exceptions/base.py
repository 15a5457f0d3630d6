"""Root of the codeatlas error hierarchy."""

from typing import Any, Mapping, Optional


class CodeAtlasError(Exception):
    """Error raised on purpose by codeatlas; the CLI reports it and exits 1.

    ``details`` holds the structured context (path, key, reason) and is
    rendered after the message: ``Invalid path: /x (path=/x, reason=...)``.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
