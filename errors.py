# errors.py
from __future__ import annotations


class FatalError(Exception):
    """An error that ends the run. `label` says which step failed."""

    label = "Fatal"

    def __init__(self, cause: object, label: str | None = None):
        super().__init__(cause)
        self.cause = cause
        if label is not None:
            self.label = label

    def __str__(self) -> str:
        return f"{self.label}: {self.cause}"


class UsageError(FatalError):
    label = "Usage"


class ConfigurationError(FatalError):
    label = "Loading kubernetes config"


class ClientError(FatalError):
    label = "Creating kubernetes client"


class ListError(FatalError):
    label = "Listing ingresses"


class TemplateError(FatalError):
    label = "Executing template"
