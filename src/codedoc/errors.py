"""Domain errors raised by the document generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class UnreadableSourceError(Exception):
    """A single source could not be read or processed."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


@dataclass(slots=True)
class GenerationError(Exception):
    """Request-level failure naming the pipeline stage that stopped generation."""

    stage: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (stage={self.stage})"

    def to_dict(self) -> dict[str, str]:
        return {"stage": self.stage, "message": self.message}


class InvalidPageSpecError(GenerationError):
    """A custom page selection token is malformed or out of range."""

    __slots__ = ("token",)

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(stage="select", message=f"Invalid page range token {token!r}: {reason}")
        self.token = token

    def to_dict(self) -> dict[str, str]:
        payload = super().to_dict()
        payload["token"] = self.token
        return payload


class EmptyInputError(GenerationError):
    """Nothing is left to paginate after aggregation."""

    __slots__ = ()

    def __init__(self, message: str) -> None:
        super().__init__(stage="aggregate", message=message)
