from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ValidationResult:
    """Ordered accumulation of validation error messages.

    A result is valid exactly when it holds no errors. Blank or
    whitespace-only messages are never recorded.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, error: str | None) -> None:
        if error is not None and error.strip():
            self.errors.append(error)

    def first_error_or_none(self) -> str | None:
        return self.errors[0] if self.errors else None

    def keep_first(self) -> None:
        """Drop every error after the first one."""
        del self.errors[1:]
