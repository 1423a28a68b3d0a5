"""Tagged success/failure outcome of a value conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion attempt.

    A successful result carries the converted value, which may be ``None`` when the
    input was absent. A failed result never carries a value; ``error`` describes why
    the conversion failed when the converter knows.
    """

    success: bool
    value: Any = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if not self.success and self.value is not None:
            raise ValueError("A failed conversion cannot carry a value")

    @classmethod
    def succeed(cls, value: Any = None) -> "ConversionResult":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: Optional[Exception] = None) -> "ConversionResult":
        return cls(success=False, error=error)

    def __bool__(self) -> bool:
        return self.success


__all__ = ["ConversionResult"]
