"""
Tagged success/failure container for fallible pylinalg calls.

Every fallible operation in pylinalg raises a LinAlgError subclass. When
a caller prefers to handle the failure as a value instead of a control
flow jump, ``attempt`` runs the call and wraps the outcome:

    outcome = attempt(Vector.parse, text)
    if outcome.ok:
        v = outcome.value
    else:
        log(outcome.error.kind)

Design decisions:
    - Generic over the success payload T
    - Exactly one of value/error is meaningful, selected by ``ok``
    - Only LinAlgError is captured; programming errors still propagate
    - Immutable (frozen=True) so an Outcome can be passed around safely
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from pylinalg.core.exceptions import LinAlgError

T = TypeVar('T')  # Success payload type


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Immutable success/failure envelope.

    Type Parameters:
        T: The payload type produced on success

    Attributes:
        value: The payload, or None on failure
        error: The captured LinAlgError, or None on success

    Examples:
        >>> Outcome.success(3.0).unwrap()
        3.0
        >>> Outcome.failure(ParseError("bad")).ok
        False
    """
    value: T | None = None
    error: LinAlgError | None = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("Outcome cannot carry both a value and an error")

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        """Wrap a successful payload."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: LinAlgError) -> Outcome[T]:
        """Wrap a captured error."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True if the call succeeded."""
        return self.error is None

    @property
    def kind(self) -> str | None:
        """Error kind tag, or None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        """
        Return the payload or re-raise the captured error.

        Raises:
            LinAlgError: The stored error, if the call failed
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the payload, or ``default`` if the call failed."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """
    Call ``func`` and capture any LinAlgError into an Outcome.

    Args:
        func: Any callable, typically a pylinalg operation
        *args: Positional arguments forwarded to func
        **kwargs: Keyword arguments forwarded to func

    Returns:
        Outcome holding the return value, or the raised LinAlgError
    """
    try:
        value = func(*args, **kwargs)
    except LinAlgError as e:
        return Outcome.failure(e)
    return Outcome.success(value)
