"""Structural checks for the capability contract.

Conformance is decided by shape, not by inheritance: any object exposing
callable ``primary_action`` and ``report_rate`` is a valid capability.
"""

from typing import Any, List, Tuple, TypeVar

from capability_dispatch.domain.base.exceptions import ContractViolationError

T = TypeVar("T")

REQUIRED_OPERATIONS: Tuple[str, ...] = ("primary_action", "report_rate")


def missing_operations(candidate: Any) -> List[str]:
    """Get the required operations that ``candidate`` does not expose as callables."""
    return [
        name for name in REQUIRED_OPERATIONS
        if not callable(getattr(candidate, name, None))
    ]


def conforms_to_capability(candidate: Any) -> bool:
    """Check whether ``candidate`` satisfies the capability contract."""
    return not missing_operations(candidate)


def verify_capability(candidate: T) -> T:
    """
    Verify that ``candidate`` satisfies the capability contract.

    Args:
        candidate: Object to check

    Returns:
        The same object, unchanged

    Raises:
        ContractViolationError: If any required operation is missing
    """
    missing = missing_operations(candidate)
    if missing:
        raise ContractViolationError(
            f"{type(candidate).__name__} does not satisfy the capability contract; "
            f"missing operations: {missing}",
            missing_operations=missing,
        )
    return candidate


def verify_rate(candidate: Any, rate: Any) -> str:
    """Ensure a value returned by ``report_rate`` is a string."""
    if not isinstance(rate, str):
        raise ContractViolationError(
            f"{type(candidate).__name__}.report_rate() returned "
            f"{type(rate).__name__}, expected str"
        )
    return rate
