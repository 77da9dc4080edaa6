"""Named self-checks run sequentially in registration order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from eigix.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Check:
    """A named zero-argument procedure returning ``True`` on success."""

    name: str
    function: Callable[[], bool]


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    error: Optional[str] = None

    @property
    def label(self) -> str:
        return "PASS" if self.passed else "FAIL"


class CheckRegistry:
    """Ordered collection of checks.

    A check that raises is reported as failed; its exception is logged and its
    text kept on the result.
    """

    def __init__(self) -> None:
        self._checks: List[Check] = []

    def register(self, name: str, function: Callable[[], bool]) -> Check:
        if any(check.name == name for check in self._checks):
            raise ValueError(f"Check already registered: {name!r}")
        check = Check(name, function)
        self._checks.append(check)
        return check

    @property
    def checks(self) -> List[Check]:
        return list(self._checks)

    def __len__(self) -> int:
        return len(self._checks)

    def run(self) -> List[CheckResult]:
        results = []
        for check in self._checks:
            try:
                passed = bool(check.function())
            except Exception as exc:
                logger.exception("Check %s raised an exception: %s", check.name, exc)
                results.append(CheckResult(check.name, False, f"{type(exc).__name__}: {exc}"))
                continue
            logger.debug("Check %s %s", check.name, "passed" if passed else "failed")
            results.append(CheckResult(check.name, passed))
        return results
