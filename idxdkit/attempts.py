"""Bookkeeping for test runs that are gated on the running kernel version.

A tracker counts how many tests were attempted and how many were skipped
because the kernel is older than a test requires. From those counts it
works out the exit status of the whole run.
"""

from __future__ import annotations

import inspect
import logging
import os
import platform
import re

__all__ = [
    "EXIT_SKIP",
    "AttemptTracker",
    "kernel_version",
    "parse_kernel_version",
    "format_kernel_version",
    "system_kernel_version",
]

EXIT_SKIP = 77

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)\.\s*([+-]?\d+)")


def kernel_version(a: int, b: int, c: int) -> int:
    """Encode a kernel release as a single comparable number.

    The sublevel is clamped to 255 so that it cannot spill into the minor
    number.
    """
    return (a << 16) + (b << 8) + min(c, 255)


def parse_kernel_version(text: str) -> int:
    """Encode the leading ``major.minor.sublevel`` of a release string.

    Anything after the three numbers, such as ``-rc1`` or a distribution
    suffix, is ignored. Raises ValueError if the string does not start with
    three dotted numbers.
    """
    match = _VERSION_RE.match(text)
    if match is None:
        raise ValueError(f"cannot read a kernel version from {text!r}")
    a, b, c = (int(part) for part in match.groups())
    return kernel_version(a, b, c)


def format_kernel_version(kver: int) -> str:
    """Return an encoded kernel version as ``major.minor.sublevel``."""
    return f"{(kver >> 16) & 0xFFFF}.{(kver >> 8) & 0xFF}.{kver & 0xFF}"


def system_kernel_version() -> int:
    """Return the version of the running kernel.

    The ``KVER`` environment variable takes precedence over the release the
    system reports.
    """
    release = os.environ.get("KVER")
    if release is None:
        release = platform.release()
    return parse_kernel_version(release)


def _call_site(caller: str | None, line: int | None) -> tuple[str, int]:
    if caller is not None and line is not None:
        return caller, line
    frame = inspect.currentframe()
    try:
        outer = frame.f_back.f_back if frame and frame.f_back else None
        if outer is not None:
            caller = caller if caller is not None else outer.f_code.co_name
            line = line if line is not None else outer.f_lineno
    finally:
        del frame
    return caller or "?", line or 0


class AttemptTracker:
    """Counts attempted and skipped tests against a kernel version."""

    def __init__(self, kver: int = 0) -> None:
        self.kver = kver if kver else system_kernel_version()
        self.attempted = 0
        self.skipped = 0

    def attempt(self, kver: int, caller: str | None = None, line: int | None = None) -> bool:
        """Record an attempt needing kernel ``kver``; return whether it may run.

        When the kernel is too old the attempt is counted as skipped.
        ``caller`` and ``line`` default to the calling function and line.
        """
        self.attempted += 1
        if kver <= self.kver:
            return True
        caller, line = _call_site(caller, line)
        logger.warning(
            "attempt: skip %s:%d requires: %s current: %s",
            caller,
            line,
            format_kernel_version(kver),
            format_kernel_version(self.kver),
        )
        self.skipped += 1
        return False

    def skip(self, caller: str | None = None, line: int | None = None) -> None:
        """Record an explicit skip; the attempt count is set to the skip count."""
        self.skipped += 1
        self.attempted = self.skipped
        caller, line = _call_site(caller, line)
        logger.warning("skip: explicit skip %s:%d", caller, line)

    def result(self, rc: int) -> int:
        """Return the exit status of the run given the status ``rc`` of the tests.

        A failure status is passed through. Otherwise the run counts as
        skipped when every attempt was skipped, and as passed when at least
        one attempt ran.
        """
        if self.skipped:
            logger.warning("attempted: %d skipped: %d", self.attempted, self.skipped)
        if rc and rc != EXIT_SKIP:
            return rc
        if self.skipped >= self.attempted:
            return EXIT_SKIP
        return 0

    def __repr__(self) -> str:
        return (
            f"AttemptTracker(kver={format_kernel_version(self.kver)}, "
            f"attempted={self.attempted}, skipped={self.skipped})"
        )