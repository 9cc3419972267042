#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/utils/decorators.py
"""Decorators and context managers shared across mdstream.

``requires_dependencies`` guards the entry points of optional features
(the markdown adapter and the autolink layer) so that a missing package
surfaces as a DependencyError with an install hint. ``debug_timer`` wraps
a block in DEBUG-level timing.

"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from mdstream.exceptions import DependencyError
from mdstream.utils.packages import probe_package


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check that optional packages are importable before calling the function.

    Parameters
    ----------
    converter_name : str
        Feature name used in the error message (e.g. "markdown", "autolink")
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` triples, as kept in
        ``mdstream.constants`` (``DEPS_MARKDOWN``, ``DEPS_AUTOLINK``)

    Returns
    -------
    Callable
        Decorator

    Raises
    ------
    DependencyError
        When the wrapped function is called and a package is missing or has
        an incompatible version

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(text):
        ...     import mistune
        ...     return mistune.create_markdown(renderer=None).parse(text)

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            statuses = [probe_package(*package) for package in packages]
            missing = [(s.install_name, s.version_spec) for s in statuses if s.import_error is not None]
            mismatched = [
                (s.install_name, s.version_spec, s.installed_version or "unknown")
                for s in statuses
                if s.import_error is None and not s.satisfied
            ]
            if missing or mismatched:
                first_error = next((s.import_error for s in statuses if s.import_error is not None), None)
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatched,
                    original_import_error=first_error,
                ) from first_error
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the enclosed block took, at DEBUG level.

    No clock is read when ``logger`` is not enabled for DEBUG.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    started = time.perf_counter()
    try:
        yield
    finally:
        logger.debug(f"{operation} completed in {time.perf_counter() - started:.4f}s")
