import logging

import contextlib
import os
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

ENV_VAR = "AM_EXCEPTIONS"
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """
    Process-wide behavior switches.

    Attributes
    ----------
    exceptions
        If ``True`` (the default), undefined parity signs and violated
        triangle preconditions raise.
        If ``False``, they evaluate to zero instead.
        Invalid ``HalfInt`` construction always raises.
    """

    exceptions: bool = True

    @classmethod
    def from_environment(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        raw = environ.get(ENV_VAR)
        if raw is None:
            return cls()

        exceptions = raw.strip().lower() not in _FALSY
        logger.debug(f"{ENV_VAR}={raw!r} -> exceptions = {exceptions}")
        return cls(exceptions=exceptions)


_settings = Settings.from_environment()


def get_settings() -> Settings:
    return _settings


def set_exceptions(flag: bool) -> Settings:
    """Set the error-reporting mode and return the previous settings."""
    global _settings
    previous = _settings
    _settings = replace(_settings, exceptions=bool(flag))
    return previous


@contextlib.contextmanager
def exceptions_disabled():
    """Evaluate disallowed phases and triangles as zero inside the block."""
    global _settings
    previous = set_exceptions(False)
    try:
        yield _settings
    finally:
        _settings = previous


def suppress(exc: Exception, fallback):
    """Raise ``exc``, or log it and return ``fallback`` when exceptions are disabled."""
    if _settings.exceptions:
        raise exc

    logger.warning(f"{exc}; returning {fallback}")
    return fallback
