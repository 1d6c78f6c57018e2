"""FreeNAS SDK global config."""

import logging
import os
from typing import Any, Callable, Dict


def _option(name: str, kind: type, doc: str) -> property:
    """Build a lazily read, overridable config property."""

    def getter(self: "FreenasConfig") -> Any:
        if name not in self._state:
            self._state[name] = self._defaults[name]()
        return self._state[name]

    def setter(self: "FreenasConfig", val: Any) -> None:
        if isinstance(val, kind):
            self._state[name] = val
        self._sync_level()

    def deleter(self: "FreenasConfig") -> None:
        self._state.pop(name, None)
        self._sync_level()

    return property(getter, setter, deleter, doc)


class FreenasConfig:
    """Process wide settings, read from the environment on first use."""

    _defaults: Dict[str, Callable[[], Any]] = {
        "debug": lambda: bool(os.environ.get("FREENAS_SDK_DEBUG")),
        "verify_ssl": lambda: not bool(
            os.environ.get("FREENAS_DISABLE_SSL_VERIFICATION")
        ),
        "log_level": lambda: int(os.environ.get("FREENAS_SDK_LOG_LEVEL", logging.INFO)),
    }

    debug = _option("debug", bool, "Enable debug logging.")
    verify_ssl = _option("verify_ssl", bool, "Verify the appliance certificate.")
    log_level = _option("log_level", int, "Logging severity of the sdk.")

    def __init__(self) -> None:
        """Define configs."""
        self._state: Dict[str, Any] = {}
        self.logger = logging.getLogger("freenas")
        self._sync_level()

    def __repr__(self) -> str:
        """Class repr."""
        return str({option: getattr(self, option) for option in self._defaults})

    def _sync_level(self) -> None:
        self.logger.setLevel(logging.DEBUG if self.debug else self.log_level)

    @property
    def version(self) -> str:
        """Get freenas sdk version."""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from freenas import __version__ as sdk_version

        return sdk_version

    @property
    def log_info(self) -> bool:
        """Show info logs."""
        return self.log_level <= logging.INFO


config = FreenasConfig()

__all__ = ["config"]
