"""Configuration file lookup and validation."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from koda_validate import DataclassValidator, Valid

from skip_rm import SkipRmError
from skip_rm.filter import Mode
from skip_rm.matcher import Syntax
from skip_rm.patterns import expand_user

logger = logging.getLogger(__name__)

# search order; the first readable file wins
CONFIG_FILES: Final[tuple[str, ...]] = (
    "~/.config/skip-rm/skip-rm.conf",
    "/etc/skip-rm/skip-rm.conf",
)


@dataclasses.dataclass
class Config:
    """Decoded ``skip-rm.conf``.

    Attributes:
        command: Command that receives the forwarded arguments.
        matcher: Pattern syntax, one of ``string``, ``glob``, ``regex``.
        mode: ``blacklist`` or ``whitelist``.
        blacklist: Pattern list file used in blacklist mode.
        whitelist: Pattern list file used in whitelist mode.
    """

    command: str
    matcher: str
    mode: str
    blacklist: str = ""
    whitelist: str = ""

    @property
    def syntax(self) -> Syntax:
        return Syntax.parse(self.matcher)

    @property
    def mode_value(self) -> Mode:
        return Mode.parse(self.mode)

    @property
    def list_path(self) -> str:
        """Pattern list file for the configured mode, ``~`` expanded.

        Raises:
            SkipRmError: If the mode is invalid or its list is not set.
        """
        mode = self.mode_value
        path = self.blacklist if mode is Mode.BLACKLIST else self.whitelist
        if not path:
            raise SkipRmError(f"no {mode.value} file configured")
        return expand_user(path)

    @classmethod
    def from_json(cls, text: str, source: str = "<config>") -> Config:
        """Decode and validate a JSON configuration.

        Args:
            text: JSON document.
            source: Name used in error messages.

        Returns:
            Config: Validated configuration.

        Raises:
            SkipRmError: If the document is not valid JSON or has the
                wrong shape.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SkipRmError(f"cannot parse config '{source}': {exc}") from exc

        result = DataclassValidator(cls)(data)
        if not isinstance(result, Valid):
            raise SkipRmError(f"config '{source}' is invalid: {result.err_type}")
        return result.val


def load_config(search_path: Sequence[str | Path] = CONFIG_FILES) -> Config:
    """Load the first readable configuration file.

    Args:
        search_path: Candidate files in priority order, ``~`` is expanded.

    Returns:
        Config: Validated configuration.

    Raises:
        SkipRmError: If no file is readable or the first readable one
            is invalid.
    """
    for candidate in search_path:
        path = Path(expand_user(str(candidate)))
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            logger.debug("Cannot read config: %s", path)
            continue
        except UnicodeDecodeError as exc:
            raise SkipRmError(f"cannot decode config '{path}': {exc}") from exc
        logger.debug("Using config: %s", path)
        return Config.from_json(text, str(path))
    raise SkipRmError("no config file")
