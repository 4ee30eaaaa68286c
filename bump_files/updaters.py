from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Protocol

from bump_files.errors import InvalidVersionError, NoMatchError

logger = logging.getLogger(__name__)

DEFAULT_MODULE_NAME = "stream-go2"


class VersionUpdater(Protocol):
    def read_version(self, contents: str) -> str: ...

    def write_version(self, contents: str, version: str) -> str: ...


def split_version(version: str) -> tuple[str, str, str]:
    """Components beyond patch are ignored.

    >>> split_version("1.2.3")
    ('1', '2', '3')
    >>> split_version("1.2.3.4")
    ('1', '2', '3')
    """
    parts = version.split(".")
    if len(parts) < 3:
        raise InvalidVersionError(version, "expected MAJOR.MINOR.PATCH")
    major, minor, patch = parts[:3]
    if not all(part.isdecimal() for part in (major, minor, patch)):
        raise InvalidVersionError(version, "expected MAJOR.MINOR.PATCH integers")
    return major, minor, patch


def major_of(version: str) -> int:
    """
    >>> major_of("3.0.0")
    3
    """
    major = version.split(".")[0]
    try:
        return int(major)
    except ValueError as e:
        raise InvalidVersionError(
            version, f"major is not an integer: {major!r}"
        ) from e


@dataclass(frozen=True)
class VersionFileUpdater:
    """Rewrites a `Version = "vX.Y.Z"` declaration, e.g. in version.go."""

    REGEX: ClassVar[re.Pattern] = re.compile(r'Version = "v(\d+\.\d+\.\d+)"')

    def read_version(self, contents: str) -> str:
        if match := self.REGEX.search(contents):
            return match.group(1)
        raise NoMatchError(self.REGEX.pattern, type(self).__name__)

    def write_version(self, contents: str, version: str) -> str:
        major, minor, patch = split_version(version)
        replacement = f'Version = "v{major}.{minor}.{patch}"'
        new_contents, count = self.REGEX.subn(
            lambda _: replacement, contents, count=1
        )
        if not count:
            logger.warning("no version declaration found, leaving contents as is")
        return new_contents


@dataclass(frozen=True)
class ModuleVersionUpdater:
    """Rewrites the major version suffix of a module path, e.g. in go.mod and README.md.

    Only tokens with the previous major (`major - 1`) are replaced, so bumps
    must increment the major by at most one.
    """

    module_name: str = DEFAULT_MODULE_NAME

    @property
    def regex(self) -> re.Pattern:
        return re.compile(rf"{re.escape(self.module_name)}/v(\d+)")

    def read_version(self, contents: str) -> str:
        regex = self.regex
        if match := regex.search(contents):
            return match.group(1)
        raise NoMatchError(regex.pattern, type(self).__name__)

    def write_version(self, contents: str, version: str) -> str:
        major = major_of(version)
        previous_major = major - 1
        previous_regex = re.compile(
            rf"{re.escape(self.module_name)}/v{previous_major}"
        )
        replacement = f"{self.module_name}/v{major}"
        new_contents, count = previous_regex.subn(lambda _: replacement, contents)
        logger.debug(
            f"replaced {count} occurrences of {self.module_name}/v{previous_major} with {replacement}"
        )
        return new_contents
