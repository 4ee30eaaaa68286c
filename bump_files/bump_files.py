from __future__ import annotations

import logging
from contextlib import suppress
from dataclasses import dataclass
from typing import Mapping

from bump_files.errors import BumpFileNotFoundError, NoMatchError
from bump_files.settings import BumpSettings
from bump_files.updaters import (
    ModuleVersionUpdater,
    VersionFileUpdater,
    VersionUpdater,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BumpFile:
    filename: str
    updater: VersionUpdater

    def matches(self, filename: str) -> bool:
        return normalize_filename(self.filename) == normalize_filename(filename)


def normalize_filename(filename: str) -> str:
    return filename.removeprefix("./")


def default_bump_files(settings: BumpSettings) -> tuple[BumpFile, ...]:
    module_updater = ModuleVersionUpdater(module_name=settings.module_name)
    return (
        BumpFile(settings.version_filename, VersionFileUpdater()),
        BumpFile(settings.module_filename, module_updater),
        BumpFile(settings.docs_filename, module_updater),
    )


BUMP_FILES: tuple[BumpFile, ...] = (
    BumpFile(BumpSettings.DEFAULT_VERSION_FILENAME, VersionFileUpdater()),
    BumpFile(BumpSettings.DEFAULT_MODULE_FILENAME, ModuleVersionUpdater()),
    BumpFile(BumpSettings.DEFAULT_DOCS_FILENAME, ModuleVersionUpdater()),
)


def find_bump_file(
    filename: str, bump_files: tuple[BumpFile, ...] = BUMP_FILES
) -> BumpFile:
    for bump_file in bump_files:
        if bump_file.matches(filename):
            return bump_file
    raise BumpFileNotFoundError(filename)


def _lookup_contents(contents: Mapping[str, str], bump_file: BumpFile) -> str | None:
    for filename, text in contents.items():
        if bump_file.matches(filename):
            return text
    return None


def read_versions(
    contents: Mapping[str, str], bump_files: tuple[BumpFile, ...] = BUMP_FILES
) -> dict[str, str]:
    """Returns {filename: version} for each configured file found in `contents`.
    Raises NoMatchError on the first file without a version."""
    versions: dict[str, str] = {}
    for bump_file in bump_files:
        text = _lookup_contents(contents, bump_file)
        if text is None:
            logger.debug(f"skipping {bump_file.filename}, no contents given")
            continue
        versions[bump_file.filename] = bump_file.updater.read_version(text)
    return versions


def write_versions(
    contents: Mapping[str, str],
    version: str,
    bump_files: tuple[BumpFile, ...] = BUMP_FILES,
) -> dict[str, str]:
    """Returns {filename: new_text}, each file is rewritten independently."""
    new_contents: dict[str, str] = {}
    for bump_file in bump_files:
        text = _lookup_contents(contents, bump_file)
        if text is None:
            logger.debug(f"skipping {bump_file.filename}, no contents given")
            continue
        old_version = None
        with suppress(NoMatchError):
            old_version = bump_file.updater.read_version(text)
        new_text = bump_file.updater.write_version(text, version)
        if new_text == text:
            logger.debug(f"{bump_file.filename} unchanged for version {version}")
        else:
            logger.info(
                f"bumping {bump_file.filename} from {old_version} to {version}"
            )
        new_contents[bump_file.filename] = new_text
    return new_contents
