from bump_files.bump_files import (
    BUMP_FILES,
    BumpFile,
    default_bump_files,
    find_bump_file,
    read_versions,
    write_versions,
)
from bump_files.errors import (
    BumpFileNotFoundError,
    InvalidVersionError,
    NoMatchError,
)
from bump_files.logging_utils import configure_logging
from bump_files.settings import BumpSettings, bump_settings, load_project_config
from bump_files.updaters import (
    ModuleVersionUpdater,
    VersionFileUpdater,
    VersionUpdater,
    major_of,
    split_version,
)

VERSION = "0.1.0"
__all__ = (
    "BUMP_FILES",
    "BumpFile",
    "BumpFileNotFoundError",
    "BumpSettings",
    "InvalidVersionError",
    "ModuleVersionUpdater",
    "NoMatchError",
    "VersionFileUpdater",
    "VersionUpdater",
    "bump_settings",
    "configure_logging",
    "default_bump_files",
    "find_bump_file",
    "load_project_config",
    "major_of",
    "read_versions",
    "split_version",
    "write_versions",
)
