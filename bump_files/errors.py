class NoMatchError(Exception):
    def __init__(self, pattern: str, updater_name: str):
        self.pattern = pattern
        self.updater_name = updater_name
        super().__init__(f"{updater_name} found no match for pattern: {pattern}")


class InvalidVersionError(ValueError):
    def __init__(self, version: str, reason: str):
        self.version = version
        self.reason = reason
        super().__init__(f"Invalid version string: {version!r} ({reason})")


class BumpFileNotFoundError(Exception):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"No bump file configured for {filename}")
