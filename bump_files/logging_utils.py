import logging

from rich.logging import RichHandler

from bump_files.settings import BumpSettings


def configure_logging(
    level: str | None = None, *, settings: BumpSettings | None = None
) -> logging.Handler:
    if level is None:
        settings = settings or BumpSettings()
        level = settings.log_level
    handler = RichHandler(rich_tracebacks=False, level=level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    return handler
