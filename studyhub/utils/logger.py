import sys
from pathlib import Path

from loguru import logger

from studyhub.config.settings import settings

CONSOLE_FORMAT = (
	'<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> '
	'<cyan>{name}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>'
)
FILE_FORMAT = '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[app]} | {name}:{function}:{line} | {message}'


def configure_logging(level: str | None = None, log_file: Path | None = None, console: bool = True) -> None:
	"""Replace every loguru handler with a stderr sink and an optional rotating file sink.

	``level`` defaults to ``LOG_LEVEL``; file rotation and retention come from settings.
	"""
	level = (level or settings.LOG_LEVEL).upper()

	handlers = []
	if console:
		handlers.append({'sink': sys.stderr, 'level': level, 'format': CONSOLE_FORMAT})
	if log_file is not None:
		log_file.parent.mkdir(parents=True, exist_ok=True)
		handlers.append(
			{
				'sink': log_file,
				'level': level,
				'format': FILE_FORMAT,
				'rotation': settings.LOG_ROTATION,
				'retention': settings.LOG_RETENTION,
				'encoding': 'utf-8',
			}
		)

	logger.configure(handlers=handlers, extra={'app': settings.APP_NAME})


configure_logging(log_file=settings.LOG_FILE)
