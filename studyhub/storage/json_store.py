import json
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from dacite import Config, from_dict

from studyhub.utils.logger import logger

from .helpers import EnumEncoder

T = TypeVar('T')

RECENT_SEARCHES = 'recent-searches'
COMPLETED_VIDEOS = 'completed-videos'
COMPLETED_DOCUMENTS = 'completed-documents'
COMPLETED_QUIZZES = 'completed-quizzes'
QUIZ_SCORES = 'quiz-scores'
STUDY_NOTES = 'study-notes'
GENERATED_NOTES = 'generated-notes'
VIDEO_NOTES = 'video-notes'
BOOKMARKS = 'bookmarks'

DACITE_CONFIG = Config(cast=[Enum])


class JsonStore:
	"""Independent JSON documents, one file per key. Writes replace the whole value."""

	def __init__(self, storage_path: Path):
		self.storage_path = storage_path

	def _file(self, key: str) -> Path:
		return self.storage_path / f'{key}.json'

	def exists(self, key: str) -> bool:
		return self._file(key).exists()

	def get(self, key: str, default: Any = None) -> Any:
		if not self.exists(key):
			return default

		try:
			with open(self._file(key), encoding='utf-8') as f:
				return json.load(f)
		except (OSError, json.JSONDecodeError) as e:
			logger.warning(f'Could not read stored value for {key!r}, using default: {e}')
			return default

	def set(self, key: str, value: Any) -> None:
		self.storage_path.mkdir(parents=True, exist_ok=True)

		with open(self._file(key), 'w', encoding='utf-8') as f:
			json.dump(value, f, cls=EnumEncoder, indent=2, ensure_ascii=False)

	def delete(self, key: str) -> None:
		if self.exists(key):
			self._file(key).unlink()

	def get_records(self, key: str, data_class: type[T]) -> list[T]:
		return [from_dict(data_class=data_class, data=item, config=DACITE_CONFIG) for item in self.get(key, [])]
