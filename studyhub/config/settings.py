from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class PaperBackend(Enum):
	ARXIV = 'arxiv'
	SEMANTIC_SCHOLAR = 'semantic_scholar'


class Settings(BaseSettings):
	# Provider credentials. A missing key is not an error: the adapter falls back.
	YOUTUBE_API_KEY: str | None = None
	GOOGLE_SEARCH_API_KEY: str | None = None
	GOOGLE_SEARCH_ENGINE_ID: str | None = None
	SEMANTIC_SCHOLAR_API_KEY: str | None = None
	OPENROUTER_API_KEY: str | None = None
	ANTHROPIC_API_KEY: str | None = None

	# Search settings
	PAPER_PROVIDER: str = 'arxiv'
	MAX_RESULTS: int = 5
	REQUEST_TIMEOUT: float = 10.0

	# Generation settings
	LLM_PROVIDER: str = 'openrouter'
	GENERATION_MODEL: str = 'google/gemini-2.0-flash-001'
	GENERATION_TEMPERATURE: float = 0.7
	GENERATION_MAX_TOKENS: int = 4000
	QUIZ_QUESTION_COUNT: int = 8
	QUIZ_DIFFICULTY: str = 'intermediate'
	FLASHCARD_COUNT: int = 8
	RETRY_MAX_ATTEMPTS: int = 4
	RETRY_BASE_DELAY: float = 1.0

	# App Settings
	APP_NAME: str = 'StudyHub'
	LOG_LEVEL: str = 'INFO'
	LOG_ROTATION: str = '10 MB'
	LOG_RETENTION: str = '14 days'
	RECENT_SEARCH_LIMIT: int = 5

	# Paths
	BASE_DIR: Path = Path(__file__).parent.parent.parent
	DATA_DIR: Path = BASE_DIR / 'data'
	STORAGE_PATH: Path = DATA_DIR / 'storage'
	EXPORT_DIR: Path = DATA_DIR / 'exports'
	LOG_FILE: Path | None = DATA_DIR / 'logs' / 'studyhub.log'

	model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

	def llm_api_key(self) -> str | None:
		if self.LLM_PROVIDER == 'anthropic':
			return self.ANTHROPIC_API_KEY
		return self.OPENROUTER_API_KEY


settings = Settings()
