from functools import lru_cache

from studyhub.config.settings import settings
from studyhub.core.factory import create_llm_client, create_note_service, create_orchestrator
from studyhub.core.orchestrator import SearchOrchestrator
from studyhub.llm.client import LLMClient
from studyhub.notes import NoteService
from studyhub.storage import JsonStore


@lru_cache
def get_llm_client() -> LLMClient:
	return create_llm_client(settings)


@lru_cache
def get_orchestrator() -> SearchOrchestrator:
	return create_orchestrator(settings, get_llm_client())


@lru_cache
def get_note_service() -> NoteService:
	return create_note_service(settings, get_llm_client())


def get_store() -> JsonStore:
	return JsonStore(settings.STORAGE_PATH)
