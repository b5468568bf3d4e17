from fastapi import APIRouter, Depends, HTTPException

from studyhub.api.dependencies import get_orchestrator, get_store
from studyhub.config.settings import settings
from studyhub.core.orchestrator import SearchOrchestrator
from studyhub.errors import ValidationError
from studyhub.storage import JsonStore, SearchHistory
from studyhub.storage.helpers import to_jsonable

search_router = APIRouter()


@search_router.get('/search')
async def search(
	topic: str,
	orchestrator: SearchOrchestrator = Depends(get_orchestrator),
	store: JsonStore = Depends(get_store),
):
	try:
		bundle = await orchestrator.search(topic)
	except ValidationError as e:
		raise HTTPException(status_code=422, detail=str(e)) from e

	SearchHistory(store, settings.RECENT_SEARCH_LIMIT).record(bundle.topic)
	return to_jsonable(bundle)


@search_router.get('/search/history')
async def search_history(store: JsonStore = Depends(get_store)):
	return {'recent': SearchHistory(store, settings.RECENT_SEARCH_LIMIT).recent()}
