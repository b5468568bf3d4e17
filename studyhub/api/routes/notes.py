from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from studyhub.api.dependencies import get_note_service, get_store
from studyhub.errors import ExportError, ValidationError
from studyhub.export import export_note
from studyhub.models import SourceType
from studyhub.notes import NoteService
from studyhub.storage import JsonStore, NoteStore
from studyhub.storage.helpers import to_jsonable

notes_router = APIRouter()


class NoteRequest(BaseModel):
	source_type: SourceType
	title: str = ''
	url: str = ''
	content: str = ''


@notes_router.post('/notes')
async def generate_notes(
	request: NoteRequest,
	note_service: NoteService = Depends(get_note_service),
	store: JsonStore = Depends(get_store),
):
	try:
		if request.source_type == SourceType.VIDEO:
			note = await note_service.analyze_video(request.url, request.title)
		elif request.source_type == SourceType.ARTICLE:
			note = await note_service.analyze_article(request.content, request.title, request.url or None)
		else:
			note = await note_service.analyze_pdf(request.url, request.title, request.content or None)
	except ValidationError as e:
		raise HTTPException(status_code=422, detail=str(e)) from e

	NoteStore(store).save(note)
	return to_jsonable(note)


@notes_router.get('/notes')
async def list_notes(store: JsonStore = Depends(get_store)):
	return to_jsonable(NoteStore(store).list_notes())


@notes_router.get('/notes/{note_id}/export')
async def export(note_id: str, format: str = 'md', store: JsonStore = Depends(get_store)):
	note = NoteStore(store).get(note_id)
	if note is None:
		raise HTTPException(status_code=404, detail=f'Note not found: {note_id}')

	try:
		exported = export_note(note, format)
	except ExportError as e:
		raise HTTPException(status_code=400, detail=str(e)) from e

	return Response(
		content=exported.content,
		media_type=exported.mime_type,
		headers={'Content-Disposition': f'attachment; filename="{exported.filename}"'},
	)
