from dacite import DaciteError, from_dict
from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from studyhub.api.dependencies import get_store
from studyhub.errors import ValidationError
from studyhub.export import export_quick_notes
from studyhub.models import LearningPath, Quiz, ResourceType, TimestampNote
from studyhub.storage import BookmarkStore, JsonStore, LearningProgress, QuickNoteStore, VideoNoteStore
from studyhub.storage.helpers import to_jsonable
from studyhub.storage.json_store import DACITE_CONFIG

progress_router = APIRouter()


class QuizSubmission(BaseModel):
	quiz: dict
	answers: list[int | None]


class BookmarkRequest(BaseModel):
	resource_id: str
	resource_type: ResourceType
	title: str


class TimestampNoteRequest(BaseModel):
	time: str
	note: str


class VideoNotesRequest(BaseModel):
	video_title: str
	current_notes: str = ''
	timestamps: list[TimestampNoteRequest] = []


class QuickNoteRequest(BaseModel):
	content: str
	video_time: str | None = None
	flashcard_id: str | None = None


def _decode(data_class, data: dict):
	try:
		return from_dict(data_class=data_class, data=data, config=DACITE_CONFIG)
	except (DaciteError, ValueError) as e:
		raise HTTPException(status_code=422, detail=f'Invalid {data_class.__name__.lower()}: {e}') from e


@progress_router.get('/progress')
async def get_progress(store: JsonStore = Depends(get_store)):
	progress = LearningProgress(store)
	return {
		'completed_videos': progress.completed_videos,
		'completed_documents': progress.completed_documents,
		'completed_quizzes': progress.completed_quizzes,
		'quiz_scores': progress.quiz_scores,
	}


@progress_router.post('/progress/videos/{video_id}')
async def complete_video(video_id: str, store: JsonStore = Depends(get_store)):
	progress = LearningProgress(store)
	progress.mark_video_complete(video_id)
	return {'completed_videos': progress.completed_videos}


@progress_router.post('/progress/documents/{document_id}')
async def complete_document(document_id: str, store: JsonStore = Depends(get_store)):
	progress = LearningProgress(store)
	progress.mark_document_complete(document_id)
	return {'completed_documents': progress.completed_documents}


@progress_router.post('/progress/quizzes')
async def submit_quiz(submission: QuizSubmission, store: JsonStore = Depends(get_store)):
	quiz = _decode(Quiz, submission.quiz)
	return to_jsonable(LearningProgress(store).submit_quiz(quiz, submission.answers))


@progress_router.post('/progress/paths')
async def path_progress(path: dict, store: JsonStore = Depends(get_store)):
	learning_path = _decode(LearningPath, path)
	return {'path_id': learning_path.id, 'progress': LearningProgress(store).calculate_path_progress(learning_path)}


@progress_router.get('/bookmarks')
async def list_bookmarks(store: JsonStore = Depends(get_store)):
	return to_jsonable(BookmarkStore(store).list_bookmarks())


@progress_router.post('/bookmarks')
async def add_bookmark(request: BookmarkRequest, store: JsonStore = Depends(get_store)):
	bookmark = BookmarkStore(store).add(request.resource_id, request.resource_type, request.title)
	return to_jsonable(bookmark)


@progress_router.delete('/bookmarks/{bookmark_id}')
async def remove_bookmark(bookmark_id: str, store: JsonStore = Depends(get_store)):
	BookmarkStore(store).remove(bookmark_id)
	return {'deleted': bookmark_id}


@progress_router.get('/video-notes')
async def list_video_notes(store: JsonStore = Depends(get_store)):
	return to_jsonable(VideoNoteStore(store).list_entries())


@progress_router.get('/video-notes/{video_id}')
async def get_video_notes(video_id: str, store: JsonStore = Depends(get_store)):
	entry = VideoNoteStore(store).get(video_id)
	if entry is None:
		raise HTTPException(status_code=404, detail=f'No notes for video: {video_id}')
	return to_jsonable(entry)


@progress_router.put('/video-notes/{video_id}')
async def save_video_notes(video_id: str, request: VideoNotesRequest, store: JsonStore = Depends(get_store)):
	timestamps = [TimestampNote(time=t.time, note=t.note) for t in request.timestamps]
	entry = VideoNoteStore(store).save(video_id, request.video_title, request.current_notes, timestamps)
	return to_jsonable(entry)


@progress_router.get('/quick-notes')
async def list_quick_notes(store: JsonStore = Depends(get_store)):
	return to_jsonable(QuickNoteStore(store).list_notes())


@progress_router.post('/quick-notes')
async def add_quick_note(request: QuickNoteRequest, store: JsonStore = Depends(get_store)):
	try:
		note = QuickNoteStore(store).add(request.content, request.video_time, request.flashcard_id)
	except ValidationError as e:
		raise HTTPException(status_code=422, detail=str(e)) from e
	return to_jsonable(note)


@progress_router.delete('/quick-notes/{note_id}')
async def delete_quick_note(note_id: str, store: JsonStore = Depends(get_store)):
	QuickNoteStore(store).delete(note_id)
	return {'deleted': note_id}


@progress_router.get('/quick-notes/export')
async def export_notes(store: JsonStore = Depends(get_store)):
	exported = export_quick_notes(QuickNoteStore(store).list_notes())
	return Response(
		content=exported.content,
		media_type=exported.mime_type,
		headers={'Content-Disposition': f'attachment; filename="{exported.filename}"'},
	)
