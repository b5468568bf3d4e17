import uuid
from datetime import UTC, datetime

from studyhub.errors import ValidationError
from studyhub.models import (
	Bookmark,
	LearningPath,
	QuickNote,
	Quiz,
	ResourceType,
	StepType,
	StudyNote,
	TimestampNote,
	VideoNotes,
)

from .helpers import to_jsonable
from .json_store import (
	BOOKMARKS,
	COMPLETED_DOCUMENTS,
	COMPLETED_QUIZZES,
	COMPLETED_VIDEOS,
	GENERATED_NOTES,
	QUIZ_SCORES,
	RECENT_SEARCHES,
	STUDY_NOTES,
	VIDEO_NOTES,
	JsonStore,
)


def _now() -> str:
	return datetime.now(UTC).isoformat()


def percentage(part: int, total: int) -> int:
	"""Whole-number percentage, halves rounded up (1 of 8 is 13)."""
	return (part * 200 + total) // (2 * total)


def score_quiz(quiz: Quiz, answers: list[int | None]) -> int:
	"""Rounded percentage of questions answered correctly. Missing answers count as wrong."""
	correct = sum(
		1
		for index, question in enumerate(quiz.questions)
		if index < len(answers) and answers[index] == question.correct_answer_index
	)
	return percentage(correct, len(quiz.questions))


class SearchHistory:
	def __init__(self, store: JsonStore, limit: int = 5):
		self.store = store
		self.limit = limit

	def record(self, topic: str) -> list[str]:
		topic = topic.strip()
		history = [topic] + [t for t in self.recent() if t != topic]
		history = history[: self.limit]
		self.store.set(RECENT_SEARCHES, history)
		return history

	def recent(self) -> list[str]:
		return self.store.get(RECENT_SEARCHES, [])

	def clear(self) -> None:
		self.store.delete(RECENT_SEARCHES)


class LearningProgress:
	def __init__(self, store: JsonStore):
		self.store = store

	@property
	def completed_videos(self) -> list[str]:
		return self.store.get(COMPLETED_VIDEOS, [])

	@property
	def completed_documents(self) -> list[str]:
		return self.store.get(COMPLETED_DOCUMENTS, [])

	@property
	def completed_quizzes(self) -> list[str]:
		return self.store.get(COMPLETED_QUIZZES, [])

	@property
	def quiz_scores(self) -> dict[str, int]:
		return self.store.get(QUIZ_SCORES, {})

	def _mark(self, key: str, resource_id: str) -> None:
		completed = self.store.get(key, [])
		if resource_id not in completed:
			self.store.set(key, completed + [resource_id])

	def mark_video_complete(self, video_id: str) -> None:
		self._mark(COMPLETED_VIDEOS, video_id)

	def mark_document_complete(self, document_id: str) -> None:
		self._mark(COMPLETED_DOCUMENTS, document_id)

	def mark_quiz_complete(self, quiz_id: str, score: int) -> None:
		self._mark(COMPLETED_QUIZZES, quiz_id)
		self.store.set(QUIZ_SCORES, {**self.quiz_scores, quiz_id: score})

	def submit_quiz(self, quiz: Quiz, answers: list[int | None]) -> Quiz:
		score = score_quiz(quiz, answers)
		self.mark_quiz_complete(quiz.id, score)
		return quiz.with_score(score)

	def calculate_path_progress(self, path: LearningPath) -> int:
		if not path.steps:
			return 0

		completed_by_type = {
			StepType.WATCH: set(self.completed_videos),
			StepType.READ: set(self.completed_documents),
			StepType.TEST: set(self.completed_quizzes),
		}
		done = sum(1 for step in path.steps if step.resource_id in completed_by_type[step.type])
		return percentage(done, len(path.steps))


class BookmarkStore:
	def __init__(self, store: JsonStore):
		self.store = store

	def list_bookmarks(self) -> list[Bookmark]:
		return self.store.get_records(BOOKMARKS, Bookmark)

	def add(self, resource_id: str, resource_type: ResourceType, title: str) -> Bookmark:
		bookmarks = self.list_bookmarks()
		for bookmark in bookmarks:
			if bookmark.resource_id == resource_id and bookmark.resource_type == resource_type:
				return bookmark

		bookmark = Bookmark(
			id=f'bookmark-{uuid.uuid4().hex[:12]}',
			resource_id=resource_id,
			resource_type=resource_type,
			title=title,
			created_at=_now(),
		)
		self.store.set(BOOKMARKS, to_jsonable(bookmarks + [bookmark]))
		return bookmark

	def remove(self, bookmark_id: str) -> None:
		self.store.set(BOOKMARKS, to_jsonable([b for b in self.list_bookmarks() if b.id != bookmark_id]))


class NoteStore:
	def __init__(self, store: JsonStore):
		self.store = store

	def list_notes(self) -> list[StudyNote]:
		return self.store.get_records(GENERATED_NOTES, StudyNote)

	def get(self, note_id: str) -> StudyNote | None:
		return next((n for n in self.list_notes() if n.id == note_id), None)

	def save(self, note: StudyNote) -> None:
		notes = [n for n in self.list_notes() if n.id != note.id]
		self.store.set(GENERATED_NOTES, to_jsonable(notes + [note]))

	def delete(self, note_id: str) -> None:
		self.store.set(GENERATED_NOTES, to_jsonable([n for n in self.list_notes() if n.id != note_id]))


class VideoNoteStore:
	def __init__(self, store: JsonStore):
		self.store = store

	def list_entries(self) -> list[VideoNotes]:
		return self.store.get_records(VIDEO_NOTES, VideoNotes)

	def get(self, video_id: str) -> VideoNotes | None:
		return next((n for n in self.list_entries() if n.video_id == video_id), None)

	def save(self, video_id: str, video_title: str, current_notes: str, timestamps: list[TimestampNote]) -> VideoNotes:
		entry = VideoNotes(
			video_id=video_id,
			video_title=video_title,
			current_notes=current_notes,
			timestamps=timestamps,
			created_at=_now(),
		)
		# One entry per video: saving again replaces the previous notes
		others = [n for n in self.list_entries() if n.video_id != video_id]
		self.store.set(VIDEO_NOTES, to_jsonable(others + [entry]))
		return entry


class QuickNoteStore:
	"""Free-form notes on the ``study-notes`` key, newest first."""

	def __init__(self, store: JsonStore):
		self.store = store

	def list_notes(self) -> list[QuickNote]:
		return self.store.get_records(STUDY_NOTES, QuickNote)

	def add(self, content: str, video_time: str | None = None, flashcard_id: str | None = None) -> QuickNote:
		if not content or not content.strip():
			raise ValidationError('Note content cannot be empty')

		note = QuickNote(
			id=f'note-{uuid.uuid4().hex[:12]}',
			content=content,
			timestamp=_now(),
			video_time=video_time or None,
			flashcard_id=flashcard_id or None,
		)
		self.store.set(STUDY_NOTES, to_jsonable([note] + self.list_notes()))
		return note

	def delete(self, note_id: str) -> None:
		self.store.set(STUDY_NOTES, to_jsonable([n for n in self.list_notes() if n.id != note_id]))
