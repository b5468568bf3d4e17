from .json_store import JsonStore
from .progress import (
	BookmarkStore,
	LearningProgress,
	NoteStore,
	QuickNoteStore,
	SearchHistory,
	VideoNoteStore,
	percentage,
	score_quiz,
)

__all__ = [
	'JsonStore',
	'SearchHistory',
	'LearningProgress',
	'BookmarkStore',
	'NoteStore',
	'QuickNoteStore',
	'VideoNoteStore',
	'percentage',
	'score_quiz',
]
