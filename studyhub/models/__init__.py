from .content import ArticleResult, PaperResult, VideoResult
from .note import (
	Definition,
	Importance,
	KeyPoint,
	NoteContent,
	NoteSection,
	Quote,
	SourceType,
	StudyNote,
	Timestamp,
)
from .progress import (
	Bookmark,
	LearningPath,
	LearningStep,
	QuickNote,
	ResourceType,
	StepType,
	TimestampNote,
	VideoNotes,
)
from .search import SearchResultBundle
from .study import OPTION_COUNT, Difficulty, Flashcard, Question, Quiz

__all__ = [
	'VideoResult',
	'ArticleResult',
	'PaperResult',
	'OPTION_COUNT',
	'Difficulty',
	'Question',
	'Quiz',
	'Flashcard',
	'SearchResultBundle',
	'SourceType',
	'Importance',
	'KeyPoint',
	'Definition',
	'Timestamp',
	'Quote',
	'NoteSection',
	'NoteContent',
	'StudyNote',
	'ResourceType',
	'StepType',
	'Bookmark',
	'LearningStep',
	'LearningPath',
	'QuickNote',
	'TimestampNote',
	'VideoNotes',
]
