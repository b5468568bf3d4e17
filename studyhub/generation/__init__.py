from .base import BaseGenerator
from .flashcards import FlashcardGenerator
from .notes import NoteGenerator, build_note, derive_source_id
from .quiz import QuizGenerator

__all__ = [
	'BaseGenerator',
	'QuizGenerator',
	'FlashcardGenerator',
	'NoteGenerator',
	'build_note',
	'derive_source_id',
]
