from dataclasses import dataclass

from .content import ArticleResult, PaperResult, VideoResult
from .study import Flashcard, Quiz


@dataclass(frozen=True)
class SearchResultBundle:
	id: str
	topic: str
	created_at: str
	videos: list[VideoResult]
	articles: list[ArticleResult]
	papers: list[PaperResult]
	quiz: Quiz
	flashcards: list[Flashcard]
