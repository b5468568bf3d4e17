import asyncio
import time
from datetime import UTC, datetime

from studyhub.core.fallbacks import (
	fallback_articles,
	fallback_flashcards,
	fallback_papers,
	fallback_quiz,
	fallback_videos,
)
from studyhub.core.policies import RetryPolicy, with_fallback
from studyhub.generation import FlashcardGenerator, QuizGenerator
from studyhub.models import ArticleResult, Flashcard, PaperResult, Quiz, SearchResultBundle, VideoResult
from studyhub.providers import SearchProvider, normalize_topic
from studyhub.utils.logger import logger


class SearchOrchestrator:
	"""Aggregates search results and generated study material for one topic.

	Searches run first, concurrently; quiz and flashcard generation follow once all
	three searches have settled. Every call is wrapped so that a failing provider
	degrades to placeholder content instead of failing the bundle.
	"""

	def __init__(
		self,
		video_provider: SearchProvider[VideoResult],
		article_provider: SearchProvider[ArticleResult],
		paper_provider: SearchProvider[PaperResult],
		quiz_generator: QuizGenerator,
		flashcard_generator: FlashcardGenerator,
		retry_policy: RetryPolicy | None = None,
		max_results: int = 5,
		quiz_difficulty: str = 'intermediate',
	):
		self.video_provider = video_provider
		self.article_provider = article_provider
		self.paper_provider = paper_provider
		self.quiz_generator = quiz_generator
		self.flashcard_generator = flashcard_generator
		self.retry_policy = retry_policy or RetryPolicy()
		self.max_results = max_results
		self.quiz_difficulty = quiz_difficulty

	async def search(self, topic: str) -> SearchResultBundle:
		topic = normalize_topic(topic)
		logger.info(f'Starting search for: {topic}')
		start_time = time.time()

		videos, articles, papers = await self._search_content(topic)
		logger.info(
			f'Content search completed: {len(videos)} videos, {len(articles)} articles, {len(papers)} papers. '
			'Starting generation...'
		)

		quiz, flashcards = await self._generate_study_material(topic)
		logger.info(
			f'Generation completed: {len(quiz.questions)} quiz questions, {len(flashcards)} flashcards '
			f'({time.time() - start_time:.2f}s total)'
		)

		return SearchResultBundle(
			id=f'search-{int(time.time() * 1000)}',
			topic=topic,
			created_at=datetime.now(UTC).isoformat(),
			videos=videos,
			articles=articles,
			papers=papers,
			quiz=quiz,
			flashcards=flashcards,
		)

	async def _search_content(self, topic: str) -> tuple[list[VideoResult], list[ArticleResult], list[PaperResult]]:
		videos, articles, papers = await asyncio.gather(
			with_fallback(
				lambda: self.video_provider.fetch(topic, self.max_results),
				lambda: fallback_videos(topic),
				name='video search',
			),
			with_fallback(
				lambda: self.article_provider.fetch(topic, self.max_results),
				lambda: fallback_articles(topic),
				name='article search',
			),
			with_fallback(
				lambda: self.paper_provider.fetch(topic, self.max_results),
				lambda: fallback_papers(topic),
				name='paper search',
			),
		)
		return videos, articles, papers

	async def _generate_study_material(self, topic: str) -> tuple[Quiz, list[Flashcard]]:
		quiz, flashcards = await asyncio.gather(
			with_fallback(
				lambda: self.retry_policy.run(
					lambda: self.quiz_generator.generate(topic, self.quiz_difficulty), name='quiz generation'
				),
				lambda: fallback_quiz(topic, self.quiz_generator.question_count),
				name='quiz generation',
			),
			with_fallback(
				lambda: self.retry_policy.run(
					lambda: self.flashcard_generator.generate(topic), name='flashcard generation'
				),
				lambda: fallback_flashcards(topic, self.flashcard_generator.card_count),
				name='flashcard generation',
			),
		)
		return quiz, flashcards
