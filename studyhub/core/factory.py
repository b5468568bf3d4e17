from studyhub.config.settings import PaperBackend, Settings
from studyhub.core.orchestrator import SearchOrchestrator
from studyhub.core.policies import RetryPolicy
from studyhub.generation import FlashcardGenerator, NoteGenerator, QuizGenerator
from studyhub.llm.client import LLMClient, create_llm_client_from_config
from studyhub.notes import NoteService
from studyhub.providers import (
	ArxivPaperProvider,
	GoogleArticleProvider,
	SearchProvider,
	SemanticScholarPaperProvider,
	YouTubeProvider,
)


def create_llm_client(settings: Settings) -> LLMClient:
	return create_llm_client_from_config(
		{
			'provider': settings.LLM_PROVIDER,
			'model': settings.GENERATION_MODEL,
			'api_key': settings.llm_api_key(),
			'temperature': settings.GENERATION_TEMPERATURE,
			'max_tokens': settings.GENERATION_MAX_TOKENS,
		}
	)


def create_retry_policy(settings: Settings) -> RetryPolicy:
	return RetryPolicy(max_attempts=settings.RETRY_MAX_ATTEMPTS, base_delay=settings.RETRY_BASE_DELAY)


def create_paper_provider(settings: Settings) -> SearchProvider:
	if PaperBackend(settings.PAPER_PROVIDER) == PaperBackend.SEMANTIC_SCHOLAR:
		return SemanticScholarPaperProvider(settings.SEMANTIC_SCHOLAR_API_KEY, timeout=settings.REQUEST_TIMEOUT)
	return ArxivPaperProvider(timeout=settings.REQUEST_TIMEOUT)


def create_orchestrator(settings: Settings, llm_client: LLMClient | None = None) -> SearchOrchestrator:
	llm_client = llm_client or create_llm_client(settings)

	return SearchOrchestrator(
		video_provider=YouTubeProvider(settings.YOUTUBE_API_KEY, timeout=settings.REQUEST_TIMEOUT),
		article_provider=GoogleArticleProvider(
			settings.GOOGLE_SEARCH_API_KEY, settings.GOOGLE_SEARCH_ENGINE_ID, timeout=settings.REQUEST_TIMEOUT
		),
		paper_provider=create_paper_provider(settings),
		quiz_generator=QuizGenerator(llm_client, question_count=settings.QUIZ_QUESTION_COUNT),
		flashcard_generator=FlashcardGenerator(llm_client, card_count=settings.FLASHCARD_COUNT),
		retry_policy=create_retry_policy(settings),
		max_results=settings.MAX_RESULTS,
		quiz_difficulty=settings.QUIZ_DIFFICULTY,
	)


def create_note_service(settings: Settings, llm_client: LLMClient | None = None) -> NoteService:
	llm_client = llm_client or create_llm_client(settings)
	return NoteService(NoteGenerator(llm_client), retry_policy=create_retry_policy(settings))
