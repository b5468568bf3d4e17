import asyncio
import json
from unittest.mock import AsyncMock, Mock

import pytest

from payloads import flashcard_payload, quiz_payload
from studyhub.core import RetryPolicy, SearchOrchestrator
from studyhub.errors import AdapterError, ErrorKind, RateLimitError, ValidationError
from studyhub.generation import FlashcardGenerator, QuizGenerator
from studyhub.models import ArticleResult, PaperResult, VideoResult


def video(video_id):
	return VideoResult(
		id=video_id,
		title='Real video',
		channel_name='Channel',
		duration='10:00',
		view_count_label='10 views',
		published_at='2024-01-01',
		thumbnail_url='https://img.example/thumb.jpg',
		watch_url=f'https://www.youtube.com/watch?v={video_id}',
		description='',
	)


def article():
	return ArticleResult(
		id='a1',
		title='Real article',
		source='Blog',
		author='Author',
		published_at='2024-01-01',
		url='https://blog.example/a1',
		summary='Summary',
		read_time_label='3 min read',
	)


def paper():
	return PaperResult(
		id='p1',
		title='Real paper',
		authors=['A. Author'],
		journal='arXiv',
		published_at='2024-01-01',
		doi='',
		url='https://arxiv.org/abs/p1',
		abstract='Abstract',
	)


class Rendezvous:
	"""Holds every caller until `parties` of them have arrived."""

	def __init__(self, parties):
		self.parties = parties
		self.arrived = 0
		self.all_arrived = asyncio.Event()

	async def arrive(self):
		self.arrived += 1
		if self.arrived >= self.parties:
			self.all_arrived.set()
		await self.all_arrived.wait()


def provider(events, name, result=None, error=None, wave=None):
	async def fetch(topic, max_results):
		events.append(f'{name}:start')
		if wave:
			await wave.arrive()
		if error:
			raise error
		events.append(f'{name}:end')
		return result

	mock = Mock()
	mock.fetch = AsyncMock(side_effect=fetch)
	return mock


@pytest.fixture
def recorded_sleeps():
	return []


@pytest.fixture
def retry_policy(recorded_sleeps):
	async def _sleep(delay):
		recorded_sleeps.append(delay)

	return RetryPolicy(max_attempts=4, base_delay=1.0, sleep=_sleep)


def build_orchestrator(events, llm_client, retry_policy, wave=None, **providers):
	return SearchOrchestrator(
		video_provider=providers.get('videos') or provider(events, 'videos', [video('v1')], wave=wave),
		article_provider=providers.get('articles') or provider(events, 'articles', [article()], wave=wave),
		paper_provider=providers.get('papers') or provider(events, 'papers', [paper()], wave=wave),
		quiz_generator=QuizGenerator(llm_client, question_count=8),
		flashcard_generator=FlashcardGenerator(llm_client, card_count=8),
		retry_policy=retry_policy,
		max_results=5,
	)


def search_within(orchestrator, topic):
	# A wave that runs its calls one after another never fills its Rendezvous and times out
	return asyncio.wait_for(orchestrator.search(topic), timeout=1)


@pytest.mark.asyncio
async def test_search_assembles_bundle(retry_policy):
	events = []
	generation_wave = Rendezvous(2)
	llm_client = Mock()

	async def generate(prompt, **kwargs):
		events.append('generate')
		await generation_wave.arrive()
		if 'flashcards' in prompt:
			return json.dumps(flashcard_payload(8))
		return json.dumps(quiz_payload(8))

	llm_client.generate = AsyncMock(side_effect=generate)
	orchestrator = build_orchestrator(events, llm_client, retry_policy, wave=Rendezvous(3))

	bundle = await search_within(orchestrator, '  Photosynthesis  ')

	assert bundle.topic == 'Photosynthesis'
	assert bundle.id.startswith('search-')
	assert bundle.created_at.endswith('+00:00')
	assert [v.id for v in bundle.videos] == ['v1']
	assert [a.id for a in bundle.articles] == ['a1']
	assert [p.id for p in bundle.papers] == ['p1']
	assert len(bundle.quiz.questions) == 8
	assert len(bundle.flashcards) == 8

	# Generation only starts once every search has settled
	first_generate = events.index('generate')
	assert all(events.index(f'{name}:end') < first_generate for name in ('videos', 'articles', 'papers'))
	assert events.count('generate') == 2

	orchestrator.video_provider.fetch.assert_awaited_once_with('Photosynthesis', 5)
	orchestrator.article_provider.fetch.assert_awaited_once_with('Photosynthesis', 5)
	orchestrator.paper_provider.fetch.assert_awaited_once_with('Photosynthesis', 5)


@pytest.mark.asyncio
async def test_searches_start_together(retry_policy, llm_returning):
	events = []
	orchestrator = build_orchestrator(events, llm_returning(quiz_payload(8)), retry_policy, wave=Rendezvous(3))

	await search_within(orchestrator, 'Photosynthesis')

	starts = [events.index(f'{name}:start') for name in ('videos', 'articles', 'papers')]
	ends = [events.index(f'{name}:end') for name in ('videos', 'articles', 'papers')]
	assert max(starts) < min(ends)


@pytest.mark.asyncio
async def test_serial_calls_would_time_out():
	wave = Rendezvous(3)

	async def one_after_another():
		for _ in range(3):
			await wave.arrive()

	with pytest.raises(asyncio.TimeoutError):
		await asyncio.wait_for(one_after_another(), timeout=0.05)


@pytest.mark.asyncio
async def test_search_waits_for_failed_searches_before_generating(retry_policy):
	events = []
	search_wave = Rendezvous(3)
	generation_wave = Rendezvous(2)
	llm_client = Mock()

	async def generate(prompt, **kwargs):
		events.append('generate')
		await generation_wave.arrive()
		raise AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no API key configured')

	llm_client.generate = AsyncMock(side_effect=generate)
	orchestrator = build_orchestrator(
		events,
		llm_client,
		retry_policy,
		wave=search_wave,
		articles=provider(events, 'articles', error=AdapterError(ErrorKind.NETWORK, 'timeout'), wave=search_wave),
	)

	bundle = await search_within(orchestrator, 'Photosynthesis')

	assert events.index('articles:start') < events.index('generate')
	assert events.index('videos:end') < events.index('generate')
	assert [v.id for v in bundle.videos] == ['v1']
	assert len(bundle.articles) == 2
	assert 'Photosynthesis' in bundle.articles[0].title


@pytest.mark.asyncio
async def test_everything_failing_still_returns_complete_bundle(retry_policy, recorded_sleeps):
	events = []
	search_wave = Rendezvous(3)
	generation_wave = Rendezvous(2)
	llm_client = Mock()

	async def generate(prompt, **kwargs):
		await generation_wave.arrive()
		raise RateLimitError()

	llm_client.generate = AsyncMock(side_effect=generate)
	orchestrator = build_orchestrator(
		events,
		llm_client,
		retry_policy,
		videos=provider(events, 'videos', error=AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no key'), wave=search_wave),
		articles=provider(events, 'articles', error=RateLimitError(), wave=search_wave),
		papers=provider(events, 'papers', error=AdapterError(ErrorKind.MALFORMED_PAYLOAD, 'bad xml'), wave=search_wave),
	)

	bundle = await search_within(orchestrator, 'Linear Algebra')

	assert bundle.topic == 'Linear Algebra'
	assert len(bundle.videos) == 2
	assert len(bundle.articles) == 2
	assert len(bundle.papers) == 1
	assert 'Linear Algebra' in bundle.quiz.title
	assert len(bundle.quiz.questions) == 8
	assert all('Linear Algebra' in q.text for q in bundle.quiz.questions)
	assert len(bundle.flashcards) == 8
	assert all('Linear Algebra' in c.front and 'Linear Algebra' in c.back for c in bundle.flashcards)

	# Quiz and flashcards are each retried four times with 1s, 2s, 4s backoff
	assert llm_client.generate.await_count == 8
	assert sorted(recorded_sleeps) == [1, 1, 2, 2, 4, 4]


@pytest.mark.asyncio
async def test_fallback_content_is_deterministic(retry_policy):
	llm_client = Mock()
	llm_client.generate = AsyncMock(side_effect=AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no key'))
	error = AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no key')

	def failing_orchestrator():
		return build_orchestrator(
			[],
			llm_client,
			retry_policy,
			videos=provider([], 'videos', error=error),
			articles=provider([], 'articles', error=error),
			papers=provider([], 'papers', error=error),
		)

	first = await failing_orchestrator().search('Linear Algebra')
	second = await failing_orchestrator().search('Linear Algebra')

	assert first.videos == second.videos
	assert first.quiz == second.quiz
	assert first.flashcards == second.flashcards


@pytest.mark.asyncio
async def test_empty_topic_is_rejected_before_any_call(retry_policy):
	events = []
	llm_client = Mock()
	llm_client.generate = AsyncMock()
	orchestrator = build_orchestrator(events, llm_client, retry_policy)

	with pytest.raises(ValidationError):
		await orchestrator.search('   ')

	assert events == []
	llm_client.generate.assert_not_awaited()
