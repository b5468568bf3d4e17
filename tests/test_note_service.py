from unittest.mock import AsyncMock, Mock

import pytest

from payloads import note_payload
from studyhub.core import RetryPolicy
from studyhub.errors import RateLimitError, ValidationError
from studyhub.generation import NoteGenerator
from studyhub.llm import LLMClient
from studyhub.models import SourceType
from studyhub.notes import NoteService


async def no_sleep(delay):
	return None


@pytest.fixture
def note_service(llm_returning):
	client = llm_returning(note_payload())
	return NoteService(NoteGenerator(client), retry_policy=RetryPolicy(sleep=no_sleep))


@pytest.mark.asyncio
@pytest.mark.parametrize(
	'call, message',
	[
		(lambda s: s.analyze_video('', 'Graph Theory'), 'Please provide both video URL and title'),
		(lambda s: s.analyze_video('https://youtu.be/abcdefghijk', '  '), 'Please provide both video URL and title'),
		(lambda s: s.analyze_article('', 'Graph Theory'), 'Please provide both article content and title'),
		(lambda s: s.analyze_pdf('', 'Graph Theory'), 'Please provide both PDF file and title'),
	],
)
async def test_missing_input_is_rejected(note_service, mock_llm_client, call, message):
	with pytest.raises(ValidationError, match=message):
		await call(note_service)

	mock_llm_client.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_analyze_video(note_service):
	note = await note_service.analyze_video(' https://www.youtube.com/watch?v=abcdefghijk ', ' Graph Theory ')

	assert note.title == 'Notes: Graph Theory'
	assert note.source_type == SourceType.VIDEO
	assert note.source_url == 'https://www.youtube.com/watch?v=abcdefghijk'
	assert note.source_id == 'abcdefghijk'
	assert note.content.summary.startswith('Graphs model')


@pytest.mark.asyncio
async def test_analyze_article_sends_content(note_service, mock_llm_client):
	note = await note_service.analyze_article('Graphs are everywhere in computing.', 'Graphs Everywhere')

	assert note.source_type == SourceType.ARTICLE
	assert note.source_url is None
	assert note.tags == ['article', 'research', 'notes']
	assert 'Graphs are everywhere in computing.' in mock_llm_client.generate.await_args.args[0]


@pytest.mark.asyncio
async def test_analyze_pdf_without_credentials_uses_template():
	service = NoteService(NoteGenerator(LLMClient('openrouter', 'test-model', api_key=None)))

	note = await service.analyze_pdf('uploads/thesis.pdf', 'Thesis')

	assert note.title == 'Notes: Thesis'
	assert note.source_type == SourceType.DOCUMENT
	assert note.tags == ['pdf', 'document', 'notes']
	assert 'Thesis' in note.content.summary
	assert len(note.content.sections) == 6
	assert note.content.quotes


@pytest.mark.asyncio
async def test_rate_limited_video_notes_retry_then_fall_back():
	client = Mock()
	client.generate = AsyncMock(side_effect=RateLimitError())
	sleeps = []

	async def record_sleep(delay):
		sleeps.append(delay)

	service = NoteService(NoteGenerator(client), retry_policy=RetryPolicy(sleep=record_sleep))

	note = await service.analyze_video('https://youtu.be/abcdefghijk', 'Graph Theory')

	assert client.generate.await_count == 4
	assert sleeps == [1, 2, 4]
	assert note.content.timestamps
	assert note.content.sections[1].subsections
