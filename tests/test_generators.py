import json

import pytest

from payloads import flashcard_payload, note_payload, quiz_payload
from studyhub.errors import AdapterError, ErrorKind
from studyhub.generation import FlashcardGenerator, NoteGenerator, QuizGenerator, build_note, derive_source_id
from studyhub.models import Difficulty, Importance, NoteContent, SourceType


@pytest.mark.asyncio
async def test_quiz_generation(llm_returning):
	client = llm_returning(quiz_payload(8))
	generator = QuizGenerator(client, question_count=8)

	quiz = await generator.generate('Photosynthesis', 'beginner')

	assert quiz.id.startswith('quiz-')
	assert quiz.title == 'Photosynthesis Quiz'
	assert len(quiz.questions) == 8
	assert [q.id for q in quiz.questions][:3] == ['q1', 'q2', 'q3']
	assert quiz.questions[1].correct_answer_index == 1
	assert quiz.completed is False
	assert quiz.score is None

	prompt = client.generate.await_args.args[0]
	assert 'Photosynthesis' in prompt
	assert 'beginner' in prompt


def test_quiz_parses_fenced_json(mock_llm_client):
	generator = QuizGenerator(mock_llm_client, question_count=2)
	response = '```json\n' + json.dumps(quiz_payload(2)) + '\n```'

	quiz = generator.parse_quiz(response, 'Photosynthesis')

	assert len(quiz.questions) == 2


def test_quiz_parses_json_wrapped_in_prose(mock_llm_client):
	generator = QuizGenerator(mock_llm_client, question_count=2)
	response = 'Here is your quiz:\n' + json.dumps(quiz_payload(2)) + '\nGood luck!'

	assert len(generator.parse_quiz(response, 'Photosynthesis').questions) == 2


def test_quiz_defaults_title_to_topic(mock_llm_client):
	generator = QuizGenerator(mock_llm_client, question_count=2)
	payload = quiz_payload(2)
	del payload['title']

	quiz = generator.parse_quiz(json.dumps(payload), 'Photosynthesis')

	assert quiz.title == 'Photosynthesis Knowledge Check'


def _broken_quiz(mutate):
	payload = quiz_payload(2)
	mutate(payload['questions'][0])
	return json.dumps(payload)


@pytest.mark.parametrize(
	'response',
	[
		json.dumps(quiz_payload(3)),
		_broken_quiz(lambda q: q.update(options=['A', 'B', 'C'])),
		_broken_quiz(lambda q: q.update(options=['A', 'B', '', 'D'])),
		_broken_quiz(lambda q: q.update(correctAnswer=4)),
		_broken_quiz(lambda q: q.update(correctAnswer=True)),
		_broken_quiz(lambda q: q.update(correctAnswer='2')),
		_broken_quiz(lambda q: q.pop('question')),
	],
)
def test_quiz_rejects_invalid_shapes(mock_llm_client, response):
	generator = QuizGenerator(mock_llm_client, question_count=2)

	with pytest.raises(AdapterError) as exc_info:
		generator.parse_quiz(response, 'Photosynthesis')

	assert exc_info.value.kind == ErrorKind.VALIDATION


def test_non_json_response_is_malformed(mock_llm_client):
	generator = QuizGenerator(mock_llm_client, question_count=2)

	with pytest.raises(AdapterError) as exc_info:
		generator.parse_quiz('Sorry, I cannot help with that.', 'Photosynthesis')

	assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD


@pytest.mark.asyncio
async def test_flashcard_generation(llm_returning):
	generator = FlashcardGenerator(llm_returning(flashcard_payload(8)), card_count=8)

	cards = await generator.generate('Photosynthesis')

	assert len(cards) == 8
	assert cards[0].id == 'fc-1'
	assert cards[0].front == 'Term 1'
	assert cards[2].difficulty == Difficulty.HARD


def test_flashcards_accept_bare_list(mock_llm_client):
	generator = FlashcardGenerator(mock_llm_client, card_count=2)

	cards = generator.parse_flashcards(json.dumps(flashcard_payload(2)['flashcards']))

	assert [c.back for c in cards] == ['Meaning 1', 'Meaning 2']


@pytest.mark.parametrize(
	'cards',
	[
		flashcard_payload(3)['flashcards'],
		[{'front': 'Term', 'back': '', 'difficulty': 'easy'}, {'front': 'T', 'back': 'B', 'difficulty': 'easy'}],
		[{'front': 'Term', 'back': 'Meaning', 'difficulty': 'trivial'}, {'front': 'T', 'back': 'B', 'difficulty': 'easy'}],
	],
)
def test_flashcards_reject_invalid_shapes(mock_llm_client, cards):
	generator = FlashcardGenerator(mock_llm_client, card_count=2)

	with pytest.raises(AdapterError) as exc_info:
		generator.parse_flashcards(json.dumps({'flashcards': cards}))

	assert exc_info.value.kind == ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_note_generation(llm_returning):
	client = llm_returning(note_payload())
	generator = NoteGenerator(client)

	note = await generator.generate(SourceType.VIDEO, 'Graph Theory', 'https://youtu.be/abcdefghijk')

	assert note.id.startswith('notes-')
	assert note.title == 'Notes: Graph Theory'
	assert note.source_id == 'abcdefghijk'
	assert note.tags == ['video', 'education', 'notes']
	assert note.created_at == note.updated_at

	content = note.content
	assert content.key_points[0].importance == Importance.HIGH
	assert content.key_points[0].timestamp == '0:45'
	assert content.definitions[0].term == 'Vertex'
	assert content.sections[0].subsections[0].title == 'Degree'
	assert content.sections[0].subsections[0].id == 'sec-1-1'
	assert content.timestamps[0].description == 'Introduction'
	assert content.quotes is None


def test_note_sections_nest_one_level_only(mock_llm_client):
	payload = note_payload()
	payload['sections'][0]['subsections'][0]['subsections'] = [{'title': 'Too deep', 'content': '...'}]

	with pytest.raises(AdapterError) as exc_info:
		NoteGenerator(mock_llm_client).parse_note_content(json.dumps(payload))

	assert exc_info.value.kind == ErrorKind.VALIDATION


def test_note_requires_summary(mock_llm_client):
	payload = note_payload()
	payload['summary'] = '  '

	with pytest.raises(AdapterError):
		NoteGenerator(mock_llm_client).parse_note_content(json.dumps(payload))


def test_derive_source_id():
	assert derive_source_id(SourceType.VIDEO, 'Any', 'https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=5') == 'dQw4w9WgXcQ'

	article_id = derive_source_id(SourceType.ARTICLE, 'Title', 'https://example.com/a')
	assert article_id.startswith('article-')
	assert article_id == derive_source_id(SourceType.ARTICLE, 'Other title', 'https://example.com/a')


def test_build_note_uses_explicit_tags():
	content = NoteContent(summary='s', key_points=[], definitions=[], sections=[])

	note = build_note(SourceType.DOCUMENT, 'Thesis', 'thesis.pdf', content, tags=['custom'])

	assert note.tags == ['custom']
	assert note.source_url == 'thesis.pdf'
