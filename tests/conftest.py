import json
from unittest.mock import AsyncMock, Mock

import pytest

from studyhub.models import (
	Definition,
	Importance,
	KeyPoint,
	NoteContent,
	NoteSection,
	SourceType,
	StudyNote,
	Timestamp,
)
from studyhub.storage import JsonStore


@pytest.fixture
def mock_llm_client():
	client = Mock()
	client.generate = AsyncMock()
	return client


@pytest.fixture
def llm_returning(mock_llm_client):
	def _set(payload):
		mock_llm_client.generate.return_value = payload if isinstance(payload, str) else json.dumps(payload)
		return mock_llm_client

	return _set


@pytest.fixture
def store(tmp_path):
	return JsonStore(tmp_path / 'storage')


@pytest.fixture
def sample_note():
	return StudyNote(
		id='notes-1709632800000',
		title='Notes: Graph Theory',
		source_type=SourceType.VIDEO,
		source_id='abcdefghijk',
		source_url='https://www.youtube.com/watch?v=abcdefghijk',
		created_at='2024-03-05T10:00:00+00:00',
		updated_at='2024-03-05T10:00:00+00:00',
		tags=['video', 'education', 'notes'],
		content=NoteContent(
			summary='Graphs model pairwise relations.',
			key_points=[
				KeyPoint('kp-1', 'Vertices are the objects', Importance.HIGH),
				KeyPoint('kp-2', 'Edges connect vertices', Importance.MEDIUM, timestamp='1:30'),
			],
			definitions=[Definition('Graph', 'A set of vertices joined by edges.')],
			timestamps=[Timestamp('0:00', 'Introduction')],
			sections=[
				NoteSection(
					'sec-1',
					'Basics',
					'Vertices and edges.',
					subsections=[NoteSection('sec-1-1', 'Degree', 'Number of incident edges.')],
				)
			],
		),
	)
