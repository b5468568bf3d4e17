import hashlib
import re
from datetime import UTC, datetime

from studyhub.models import (
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
from studyhub.utils.logger import logger

from .base import BaseGenerator, timestamp_id
from .prompt_builder import build_note_prompt

DEFAULT_TAGS = {
	SourceType.VIDEO: ['video', 'education', 'notes'],
	SourceType.ARTICLE: ['article', 'research', 'notes'],
	SourceType.DOCUMENT: ['pdf', 'document', 'notes'],
}

_YOUTUBE_ID = re.compile(r'(?:v=|youtu\.be/|embed/|shorts/)([\w-]{11})')


def derive_source_id(source_type: SourceType, title: str, source_url: str | None) -> str:
	if source_type == SourceType.VIDEO and source_url:
		match = _YOUTUBE_ID.search(source_url)
		if match:
			return match.group(1)

	digest = hashlib.sha1((source_url or title).encode('utf-8')).hexdigest()[:8]
	return f'{source_type.value}-{digest}'


def build_note(
	source_type: SourceType, title: str, source_url: str | None, content: NoteContent, tags: list[str] | None = None
) -> StudyNote:
	now = datetime.now(UTC).isoformat()
	return StudyNote(
		id=timestamp_id('notes'),
		title=f'Notes: {title}',
		source_type=source_type,
		source_id=derive_source_id(source_type, title, source_url),
		source_url=source_url,
		created_at=now,
		updated_at=now,
		tags=tags or list(DEFAULT_TAGS[source_type]),
		content=content,
	)


class NoteGenerator(BaseGenerator):
	name = 'note_generator'

	async def generate(
		self, source_type: SourceType, title: str, source_url: str | None = None, content: str | None = None
	) -> StudyNote:
		prompt = build_note_prompt(source_type, title, source_url, content)
		response = await self.llm_client.generate(
			prompt, system_prompt='You are an expert note-taking assistant.', max_tokens=4000
		)

		note_content = self.parse_note_content(response)
		logger.info(
			f'Generated notes for "{title}": {len(note_content.key_points)} key points, '
			f'{len(note_content.sections)} sections'
		)
		return build_note(source_type, title, source_url, note_content)

	def parse_note_content(self, response: str) -> NoteContent:
		data = self.parse_json_response(response)
		if not isinstance(data, dict):
			raise self.invalid('notes: expected a JSON object')

		key_points = [self._parse_key_point(i, raw) for i, raw in enumerate(self.require_list(data, 'keyPoints', 'notes'))]
		definitions = [
			Definition(
				term=self.require_text(raw, 'term', where=f'definition {i + 1}'),
				definition=self.require_text(raw, 'definition', where=f'definition {i + 1}'),
			)
			for i, raw in enumerate(self._objects(data.get('definitions', []), 'definitions'))
		]
		sections = [
			self._parse_section(f'sec-{i + 1}', raw, depth=1)
			for i, raw in enumerate(self._objects(self.require_list(data, 'sections', 'notes'), 'sections'))
		]

		timestamps = None
		if data.get('timestamps'):
			timestamps = [
				Timestamp(
					time=self.require_text(raw, 'time', where=f'timestamp {i + 1}'),
					description=self.require_text(raw, 'description', where=f'timestamp {i + 1}'),
				)
				for i, raw in enumerate(self._objects(data['timestamps'], 'timestamps'))
			]

		quotes = None
		if data.get('quotes'):
			quotes = [
				Quote(
					id=f'q-{i + 1}',
					text=self.require_text(raw, 'text', where=f'quote {i + 1}'),
					source=self.optional_text(raw, 'source') or 'Unknown',
					timestamp=self.optional_text(raw, 'timestamp'),
					page_reference=self.optional_text(raw, 'pageReference', 'page_reference'),
				)
				for i, raw in enumerate(self._objects(data['quotes'], 'quotes'))
			]

		return NoteContent(
			summary=self.require_text(data, 'summary', where='notes'),
			key_points=key_points,
			definitions=definitions,
			sections=sections,
			timestamps=timestamps,
			quotes=quotes,
		)

	def _objects(self, items, where: str) -> list[dict]:
		if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
			raise self.invalid(f'{where}: expected a list of objects')
		return items

	def _parse_key_point(self, index: int, raw) -> KeyPoint:
		where = f'key point {index + 1}'
		if not isinstance(raw, dict):
			raise self.invalid(f'{where}: expected an object')

		try:
			importance = Importance(str(raw.get('importance', 'medium')).strip().lower())
		except ValueError as e:
			raise self.invalid(f'{where}: invalid importance {raw.get("importance")!r}') from e

		return KeyPoint(
			id=f'kp-{index + 1}',
			text=self.require_text(raw, 'text', where=where),
			importance=importance,
			timestamp=self.optional_text(raw, 'timestamp'),
			page_reference=self.optional_text(raw, 'pageReference', 'page_reference'),
		)

	def _parse_section(self, section_id: str, raw: dict, depth: int) -> NoteSection:
		where = f'section {section_id}'
		raw_subsections = raw.get('subsections') or []

		if raw_subsections and depth >= 2:
			raise self.invalid(f'{where}: subsections may only be nested one level deep')

		subsections = [
			self._parse_section(f'{section_id}-{i + 1}', sub, depth + 1)
			for i, sub in enumerate(self._objects(raw_subsections, f'{where} subsections'))
		]

		return NoteSection(
			id=section_id,
			title=self.require_text(raw, 'title', where=where),
			content=self.optional_text(raw, 'content') or '',
			timestamp=self.optional_text(raw, 'timestamp'),
			subsections=subsections,
		)
