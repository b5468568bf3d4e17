import re
from datetime import date, datetime

from studyhub.models import KeyPoint, NoteSection, QuickNote, Quote, StudyNote


def format_generated_date(created_at: str) -> str:
	try:
		return datetime.fromisoformat(created_at).strftime('%B %d, %Y')
	except ValueError:
		return created_at


def note_filename(note: StudyNote, extension: str) -> str:
	stem = re.sub(r'[^a-z0-9]+', '_', note.title.lower()).strip('_') or 'notes'
	return f'{stem}.{extension}'


def _suffix(timestamp: str | None, page_reference: str | None) -> str:
	parts = []
	if timestamp:
		parts.append(f'({timestamp})')
	if page_reference:
		parts.append(f'[{page_reference}]')
	return (' ' + ' '.join(parts)) if parts else ''


def _key_point_line(index: int, point: KeyPoint, bold: bool) -> str:
	text = f'**{point.text}**' if bold else point.text
	return f'{index}. {text}{_suffix(point.timestamp, point.page_reference)}'


def _quote_line(quote: Quote) -> str:
	return f'"{quote.text}" - {quote.source}{_suffix(None, quote.page_reference)}'


def _markdown_section(section: NoteSection, level: int) -> str:
	lines = [f'{"#" * level} {section.title}', section.content]
	text = '\n'.join(lines)
	if section.subsections:
		text += '\n\n' + '\n\n'.join(_markdown_section(sub, level + 1) for sub in section.subsections)
	return text


def _text_section(section: NoteSection, depth: int) -> str:
	title = section.title.upper() if depth == 0 else section.title
	text = f'{title}\n{section.content}'
	if section.subsections:
		text += '\n' + '\n'.join(_text_section(sub, depth + 1) for sub in section.subsections)
	return text


def to_markdown(note: StudyNote) -> str:
	content = note.content
	blocks = [
		f'# {note.title}',
		f'*Generated on: {format_generated_date(note.created_at)}*',
		f'## Summary\n{content.summary}',
		'## Key Points\n' + '\n'.join(_key_point_line(i, p, bold=True) for i, p in enumerate(content.key_points, 1)),
		'## Definitions\n' + '\n\n'.join(f'**{d.term}**: {d.definition}' for d in content.definitions),
	]

	if content.timestamps:
		blocks.append('## Timestamps\n' + '\n'.join(f'- {ts.time}: {ts.description}' for ts in content.timestamps))

	if content.quotes:
		blocks.append('## Key Quotes\n' + '\n\n'.join(f'> {_quote_line(q)}' for q in content.quotes))

	blocks.append('## Detailed Notes\n' + '\n\n'.join(_markdown_section(s, 3) for s in content.sections))

	return '\n\n'.join(blocks) + '\n'


def to_text(note: StudyNote) -> str:
	content = note.content
	blocks = [
		f'{note.title}\nGenerated on: {format_generated_date(note.created_at)}',
		f'SUMMARY\n{content.summary}',
		'KEY POINTS\n' + '\n'.join(_key_point_line(i, p, bold=False) for i, p in enumerate(content.key_points, 1)),
		'DEFINITIONS\n' + '\n'.join(f'{d.term}: {d.definition}' for d in content.definitions),
	]

	if content.timestamps:
		blocks.append('TIMESTAMPS\n' + '\n'.join(f'{ts.time}: {ts.description}' for ts in content.timestamps))

	if content.quotes:
		blocks.append('KEY QUOTES\n' + '\n'.join(_quote_line(q) for q in content.quotes))

	blocks.append('DETAILED NOTES\n' + '\n\n'.join(_text_section(s, 0) for s in content.sections))

	return '\n\n'.join(blocks) + '\n'


def format_note_time(timestamp: str) -> str:
	"""``2024-03-05T14:07:09+00:00`` -> ``3/5/2024, 2:07:09 PM``."""
	try:
		moment = datetime.fromisoformat(timestamp)
	except ValueError:
		return timestamp
	hour = moment.hour % 12 or 12
	return f'{moment.month}/{moment.day}/{moment.year}, {hour}:{moment:%M:%S} {moment:%p}'


def quick_notes_to_text(notes: list[QuickNote]) -> str:
	entries = []
	for note in notes:
		header = f'[{format_note_time(note.timestamp)}]'
		if note.video_time:
			header += f' [Video: {note.video_time}]'
		if note.flashcard_id:
			header += f' [Flashcard: {note.flashcard_id}]'
		entries.append(f'{header}\n{note.content}\n\n')
	return ''.join(entries)


def quick_notes_filename(day: date) -> str:
	return f'study-notes-{day.isoformat()}.txt'
