from dataclasses import dataclass
from datetime import date
from enum import Enum

from studyhub.errors import ExportError
from studyhub.models import QuickNote, StudyNote

from .formats import note_filename, quick_notes_filename, quick_notes_to_text, to_markdown, to_text
from .pdf_exporter import PdfExporter
from .word_exporter import DOCX_MIME_TYPE, WordExporter


class ExportFormat(Enum):
	TXT = 'txt'
	MD = 'md'
	DOCX = 'docx'
	PDF = 'pdf'


@dataclass(frozen=True)
class ExportedFile:
	content: bytes
	filename: str
	mime_type: str


def export_note(note: StudyNote, export_format: ExportFormat | str) -> ExportedFile:
	try:
		export_format = ExportFormat(export_format)
	except ValueError as e:
		raise ExportError(f'Unsupported format: {export_format}') from e

	if export_format == ExportFormat.TXT:
		content, mime_type = to_text(note).encode('utf-8'), 'text/plain'
	elif export_format == ExportFormat.MD:
		content, mime_type = to_markdown(note).encode('utf-8'), 'text/markdown'
	elif export_format == ExportFormat.DOCX:
		content, mime_type = WordExporter().export(note), DOCX_MIME_TYPE
	else:
		content, mime_type = PdfExporter().export(note), 'application/pdf'

	return ExportedFile(content=content, filename=note_filename(note, export_format.value), mime_type=mime_type)


def export_quick_notes(notes: list[QuickNote], day: date | None = None) -> ExportedFile:
	return ExportedFile(
		content=quick_notes_to_text(notes).encode('utf-8'),
		filename=quick_notes_filename(day or date.today()),
		mime_type='text/plain',
	)


__all__ = [
	'ExportFormat',
	'ExportedFile',
	'export_note',
	'export_quick_notes',
	'to_markdown',
	'to_text',
	'note_filename',
]
