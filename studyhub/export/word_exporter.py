from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from studyhub.models import NoteSection, StudyNote
from studyhub.utils.logger import logger

from .formats import format_generated_date

DOCX_MIME_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'


class WordExporter:
	def export(self, note: StudyNote) -> bytes:
		logger.info(f'Exporting note to Word: {note.title}')

		doc = Document()
		self._setup_document_style(doc)
		self._add_title(doc, note)

		content = note.content
		doc.add_heading('Summary', 1)
		doc.add_paragraph(content.summary)

		doc.add_heading('Key Points', 1)
		for point in content.key_points:
			para = doc.add_paragraph(style='List Number')
			para.add_run(point.text).bold = True
			if point.timestamp:
				para.add_run(f' ({point.timestamp})').italic = True
			if point.page_reference:
				para.add_run(f' [{point.page_reference}]').italic = True

		doc.add_heading('Definitions', 1)
		for definition in content.definitions:
			para = doc.add_paragraph()
			para.add_run(definition.term).bold = True
			para.add_run(f': {definition.definition}')

		if content.timestamps:
			doc.add_heading('Timestamps', 1)
			for ts in content.timestamps:
				doc.add_paragraph(f'{ts.time}: {ts.description}', style='List Bullet')

		if content.quotes:
			doc.add_heading('Key Quotes', 1)
			for quote in content.quotes:
				reference = f' [{quote.page_reference}]' if quote.page_reference else ''
				doc.add_paragraph(f'"{quote.text}" - {quote.source}{reference}', style='Quote')

		doc.add_heading('Detailed Notes', 1)
		for section in content.sections:
			self._add_section(doc, section, level=2)

		buffer = BytesIO()
		doc.save(buffer)
		return buffer.getvalue()

	def _setup_document_style(self, doc: Document):
		style = doc.styles['Normal']
		font = style.font
		font.name = 'Calibri'
		font.size = Pt(11)

		paragraph_format = style.paragraph_format
		paragraph_format.line_spacing = 1.15
		paragraph_format.space_after = Pt(6)

		for section in doc.sections:
			section.top_margin = Inches(1)
			section.bottom_margin = Inches(1)
			section.left_margin = Inches(1)
			section.right_margin = Inches(1)

	def _add_title(self, doc: Document, note: StudyNote):
		title_para = doc.add_heading(note.title, 0)
		title_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

		date_para = doc.add_paragraph()
		date_para.add_run(f'Generated on: {format_generated_date(note.created_at)}').italic = True
		date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

	def _add_section(self, doc: Document, section: NoteSection, level: int):
		doc.add_heading(section.title, min(level, 9))
		if section.content:
			doc.add_paragraph(section.content)
		for subsection in section.subsections:
			self._add_section(doc, subsection, level + 1)
