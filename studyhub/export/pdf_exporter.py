from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from studyhub.models import StudyNote
from studyhub.utils.logger import logger

from .formats import to_text

HEADINGS = {'SUMMARY', 'KEY POINTS', 'DEFINITIONS', 'TIMESTAMPS', 'KEY QUOTES', 'DETAILED NOTES'}


class PdfExporter:
	def __init__(self, font: str = 'Helvetica', font_size: int = 10, margin: int = 40):
		self.font = font
		self.font_size = font_size
		self.margin = margin

	def export(self, note: StudyNote) -> bytes:
		logger.info(f'Exporting note to PDF: {note.title}')

		buffer = BytesIO()
		c = canvas.Canvas(buffer, pagesize=A4)
		c.setTitle(note.title)
		width, height = A4
		line_height = self.font_size + 4
		y = height - 50

		for index, raw_line in enumerate(to_text(note).splitlines()):
			line = raw_line.strip() or ' '
			is_heading = index == 0 or line in HEADINGS
			font = f'{self.font}-Bold' if is_heading else self.font
			size = self.font_size + 4 if index == 0 else self.font_size

			for wrapped in simpleSplit(line, font, size, width - (self.margin * 2)):
				c.setFont(font, size)
				c.drawString(self.margin, y, wrapped)
				y -= line_height
				if y < self.margin:
					c.showPage()
					y = height - 50

		c.save()
		return buffer.getvalue()
