from studyhub.core.fallbacks import fallback_note_content
from studyhub.core.policies import RetryPolicy, with_fallback
from studyhub.errors import ValidationError
from studyhub.generation import NoteGenerator, build_note
from studyhub.models import SourceType, StudyNote
from studyhub.utils.logger import logger


def _blank(value: str | None) -> bool:
	return not value or not value.strip()


class NoteService:
	def __init__(self, note_generator: NoteGenerator, retry_policy: RetryPolicy | None = None):
		self.note_generator = note_generator
		self.retry_policy = retry_policy or RetryPolicy()

	async def analyze_video(self, video_url: str, video_title: str) -> StudyNote:
		if _blank(video_url) or _blank(video_title):
			raise ValidationError('Please provide both video URL and title')
		return await self._generate(SourceType.VIDEO, video_title.strip(), video_url.strip(), None)

	async def analyze_article(self, content: str, title: str, source_url: str | None = None) -> StudyNote:
		if _blank(content) or _blank(title):
			raise ValidationError('Please provide both article content and title')
		return await self._generate(SourceType.ARTICLE, title.strip(), source_url or None, content)

	async def analyze_pdf(self, pdf_location: str, title: str, text: str | None = None) -> StudyNote:
		"""Generate notes for a PDF. ``text`` is the already-extracted document text, if any."""
		if _blank(pdf_location) or _blank(title):
			raise ValidationError('Please provide both PDF file and title')
		return await self._generate(SourceType.DOCUMENT, title.strip(), pdf_location.strip(), text)

	async def _generate(
		self, source_type: SourceType, title: str, source_url: str | None, content: str | None
	) -> StudyNote:
		logger.info(f'Generating {source_type.value} notes for: {title}')
		name = f'{source_type.value} note generation'

		return await with_fallback(
			lambda: self.retry_policy.run(
				lambda: self.note_generator.generate(source_type, title, source_url, content), name=name
			),
			lambda: build_note(source_type, title, source_url, fallback_note_content(source_type, title)),
			name=name,
		)
