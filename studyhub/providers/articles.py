from studyhub.models import ArticleResult
from studyhub.utils.logger import logger

from .base import DEFAULT_MAX_RESULTS, SearchProvider, clamp_max_results, normalize_topic
from .formatting import estimate_read_time

CUSTOM_SEARCH_URL = 'https://www.googleapis.com/customsearch/v1'


class GoogleArticleProvider(SearchProvider[ArticleResult]):
	name = 'google_custom_search'

	def __init__(self, api_key: str | None, engine_id: str | None, timeout: float = 10.0):
		super().__init__(timeout)
		self.api_key = api_key
		self.engine_id = engine_id

	async def fetch(self, topic: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[ArticleResult]:
		topic = normalize_topic(topic)
		self.require_credential(self.api_key, self.engine_id)

		data = await self.get_json(
			CUSTOM_SEARCH_URL,
			{
				'key': self.api_key,
				'cx': self.engine_id,
				'q': f'{topic} blog article',
				'num': clamp_max_results(max_results),
			},
		)

		# A query with no hits omits 'items' entirely
		items = data.get('items', [])
		if not isinstance(items, list):
			raise self.malformed("'items' is not a list")

		articles = [self._to_article(index, item) for index, item in enumerate(items)]
		logger.info(f'Found {len(articles)} articles for: {topic}')
		return articles

	def _to_article(self, index: int, item: dict) -> ArticleResult:
		if 'link' not in item:
			raise self.malformed(f'search item {index} has no link')

		metatags = (item.get('pagemap', {}).get('metatags') or [{}])[0]
		summary = metatags.get('og:description') or item.get('snippet', '')

		return ArticleResult(
			id=item.get('cacheId') or f'art-{index + 1}',
			title=item.get('title', 'Untitled article'),
			source=metatags.get('og:site_name') or item.get('displayLink', ''),
			author=metatags.get('author') or metatags.get('article:author') or 'Unknown author',
			published_at=(metatags.get('article:published_time') or '')[:10],
			url=item['link'],
			summary=summary,
			read_time_label=estimate_read_time(summary),
		)
