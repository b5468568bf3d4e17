import asyncio

import arxiv
import requests

from studyhub.errors import AdapterError, ErrorKind, RateLimitError
from studyhub.models import PaperResult
from studyhub.utils.logger import logger

from .base import DEFAULT_MAX_RESULTS, SearchProvider, clamp_max_results, normalize_topic
from .formatting import split_sentences

KEY_FINDINGS_LIMIT = 3


class ArxivPaperProvider(SearchProvider[PaperResult]):
	name = 'arxiv'

	def __init__(self, timeout: float = 10.0, client: arxiv.Client | None = None):
		super().__init__(timeout)
		self.client = client or arxiv.Client(num_retries=1)

	async def fetch(self, topic: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[PaperResult]:
		topic = normalize_topic(topic)
		search = arxiv.Search(
			query=topic, max_results=clamp_max_results(max_results), sort_by=arxiv.SortCriterion.Relevance
		)

		try:
			papers = await asyncio.wait_for(asyncio.to_thread(self._search, search), timeout=self.timeout)
		except TimeoutError as e:
			raise AdapterError(ErrorKind.NETWORK, f'timed out after {self.timeout}s', self.name) from e
		except arxiv.HTTPError as e:
			if e.status == 429:
				raise RateLimitError(str(e), self.name) from e
			raise AdapterError(ErrorKind.HTTP_STATUS, str(e), self.name) from e
		except (arxiv.ArxivError, requests.RequestException) as e:
			raise AdapterError(ErrorKind.NETWORK, str(e), self.name) from e

		logger.info(f'Found {len(papers)} papers on arXiv')
		return papers

	def _search(self, search: arxiv.Search) -> list[PaperResult]:
		return [self._to_paper(result) for result in self.client.results(search)]

	def _to_paper(self, result: arxiv.Result) -> PaperResult:
		doi = result.doi or ''
		return PaperResult(
			id=result.get_short_id(),
			title=result.title,
			authors=[author.name for author in result.authors],
			journal=result.journal_ref or 'arXiv',
			published_at=result.published.date().isoformat() if result.published else '',
			doi=doi,
			url=f'https://doi.org/{doi}' if doi else result.entry_id,
			abstract=result.summary,
			key_findings=split_sentences(result.summary, KEY_FINDINGS_LIMIT),
		)


class SemanticScholarPaperProvider(SearchProvider[PaperResult]):
	name = 'semantic_scholar'

	def __init__(self, api_key: str | None = None, timeout: float = 10.0):
		super().__init__(timeout)
		self.api_key = api_key
		self.base_url = 'https://api.semanticscholar.org/graph/v1'

	async def fetch(self, topic: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[PaperResult]:
		topic = normalize_topic(topic)
		headers = {}
		if self.api_key:
			headers['x-api-key'] = self.api_key

		data = await self.get_json(
			f'{self.base_url}/paper/search',
			{
				'query': topic,
				'limit': clamp_max_results(max_results),
				'fields': 'title,authors,venue,publicationDate,year,abstract,externalIds,url,tldr',
			},
			headers,
		)

		papers = data.get('data', [])
		if not isinstance(papers, list):
			raise self.malformed("'data' is not a list")

		results = [self._to_paper(paper) for paper in papers if paper.get('paperId')]
		logger.info(f'Found {len(results)} papers on Semantic Scholar')
		return results

	def _to_paper(self, paper: dict) -> PaperResult:
		abstract = paper.get('abstract') or ''
		tldr = (paper.get('tldr') or {}).get('text')
		doi = (paper.get('externalIds') or {}).get('DOI') or ''
		published = paper.get('publicationDate') or (str(paper['year']) if paper.get('year') else '')

		return PaperResult(
			id=paper['paperId'],
			title=paper.get('title', 'Untitled paper'),
			authors=[a['name'] for a in paper.get('authors', []) if a.get('name')],
			journal=paper.get('venue') or 'Semantic Scholar',
			published_at=published,
			doi=doi,
			url=paper.get('url') or (f'https://doi.org/{doi}' if doi else ''),
			abstract=abstract,
			key_findings=[tldr] if tldr else split_sentences(abstract, KEY_FINDINGS_LIMIT),
		)
