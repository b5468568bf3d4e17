from .articles import GoogleArticleProvider
from .base import SearchProvider, clamp_max_results, normalize_topic
from .formatting import estimate_read_time, format_duration, format_view_count
from .papers import ArxivPaperProvider, SemanticScholarPaperProvider
from .youtube import YouTubeProvider

__all__ = [
	'SearchProvider',
	'YouTubeProvider',
	'GoogleArticleProvider',
	'ArxivPaperProvider',
	'SemanticScholarPaperProvider',
	'normalize_topic',
	'clamp_max_results',
	'format_duration',
	'format_view_count',
	'estimate_read_time',
]
