from studyhub.models import VideoResult
from studyhub.utils.logger import logger

from .base import DEFAULT_MAX_RESULTS, SearchProvider, clamp_max_results, normalize_topic
from .formatting import format_duration, format_view_count

YOUTUBE_API_URL = 'https://www.googleapis.com/youtube/v3'


class YouTubeProvider(SearchProvider[VideoResult]):
	name = 'youtube'

	def __init__(self, api_key: str | None, timeout: float = 10.0):
		super().__init__(timeout)
		self.api_key = api_key

	async def fetch(self, topic: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[VideoResult]:
		topic = normalize_topic(topic)
		self.require_credential(self.api_key)

		search = await self.get_json(
			f'{YOUTUBE_API_URL}/search',
			{
				'part': 'snippet',
				'q': topic,
				'type': 'video',
				'maxResults': clamp_max_results(max_results),
				'key': self.api_key,
			},
		)

		items = search.get('items')
		if not isinstance(items, list):
			raise self.malformed("search response missing 'items'")

		items = [item for item in items if (item.get('id') or {}).get('videoId')]
		video_ids = [item['id']['videoId'] for item in items]
		if not video_ids:
			logger.info(f'YouTube returned no videos for: {topic}')
			return []

		# Durations and view counts are only available from the videos endpoint
		details = await self.get_json(
			f'{YOUTUBE_API_URL}/videos',
			{'part': 'contentDetails,statistics', 'id': ','.join(video_ids), 'key': self.api_key},
		)
		details_by_id = {d.get('id'): d for d in details.get('items', [])}

		videos = [self._to_video(item, details_by_id.get(item['id']['videoId'], {})) for item in items]
		logger.info(f'Found {len(videos)} videos on YouTube')
		return videos

	def _to_video(self, item: dict, details: dict) -> VideoResult:
		video_id = item['id']['videoId']
		snippet = item.get('snippet') or {}

		try:
			duration = format_duration(details.get('contentDetails', {}).get('duration', 'PT0S'))
			view_count = int(details.get('statistics', {}).get('viewCount', 0))
		except (TypeError, ValueError) as e:
			raise self.malformed(f'bad details for video {video_id}: {e}') from e

		thumbnails = snippet.get('thumbnails') or {}
		thumbnail = thumbnails.get('high') or thumbnails.get('medium') or thumbnails.get('default') or {}

		return VideoResult(
			id=video_id,
			title=snippet.get('title', 'Untitled video'),
			channel_name=snippet.get('channelTitle', 'Unknown channel'),
			duration=duration,
			view_count_label=format_view_count(view_count),
			published_at=(snippet.get('publishedAt') or '')[:10],
			thumbnail_url=thumbnail.get('url', f'https://img.youtube.com/vi/{video_id}/maxresdefault.jpg'),
			watch_url=f'https://www.youtube.com/watch?v={video_id}',
			description=snippet.get('description', ''),
		)
