import re

_ISO_DURATION = re.compile(r'^P(?:(?P<days>\d+)D)?(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$')

WORDS_PER_MINUTE = 200


def format_duration(iso_duration: str) -> str:
	"""Convert an ISO-8601 duration such as ``PT1H2M3S`` into ``1:02:03`` (or ``m:ss`` under an hour)."""
	match = _ISO_DURATION.match(iso_duration.strip()) if iso_duration else None
	if not match or iso_duration.strip() in ('P', 'PT'):
		raise ValueError(f'Invalid ISO-8601 duration: {iso_duration!r}')

	parts = {k: int(v) if v else 0 for k, v in match.groupdict().items()}
	hours = parts['days'] * 24 + parts['hours']
	minutes = parts['minutes']
	seconds = parts['seconds']

	if hours:
		return f'{hours}:{minutes:02d}:{seconds:02d}'
	return f'{minutes}:{seconds:02d}'


def format_view_count(count: int) -> str:
	if count >= 1_000_000:
		return f'{count / 1_000_000:.1f}M views'
	if count >= 1_000:
		return f'{count / 1_000:.1f}K views'
	return f'{count} views'


def estimate_read_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
	words = len(text.split())
	minutes = max(1, round(words / words_per_minute))
	return f'{minutes} min read'


def split_sentences(text: str, limit: int = 3) -> list[str]:
	sentences = [s.strip() for s in re.split(r'(?<=[.!?])\s+', ' '.join(text.split())) if s.strip()]
	return sentences[:limit]
