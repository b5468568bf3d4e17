import asyncio
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import requests

from studyhub.errors import AdapterError, ErrorKind, RateLimitError, ValidationError

T = TypeVar('T')

DEFAULT_MAX_RESULTS = 5
MAX_RESULTS_CAP = 10


def normalize_topic(topic: str) -> str:
	topic = (topic or '').strip()
	if not topic:
		raise ValidationError('Search topic cannot be empty')
	return topic


def clamp_max_results(max_results: int) -> int:
	return max(1, min(max_results, MAX_RESULTS_CAP))


class SearchProvider(ABC, Generic[T]):
	"""One outbound capability. ``fetch`` returns canonical records or raises AdapterError."""

	name: str = 'provider'

	def __init__(self, timeout: float = 10.0):
		self.timeout = timeout

	@abstractmethod
	async def fetch(self, topic: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[T]:
		raise NotImplementedError

	def require_credential(self, *values: str | None) -> None:
		if not all(values):
			raise AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no API key configured', self.name)

	async def get_json(self, url: str, params: dict[str, Any], headers: dict[str, str] | None = None) -> dict:
		return await asyncio.to_thread(self._get_json, url, params, headers or {})

	def _get_json(self, url: str, params: dict[str, Any], headers: dict[str, str]) -> dict:
		try:
			response = requests.get(url, params=params, headers=headers, timeout=self.timeout)
		except requests.RequestException as e:
			raise AdapterError(ErrorKind.NETWORK, str(e), self.name) from e

		if response.status_code == 429:
			raise RateLimitError(f'HTTP 429 from {url}', self.name)

		try:
			response.raise_for_status()
		except requests.HTTPError as e:
			raise AdapterError(ErrorKind.HTTP_STATUS, f'HTTP {response.status_code}: {e}', self.name) from e

		try:
			data = response.json()
		except ValueError as e:
			raise AdapterError(ErrorKind.MALFORMED_PAYLOAD, f'invalid JSON body: {e}', self.name) from e

		if not isinstance(data, dict):
			raise AdapterError(ErrorKind.MALFORMED_PAYLOAD, 'expected a JSON object', self.name)
		return data

	def malformed(self, message: str) -> AdapterError:
		return AdapterError(ErrorKind.MALFORMED_PAYLOAD, message, self.name)
