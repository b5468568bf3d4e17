import json
import re
import time
from typing import Any

from studyhub.errors import AdapterError, ErrorKind
from studyhub.llm.client import LLMClient

_JSON_BLOCK = re.compile(r'(\{.*\}|\[.*\])', re.DOTALL)


def timestamp_id(prefix: str) -> str:
	return f'{prefix}-{int(time.time() * 1000)}'


class BaseGenerator:
	"""Shared prompt/parse plumbing for the LLM-backed generators.

	Model output is untrusted: anything that is not the expected JSON shape raises
	``AdapterError`` so the caller's fallback policy takes over.
	"""

	name = 'generator'

	def __init__(self, llm_client: LLMClient):
		self.llm_client = llm_client

	def parse_json_response(self, response: str) -> Any:
		response = response.strip()
		if response.startswith('```json'):
			response = response[7:]
		if response.startswith('```'):
			response = response[3:]
		if response.endswith('```'):
			response = response[:-3]
		response = response.strip()

		try:
			return json.loads(response)
		except json.JSONDecodeError:
			pass

		match = _JSON_BLOCK.search(response)
		if match:
			try:
				return json.loads(match.group(1))
			except json.JSONDecodeError:
				pass

		raise AdapterError(ErrorKind.MALFORMED_PAYLOAD, f'model did not return JSON: {response[:200]!r}', self.name)

	def invalid(self, message: str) -> AdapterError:
		return AdapterError(ErrorKind.VALIDATION, message, self.name)

	def require_text(self, data: dict, *keys: str, where: str) -> str:
		for key in keys:
			value = data.get(key)
			if isinstance(value, str) and value.strip():
				return value.strip()
		raise self.invalid(f'{where}: missing non-empty {"/".join(keys)}')

	def optional_text(self, data: dict, *keys: str) -> str | None:
		for key in keys:
			value = data.get(key)
			if isinstance(value, str) and value.strip():
				return value.strip()
		return None

	def require_list(self, data: Any, key: str, where: str) -> list:
		if isinstance(data, list):
			return data
		if isinstance(data, dict) and isinstance(data.get(key), list):
			return data[key]
		raise self.invalid(f'{where}: expected a list under {key!r}')
