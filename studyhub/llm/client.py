from enum import Enum
from typing import Any

from studyhub.errors import AdapterError, ErrorKind, RateLimitError
from studyhub.utils.logger import logger


class LLMProvider(Enum):
	OPENROUTER = 'openrouter'
	ANTHROPIC = 'anthropic'


class LLMClient:
	def __init__(
		self,
		provider: str,
		model: str,
		api_key: str | None,
		temperature: float = 0.7,
		max_tokens: int = 4000,
		timeout: float = 60.0,
	):
		self.provider = LLMProvider(provider)
		self.model = model
		self.api_key = api_key
		self.temperature = temperature
		self.max_tokens = max_tokens
		self.timeout = timeout

		self.total_input_tokens = 0
		self.total_output_tokens = 0

		self._client = self._initialize_client() if api_key else None
		logger.info(f'LLM Client initialized: {provider}/{model} (credential {"set" if api_key else "missing"})')

	def _initialize_client(self):
		if self.provider == LLMProvider.OPENROUTER:
			from openai import AsyncOpenAI

			return AsyncOpenAI(base_url='https://openrouter.ai/api/v1', api_key=self.api_key, timeout=self.timeout)
		elif self.provider == LLMProvider.ANTHROPIC:
			from anthropic import AsyncAnthropic

			return AsyncAnthropic(api_key=self.api_key, timeout=self.timeout)
		else:
			raise ValueError(f'Unsupported provider: {self.provider}')

	@property
	def is_configured(self) -> bool:
		return self._client is not None

	async def generate(
		self,
		prompt: str,
		system_prompt: str | None = None,
		temperature: float | None = None,
		max_tokens: int | None = None,
	) -> str:
		if self._client is None:
			raise AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no API key configured', self.provider.value)

		temp = temperature if temperature is not None else self.temperature
		max_tok = max_tokens if max_tokens is not None else self.max_tokens
		logger.info(f'Generating with {self.provider.value}...')

		try:
			if self.provider == LLMProvider.OPENROUTER:
				response = await self._generate_openrouter(prompt, system_prompt, temp, max_tok)
			else:
				response = await self._generate_anthropic(prompt, system_prompt, temp, max_tok)
		except AdapterError:
			raise
		except Exception as e:
			raise self._translate_error(e) from e

		logger.info(
			f'Generation complete. Tokens used: input={self.total_input_tokens}, output={self.total_output_tokens}'
		)
		return response

	async def _generate_openrouter(
		self, prompt: str, system_prompt: str | None, temperature: float, max_tokens: int
	) -> str:
		messages = []

		if system_prompt:
			messages.append({'role': 'system', 'content': system_prompt})

		messages.append({'role': 'user', 'content': prompt})

		response = await self._client.chat.completions.create(
			model=self.model, messages=messages, temperature=temperature, max_tokens=max_tokens
		)

		# Track usage
		if getattr(response, 'usage', None):
			self.total_input_tokens += response.usage.prompt_tokens
			self.total_output_tokens += response.usage.completion_tokens

		if not response.choices or response.choices[0].message.content is None:
			raise AdapterError(ErrorKind.MALFORMED_PAYLOAD, 'empty completion', self.provider.value)

		return response.choices[0].message.content

	async def _generate_anthropic(
		self, prompt: str, system_prompt: str | None, temperature: float, max_tokens: int
	) -> str:
		kwargs: dict[str, Any] = {
			'model': self.model,
			'max_tokens': max_tokens,
			'temperature': temperature,
			'messages': [{'role': 'user', 'content': prompt}],
		}

		if system_prompt:
			kwargs['system'] = system_prompt

		response = await self._client.messages.create(**kwargs)

		if getattr(response, 'usage', None):
			self.total_input_tokens += response.usage.input_tokens
			self.total_output_tokens += response.usage.output_tokens

		if not response.content:
			raise AdapterError(ErrorKind.MALFORMED_PAYLOAD, 'empty completion', self.provider.value)

		return response.content[0].text

	def _translate_error(self, error: Exception) -> AdapterError:
		status_code = getattr(error, 'status_code', None)
		if status_code == 429:
			return RateLimitError(str(error), self.provider.value)
		if status_code is not None:
			return AdapterError(ErrorKind.HTTP_STATUS, f'HTTP {status_code}: {error}', self.provider.value)
		return AdapterError(ErrorKind.NETWORK, str(error), self.provider.value)

	def get_usage_stats(self) -> dict[str, int]:
		"""Get token usage statistics."""
		return {
			'input_tokens': self.total_input_tokens,
			'output_tokens': self.total_output_tokens,
			'total_tokens': self.total_input_tokens + self.total_output_tokens,
		}


def create_llm_client_from_config(config: dict[str, Any]) -> LLMClient:
	return LLMClient(
		provider=config['provider'],
		model=config['model'],
		api_key=config.get('api_key'),
		temperature=config.get('temperature', 0.7),
		max_tokens=config.get('max_tokens', 4000),
		timeout=config.get('timeout', 60.0),
	)
