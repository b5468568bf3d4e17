import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_exponential

from studyhub.errors import AdapterError, RateLimitError
from studyhub.utils.logger import logger

T = TypeVar('T')


async def with_fallback(primary: Callable[[], Awaitable[T]], fallback: Callable[[], T], name: str = 'operation') -> T:
	"""Run ``primary`` and substitute ``fallback()`` on any failure.

	Errors raised by ``fallback`` itself are not caught.
	"""
	try:
		return await primary()
	except AdapterError as e:
		logger.warning(f'{name} failed ({e.kind.value}): {e.message}. Using fallback content')
	except Exception as e:
		logger.warning(f'{name} failed unexpectedly: {e!r}. Using fallback content')

	return fallback()


class RetryPolicy:
	"""Exponential backoff on rate limiting: waits base_delay * 2**n seconds after attempt n."""

	def __init__(
		self,
		max_attempts: int = 4,
		base_delay: float = 1.0,
		sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
	):
		if max_attempts < 1:
			raise ValueError('max_attempts must be at least 1')
		self.max_attempts = max_attempts
		self.base_delay = base_delay
		self.sleep = sleep

	async def run(self, operation: Callable[[], Awaitable[T]], name: str = 'operation') -> T:
		def log_retry(retry_state: RetryCallState):
			delay = retry_state.next_action.sleep if retry_state.next_action else 0
			logger.warning(
				f'{name} rate limited, retry {retry_state.attempt_number}/{self.max_attempts - 1} in {delay:.1f}s'
			)

		retrying = AsyncRetrying(
			stop=stop_after_attempt(self.max_attempts),
			wait=wait_exponential(multiplier=self.base_delay, exp_base=2, min=0),
			retry=retry_if_exception_type(RateLimitError),
			before_sleep=log_retry,
			sleep=self.sleep,
			reraise=True,
		)
		async for attempt in retrying:
			with attempt:
				return await operation()


async def with_retry(
	operation: Callable[[], Awaitable[T]],
	max_attempts: int = 4,
	base_delay: float = 1.0,
	sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
	return await RetryPolicy(max_attempts, base_delay, sleep).run(operation)
