from unittest.mock import AsyncMock, Mock

import pytest

from studyhub.core import RetryPolicy, with_fallback, with_retry
from studyhub.errors import AdapterError, ErrorKind, RateLimitError


@pytest.fixture
def recorded_sleeps():
	return []


@pytest.fixture
def fake_sleep(recorded_sleeps):
	async def _sleep(delay):
		recorded_sleeps.append(delay)

	return _sleep


@pytest.mark.asyncio
async def test_retry_gives_up_after_four_attempts(fake_sleep, recorded_sleeps):
	operation = AsyncMock(side_effect=RateLimitError())
	policy = RetryPolicy(max_attempts=4, base_delay=1.0, sleep=fake_sleep)

	with pytest.raises(RateLimitError):
		await policy.run(operation)

	assert operation.await_count == 4
	assert recorded_sleeps == [1, 2, 4]


@pytest.mark.asyncio
async def test_retry_returns_first_success(fake_sleep, recorded_sleeps):
	operation = AsyncMock(side_effect=[RateLimitError(), RateLimitError(), 'generated'])

	result = await with_retry(operation, max_attempts=4, base_delay=1.0, sleep=fake_sleep)

	assert result == 'generated'
	assert operation.await_count == 3
	assert recorded_sleeps == [1, 2]


@pytest.mark.asyncio
async def test_retry_scales_with_base_delay(fake_sleep, recorded_sleeps):
	operation = AsyncMock(side_effect=RateLimitError())

	with pytest.raises(RateLimitError):
		await with_retry(operation, max_attempts=3, base_delay=0.5, sleep=fake_sleep)

	assert recorded_sleeps == [0.5, 1.0]


@pytest.mark.asyncio
async def test_other_errors_are_not_retried(fake_sleep, recorded_sleeps):
	operation = AsyncMock(side_effect=AdapterError(ErrorKind.NETWORK, 'connection reset'))

	with pytest.raises(AdapterError):
		await RetryPolicy(sleep=fake_sleep).run(operation)

	assert operation.await_count == 1
	assert recorded_sleeps == []


def test_retry_policy_requires_an_attempt():
	with pytest.raises(ValueError):
		RetryPolicy(max_attempts=0)


@pytest.mark.asyncio
async def test_fallback_not_used_on_success():
	fallback = Mock(return_value=['placeholder'])

	result = await with_fallback(AsyncMock(return_value=['real']), fallback)

	assert result == ['real']
	fallback.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
	'error',
	[
		AdapterError(ErrorKind.MISSING_CREDENTIAL, 'no API key configured'),
		RateLimitError(),
		RuntimeError('unexpected'),
	],
)
async def test_fallback_absorbs_failures(error):
	result = await with_fallback(AsyncMock(side_effect=error), lambda: ['placeholder'], name='video search')

	assert result == ['placeholder']


@pytest.mark.asyncio
async def test_fallback_errors_propagate():
	def broken_fallback():
		raise KeyError('template')

	with pytest.raises(KeyError):
		await with_fallback(AsyncMock(side_effect=RateLimitError()), broken_fallback)


def test_adapter_error_str():
	error = AdapterError(ErrorKind.HTTP_STATUS, 'HTTP 503', 'youtube')

	assert str(error) == 'youtube: [http_status] HTTP 503'
	assert RateLimitError().kind == ErrorKind.RATE_LIMITED


@pytest.mark.asyncio
async def test_retry_awaits_plain_callables(fake_sleep, recorded_sleeps):
	calls = []

	async def generate(topic):
		calls.append(topic)
		if len(calls) < 3:
			raise RateLimitError()
		return f'quiz for {topic}'

	result = await RetryPolicy(sleep=fake_sleep).run(lambda: generate('Linear Algebra'))

	assert result == 'quiz for Linear Algebra'
	assert calls == ['Linear Algebra'] * 3
	assert recorded_sleeps == [1, 2]


@pytest.mark.asyncio
async def test_exhausted_plain_callable_falls_back(fake_sleep):
	calls = []

	async def generate():
		calls.append(1)
		raise RateLimitError()

	policy = RetryPolicy(sleep=fake_sleep)
	result = await with_fallback(lambda: policy.run(lambda: generate()), lambda: 'placeholder')

	assert result == 'placeholder'
	assert len(calls) == 4
