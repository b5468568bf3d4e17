from enum import Enum


class ErrorKind(Enum):
	NETWORK = 'network'
	HTTP_STATUS = 'http_status'
	MISSING_CREDENTIAL = 'missing_credential'
	MALFORMED_PAYLOAD = 'malformed_payload'
	VALIDATION = 'validation'
	RATE_LIMITED = 'rate_limited'


class StudyHubError(Exception):
	pass


class AdapterError(StudyHubError):
	"""Failure of a single outbound provider call, absorbed by the fallback policy."""

	def __init__(self, kind: ErrorKind, message: str, provider: str | None = None):
		super().__init__(message)
		self.kind = kind
		self.message = message
		self.provider = provider

	def __str__(self) -> str:
		prefix = f'{self.provider}: ' if self.provider else ''
		return f'{prefix}[{self.kind.value}] {self.message}'


class RateLimitError(AdapterError):
	def __init__(self, message: str = 'rate limited by upstream provider', provider: str | None = None):
		super().__init__(ErrorKind.RATE_LIMITED, message, provider)


class ValidationError(StudyHubError):
	"""Invalid user input. Surfaced to the user; the operation is not attempted."""


class ExportError(StudyHubError):
	pass
