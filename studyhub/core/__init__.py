from .orchestrator import SearchOrchestrator
from .policies import RetryPolicy, with_fallback, with_retry

__all__ = ['SearchOrchestrator', 'RetryPolicy', 'with_fallback', 'with_retry']
