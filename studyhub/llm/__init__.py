from .client import LLMClient, LLMProvider, create_llm_client_from_config

__all__ = ['LLMClient', 'LLMProvider', 'create_llm_client_from_config']
