from .settings import PaperBackend, Settings, settings

__all__ = ['PaperBackend', 'Settings', 'settings']
