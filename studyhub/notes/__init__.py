from .service import NoteService

__all__ = ['NoteService']
