from fastapi import FastAPI

from studyhub import __version__
from studyhub.api.routes.health import health_router
from studyhub.api.routes.notes import notes_router
from studyhub.api.routes.progress import progress_router
from studyhub.api.routes.search import search_router
from studyhub.config.settings import settings
from studyhub.utils.logger import logger


def create_app():
	logger.info(f'Starting {settings.APP_NAME} FastAPI application...')

	app = FastAPI(
		title=settings.APP_NAME,
		version=__version__,
		description='Study portal: topic search, quizzes, flashcards and AI notes',
	)

	app.include_router(health_router, prefix='/api')
	app.include_router(search_router, prefix='/api')
	app.include_router(notes_router, prefix='/api')
	app.include_router(progress_router, prefix='/api')

	return app


app = create_app()
