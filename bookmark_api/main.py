import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from bookmark_api.core.config import Settings, validate_runtime_config
from bookmark_api.core.errors import register_exception_handlers
from bookmark_api.database import Database
from bookmark_api.models import bookmark, user  # noqa: F401  registers tables on Base
from bookmark_api.routes import auth_routes, bookmark_routes, user_routes

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    validate_runtime_config(settings)
    database = database or Database(settings.database_url, echo=settings.database_echo)
    logging.getLogger('bookmark_api').setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            database.create_all()
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
        yield
        database.dispose()

    app = FastAPI(title='Bookmark API', lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    @app.get('/')
    def root():
        return {'status': 'Bookmark API Running'}

    app.include_router(auth_routes.router, prefix='/auth')
    app.include_router(user_routes.router, prefix='/users')
    app.include_router(bookmark_routes.router, prefix='/bookmarks')
    return app
