from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobboard.api.router import api_router
from jobboard.config.base_config import BaseConfig
from jobboard.config.config_validator import get_config
from jobboard.db.session import MongoDBManager
from jobboard.domain.candidates.repositories import MongoCandidateRepository
from jobboard.domain.candidates.services import CandidateSkillSetReader
from jobboard.domain.companies.repositories import MongoCompanyRepository
from jobboard.domain.companies.services import CompanyDomainService
from jobboard.domain.jobs.filters import JobFilterBuilder
from jobboard.domain.jobs.repositories import MongoJobRepository
from jobboard.domain.jobs.scoring import MatchScorer
from jobboard.domain.jobs.services import JobRankingService
from jobboard.domain.jobs.suggestions import JobSuggestionEngine
from jobboard.domain.skills.repositories import MongoSkillCatalogRepository
from jobboard.services.auth_service import AuthService
from jobboard.utils.error_handling import register_exception_handlers
from jobboard.utils.logger import configure_logging, logger


def build_services(app: FastAPI, mongodb: MongoDBManager, config: BaseConfig) -> None:
    """Wire repositories and domain services onto ``app.state``."""
    db = mongodb.db
    job_repository = MongoJobRepository(
        db,
        collection=config.JOB_COLLECTION,
        company_collection=config.COMPANY_COLLECTION,
        skill_collection=config.SKILL_COLLECTION,
    )

    app.state.mongodb = mongodb
    app.state.ranking_service = JobRankingService(
        job_repository=job_repository,
        candidate_reader=CandidateSkillSetReader(
            MongoCandidateRepository(db, collection=config.CANDIDATE_COLLECTION)
        ),
        skill_repository=MongoSkillCatalogRepository(db, collection=config.SKILL_COLLECTION),
        filter_builder=JobFilterBuilder(combination_policy=config.FILTER_COMBINATION_POLICY),
        scorer=MatchScorer(experience_policy=config.EXPERIENCE_MATCH_POLICY),
        default_limit=config.DEFAULT_PAGE_LIMIT,
        max_limit=config.MAX_PAGE_LIMIT,
    )
    app.state.suggestion_engine = JobSuggestionEngine(
        job_repository,
        default_limit=config.DEFAULT_SUGGESTION_LIMIT,
        max_limit=config.MAX_PAGE_LIMIT,
    )
    app.state.company_service = CompanyDomainService(
        MongoCompanyRepository(db, collection=config.COMPANY_COLLECTION),
        default_limit=config.DEFAULT_COMPANY_PAGE_LIMIT,
        max_limit=config.MAX_PAGE_LIMIT,
    )


def create_app(config: Optional[BaseConfig] = None) -> FastAPI:
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown events."""
        configure_logging(
            level=config.LOG_LEVEL.value,
            log_file=config.LOG_FILE,
            json_logs=config.LOG_JSON,
            max_bytes=config.LOG_MAX_SIZE,
            backup_count=config.LOG_BACKUP_COUNT,
        )
        logger.info("Configured logging for environment", environment=config.ENVIRONMENT.value)

        mongodb = MongoDBManager(config)
        build_services(app, mongodb, config)
        logger.info(
            "Application started successfully",
            app_name=config.APP_NAME,
            version=config.APP_VERSION,
            environment=config.ENVIRONMENT.value,
            database=config.MONGO_DB_NAME,
        )

        yield

        logger.info("Shutting down application")
        await mongodb.close()
        logger.info("Application shutdown completed")

    app = FastAPI(
        title=config.APP_NAME,
        description=config.APP_DESCRIPTION,
        version=config.APP_VERSION,
        debug=config.DEBUG,
        docs_url=config.DOCS_URL,
        redoc_url=config.REDOC_URL,
        openapi_url=config.OPENAPI_URL,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.auth_service = AuthService(config)

    app.add_middleware(CORSMiddleware, **config.get_cors_config())
    register_exception_handlers(app)
    app.include_router(api_router, prefix=config.API_V1_STR)

    return app


app = create_app()
