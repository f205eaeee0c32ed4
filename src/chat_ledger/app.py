from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chat_ledger.api.routes import interpret, transactions
from chat_ledger.core import settings
from chat_ledger.domain.ledger import LedgerBook
from chat_ledger.logger import get_logger, setup_logging
from chat_ledger.services.interpreter import TransactionInterpreter

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        app.state.interpreter = TransactionInterpreter(
            include_diagnostics=settings.get_env_bool("INCLUDE_DIAGNOSTICS", True),
        )
        app.state.ledger = LedgerBook()

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Chat Ledger", lifespan=lifespan)

    app.include_router(interpret.router)
    app.include_router(transactions.router)

    return app


app = create_app()
