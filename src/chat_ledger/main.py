import uvicorn

from chat_ledger.core import settings
from chat_ledger.logger import get_logging_config


def run() -> None:
    uvicorn.run(
        "chat_ledger.app:app",
        host=settings.get_env_str("HOST", settings.DEFAULT_HOST),
        port=settings.get_env_int("PORT", settings.DEFAULT_PORT, min_value=1),
        log_config=get_logging_config(),
    )


if __name__ == "__main__":
    run()
