import logging

import uvicorn
from fastapi import FastAPI

from pokerhands import config
from pokerhands.hands_api import router as hands_router


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app = FastAPI(title="Poker Hands")

# ---- Include all routers ----
app.include_router(hands_router)  # /draw, /analyze/{cards}


@app.get("/")
def read_root():
    return {"status": "ok"}


def run() -> None:
    configure_logging()
    logging.getLogger(__name__).info("starting server on %s:%s", config.HOST, config.PORT)

    server_config = uvicorn.Config(
        app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower()
    )
    uvicorn.Server(server_config).run()


if __name__ == "__main__":
    run()
