from dotenv import load_dotenv
load_dotenv()

import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import config
from errors import register_error_handlers
from guard import route_guard
from routes import mars, session, shell, spacex

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mission Control", version="0.1.0")

app.middleware("http")(route_guard)
register_error_handlers(app)

app.include_router(session.router)
app.include_router(mars.router)
app.include_router(spacex.router)

if os.path.isdir(config.STATIC_DIR):
    app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")

# Catch-all shell route goes last
app.include_router(shell.router)


if __name__ == "__main__":
    import uvicorn

    tls = {}
    if os.path.isfile(config.TLS_KEYFILE) and os.path.isfile(config.TLS_CERTFILE):
        tls = {"ssl_keyfile": config.TLS_KEYFILE, "ssl_certfile": config.TLS_CERTFILE}
    else:
        logger.warning(
            "TLS key/cert not found (%s, %s); serving plain HTTP. "
            "Secure cookies will not be sent back by browsers.",
            config.TLS_KEYFILE,
            config.TLS_CERTFILE,
        )

    scheme = "https" if tls else "http"
    logger.info("Listening on %s://%s:%s/", scheme, config.APP_HOST, config.APP_PORT)
    uvicorn.run(app, host=config.APP_HOST, port=config.APP_PORT, **tls)
