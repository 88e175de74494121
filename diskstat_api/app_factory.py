import logging
import os
import sys
from contextlib import asynccontextmanager
from importlib.metadata import metadata

import gconf
from fastapi import FastAPI

from .service.disk_stats import configured_command
from .web import diskstats, public

log = logging.getLogger(__name__)


def create_app():
    gconf.set_env_prefix("DISKSTAT")
    # Only load config if not already loaded (e.g., by test fixtures)
    try:
        gconf.get("diskstats.command")
        log.debug("Config already loaded, skipping config file load")
    except KeyError:
        load_config()
    configure_logging()

    app_meta = metadata("diskstat_api")
    app = FastAPI(
        title="Disk Stats",
        description=app_meta["summary"],
        version=app_meta["version"],
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.include_router(public.router)
    app.include_router(diskstats.router)

    return app


def load_config():
    if "CONFIG" in os.environ:
        for c in os.environ["CONFIG"].split(","):
            gconf.load(c)
    else:
        gconf.load("config.yml")


def configure_logging():
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for module, level in gconf.get("log.levels").items():  # type: str, str
        logger = logging.getLogger() if module == "root" else logging.getLogger(module)
        logger.setLevel(getattr(logging, level.upper()))
        log.info(f"set logger for {module} to {level.upper()}")


@asynccontextmanager
async def lifespan(_):
    command = configured_command()
    log.info(f"Startup complete, reporting disk usage with [{' '.join(command)}]")
    yield  # === run app ===
    log.info("Shutting down")
