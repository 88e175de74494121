import logging
from logging import LogRecord
from pathlib import Path
from typing import List

import gconf
import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

import diskstat_api

pytest_plugins = ("pytest_asyncio",)

CONFIG_FILE = Path(__file__).parent.parent / "config.yml"


@pytest.fixture(autouse=True, scope="session")
def setup_all():
    gconf.set_env_prefix("DISKSTAT")
    gconf.load(str(CONFIG_FILE))


@pytest.fixture(autouse=True)
def config_override(request):
    # Detects the variable named *config_override* of a test module
    module_override = getattr(request.module, "config_override", {})

    # Detects the annotation named @pytest.mark.config_override of a test function
    function_override_mark = request.node.get_closest_marker("config_override")
    function_override = function_override_mark.args[0] if function_override_mark else {}

    with gconf.override_conf(module_override), gconf.override_conf(function_override):
        yield


@pytest.fixture
def disk_report(mocker):
    """
    Replaces the disk usage command. Tests set ``disk_report.output`` or
    ``disk_report.error`` and inspect ``disk_report.paths``.
    """
    report = MockDiskReport()
    mocker.patch("diskstat_api.service.disk_stats.run_disk_report", report)
    return report


@pytest_asyncio.fixture
async def api_client(disk_report) -> AsyncClient:
    app = diskstat_api.create_app()
    async with LifespanManager(app), AsyncClient(
        transport=ASGITransport(app=app), base_url="http://diskstats"
    ) as client:
        yield client


class MockDiskReport:
    def __init__(self):
        self.output = ""
        self.error = None
        self.paths: List[str] = []

    async def __call__(self, path: str) -> str:
        self.paths.append(path)
        if self.error:
            raise self.error
        return self.output


class MemoryLogHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: List[LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def memory_logger():
    memory_handler = MemoryLogHandler()
    root_logger = logging.getLogger()
    root_logger.addHandler(memory_handler)
    yield memory_handler
    root_logger.removeHandler(memory_handler)
