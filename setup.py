import logging

from setuptools import setup, find_packages

log = logging.getLogger(__name__)

tests_require = [
    "pytest",
    "pytest-mock",
    "pytest-asyncio",
    "asgi-lifespan==2.*",
    "httpx",
]

setup(
    name="diskstat_api",
    version="0.1.0.dev0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="HTTP service that reports disk usage statistics for a device",
    install_requires=[
        "gconf",
        "uvicorn",
        "fastapi",
        "pydantic>=2",
        "blinker",
    ],
    extras_require={
        "test": tests_require,
        "dev": ["setuptools", "ruff", *tests_require],
    },
)
