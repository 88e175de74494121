import asyncio
import logging

log = logging.getLogger(__name__)


async def subprocess(*args, cwd=None) -> str:
    process = await asyncio.create_subprocess_exec(
        *args,
        cwd=cwd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    log.debug(f'[{" ".join(args)}] started at {cwd or "."}')
    stdout, stderr = await process.communicate()

    if process.returncode != 0:
        raise SubprocessError(
            f"[{' '.join(args)} exited with {process.returncode}]\n"
            + f"[stderr]\n{stderr.decode(errors='replace')}",
            returncode=process.returncode,
        )
    return stdout.decode("utf-8")


class SubprocessError(Exception):
    def __init__(self, message: str, returncode: int = None):
        super().__init__(message)
        self.returncode = returncode
