"""CLI entrypoint: run a shell command while holding a named lock."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from steplock.core.errors import LockTimeoutError
from steplock.core.factory import create_lock_manager
from steplock.core.settings import StepLockSettings
from steplock.utils.logging import get_logger


logger = get_logger("StepLockCLI")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a command under a Redis-backed named lock.")
    parser.add_argument("name", help="Lock name")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run while the lock is held")
    parser.add_argument("--config", type=Path, default=None, help="Path to settings YAML")
    parser.add_argument("--expire", type=int, default=None, help="Lock TTL in seconds")
    parser.add_argument("--timeout", type=int, default=None, help="Max wait in milliseconds")
    return parser.parse_args(argv)


async def _run_command(command: Sequence[str]) -> int:
    proc = await asyncio.create_subprocess_exec(*command)
    try:
        return await proc.wait()
    except asyncio.CancelledError:
        if proc.returncode is None:
            proc.terminate()
            await proc.wait()
        raise


async def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if not args.command:
        logger.error("No command given")
        return 2

    settings = StepLockSettings.from_file(args.config) if args.config else StepLockSettings()
    async with create_lock_manager(settings) as manager:
        try:
            code = await manager.with_lock(
                args.name,
                lambda: _run_command(args.command),
                expire=args.expire,
                timeout=args.timeout,
            )
        except LockTimeoutError as exc:
            logger.error("%s", exc)
            return 1
    logger.info("Command exited with %d", code)
    return code


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
