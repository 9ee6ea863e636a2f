"""Connectivity checks for the external image provider."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from trailer_studio.imggen.generator_client import ImageGeneratorClient


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Service responded with non-success status.",
    )


async def check_aitunnel_images() -> IntegrationCheckResult:
    """Ping the AITunnel image endpoint and return the result."""

    async def _ping() -> bool:
        client = ImageGeneratorClient()
        try:
            return await client.ping()
        finally:
            await client.close()

    return await _run_check(
        name="AITunnel images",
        factory=_ping,
        success_message="AITunnel image API is reachable.",
    )


async def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_aitunnel_images()))
