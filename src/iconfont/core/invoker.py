"""Compositing engine interface and invocation."""

from typing import Protocol

from iconfont.domain.generation import GenerationRequest, GenerationResult


class CompositingEngine(Protocol):
    """Turns a generation request into font payloads and a stylesheet generator."""

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate every format in ``request.types``."""
        ...


async def invoke(engine: CompositingEngine, request: GenerationRequest) -> GenerationResult:
    """Run the compositing engine once.

    Compositing is deterministic, so there is no retry. Engine exceptions
    propagate unchanged and no partial result is kept.

    Args:
        engine: Compositing engine
        request: Normalized generation request

    Returns:
        The engine's result
    """
    return await engine.generate(request)
