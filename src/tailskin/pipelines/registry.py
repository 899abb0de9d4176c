"""Registry mapping pipeline keys to pipeline implementations."""

from __future__ import annotations

import logging

from tailskin.config import CompilerConfig, CSSStrategy
from tailskin.pipelines.base import (
    CompilationOutput,
    CompilationPipeline,
    PipelineConfigError,
    PipelineKey,
    PipelineNotFoundError,
)
from tailskin.pipelines.react import ReactCSSModulesPipeline, ReactInlinePipeline
from tailskin.pipelines.web_component import WebComponentPipeline

logger = logging.getLogger(__name__)


class PipelineRegistry:
    """Maps ``(input type, output format, CSS strategy)`` keys to pipelines."""

    def __init__(self) -> None:
        self._pipelines: dict[PipelineKey, CompilationPipeline] = {}

    def register(self, pipeline: CompilationPipeline) -> None:
        """Register *pipeline* under its key.

        Raises:
            PipelineConfigError: if the key is already taken.
        """
        if pipeline.key in self._pipelines:
            raise PipelineConfigError(f"a pipeline is already registered for {pipeline.key}")
        self._pipelines[pipeline.key] = pipeline

    def get(self, key: PipelineKey) -> CompilationPipeline:
        """Return the pipeline for *key*.

        Raises:
            PipelineNotFoundError: if nothing is registered for *key*.
        """
        try:
            return self._pipelines[key]
        except KeyError:
            raise PipelineNotFoundError(key, self.keys()) from None

    def for_config(self, config: CompilerConfig) -> CompilationPipeline:
        return self.get(PipelineKey.from_config(config))

    def keys(self) -> list[PipelineKey]:
        return list(self._pipelines)

    def __contains__(self, key: object) -> bool:
        return key in self._pipelines

    def __len__(self) -> int:
        return len(self._pipelines)


def default_registry() -> PipelineRegistry:
    """A new registry holding the built-in pipelines."""
    registry = PipelineRegistry()
    registry.register(WebComponentPipeline(CSSStrategy.INLINE))
    registry.register(WebComponentPipeline(CSSStrategy.VANILLA))
    registry.register(ReactCSSModulesPipeline())
    registry.register(ReactInlinePipeline())
    return registry


def compile_skin(
    entry_file: str,
    source: str,
    config: CompilerConfig | None = None,
    styles_source: str | None = None,
    registry: PipelineRegistry | None = None,
) -> CompilationOutput:
    """Compile one skin source with the pipeline *config* selects.

    *entry_file* names the source for output paths and error messages; no
    files are read or written.

    Raises:
        PipelineNotFoundError: if no pipeline matches the configuration.
        CompilationError: if the source cannot be compiled.
    """
    config = config or CompilerConfig()
    registry = registry if registry is not None else default_registry()
    pipeline = registry.for_config(config)
    logger.info("compiling %s with pipeline %s", entry_file, pipeline.key)
    return pipeline.compile(entry_file, source, config, styles_source)
