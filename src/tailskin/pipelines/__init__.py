"""Compilation pipelines and their registry."""

from tailskin.pipelines.base import (
    CompilationError,
    CompilationFile,
    CompilationOutput,
    CompilationPipeline,
    PipelineConfigError,
    PipelineKey,
    PipelineNotFoundError,
    SkinContext,
    load_skin,
)
from tailskin.pipelines.react import ReactCSSModulesPipeline, ReactInlinePipeline
from tailskin.pipelines.registry import PipelineRegistry, compile_skin, default_registry
from tailskin.pipelines.web_component import WebComponentPipeline

__all__ = [
    "CompilationError",
    "CompilationFile",
    "CompilationOutput",
    "CompilationPipeline",
    "PipelineConfigError",
    "PipelineKey",
    "PipelineNotFoundError",
    "PipelineRegistry",
    "ReactCSSModulesPipeline",
    "ReactInlinePipeline",
    "SkinContext",
    "WebComponentPipeline",
    "compile_skin",
    "default_registry",
    "load_skin",
]
