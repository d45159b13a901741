# rerungen/__init__.py

from .cli_config import GenerationConfig, RunnerFlavor
from .descriptor_builder import build_descriptor
from .errors import (
    DirectoryNotFound,
    OutputPrepError,
    RenderError,
    RerunGenError,
    SourceReadError,
    UnknownFlavor,
)
from .generator import GenerationDriver, generate_runners
from .scanner import RerunListScanner
from .shared import GenerationResult, RunnerDescriptor
from .splitter import split_scenarios

__all__ = [
    "GenerationConfig",
    "RunnerFlavor",
    "build_descriptor",
    "RerunGenError",
    "DirectoryNotFound",
    "OutputPrepError",
    "UnknownFlavor",
    "SourceReadError",
    "RenderError",
    "GenerationDriver",
    "generate_runners",
    "RerunListScanner",
    "GenerationResult",
    "RunnerDescriptor",
    "split_scenarios",
]
