"""
Models package for markfolio

Contains data structures and type definitions for rendering and the CLI pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveSpec, DirectiveKind, KNOWN_DIRECTIVE_TYPES
from .parser import Directive
from .editor import InsertResult

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveSpec",
    "DirectiveKind",
    "KNOWN_DIRECTIVE_TYPES",
    "Directive",
    "InsertResult",
]
