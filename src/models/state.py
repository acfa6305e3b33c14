"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the batch rendering pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, theme, themesDir, outputSubdir
        - env_check: themeLoaded, htmlOutputdir, envOK
        - sources_collect: sourceFiles
        - html_render: renderResult
        - stylesheet_write: stylesheetFile
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing markdown content files
        outputdir: Base output directory for rendered fragments
        verbosity: Logging verbosity level (1-3)
        pattern: Glob (relative to inputdir) selecting markdown sources
        theme: Theme name used for the highlight stylesheet
        themesDir: Optional custom themes directory
        outputSubdir: Subdirectory within outputdir for output
        envOK: Environment validation passed
        themeLoaded: Loaded Theme instance
        htmlOutputdir: Final output directory (outputdir + outputSubdir)
        sourceFiles: Markdown files selected by pattern
        renderResult: Rendering results (files, directive_count, status)
        stylesheetFile: Path of the written highlight stylesheet
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="**/*.md")
    theme: str = field(default="default")
    themesDir: Optional[str] = field(default=None)
    outputSubdir: str = field(default=".")

    # Pipeline state
    envOK: bool = field(default=False)
    themeLoaded: Optional[Any] = field(default=None)  # Theme at runtime
    htmlOutputdir: Path = field(default=Path("/"))
    sourceFiles: List[Path] = field(default_factory=list)
    renderResult: Optional[Dict] = field(default=None)
    stylesheetFile: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields (e.g. chris_plugin's own
        flags) are dropped.

        Args:
            options: Parsed CLI arguments (pattern, theme, etc.)
            inputdir: Directory containing markdown sources
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_collect,
            html_render,
        )

    This is equivalent to:
        html_render(sources_collect(env_check(initial_state)))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
