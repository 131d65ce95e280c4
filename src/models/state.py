"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing conversion stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field
from functools import reduce
import dataclasses

from .filters import Excludes


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for a conversion run (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses. The single
    stream command and the batch plugin share it; each uses the fields its
    stages need.

    Pipeline stages and their state additions:
        - Initial: CLI options (infile/outfile or inputdir/outputdir, exclude,
          style, verbosity, ...)
        - options_check / env_check: excludes, envOK
        - sources_find (batch): sourceFiles
        - stream_convert / files_convert: conversionResults
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory searched for WordStar files (batch)
        outputdir: Directory receiving converted files (batch)
        infile: Input file, "" for stdin (single stream)
        outfile: Output file, "" for stdout (single stream)
        verbosity: Logging verbosity level (0-3)
        exclude: Stage names to skip, as given on the command line
        style: Emphasis style name ("unicode" or "markdown")
        noEscape: Pass leftover control characters through unescaped
        resetPerLine: Close open emphasis at the start of every line
        pattern: Glob selecting batch input files
        outputSuffix: Suffix of batch output files
        envOK: Environment validation passed
        excludes: Parsed exclusion set
        sourceFiles: Batch input files found under inputdir
        conversionResults: One statistics dict per converted file
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    infile: str = field(default="")
    outfile: str = field(default="")
    verbosity: int = field(default=1)
    exclude: List[str] = field(default_factory=list)
    style: Optional[str] = field(default=None)
    noEscape: bool = field(default=False)
    resetPerLine: bool = field(default=False)
    pattern: Optional[str] = field(default=None)
    outputSuffix: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    excludes: Excludes = field(default_factory=Excludes)
    sourceFiles: List[Path] = field(default_factory=list)
    conversionResults: List[Dict] = field(default_factory=list)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"],
        options: Namespace,
        inputdir: Optional[Path] = None,
        outputdir: Optional[Path] = None,
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the conversion pipeline.

        Args:
            options: Parsed CLI arguments (infile, exclude, style, etc.)
            inputdir: Directory containing source files (batch only)
            outputdir: Directory for conversion output (batch only)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {
            k: v for k, v in options_dict.items() if k in valid_fields and v is not None
        }

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

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_find,
            files_convert,
            results_report
        )

    This is equivalent to:
        results_report(files_convert(sources_find(env_check(initial_state))))

    But reads left-to-right instead of inside-out.
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
