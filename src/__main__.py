#!/usr/bin/env python3
"""
wsconvert - WordStar to Unicode text converter (batch mode)

Converts every WordStar document found under an input directory into UTF-8
text files under an output directory, keeping the relative layout.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Conversion:
    - 8-bit WordStar bytes are folded to 7-bit ASCII (high bits cleared,
      input ends at ^Z)
    - Dot commands become headings and rules, or are removed
    - Emphasis wrappers become Unicode styled alphabets and combining
      marks, or Markdown
    - Remaining control characters become substitutes or ^X escapes

Usage:
    wsconvert-batch inputdir/ outputdir/

Examples:
    # Convert all .ws files below the current directory
    wsconvert-batch . output/

    # Other file names, Markdown output
    wsconvert-batch docs/ output/ --pattern '**/*.DOC' --style markdown

    # Verbose output
    wsconvert-batch docs/ output/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .cli import converter_make, options_add, options_check
from .config import appsettings
from .lib import ConversionError, directory_process, sources_glob, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                                            _
 __      _____  ___ ___  _ ____   _____ _ __| |_
 \ \ /\ / / __|/ __/ _ \| '_ \ \ / / _ \ '__| __|
  \ V  V /\__ \ (_| (_) | | | \ V /  __/ |  | |_
   \_/\_/ |___/\___\___/|_| |_|\_/ \___|_|   \__|

  WordStar to Unicode text converter
"""

# Define CLI arguments
parser = options_add(
    ArgumentParser(
        description="wsconvert - WordStar to Unicode text converter (batch mode)",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )
)

parser.add_argument(
    "--pattern",
    default=appsettings.input_pattern,
    type=str,
    help="Glob (relative to inputdir) selecting the files to convert",
)

parser.add_argument(
    "--outputSuffix",
    default=appsettings.output_suffix,
    type=str,
    help="Suffix given to each converted file",
)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and conversion options.

    Verifies that the input directory exists, resolves the stage exclusions
    and creates the output directory.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - excludes: Parsed exclusion set
            - envOK: True if environment is valid

    Exits:
        1 if the input directory is not found
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if not state.inputdir or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Input directory: {state.inputdir}", level=2)

    state = options_check(state)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)
    return state


def sources_find(inputstate: ProgramState) -> ProgramState:
    """
    Find the WordStar files to convert.

    Returns:
        ProgramState with added field:
            - sourceFiles: Sorted list of matching files under inputdir
    """
    state = inputstate.copy()

    LOG(f"Searching {state.inputdir} for {state.pattern}...", level=1)
    state.sourceFiles = sources_glob(state.inputdir, state.pattern)
    LOG(f"Found {len(state.sourceFiles)} file(s)", level=2)
    return state


def files_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert every source file into outputdir.

    Each file gets a fresh Converter, so open emphasis never carries over
    from one file to the next.

    Returns:
        ProgramState with added field:
            - conversionResults: One dict per file (input, output, bytes,
              lines_read, lines_written)

    Exits:
        1 on the first file that cannot be converted
    """
    state = inputstate.copy()

    if not state.sourceFiles:
        LOG("Nothing to convert", level=1)
        return state

    try:
        state.conversionResults = directory_process(
            state.inputdir,
            state.outputdir,
            suffix=state.outputSuffix,
            converter_factory=lambda: converter_make(state),
            sources=state.sourceFiles,
        )
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state = inputstate.copy()

    for result in state.conversionResults:
        LOG(
            f"  {result['input']} -> {result['output']}: "
            f"{result['lines_written']} of {result['lines_read']} lines",
            level=1,
        )
    LOG(f"\n✓ Converted {len(state.conversionResults)} file(s) into {state.outputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="wsconvert - WordStar to Unicode text converter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert a tree of WordStar files.

    Orchestrates the batch pipeline:
        1. env_check: Validate paths and options
        2. sources_find: Glob the input directory
        3. files_convert: Convert each file into outputdir
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - pattern: str - Glob selecting input files
            - outputSuffix: str - Suffix of converted files
            - exclude, style, noEscape, resetPerLine: conversion options
            - verbosity: int - Logging verbosity level
        inputdir: Directory containing WordStar files
        outputdir: Directory where converted files will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_find, files_convert, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
