"""
wsconvert - convert a single WordStar stream to Unicode text

Reads a WordStar document from a file or stdin and writes UTF-8 text to a
new file or stdout. A per-stage count of control characters is written to
stderr, so stdout carries only the converted text.

Usage:
    wsconvert -i letter.ws -o letter.txt
    wsconvert < letter.ws > letter.txt

Examples:
    # Markdown emphasis, leave dot commands untouched
    wsconvert -i report.ws -o report.md --style markdown -x dot_cmds

    # Trace every line
    wsconvert -i report.ws -vvv
"""

import sys
from argparse import ArgumentParser, ArgumentTypeError, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .lib import Converter, ConversionError, process, __version__, LOG, state_connectToLogger
from .models import EmphasisStyle, Excludes, ProgramState, Stage, pipeline


def stage_name(name: str) -> str:
    """argparse type for -x/--exclude: a known stage name"""
    try:
        Excludes.excludes_fromNames([name])
    except ValueError as e:
        raise ArgumentTypeError(str(e))
    return name.strip().lower().replace("-", "_")


def options_add(parser: ArgumentParser) -> ArgumentParser:
    """Add the conversion options shared by the stream command and the batch plugin"""
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        type=stage_name,
        metavar="STAGE",
        help="Skip a filter stage (repeatable): " + ", ".join(stage.value for stage in Stage),
    )
    parser.add_argument(
        "--style",
        choices=[style.value for style in EmphasisStyle],
        default=None,
        help="Emphasis rendering (default: WSCONVERT_EMPHASIS_STYLE or unicode)",
    )
    parser.add_argument(
        "--no-escape",
        dest="noEscape",
        action="store_true",
        help="Pass unknown control characters through instead of writing ^X",
    )
    parser.add_argument(
        "--reset-per-line",
        dest="resetPerLine",
        action="store_true",
        help="Close all open emphasis at the start of each line",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        action="count",
        default=1,
        help="Increase output verbosity (can be repeated: -v, -vv)",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


parser = options_add(
    ArgumentParser(
        prog="wsconvert",
        description="wsconvert - WordStar to Unicode text converter",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )
)

parser.add_argument(
    "-i", "--infile", default="", type=str, help="Input WordStar file (default: stdin)"
)

parser.add_argument(
    "-o", "--outfile", default="", type=str, help="Output text file, must not exist (default: stdout)"
)


def converter_make(state: ProgramState) -> Converter:
    """Build a Converter from the options carried in state"""
    return Converter(
        excludes=state.excludes,
        style=EmphasisStyle(state.style) if state.style else None,
        escape=False if state.noEscape else None,
        reset_per_line=True if state.resetPerLine else None,
    )


def options_check(inputstate: ProgramState) -> ProgramState:
    """
    Resolve the exclusion names into an Excludes set.

    Returns:
        ProgramState with added fields:
            - excludes: Excludes built from state.exclude
            - envOK: True if the options are consistent

    Exits:
        2 if a stage name is unknown
    """
    state = inputstate.copy()
    try:
        state.excludes = Excludes.excludes_fromNames(state.exclude)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        state.envOK = False
        sys.exit(2)

    if state.excludes.names_list():
        LOG(f"Excluded stages: {', '.join(state.excludes.names_list())}", level=2)
    state.envOK = True
    return state


def stream_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert infile (or stdin) into outfile (or stdout).

    Returns:
        ProgramState with added field:
            - conversionResults: single dict of byte/line statistics and the
              diagnostic summary lines

    Exits:
        1 on any conversion or I/O error
    """
    state = inputstate.copy()

    converter = converter_make(state)
    LOG(f"Converting {state.infile or '<stdin>'} -> {state.outfile or '<stdout>'}", level=2)
    try:
        stats = process(state.infile, state.outfile, converter)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    state.conversionResults = [
        {
            'input': state.infile or "<stdin>",
            'output': state.outfile or "<stdout>",
            **stats,
            'summary': converter.summary_lines(),
        }
    ]
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Write the diagnostic counter summary to the log.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state = inputstate.copy()
    for result in state.conversionResults:
        for line in result.get('summary', []):
            LOG(line, level=1)
        LOG(f"{result['lines_written']} of {result['lines_read']} lines written", level=2)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - convert one WordStar stream.

    Runs the pipeline:
        1. options_check: Validate stage exclusions
        2. stream_convert: Two-pass conversion through a temporary file
        3. results_report: Counter summary to stderr

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        0 on success (errors exit with 1, bad arguments with 2)
    """
    options = parser.parse_args(argv)
    state = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, options_check, stream_convert, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
