"""
Converter for lines of 7-bit WordStar text to Unicode text

Applies the line filters in a fixed order:

    dot commands -> re-align -> specials -> overline -> wrappers -> controls

Each filter returns None when it has nothing to change, in which case the
line passes to the next filter as it was. A dot command that resolves to ""
removes the line from the output and no further filter sees it.
"""

from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from ..config import appsettings
from ..models.filters import Excludes, EmphasisStyle, Stage, STAGE_TAGS
from . import align, controls, dotcmd, emphasis, overline, specials
from .counts import ControlCount
from .log import LOG
from .wrappers import WrapperState, Wrappers


class Converter:
    """
    Transforms lines of 7-bit WordStar text into Unicode text

    Responsibilities:
    - Run the enabled line filters in order
    - Own the wrapper toggle state for the run
    - Keep per-stage control character counters for diagnostics

    One Converter should be used per input file: wrapper state and
    counters accumulate over every line it converts.
    """

    def __init__(
        self,
        excludes: Optional[Excludes] = None,
        style: Optional[EmphasisStyle] = None,
        escape: Optional[bool] = None,
        reset_per_line: Optional[bool] = None,
    ) -> None:
        """
        Initialize converter

        Args:
            excludes: Stages to skip (default: none)
            style: Emphasis rendering (default: AppSettings.emphasis_style)
            escape: Escape leftover controls as ^X (default:
                    AppSettings.escape_controls)
            reset_per_line: Clear wrapper state before each line (default:
                            AppSettings.reset_wrappers_per_line)
        """
        self.excludes = excludes or Excludes()
        self.style = style or EmphasisStyle(appsettings.emphasis_style)
        self.escape = appsettings.escape_controls if escape is None else escape
        self.reset_per_line = (
            appsettings.reset_wrappers_per_line if reset_per_line is None else reset_per_line
        )

        self.wrapper_state = WrapperState()
        self.wrappers = Wrappers(self.wrapper_state)

        self.original_counts = ControlCount("To ASCII")
        self.stage_counts: Dict[Stage, ControlCount] = {
            stage: ControlCount(STAGE_TAGS[stage])
            for stage in Stage
            if not self.excludes.is_excluded(stage)
        }
        self.dot_cmds_replaced = 0
        self.dot_cmds_removed = 0
        self.lines_read = 0
        self.lines_written = 0

    def stage_run(self, stage: Stage, line: str) -> Optional[str]:
        """
        Run one (non dot-command) filter stage on a line

        Returns:
            Replacement line, or None if the stage made no change
        """
        if stage is Stage.RE_ALIGN:
            return align.process(line)
        if stage is Stage.SPECIALS:
            return specials.process(line)
        if stage is Stage.OVERLINE:
            return overline.process(line, combining=self.style is EmphasisStyle.MARKDOWN)
        if stage is Stage.WRAPPERS:
            if self.style is EmphasisStyle.MARKDOWN:
                return emphasis.process(line)
            return self.wrappers.process(line)
        if stage is Stage.CONTROLS:
            return controls.process(line, escape=self.escape)
        raise ValueError(f"Unexpected stage: {stage}")

    def line_transform(self, line: str) -> Optional[str]:
        """
        Transform a single line through all enabled stages

        Args:
            line: Line of 7-bit text without its line terminator

        Returns:
            Converted line, or None if the line is to be removed
        """
        self.lines_read += 1
        self.original_counts.scan(line)
        if self.reset_per_line:
            self.wrapper_state.reset()

        if not self.excludes.dot_cmds:
            replacement = dotcmd.process(line)
            if replacement is not None:
                if replacement == "":
                    self.dot_cmds_removed += 1
                    LOG(f"Line {self.lines_read}: dot command removed", level=3)
                    return None
                self.dot_cmds_replaced += 1
                line = replacement
            self.stage_counts[Stage.DOT_CMDS].scan(line)

        for stage in (Stage.RE_ALIGN, Stage.SPECIALS, Stage.OVERLINE, Stage.WRAPPERS, Stage.CONTROLS):
            if self.excludes.is_excluded(stage):
                continue
            replacement = self.stage_run(stage, line)
            if replacement is not None:
                line = replacement
            self.stage_counts[stage].scan(line)

        self.lines_written += 1
        return line

    def lines_transform(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield the converted form of each line that is not removed"""
        for line in lines:
            converted = self.line_transform(line)
            if converted is not None:
                yield converted

    def stream_transform(self, reader: TextIO, writer: TextIO) -> int:
        """
        Convert a text stream line by line

        Lines may end in "\\n" or "\\r\\n"; a lone "\\r" is kept as a control
        character. Every emitted line is terminated with "\\n".

        Args:
            reader: Text source split on "\\n" only (opened with
                    newline="\\n", as io.StringIO is by default)
            writer: Text destination

        Returns:
            Number of lines written
        """
        written = 0
        for converted in self.lines_transform(line_strip(raw) for raw in reader):
            writer.write(converted)
            writer.write("\n")
            written += 1
        writer.flush()
        return written

    def summary_lines(self) -> List[str]:
        """Diagnostic summary of dot commands and per-stage control counts"""
        lines = [
            "Dot commands after processing:",
            f"Replaced: {self.dot_cmds_replaced}",
            f"Removed:  {self.dot_cmds_removed}",
            "Control characters after processing:",
            str(self.original_counts),
        ]
        lines.extend(str(counts) for counts in self.stage_counts.values())
        return lines

    def summary_log(self, level: int = 1) -> None:
        """Write the diagnostic summary through LOG()"""
        for line in self.summary_lines():
            LOG(line, level=level)

    def final_counts(self) -> ControlCount:
        """Counter of the last enabled stage (or the input counter if none)"""
        if not self.stage_counts:
            return self.original_counts
        return list(self.stage_counts.values())[-1]


def line_strip(raw: str) -> str:
    """Remove a trailing "\\n" or "\\r\\n" line terminator"""
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith("\n"):
        return raw[:-1]
    return raw
