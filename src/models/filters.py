"""
Filter pipeline models

Stage names, emphasis styles and the exclusion set used to switch individual
line filters off.
"""

from enum import Enum
from dataclasses import dataclass, fields
from typing import Iterable, List


class Stage(Enum):
    """
    Line filter stages, in the order they are applied

    The value doubles as the Excludes field name and the CLI exclusion name.
    """
    DOT_CMDS = "dot_cmds"
    RE_ALIGN = "re_align"
    SPECIALS = "specials"
    OVERLINE = "overline"
    WRAPPERS = "wrappers"
    CONTROLS = "controls"


class EmphasisStyle(Enum):
    """How emphasis wrappers are rendered"""
    UNICODE = "unicode"      # styled alphabets and combining modifiers
    MARKDOWN = "markdown"    # **bold**, *italic*, ~~strike~~


# Counter tags used in the diagnostic summary
STAGE_TAGS = {
    Stage.DOT_CMDS: "Dot-cmds",
    Stage.RE_ALIGN: "Re-align",
    Stage.SPECIALS: "Specials",
    Stage.OVERLINE: "Overline",
    Stage.WRAPPERS: "Wrappers",
    Stage.CONTROLS: "Controls",
}


@dataclass(frozen=True)
class Excludes:
    """
    Set of flags specifying line filters to be skipped

    Each flag set to True disables the corresponding stage. All stages are
    active by default.
    """
    dot_cmds: bool = False
    re_align: bool = False
    specials: bool = False
    overline: bool = False
    wrappers: bool = False
    controls: bool = False

    @classmethod
    def excludes_fromNames(cls, names: Iterable[str]) -> "Excludes":
        """
        Build an exclusion set from stage names

        Args:
            names: Stage names such as "re_align" or "controls" (hyphens
                   are accepted in place of underscores)

        Returns:
            Excludes with the named stages disabled

        Raises:
            ValueError: If a name does not match any stage
        """
        valid = {f.name for f in fields(cls)}
        flags = {}
        for name in names:
            key = name.strip().lower().replace("-", "_")
            if key not in valid:
                raise ValueError(
                    f"Unknown filter stage '{name}' (expected one of: {', '.join(sorted(valid))})"
                )
            flags[key] = True
        return cls(**flags)

    def is_excluded(self, stage: Stage) -> bool:
        """Check if the given stage is disabled"""
        return bool(getattr(self, stage.value))

    def names_list(self) -> List[str]:
        """Names of the excluded stages, in pipeline order"""
        return [stage.value for stage in Stage if self.is_excluded(stage)]
