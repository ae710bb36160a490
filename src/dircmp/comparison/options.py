"""Options controlling a single comparison run."""

from dataclasses import dataclass
from typing import Optional

from dircmp.filter_rules.base_rules import BaseFilterRules


@dataclass
class CompareOptions:
    """Configuration for one comparison run.

    The same instance is handed down every level of the recursion and is never
    modified by the comparator.

    Attributes:
        ignore_equal: Drop records for matched files with identical content.
        ignore_left_only: Drop records for paths present only on the left.
        ignore_right_only: Drop records for paths present only on the right.
        filter_rules: Rules applied to relative paths before alignment.
        recursive: Descend into subdirectories. When False only the immediate
            children of the two roots are compared.
        report_type_mismatch: Emit a TYPE_MISMATCH record when a path is a file on
            one side and a directory on the other. Such pairs are silently dropped
            otherwise.
    """

    ignore_equal: bool = False
    ignore_left_only: bool = False
    ignore_right_only: bool = False
    filter_rules: Optional[BaseFilterRules] = None
    recursive: bool = True
    report_type_mismatch: bool = False
