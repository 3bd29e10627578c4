"""
TreeLog - Hierarchical Execution Logs for Composed Computations

Builds a tree-shaped log in lock-step with a computation, so that a
caller can inspect both the result and a structured account of how it
was derived, including which steps succeeded or failed.
"""

__version__ = "0.1.0"

from .tree import Tree, leaf, node
from .labels import (
    LogTreeLabel,
    DescribedLogTreeLabel,
    UndescribedLogTreeLabel,
    described_label,
    undescribed_label,
)
from .outcome import Outcome, Success, Failure
from .log_tree import LogTree, NIL_TREE, merge, merge_all
from .computation import DescribedComputation, success, failure, failure_of, failure_log
from .syntax import (
    branch,
    branch_fold,
    map_each,
    hoist,
    fold_log,
    annotate,
    all_annotations,
    from_bool,
    from_optional,
    from_either,
    optional_or_default,
    sequence,
    described,
)
from .render import RenderConfig, show, draw_tree
from .serialization import (
    SerializableTree,
    SerializableDescribedComputation,
    to_serializable_form,
    from_serializable_form,
    to_dict,
    from_dict,
    dumps,
    loads,
)
from .transformer import DescribedComputationT, LIST_EFFECT, OPTIONAL_EFFECT
from .futures import gather

__all__ = [
    "Tree",
    "leaf",
    "node",
    "LogTreeLabel",
    "DescribedLogTreeLabel",
    "UndescribedLogTreeLabel",
    "described_label",
    "undescribed_label",
    "Outcome",
    "Success",
    "Failure",
    "LogTree",
    "NIL_TREE",
    "merge",
    "merge_all",
    "DescribedComputation",
    "success",
    "failure",
    "failure_of",
    "failure_log",
    "branch",
    "branch_fold",
    "map_each",
    "hoist",
    "fold_log",
    "annotate",
    "all_annotations",
    "from_bool",
    "from_optional",
    "from_either",
    "optional_or_default",
    "sequence",
    "described",
    "RenderConfig",
    "show",
    "draw_tree",
    "SerializableTree",
    "SerializableDescribedComputation",
    "to_serializable_form",
    "from_serializable_form",
    "to_dict",
    "from_dict",
    "dumps",
    "loads",
    "DescribedComputationT",
    "LIST_EFFECT",
    "OPTIONAL_EFFECT",
    "gather",
]
