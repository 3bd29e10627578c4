"""
Serializable Form of DescribedComputation
=========================================

Flattens a DescribedComputation into plain data that a caller can
persist, and rebuilds it exactly:

    from_serializable_form(to_serializable_form(dc)) == dc

SerializableTree mirrors Tree (label + list of children) but is a plain
mutable-free record decoupled from the Tree class. to_dict / from_dict
go one step further, to JSON-compatible dicts:

    {
      "outcome": {"Right": <encoded value>}   or   {"Left": "<message>"},
      "tree": {
        "label": {"success": true, "annotations": [...], "description": "..."},
        "children": [ ... ]
      }
    }

"description" is present only for described labels. Values and
annotations are encoded by caller-supplied functions; the defaults pass
them through unchanged. All conversions are iterative.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple, TypeVar

from .computation import DescribedComputation
from .constants import (
    KEY_OUTCOME,
    KEY_TREE,
    KEY_LABEL,
    KEY_CHILDREN,
    KEY_DESCRIPTION,
    KEY_SUCCESS,
    KEY_ANNOTATIONS,
    KEY_RIGHT,
    KEY_LEFT,
)
from .labels import LogTreeLabel, described_label, undescribed_label
from .log_tree import LogTree
from .outcome import Outcome, Success, Failure
from .tree import Tree


logger = logging.getLogger(__name__)

V = TypeVar("V")


def _identity(x):
    return x


def _require_dict(d: Any, kind: str) -> None:
    if not isinstance(d, dict):
        raise ValueError(f"{kind} must be a dict, got {type(d).__name__}: {d!r}")


@dataclass(frozen=True)
class SerializableTree:
    """Label plus ordered children, structurally identical to a LogTree."""
    label: LogTreeLabel
    children: Tuple["SerializableTree", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SerializableDescribedComputation:
    """Outcome and flattened tree of a DescribedComputation."""
    outcome: Outcome[Any]
    tree: SerializableTree


# =============================================================================
# SECTION 1: Tree <-> SerializableTree
# =============================================================================

def _convert(root: Any, make: Callable[[Any, Tuple[Any, ...]], Any]) -> Any:
    """Rebuild a (label, children) structure bottom-up without recursion."""
    results: Dict[int, Any] = {}
    stack: List[Tuple[Any, bool]] = [(root, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded:
            children = tuple(results[id(child)] for child in current.children)
            results[id(current)] = make(current.label, children)
        elif id(current) not in results:
            stack.append((current, True))
            stack.extend((child, False) for child in current.children)
    return results[id(root)]


def to_serializable_tree(tree: LogTree) -> SerializableTree:
    return _convert(tree, SerializableTree)


def from_serializable_tree(tree: SerializableTree) -> LogTree:
    return _convert(tree, Tree)


def to_serializable_form(dc: DescribedComputation[V]) -> SerializableDescribedComputation:
    """Flatten `dc` into its serializable form."""
    return SerializableDescribedComputation(dc.outcome, to_serializable_tree(dc.tree))


def from_serializable_form(sdc: SerializableDescribedComputation) -> DescribedComputation[Any]:
    """Inverse of to_serializable_form."""
    return DescribedComputation(sdc.outcome, from_serializable_tree(sdc.tree))


# =============================================================================
# SECTION 2: Serializable form <-> JSON-compatible dicts
# =============================================================================

def label_to_dict(label: LogTreeLabel,
                  annotation_encoder: Callable[[Any], Any] = _identity) -> Dict[str, Any]:
    """Serialize a label to a dict."""
    encoded = [annotation_encoder(a) for a in label.annotations]
    d: Dict[str, Any] = {
        KEY_SUCCESS: label.success,
        KEY_ANNOTATIONS: sorted(encoded, key=repr),
    }
    if label.is_described:
        d[KEY_DESCRIPTION] = label.description
    return d


def label_from_dict(d: Dict[str, Any],
                    annotation_decoder: Callable[[Any], Any] = _identity) -> LogTreeLabel:
    """Deserialize a label from a dict."""
    _require_dict(d, "Label")
    if KEY_SUCCESS not in d:
        raise ValueError(f"Label dict is missing '{KEY_SUCCESS}': {d!r}")
    annotations = [annotation_decoder(a) for a in d.get(KEY_ANNOTATIONS, [])]
    if KEY_DESCRIPTION in d:
        return described_label(d[KEY_DESCRIPTION], bool(d[KEY_SUCCESS]), annotations)
    return undescribed_label(bool(d[KEY_SUCCESS]), annotations)


def tree_to_dict(tree: SerializableTree,
                 annotation_encoder: Callable[[Any], Any] = _identity) -> Dict[str, Any]:
    return _convert(tree, lambda label, children: {
        KEY_LABEL: label_to_dict(label, annotation_encoder),
        KEY_CHILDREN: list(children),
    })


@dataclass
class _DictNode:
    label: LogTreeLabel
    children: List["_DictNode"]


def tree_from_dict(d: Dict[str, Any],
                   annotation_decoder: Callable[[Any], Any] = _identity) -> SerializableTree:
    # Parse labels top-down, then rebuild the frozen tree bottom-up
    root = _DictNode(None, [])
    stack: List[Tuple[Dict[str, Any], _DictNode]] = [(d, root)]
    while stack:
        current, target = stack.pop()
        _require_dict(current, "Tree")
        if KEY_LABEL not in current:
            raise ValueError(f"Tree dict is missing '{KEY_LABEL}': {current!r}")
        target.label = label_from_dict(current[KEY_LABEL], annotation_decoder)
        children = current.get(KEY_CHILDREN, [])
        if not isinstance(children, list):
            raise ValueError(f"Tree '{KEY_CHILDREN}' must be a list, got {type(children).__name__}")
        for child in children:
            placeholder = _DictNode(None, [])
            target.children.append(placeholder)
            stack.append((child, placeholder))
    return _convert(root, SerializableTree)


def outcome_to_dict(outcome: Outcome[Any],
                    value_encoder: Callable[[Any], Any] = _identity) -> Dict[str, Any]:
    return outcome.fold(lambda message: {KEY_LEFT: message},
                        lambda value: {KEY_RIGHT: value_encoder(value)})


def outcome_from_dict(d: Dict[str, Any],
                      value_decoder: Callable[[Any], Any] = _identity) -> Outcome[Any]:
    _require_dict(d, "Outcome")
    if KEY_RIGHT in d:
        return Success(value_decoder(d[KEY_RIGHT]))
    if KEY_LEFT in d:
        return Failure(d[KEY_LEFT])
    raise ValueError(f"Outcome dict must have '{KEY_RIGHT}' or '{KEY_LEFT}': {d!r}")


def to_dict(dc: DescribedComputation[Any],
            value_encoder: Callable[[Any], Any] = _identity,
            annotation_encoder: Callable[[Any], Any] = _identity) -> Dict[str, Any]:
    """Serialize a DescribedComputation to a JSON-compatible dict."""
    sdc = to_serializable_form(dc)
    logger.debug("Serializing computation with %d log nodes", dc.tree.size())
    return {
        KEY_OUTCOME: outcome_to_dict(sdc.outcome, value_encoder),
        KEY_TREE: tree_to_dict(sdc.tree, annotation_encoder),
    }


def from_dict(d: Dict[str, Any],
              value_decoder: Callable[[Any], Any] = _identity,
              annotation_decoder: Callable[[Any], Any] = _identity) -> DescribedComputation[Any]:
    """Deserialize a DescribedComputation from a dict produced by to_dict."""
    _require_dict(d, "Computation")
    for key in (KEY_OUTCOME, KEY_TREE):
        if key not in d:
            raise ValueError(f"Computation dict is missing '{key}'")
    sdc = SerializableDescribedComputation(
        outcome=outcome_from_dict(d[KEY_OUTCOME], value_decoder),
        tree=tree_from_dict(d[KEY_TREE], annotation_decoder),
    )
    dc = from_serializable_form(sdc)
    logger.debug("Deserialized computation with %d log nodes", dc.tree.size())
    return dc


def dumps(dc: DescribedComputation[Any],
          value_encoder: Callable[[Any], Any] = _identity,
          annotation_encoder: Callable[[Any], Any] = _identity,
          **json_kwargs) -> str:
    return json.dumps(to_dict(dc, value_encoder, annotation_encoder), **json_kwargs)


def loads(s: str,
          value_decoder: Callable[[Any], Any] = _identity,
          annotation_decoder: Callable[[Any], Any] = _identity) -> DescribedComputation[Any]:
    return from_dict(json.loads(s), value_decoder, annotation_decoder)


__all__ = [
    'SerializableTree',
    'SerializableDescribedComputation',
    'to_serializable_tree',
    'from_serializable_tree',
    'to_serializable_form',
    'from_serializable_form',
    'label_to_dict',
    'label_from_dict',
    'tree_to_dict',
    'tree_from_dict',
    'outcome_to_dict',
    'outcome_from_dict',
    'to_dict',
    'from_dict',
    'dumps',
    'loads',
]
