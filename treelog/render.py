"""
Rendering Log Trees as Text

Two layouts:

show(tree)        one line per node, pre-order, indented two spaces per
                  depth level:

                      Calc
                        Got a
                        Failed: Got b - [key-1, key-2]

draw_tree(tree)   2D ASCII drawing of any Tree:

                      1
                      |
                      +- 2
                      |
                      `- 3

Annotations are rendered by a caller-supplied renderer (str by default).
Both walk the tree with an explicit stack.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .constants import (
    INDENT,
    FAILED_PREFIX,
    NO_DESCRIPTION,
    ANNOTATION_SEPARATOR,
    LINE_SEPARATOR,
    DRAW_BRANCH,
    DRAW_STEM,
    DRAW_TRUNK,
    DRAW_GAP,
    DRAW_CONNECTOR,
)
from .labels import LogTreeLabel
from .tree import Tree


@dataclass(frozen=True)
class RenderConfig:
    """
    Layout settings for `show`.

    sort_annotations orders annotations by their rendered text, so output
    does not depend on set iteration order.
    """
    indent: str = INDENT
    failed_prefix: str = FAILED_PREFIX
    no_description: str = NO_DESCRIPTION
    annotation_separator: str = ANNOTATION_SEPARATOR
    line_separator: str = LINE_SEPARATOR
    sort_annotations: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if self.indent.strip():
            raise ValueError(f"indent must be whitespace only, got {self.indent!r}")
        if not self.annotation_separator:
            raise ValueError("annotation_separator must not be empty")
        if not self.line_separator:
            raise ValueError("line_separator must not be empty")


DEFAULT_RENDER_CONFIG = RenderConfig()


def render_label(label: LogTreeLabel,
                 renderer: Callable[[Any], str] = str,
                 config: Optional[RenderConfig] = None) -> str:
    """`[Failed: ]<description or No Description>[ - [ann1, ann2]]`"""
    cfg = config or DEFAULT_RENDER_CONFIG
    text = label.fold(lambda d: d.description, lambda _: cfg.no_description)
    if not label.success:
        text = cfg.failed_prefix + text
    if label.annotations:
        rendered = [renderer(annotation) for annotation in label.annotations]
        if cfg.sort_annotations:
            rendered.sort()
        text += " - [" + cfg.annotation_separator.join(rendered) + "]"
    return text


def show_lines(tree: Tree[LogTreeLabel],
               renderer: Callable[[Any], str] = str,
               config: Optional[RenderConfig] = None) -> List[str]:
    """One rendered, indented line per node in pre-order."""
    cfg = config or DEFAULT_RENDER_CONFIG
    lines: List[str] = []
    stack: List[Tuple[Tree[LogTreeLabel], int]] = [(tree, 0)]
    while stack:
        current, depth = stack.pop()
        lines.append(cfg.indent * depth + render_label(current.label, renderer, cfg))
        stack.extend((child, depth + 1) for child in reversed(current.children))
    return lines


def show(tree: Tree[LogTreeLabel],
         renderer: Callable[[Any], str] = str,
         config: Optional[RenderConfig] = None) -> str:
    """Render a log tree as indented multi-line text (no trailing newline)."""
    cfg = config or DEFAULT_RENDER_CONFIG
    return cfg.line_separator.join(show_lines(tree, renderer, cfg))


def draw_tree(tree: Tree[Any], label_renderer: Callable[[Any], str] = str) -> str:
    """
    Draw any Tree as 2D ASCII art, one connector line before each child.

    Multi-line labels are continued under the same prefix.
    The result ends with a newline.
    """
    lines: List[str] = []
    # (subtree, prefix of ancestors, is last child, is root)
    stack: List[Tuple[Tree[Any], str, bool, bool]] = [(tree, "", True, True)]
    while stack:
        current, prefix, is_last, is_root = stack.pop()
        label_lines = label_renderer(current.label).split("\n")
        if is_root:
            lines.extend(label_lines)
            child_prefix = ""
        else:
            lines.append(prefix + DRAW_CONNECTOR)
            continuation = DRAW_GAP if is_last else DRAW_TRUNK
            lines.append(prefix + (DRAW_STEM if is_last else DRAW_BRANCH) + label_lines[0])
            lines.extend(prefix + continuation + extra for extra in label_lines[1:])
            child_prefix = prefix + continuation
        last_index = len(current.children) - 1
        for index in range(last_index, -1, -1):
            stack.append((current.children[index], child_prefix, index == last_index, False))
    return "\n".join(lines) + "\n"


__all__ = [
    'RenderConfig',
    'DEFAULT_RENDER_CONFIG',
    'render_label',
    'show_lines',
    'show',
    'draw_tree',
]
