# treelog/constants.py
"""
TreeLog Constants

This module defines constants used throughout the treelog package:

LAYER 1: Rendering Constants (Text Layout)
- INDENT: Indentation added per depth level
- FAILED_PREFIX: Prefix for nodes whose success flag is False
- NO_DESCRIPTION: Text shown for undescribed nodes
- ANNOTATION_SEPARATOR: Separator between rendered annotations

LAYER 2: Drawing Constants (2D ASCII Trees)
- DRAW_BRANCH / DRAW_STEM / DRAW_TRUNK / DRAW_GAP

LAYER 3: Serialization Keys (Dict / JSON Form)
- KEY_*: Keys used by to_dict / from_dict
"""


# =============================================================================
# LAYER 1: Rendering Constants (Text Layout)
# =============================================================================

INDENT = "  "                    # Two spaces per depth level
FAILED_PREFIX = "Failed: "
NO_DESCRIPTION = "No Description"
ANNOTATION_SEPARATOR = ", "
LINE_SEPARATOR = "\n"

assert INDENT.strip() == "", "INDENT must be whitespace only"


# =============================================================================
# LAYER 2: Drawing Constants (2D ASCII Trees)
# =============================================================================

DRAW_BRANCH = "+- "   # Child that has later siblings
DRAW_STEM = "`- "     # Last child
DRAW_TRUNK = "|  "    # Continuation under a non-last child
DRAW_GAP = "   "      # Continuation under a last child
DRAW_CONNECTOR = "|"

assert len(DRAW_BRANCH) == len(DRAW_STEM) == len(DRAW_TRUNK) == len(DRAW_GAP)


# =============================================================================
# LAYER 3: Serialization Keys (Dict / JSON Form)
# =============================================================================

KEY_OUTCOME = "outcome"
KEY_TREE = "tree"
KEY_LABEL = "label"
KEY_CHILDREN = "children"
KEY_DESCRIPTION = "description"
KEY_SUCCESS = "success"
KEY_ANNOTATIONS = "annotations"

# Outcome tags follow the Either convention: Right = success, Left = failure
KEY_RIGHT = "Right"
KEY_LEFT = "Left"
