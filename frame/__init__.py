"""Frame state-transition engine: entry card rendering and button resolution."""

from frame.logic import TRANSITIONS, Transition, asset_url, resolve
from frame.models import (
    MAX_BUTTONS,
    Button,
    FrameDescriptor,
    Invalid,
    NextState,
    TransitionResult,
)
from frame.render import ENTRY_LABELS, main_image_url, meta_tags, render_entry

__all__ = [
    "Button",
    "FrameDescriptor",
    "Invalid",
    "NextState",
    "TransitionResult",
    "MAX_BUTTONS",
    "Transition",
    "TRANSITIONS",
    "ENTRY_LABELS",
    "asset_url",
    "resolve",
    "render_entry",
    "main_image_url",
    "meta_tags",
]
