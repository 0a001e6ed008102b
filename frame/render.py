from __future__ import annotations

from typing import List, Tuple

from frame.logic import TRANSITIONS, asset_url
from frame.models import FrameDescriptor


FRAME_VERSION = "vNext"
MAIN_ASSET = "main.png"
ACTION_PATH = "/api/frame"

ENTRY_LABELS: Tuple[str, ...] = tuple(
    TRANSITIONS[position].entry_label for position in sorted(TRANSITIONS)
)


def main_image_url(domain: str) -> str:
    return asset_url(domain, MAIN_ASSET)


def render_entry(domain: str) -> FrameDescriptor:
    return FrameDescriptor(
        image_url=main_image_url(domain),
        action_url=f"{domain}{ACTION_PATH}",
        button_labels=list(ENTRY_LABELS),
    )


def meta_tags(descriptor: FrameDescriptor) -> List[Tuple[str, str]]:
    """Ordered ``(property, content)`` pairs for the entry document."""
    tags: List[Tuple[str, str]] = [
        ("fc:frame", FRAME_VERSION),
        ("fc:frame:image", descriptor.image_url),
    ]
    for position, label in enumerate(descriptor.button_labels, start=1):
        tags.append((f"fc:frame:button:{position}", label))
    tags.append(("fc:frame:post_url", descriptor.action_url))
    return tags
