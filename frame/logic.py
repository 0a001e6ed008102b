from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from frame.models import Button, Invalid, NextState, TransitionResult


ASSETS_PATH = "/assets"


@dataclass(frozen=True)
class Transition:
    entry_label: str
    asset: str
    labels: Tuple[str, ...]


# Keyed by the 1-based position of the pressed button on the entry card.
TRANSITIONS: Mapping[int, Transition] = MappingProxyType({
    1: Transition(
        entry_label="Buy & Boost",
        asset="buy_boost.png",
        labels=("Confirm", "Back"),
    ),
    2: Transition(
        entry_label="Add Liquidity",
        asset="add_liquidity.png",
        labels=("Add", "Back"),
    ),
    3: Transition(
        entry_label="Gift",
        asset="gift.png",
        labels=("Send Gift", "Back"),
    ),
    4: Transition(
        entry_label="More",
        asset="more.png",
        labels=("Reward", "Bid", "Top-up", "Back"),
    ),
})


def asset_url(domain: str, name: str) -> str:
    return f"{domain}{ASSETS_PATH}/{name}"


def resolve(index: object, domain: str) -> TransitionResult:
    """Map a pressed button index to the next card.

    The index comes from the caller unverified. Anything that is not a key
    of ``TRANSITIONS`` comes back as ``Invalid``; this function never
    raises and has no side effects.
    """
    # bool is an int subclass; True must not resolve as button 1
    if isinstance(index, bool) or not isinstance(index, int):
        return Invalid(index=index, reason=f"Invalid button index: {index!r}")

    transition = TRANSITIONS.get(index)
    if transition is None:
        return Invalid(index=index, reason=f"Invalid button index: {index}")

    return NextState(
        image_url=asset_url(domain, transition.asset),
        buttons=[Button(label=label) for label in transition.labels],
    )
