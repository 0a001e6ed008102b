from __future__ import annotations

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_BUTTONS = 4


class Button(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str


class FrameDescriptor(BaseModel):
    """The entry card: image, post target and the initial button row."""

    model_config = ConfigDict(frozen=True)

    image_url: str = Field(..., description="Absolute URL of the card image")
    action_url: str = Field(..., description="Absolute URL actions are posted to")
    button_labels: List[str] = Field(..., min_length=1, max_length=MAX_BUTTONS)


class NextState(BaseModel):
    model_config = ConfigDict(frozen=True)

    image_url: str
    buttons: List[Button] = Field(..., min_length=1, max_length=MAX_BUTTONS)

    @property
    def labels(self) -> List[str]:
        return [button.label for button in self.buttons]


class Invalid(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: Any = None
    reason: str

    @field_validator("reason")
    @classmethod
    def _reason_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("reason must not be empty")
        return value


TransitionResult = Union[NextState, Invalid]
