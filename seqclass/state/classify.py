"""Classification request/response dataclasses."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class EncodedText:
    """Token ids and attention mask for one input of a padded batch."""

    ids: list[int]
    attention_mask: list[int]

    def __len__(self) -> int:
        return len(self.ids)


@dataclass(frozen=True, slots=True)
class ClassifyResponse:
    """Winning label and its raw score for one input.

    The score is the head's output value for the winning class, passed
    through without softmax.
    """

    label: str
    score: float

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


__all__ = ["EncodedText", "ClassifyResponse"]
