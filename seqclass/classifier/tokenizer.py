"""Tokenizer adapter with batch-consistent padding.

Wraps a tokenizers.Tokenizer loaded from the bundle's tokenizer.json and
configures it once, before any encoding:

- Padding: pad every batch to its longest member using the pad token id
  declared in config.json, on the right.
- Truncation: disabled unless a max_length is given. With truncation off,
  inputs longer than the encoder's positional capacity reach the model
  unchanged and fail (or misbehave) in the forward pass.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

# Disable tokenizers parallelism before importing tokenizers (prevents fork warnings)
os.environ.setdefault("TOKENIZERS_PARALLELISM", "false")

from tokenizers import Tokenizer  # noqa: E402

from ..errors import TokenizerEncodeError, TokenizerLoadError  # noqa: E402
from ..state import EncodedText  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_PAD_TOKEN = "[PAD]"


class TokenizerAdapter:
    """Batch encoder over a configured tokenizers.Tokenizer."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        *,
        pad_token_id: int,
        max_length: int | None = None,
    ) -> None:
        """Configure padding and truncation on the wrapped tokenizer.

        Args:
            tokenizer: Tokenizer built from tokenizer.json. It is mutated in place.
            pad_token_id: Padding id from the model configuration.
            max_length: Optional truncation budget in tokens; None disables truncation.
        """
        self._tokenizer = tokenizer
        self._pad_token_id = int(pad_token_id)
        self._max_length = max_length

        pad_token = tokenizer.id_to_token(self._pad_token_id) or DEFAULT_PAD_TOKEN
        try:
            tokenizer.enable_padding(
                direction="right",
                pad_id=self._pad_token_id,
                pad_token=pad_token,
            )
            if max_length is None:
                tokenizer.no_truncation()
            else:
                tokenizer.enable_truncation(max_length=max_length)
        except Exception as exc:  # noqa: BLE001
            raise TokenizerLoadError(f"failed to configure tokenizer: {exc}") from exc

    @classmethod
    def from_file(
        cls,
        path: Path,
        *,
        pad_token_id: int,
        max_length: int | None = None,
    ) -> TokenizerAdapter:
        """Load tokenizer.json and configure it for batch encoding.

        Raises:
            TokenizerLoadError: The file is malformed or not a tokenizer definition.
        """
        try:
            tokenizer = Tokenizer.from_file(str(path))
        except Exception as exc:  # noqa: BLE001
            raise TokenizerLoadError(f"invalid tokenizer definition: {exc}", path=path) from exc
        logger.debug(
            "tokenizer: loaded path=%s vocab=%s pad_id=%s max_length=%s",
            path,
            tokenizer.get_vocab_size(),
            pad_token_id,
            max_length,
        )
        return cls(tokenizer, pad_token_id=pad_token_id, max_length=max_length)

    @property
    def pad_token_id(self) -> int:
        return self._pad_token_id

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def encode_batch(self, texts: Sequence[str]) -> list[EncodedText]:
        """Encode texts into equally padded id/mask pairs, one per input.

        Raises:
            TokenizerEncodeError: texts is a bare string, or any input is not a
                string or fails to encode.
        """
        if isinstance(texts, str):
            raise TokenizerEncodeError("expected a sequence of strings, got a single str")
        batch = list(texts)
        if not batch:
            return []
        for index, text in enumerate(batch):
            if not isinstance(text, str):
                raise TokenizerEncodeError(
                    f"input {index} is {type(text).__name__}, expected str"
                )
        try:
            encodings = self._tokenizer.encode_batch(batch, add_special_tokens=True)
        except Exception as exc:  # noqa: BLE001
            raise TokenizerEncodeError(f"failed to encode batch: {exc}") from exc
        return [
            EncodedText(ids=list(enc.ids), attention_mask=list(enc.attention_mask))
            for enc in encodings
        ]


__all__ = ["TokenizerAdapter"]
