"""Torch device and dtype resolution."""

from __future__ import annotations

import torch  # type: ignore[import]

_DTYPES: dict[str, torch.dtype] = {
    "float32": torch.float32,
    "fp32": torch.float32,
    "float16": torch.float16,
    "fp16": torch.float16,
    "half": torch.float16,
    "bfloat16": torch.bfloat16,
    "bf16": torch.bfloat16,
}


def resolve_device(device: str | torch.device | None) -> torch.device:
    """Return a torch.device, defaulting to CPU.

    Raises:
        ValueError: The string is not a valid torch device.
    """
    if isinstance(device, torch.device):
        return device
    name = (device or "cpu").strip().lower()
    try:
        return torch.device(name)
    except RuntimeError as exc:
        raise ValueError(f"invalid device {device!r}: {exc}") from exc


def resolve_dtype(dtype: str | torch.dtype | None) -> torch.dtype:
    """Return the torch dtype for a config string, defaulting to float32.

    Raises:
        ValueError: The name is not a supported floating-point dtype.
    """
    if isinstance(dtype, torch.dtype):
        return dtype
    name = (dtype or "float32").strip().lower()
    if name.startswith("torch."):
        name = name[len("torch."):]
    try:
        return _DTYPES[name]
    except KeyError:
        raise ValueError(
            f"unsupported dtype {dtype!r}; expected one of {sorted(_DTYPES)}"
        ) from None


__all__ = ["resolve_device", "resolve_dtype"]
