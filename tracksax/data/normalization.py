# tracksax/data/normalization.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union

import numpy as np

from ..errors import InvalidParams


ArrayLike = Union[float, np.ndarray]


@dataclass(frozen=True)
class NormParams:
    """
    z-normalization parameters: (x - mean) / std.

    `None` in place of a NormParams means "compute from data"; see
    resolve_params().
    """
    mean: float
    std: float

    def __post_init__(self) -> None:
        if not np.isfinite(self.mean):
            raise InvalidParams(f"mean must be finite, got {self.mean}")
        if not np.isfinite(self.std) or self.std <= 0:
            raise InvalidParams(f"std must be > 0, got {self.std}")

    @staticmethod
    def from_options(mean: Optional[float], std: Optional[float]) -> Optional["NormParams"]:
        """
        Build fixed parameters from user options.

        Both or neither must be supplied. Returns None (compute from data)
        when neither is.
        """
        if mean is None and std is None:
            return None
        if mean is None or std is None:
            raise InvalidParams("if mean is specified, std is required, and vice versa")
        try:
            mean, std = float(mean), float(std)
        except (TypeError, ValueError) as exc:
            raise InvalidParams(f"mean and std must be numbers, got mean={mean!r} std={std!r}") from exc
        return NormParams(mean=mean, std=std)

    def as_dict(self) -> Dict[str, float]:
        return {"mean": self.mean, "std": self.std}


def fit_params(x: np.ndarray) -> NormParams:
    """
    Population mean/std (ddof=0) over a whole series.

    NaN positions are ignored. A series with no finite values, or with zero
    spread, cannot be z-normalized and raises InvalidParams.
    """
    x = np.asarray(x, dtype=np.float64)
    finite = x[np.isfinite(x)]
    if finite.size == 0:
        raise InvalidParams("cannot derive mean/std: series has no finite values")

    mu = float(finite.mean())
    sigma = float(finite.std())
    if sigma <= 0:
        raise InvalidParams(
            f"cannot z-normalize: data std is 0 (constant series, mean={mu:.4f}); "
            "supply mean and std explicitly"
        )
    return NormParams(mean=mu, std=sigma)


def normalize(value: ArrayLike, params: NormParams) -> ArrayLike:
    """Apply z-normalization: (value - mean) / std."""
    if isinstance(value, np.ndarray):
        return (value.astype(np.float64) - params.mean) / params.std
    return (float(value) - params.mean) / params.std


def resolve_params(x: np.ndarray, params: Optional[NormParams]) -> NormParams:
    """Return `params` when given, else statistics fitted on `x`."""
    if params is not None:
        return params
    return fit_params(x)
