"""Build parameters for a multigrid tiling.

:class:`TilingParams` is the single parameter surface: one offset per
pencil plus an inset.  The older single-offset form is accepted through
:meth:`TilingParams.uniform`, which simply repeats the offset.

Usage
-----
>>> from multigrid.config import PENROSE, build_from_params
>>> tiling = build_from_params(PENROSE)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from .multigrid import Tiling, build, validate_parameters

DEFAULT_OFFSET = 0.2


@dataclass(frozen=True)
class TilingParams:
    """All inputs of :func:`~multigrid.multigrid.build`.

    Attributes
    ----------
    symmetry : int
        Number of pencils; 5 gives Penrose rhombus tilings.
    radius : int
        Lines per pencil on each side of the central one.
    offsets : tuple[float, ...] | None
        One offset per pencil.  ``None`` means ``DEFAULT_OFFSET`` for
        every pencil.
    inset : float
        Shrinks each pencil's boundary band, in ``[0, 1)``.
    """

    symmetry: int = 5
    radius: int = 3
    offsets: Optional[Tuple[float, ...]] = field(default=None)
    inset: float = 0.0

    def __post_init__(self) -> None:
        if self.offsets is None:
            offsets = (DEFAULT_OFFSET,) * max(self.symmetry, 0)
        else:
            offsets = tuple(float(o) for o in self.offsets)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def uniform(
        cls,
        symmetry: int,
        radius: int,
        offset: float = DEFAULT_OFFSET,
        inset: float = 0.0,
    ) -> "TilingParams":
        """Parameters with the same offset on every pencil."""
        return cls(symmetry, radius, (offset,) * max(symmetry, 0), inset)

    def validate(self) -> List[str]:
        return validate_parameters(self.symmetry, self.radius, self.offsets, self.inset)

    def with_radius(self, radius: int) -> "TilingParams":
        return replace(self, radius=radius)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symmetry": self.symmetry,
            "radius": self.radius,
            "offsets": list(self.offsets),
            "inset": self.inset,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TilingParams":
        offsets = data.get("offsets")
        return cls(
            symmetry=int(data.get("symmetry", 5)),
            radius=int(data.get("radius", 3)),
            offsets=tuple(offsets) if offsets is not None else None,
            inset=float(data.get("inset", 0.0)),
        )


def build_from_params(params: TilingParams) -> Tiling:
    return build(params.symmetry, params.radius, params.offsets, params.inset)


# ═══════════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════════

PENROSE = TilingParams(symmetry=5, radius=3, offsets=(0.2,) * 5, inset=0.0)

AMMANN_BEENKER = TilingParams(symmetry=8, radius=2, offsets=(0.2,) * 8, inset=0.0)

SQUARE = TilingParams(symmetry=4, radius=2, offsets=(0.1, 0.2, 0.3, 0.4), inset=0.0)

PRESETS: Dict[str, TilingParams] = {
    "penrose": PENROSE,
    "ammann-beenker": AMMANN_BEENKER,
    "square": SQUARE,
}
