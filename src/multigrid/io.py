from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from .config import TilingParams, build_from_params
from .multigrid import Tiling

PathLike = Union[str, Path]

VERSION = "1.0"


def tiling_to_dict(tiling: Tiling) -> dict:
    tiles_payload = []
    for tile in tiling.tiles:
        tiles_payload.append({
            "intersection": list(tile.intersection.as_tuple()),
            "vertices": [list(v.as_tuple()) for v in tile.vertices],
            "indices": list(tile.indices),
            "area": tile.area,
        })
    return {
        "version": VERSION,
        "params": tiling.params.to_dict(),
        "tiling_radius": tiling.tiling_radius,
        "areas": list(tiling.areas),
        "signatures": [list(sig) for sig in sorted(tiling.signatures)],
        "tiles": tiles_payload,
    }


def tiling_to_json(tiling: Tiling, indent: int = 2) -> str:
    return json.dumps(tiling_to_dict(tiling), indent=indent)


def save_json(tiling: Tiling, path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tiling_to_json(tiling), encoding="utf-8")


def load_json(path: PathLike) -> Tiling:
    """Rebuild a tiling from the parameters stored in an exported file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return build_from_params(TilingParams.from_dict(data["params"]))
