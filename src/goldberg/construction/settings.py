"""Generation settings and their JSON save/load."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path

from goldberg.construction.seeds import SEEDS, get_seed
from goldberg.model import Shape


@dataclass
class GenerationSettings:
    """Everything needed to reproduce one generated mesh.

    Attributes:
        seed: Name of a built-in seed (a key of
            :data:`~goldberg.construction.seeds.SEEDS`) or a custom
            :class:`~goldberg.model.Shape`.
        complexity: Number of dual/truncation iterations.
        fan_triangles: Fan triangular primary faces around a hub
            instead of emitting them unchanged.
        project_hubs: Project fan hubs onto the unit sphere.

    Raises:
        ValueError: If *seed* is an unknown name or *complexity* is
            negative.
        TypeError: If *seed* is neither a name nor a Shape, or
            *complexity* is not an integer.
    """

    seed: str | Shape = "dodecahedron"
    complexity: int = 1
    fan_triangles: bool = False
    project_hubs: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.seed, str):
            if self.seed not in SEEDS:
                raise ValueError(
                    f"unknown seed {self.seed!r}; choose from {sorted(SEEDS)}"
                )
        elif not isinstance(self.seed, Shape):
            raise TypeError(
                f"seed must be a seed name or a Shape, got "
                f"{type(self.seed).__name__}"
            )
        if isinstance(self.complexity, bool) or not isinstance(self.complexity, int):
            raise TypeError(
                f"complexity must be an int, got {type(self.complexity).__name__}"
            )
        if self.complexity < 0:
            raise ValueError(
                f"complexity must be non-negative, got {self.complexity}"
            )

    def resolve_seed(self) -> Shape:
        """Return the seed shape, building it if given by name."""
        if isinstance(self.seed, Shape):
            return self.seed
        return get_seed(self.seed)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        ``seed`` is always written (as a name, or as a nested shape
        dictionary); other fields only when they differ from their
        defaults.
        """
        d: dict = {}
        if isinstance(self.seed, Shape):
            d["seed"] = self.seed.to_dict()
        else:
            d["seed"] = self.seed
        for f in dataclasses.fields(self):
            if f.name == "seed":
                continue
            val = getattr(self, f.name)
            if val != f.default:
                d[f.name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> GenerationSettings:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(
                f"unknown keys in generation settings: {sorted(unknown)}"
            )
        kwargs = dict(d)
        if isinstance(kwargs.get("seed"), dict):
            kwargs["seed"] = Shape.from_dict(kwargs["seed"])
        return cls(**kwargs)


def save_settings(path: str | Path, settings: GenerationSettings) -> None:
    """Write *settings* to a JSON file with two-space indentation."""
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2) + "\n")


def load_settings(path: str | Path) -> GenerationSettings:
    """Read generation settings from a JSON file.

    Missing fields take their defaults.

    Raises:
        ValueError: If the file contains unknown top-level keys or
            invalid values.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"settings file must contain a JSON object, got {type(data).__name__}"
        )
    return GenerationSettings.from_dict(data)
