"""
Layer Hierarchy Partitioner
===========================
Splits the flat ``layer name -> tensor`` mapping into main layers and their
internal sub-layers, following the dotted-name convention:

    conv1          -> main layer
    conv1.relu     -> internal layer of ``conv1``
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from audio_cnn_viz.schemas import LayerData


logger = logging.getLogger("audio_cnn_viz.engine.layers")

SEPARATOR = "."

NamedLayer = tuple[str, LayerData]


@dataclass(frozen=True)
class LayerPartition:
    """Main layers in encounter order plus internals keyed by parent name."""
    main: list[NamedLayer] = field(default_factory=list)
    internals: dict[str, list[NamedLayer]] = field(default_factory=dict)

    def sorted_internals(self, parent: str) -> list[NamedLayer]:
        """Internals of ``parent`` sorted by full name (display order)."""
        return sorted(self.internals.get(parent, []), key=lambda item: item[0])


def split_layers(visualizations: Mapping[str, LayerData]) -> LayerPartition:
    """
    Partition layers by the substring before the first ``.``.

    Main-layer order follows the input mapping; internals keep their raw
    append order here and are sorted at render time. Entries whose parent
    would be empty (e.g. ``".relu"``) are dropped.
    """
    main: list[NamedLayer] = []
    internals: dict[str, list[NamedLayer]] = {}

    for name, data in visualizations.items():
        if SEPARATOR not in name:
            main.append((name, data))
            continue

        parent = name.split(SEPARATOR, 1)[0]
        if not parent:
            logger.debug("Dropping layer %r: no parent name", name)
            continue
        internals.setdefault(parent, []).append((name, data))

    return LayerPartition(main=main, internals=internals)


def child_label(name: str, parent: str) -> str:
    """Strip the ``<parent>.`` prefix for internal-layer captions."""
    prefix = f"{parent}{SEPARATOR}"
    return name[len(prefix):] if name.startswith(prefix) else name
