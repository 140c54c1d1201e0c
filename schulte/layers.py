"""UI node tree with a root split into named, stacked layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class BuiltInUiLayer(Enum):
    """Layers every UI root has, from back to front."""

    BACKGROUND = "Background"
    MAIN = "Main"
    DEBUG = "Debug"


@dataclass(frozen=True)
class UiLayerKey:
    """Identifies a layer: either a built-in one or a custom one by name."""

    name: str
    is_built_in: bool = False

    @staticmethod
    def custom(name: str) -> UiLayerKey:
        """A custom layer key (PascalCase names are recommended)."""
        return UiLayerKey(str(name), False)

    @staticmethod
    def built_in(layer: BuiltInUiLayer) -> UiLayerKey:
        return UiLayerKey(layer.value, True)

    def __str__(self) -> str:
        return self.name


class LayerNotFoundError(LookupError):
    """A layer was requested that the UI root does not have."""


@dataclass(eq=False)
class Node:
    """A box in the UI tree; sizes are percentages of the parent."""

    name: str = ""
    width: float = 100.0
    height: float = 100.0
    absolute: bool = False
    layer: Optional[UiLayerKey] = None
    style: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)

    def add_child(self, child: Node) -> Node:
        """Attach ``child`` at the end, detaching it from any earlier parent."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return self


@dataclass
class UiRoot:
    """The root node and the layer nodes created under it."""

    root: Node
    layers: dict[UiLayerKey, Node] = field(default_factory=dict)

    def get_built_in_layer_node(self, key: BuiltInUiLayer) -> Node:
        node = self.try_get_layer_node(UiLayerKey.built_in(key))
        if node is None:
            raise LayerNotFoundError(
                f"built-in layer node for key {key.value} should have been created"
                " during bootstrap"
            )
        return node

    def try_get_layer_node(self, key: UiLayerKey) -> Optional[Node]:
        return self.layers.get(key)

    def get_layer_node(self, key: UiLayerKey) -> Node:
        node = self.try_get_layer_node(key)
        if node is None:
            raise LayerNotFoundError(
                f"layer node for key {key} should have been created during bootstrap"
            )
        return node

    def _build_layer_node(self, key: BuiltInUiLayer) -> bool:
        """Create a layer under the root; True if it replaced an existing one."""
        layer_key = UiLayerKey.built_in(key)
        node = Node(
            name=f"UiRoot::Layer::{key.value}",
            absolute=True,
            layer=layer_key,
        )
        self.root.add_child(node)
        replaced = layer_key in self.layers
        self.layers[layer_key] = node
        return replaced


def build_ui_root() -> UiRoot:
    """Create a full-size root with every built-in layer, back to front."""
    ui_root = UiRoot(Node(name="UiRoot"))
    for layer in BuiltInUiLayer:
        ui_root._build_layer_node(layer)
    return ui_root