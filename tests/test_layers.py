import pytest

from schulte.layers import (
    BuiltInUiLayer,
    LayerNotFoundError,
    Node,
    UiLayerKey,
    UiRoot,
    build_ui_root,
)


def test_root_has_every_built_in_layer_in_order():
    ui_root = build_ui_root()
    layer_keys = [child.layer for child in ui_root.root.children]
    assert layer_keys == [UiLayerKey.built_in(layer) for layer in BuiltInUiLayer]


def test_layer_nodes_are_full_size_and_absolute():
    ui_root = build_ui_root()
    for layer in BuiltInUiLayer:
        node = ui_root.get_built_in_layer_node(layer)
        assert node.absolute
        assert (node.width, node.height) == (100.0, 100.0)
        assert node.parent is ui_root.root


def test_layer_names_carry_the_layer_name():
    ui_root = build_ui_root()
    node = ui_root.get_built_in_layer_node(BuiltInUiLayer.MAIN)
    assert node.name.endswith("::Main")


def test_get_layer_node_matches_built_in_lookup():
    ui_root = build_ui_root()
    key = UiLayerKey.built_in(BuiltInUiLayer.DEBUG)
    assert ui_root.get_layer_node(key) is ui_root.get_built_in_layer_node(
        BuiltInUiLayer.DEBUG
    )


def test_missing_custom_layer():
    ui_root = build_ui_root()
    key = UiLayerKey.custom("Overlay")
    assert ui_root.try_get_layer_node(key) is None
    with pytest.raises(LayerNotFoundError):
        ui_root.get_layer_node(key)


def test_missing_built_in_layer_raises():
    ui_root = UiRoot(Node())
    with pytest.raises(LayerNotFoundError):
        ui_root.get_built_in_layer_node(BuiltInUiLayer.MAIN)


def test_custom_key_differs_from_built_in_with_same_name():
    custom = UiLayerKey.custom("Main")
    built_in = UiLayerKey.built_in(BuiltInUiLayer.MAIN)
    assert custom != built_in
    assert str(custom) == str(built_in)
    assert custom == UiLayerKey.custom("Main")


def test_add_child_reparents():
    first = Node(name="first")
    second = Node(name="second")
    child = Node(name="child")
    first.add_child(child)
    second.add_child(child)
    assert first.children == []
    assert second.children == [child]
    assert child.parent is second