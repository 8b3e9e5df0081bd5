import pytest

from gatekit.node_tree import (
    Method,
    ServiceNode,
    ServiceNotFound,
    build_default_tree,
    find_process,
)


@pytest.fixture
def tree():
    return build_default_tree()


def test_resolves_nested_leaf(tree):
    process, node = find_process(tree, "logInfo/config/info")
    assert node.name == "info"
    assert process is node.process
    log_config = tree[1].children[0]
    assert node is log_config.children[1]


def test_same_name_at_different_levels_differs(tree):
    _, deep = find_process(tree, "logInfo/config/info")
    _, shallow = find_process(tree, "logInfo/info")
    assert deep is not shallow
    assert shallow is tree[1].children[1]


def test_root_level_handler(tree):
    process, node = find_process(tree, "network")
    assert node is tree[2]
    assert Method.POST in node.methods
    assert Method.GET in node.methods


def test_node_without_handler_is_not_found(tree):
    with pytest.raises(ServiceNotFound):
        find_process(tree, "system")


def test_unknown_component(tree):
    with pytest.raises(ServiceNotFound):
        find_process(tree, "system/missing")


def test_path_beyond_leaf(tree):
    with pytest.raises(ServiceNotFound):
        find_process(tree, "system/info/extra")


def test_empty_path(tree):
    with pytest.raises(LookupError):
        find_process(tree, "")
    with pytest.raises(LookupError):
        find_process(tree, "///")


def test_extra_slashes_are_skipped(tree):
    _, node = find_process(tree, "/system//config/")
    assert node is tree[0].children[0]


def test_custom_tree_handler_called():
    calls = []
    leaf = ServiceNode("leaf", lambda node, args: calls.append((node.name, args)))
    nodes = [ServiceNode("root", children=[leaf])]
    process, node = find_process(nodes, "root/leaf")
    process(node, 5)
    assert calls == [("leaf", 5)]


def test_default_tree_shape(tree):
    assert [node.name for node in tree] == ["system", "logInfo", "network"]
    assert [child.name for child in tree[0].children] == ["config", "info"]