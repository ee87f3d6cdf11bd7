"""Tests for the error tree model: validation, traversal, declarative loading."""

import pytest

from errortree import CategoryNode, ErrorTree, LeafVariant, StructureError, category, leaf
from errortree.errors import ConfigError
from errortree.model import FieldSpec


def test_walk_is_depth_first_in_declaration_order(fs_tree):
    paths = [path for path, _ in fs_tree.walk()]
    assert paths == [
        "file",
        "file.not_found",
        "file.not_a_file",
        "access",
        "access.denied",
        "lint",
        "lint.long_line",
    ]


def test_walk_excludes_root(fs_tree):
    assert all(node is not fs_tree.root() for _, node in fs_tree.walk())


def test_leaves_only_yields_leaf_variants(fs_tree):
    leaves = list(fs_tree.leaves())
    assert len(leaves) == len(fs_tree) == 4
    assert all(isinstance(node, LeafVariant) for _, node in leaves)


def test_find_leaf_by_dotted_path_or_sequence(fs_tree):
    by_str = fs_tree.find_leaf("file.not_found")
    by_seq = fs_tree.find_leaf(["file", "not_found"])
    assert by_str is by_seq
    assert by_str.description == "File {path!r} not found."


def test_find_leaf_returns_none_for_categories_and_unknown_paths(fs_tree):
    assert fs_tree.find_leaf("file") is None
    assert fs_tree.find_leaf("file.missing") is None
    assert "access.denied" in fs_tree
    assert "access" not in fs_tree


def test_root_must_be_a_category():
    with pytest.raises(StructureError, match="root must be a category"):
        ErrorTree(leaf("lonely", 0, "x"))


def test_duplicate_sibling_names_rejected():
    root = category("root", leaf("a", 0, "x"), leaf("a", 1, "y"))
    with pytest.raises(StructureError) as exc:
        ErrorTree(root)
    assert exc.value.path == "a"
    assert "duplicate name" in exc.value.rule


def test_same_name_under_different_parents_is_fine():
    tree = ErrorTree(
        category(
            "root",
            category("x", leaf("a", 0, "x")),
            category("y", leaf("a", 0, "y")),
        )
    )
    assert "x.a" in tree
    assert "y.a" in tree


def test_empty_category_rejected():
    root = category("root", category("io"), leaf("a", 0, "x"))
    with pytest.raises(StructureError) as exc:
        ErrorTree(root)
    assert exc.value.path == "io"


def test_negative_leaf_number_rejected():
    with pytest.raises(StructureError, match="non-negative"):
        ErrorTree(category("root", leaf("a", -1, "x")))


def test_negative_category_number_rejected():
    with pytest.raises(StructureError, match="non-negative"):
        ErrorTree(category("root", category("c", leaf("a", 0, "x"), number=-3)))


def test_non_integer_number_rejected():
    with pytest.raises(StructureError, match="integer"):
        ErrorTree(category("root", leaf("a", True, "x")))


def test_dotted_name_rejected():
    with pytest.raises(StructureError, match="invalid node name"):
        ErrorTree(category("root", leaf("a.b", 0, "x")))


def test_duplicate_field_rejected():
    with pytest.raises(StructureError, match="duplicate field"):
        ErrorTree(category("root", leaf("a", 0, "{x}", fields=["x", "x"])))


def test_unknown_field_type_rejected():
    with pytest.raises(StructureError, match="unknown type 'bytes'"):
        ErrorTree(category("root", leaf("a", 0, "{x}", fields={"x": "bytes"})))


def test_field_spec_accepts():
    assert FieldSpec("n", "int").accepts(3)
    assert not FieldSpec("n", "int").accepts(True)
    assert not FieldSpec("n", "int").accepts("3")
    assert FieldSpec("f", "float").accepts(3)
    assert FieldSpec("b", "bool").accepts(False)
    assert FieldSpec("a").accepts(object())


def test_leaf_fields_keep_declaration_order():
    variant = leaf("a", 0, "{b} {a}", fields={"b": "str", "a": "int"})
    assert variant.field_names() == ("b", "a")


# -- from_dict -----------------------------------------------------------------


def test_from_dict_builds_categories_and_leaves():
    tree = ErrorTree.from_dict(
        {
            "acronym": "E",
            "children": [
                {
                    "name": "io",
                    "number": 1,
                    "children": [
                        {"name": "eof", "number": 0, "description": "Unexpected EOF."},
                    ],
                },
                {"name": "other", "number": 9, "description": "{what}", "fields": ["what"]},
            ],
        }
    )
    root = tree.root()
    assert isinstance(root, CategoryNode)
    assert root.name == "root"
    assert root.acronym == "E"
    assert tree.find_leaf("io.eof").description == "Unexpected EOF."
    assert tree.find_leaf("other").fields == (FieldSpec("what"),)


def test_from_dict_root_needs_children():
    with pytest.raises(ConfigError, match="children"):
        ErrorTree.from_dict({"name": "root"})


def test_from_dict_leaf_missing_number():
    with pytest.raises(ConfigError, match="missing 'number'"):
        ErrorTree.from_dict({"children": [{"name": "a", "description": "x"}]})


def test_from_dict_unknown_key():
    with pytest.raises(ConfigError, match="unknown key"):
        ErrorTree.from_dict(
            {"children": [{"name": "a", "number": 0, "description": "x", "severity": "high"}]}
        )


def test_from_dict_child_without_name():
    with pytest.raises(ConfigError, match="missing a 'name'"):
        ErrorTree.from_dict({"children": [{"number": 0, "description": "x"}]})


@pytest.mark.parametrize(
    "node",
    [
        category("root", leaf("a", 0, 5)),
        category("root", leaf("a", 0, "x", label=["here"])),
        category("root", leaf("a", 0, "x", kind=1)),
        category("root", category("c", leaf("a", 0, "x"), acronym=7)),
        category("root", leaf("a", 0, "x"), description=3.5),
    ],
)
def test_non_string_text_rejected(node):
    with pytest.raises(StructureError, match="must be a string"):
        ErrorTree(node)
