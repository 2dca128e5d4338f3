from types import SimpleNamespace
from unittest import mock

import pytest

from familygraph.graph import (
    DudeNotFoundError,
    DuplicateDudeError,
    DuplicateEdgeError,
    EdgeNotFoundError,
    FamilyGraph,
    InvalidArgumentError,
    NameTakenError,
    NoChangeError,
    NoHeirsError,
    Relation,
    Sex,
    generate_image,
)


@pytest.fixture
def family():
    graph = FamilyGraph()
    graph.add_dude("grandpa", Sex.MALE, 1940, None)
    graph.add_dude("father", Sex.MALE, 1970, None)
    graph.add_dude("kid", Sex.FEMALE, 2000, None)
    graph.add_edge("grandpa", "father", Relation.CHILD)
    graph.add_edge("father", "kid", Relation.CHILD)
    return graph


def test_add_and_search():
    graph = FamilyGraph()
    graph.add_dude("Ann", Sex.FEMALE, 1950, 2000)
    graph.add_dude("Bob", Sex.MALE, None, None)
    assert len(graph) == 2
    assert graph.search("Bob") == 1
    assert graph.search("Nobody") is None
    assert graph[0].name == "Ann"
    assert [d.name for d in graph] == ["Ann", "Bob"]
    assert graph[1].alive and not graph[0].alive


def test_add_dude_errors():
    graph = FamilyGraph()
    graph.add_dude("Ann", Sex.FEMALE, None, 1990)
    with pytest.raises(DuplicateDudeError):
        graph.add_dude("Ann", Sex.FEMALE, 1950, None)
    with pytest.raises(InvalidArgumentError):
        graph.add_dude("", Sex.MALE, 1950, None)
    with pytest.raises(InvalidArgumentError):
        graph.add_dude("Bob", Sex.MALE, 1990, 1950)
    assert len(graph) == 1


def test_delete_dude_moves_last_into_slot():
    graph = FamilyGraph()
    for name in ("A", "B", "C"):
        graph.add_dude(name, Sex.MALE, None, None)
    graph.add_edge("A", "B", Relation.CHILD)
    graph.add_edge("C", "B", Relation.PARENT)
    graph.delete_dude("A")
    assert [d.name for d in graph] == ["C", "B"]
    assert [e.to for e in graph[1].edges] == [graph.search("C")]
    assert graph[0].edges[0].to == graph.search("B")
    with pytest.raises(DudeNotFoundError):
        graph.delete_dude("A")


def test_delete_last_dude_empties_graph():
    graph = FamilyGraph()
    graph.add_dude("A", Sex.MALE, None, None)
    graph.delete_dude("A")
    assert len(graph) == 0
    assert graph.describe() == "Graph is empty\n"


def test_edit_dude():
    graph = FamilyGraph()
    graph.add_dude("Ann", Sex.FEMALE, 1950, None)
    graph.add_dude("Bob", Sex.MALE, 1960, None)
    graph.edit_dude("Ann", "Anna", Sex.FEMALE, 1951, 2010)
    dude = graph[graph.search("Anna")]
    assert (dude.birth, dude.death) == (1951, 2010)
    assert graph.search("Ann") is None
    with pytest.raises(NameTakenError):
        graph.edit_dude("Anna", "Bob", Sex.FEMALE, 1951, 2010)
    with pytest.raises(NoChangeError):
        graph.edit_dude("Bob", None, Sex.MALE, 1960, None)
    with pytest.raises(InvalidArgumentError):
        graph.edit_dude("Bob", None, Sex.MALE, 1960, 1900)
    with pytest.raises(DudeNotFoundError):
        graph.edit_dude("Zed", None, Sex.MALE, 1960, None)


def test_edit_dude_same_name_counts_as_change():
    graph = FamilyGraph()
    graph.add_dude("Ann", Sex.FEMALE, 1950, None)
    graph.edit_dude("Ann", "Ann", Sex.FEMALE, 1950, None)
    assert graph.search("Ann") == 0


def test_add_edge_creates_reverse(family):
    father = graph_index = family.search("father")
    grandpa = family.search("grandpa")
    up = [e for e in family[graph_index].edges if e.to == grandpa]
    down = [e for e in family[grandpa].edges if e.to == father]
    assert up[0].relation == Relation.PARENT
    assert down[0].relation == Relation.CHILD


def test_add_edge_prepends(family):
    family.add_dude("son", Sex.MALE, 2005, None)
    family.add_edge("father", "son", Relation.CHILD)
    assert family[family.search("father")].edges[0].to == family.search("son")


def test_add_edge_errors(family):
    with pytest.raises(DuplicateEdgeError):
        family.add_edge("father", "kid", Relation.PARENT)
    with pytest.raises(InvalidArgumentError):
        family.add_edge("kid", "kid", Relation.PARENT)
    with pytest.raises(DudeNotFoundError):
        family.add_edge("kid", "ghost", Relation.PARENT)


def test_delete_edge(family):
    family.delete_edge("father", "kid")
    assert all(e.to != family.search("kid") for e in family[family.search("father")].edges)
    assert family[family.search("kid")].edges == []
    with pytest.raises(EdgeNotFoundError):
        family.delete_edge("father", "kid")


def test_edit_edge(family):
    family.edit_edge("father", "kid", Relation.PARENT)
    kid = family.search("kid")
    father = family.search("father")
    assert next(e for e in family[father].edges if e.to == kid).relation == Relation.PARENT
    assert family[kid].edges[0].relation == Relation.CHILD
    with pytest.raises(NoChangeError):
        family.edit_edge("father", "kid", Relation.PARENT)
    with pytest.raises(EdgeNotFoundError):
        family.edit_edge("grandpa", "kid", Relation.PARENT)


def test_kinship_distance(family):
    family.add_dude("stranger", Sex.MALE, None, None)
    assert family.kinship_distance("kid", "grandpa") == family.kinship_distance("grandpa", "kid")
    assert family.kinship_distance("kid", "grandpa") == (
        family.kinship_distance("kid", "father") + family.kinship_distance("father", "grandpa")
    )
    assert family.kinship_distance("kid", "kid") == 0
    assert family.kinship_distance("kid", "stranger") is None
    with pytest.raises(DudeNotFoundError):
        family.kinship_distance("kid", "ghost")


def test_oldest_living_male_ancestor(family):
    assert family.oldest_living_male_ancestor("kid") == family.search("grandpa")
    family.edit_dude("grandpa", None, Sex.MALE, 1940, 1999)
    assert family.oldest_living_male_ancestor("kid") == family.search("father")
    assert family.oldest_living_male_ancestor("grandpa") is None


def test_oldest_ancestor_skips_women_and_unknown_birth(family):
    family.edit_dude("grandpa", None, Sex.FEMALE, 1940, None)
    family.edit_dude("father", None, Sex.MALE, None, None)
    assert family.oldest_living_male_ancestor("kid") is None


def test_distance_matrix(family):
    matrix = family.distance_matrix()
    grandpa, kid = family.search("grandpa"), family.search("kid")
    assert all(matrix[i][i] == 0 for i in range(len(family)))
    assert matrix[kid][grandpa] is None
    assert matrix[grandpa][kid] == family.kinship_distance("grandpa", "kid")


def test_distribute_money(family):
    shares = family.distribute_money("grandpa", 300)
    assert set(shares) == {"father", "kid"}
    assert sum(shares.values()) == pytest.approx(300)
    assert shares["father"] == pytest.approx(2 * shares["kid"])


def test_distribute_money_excludes_dead(family):
    family.edit_dude("father", None, Sex.MALE, 1970, 2010)
    assert family.distribute_money("grandpa", 50) == {"kid": pytest.approx(50)}


def test_distribute_money_errors(family):
    with pytest.raises(NoHeirsError):
        family.distribute_money("kid", 100)
    with pytest.raises(InvalidArgumentError):
        family.distribute_money("grandpa", 0)
    with pytest.raises(DudeNotFoundError):
        family.distribute_money("ghost", 100)
    with pytest.raises(InvalidArgumentError):
        FamilyGraph().distribute_money("grandpa", 100)


def test_describe_dude():
    graph = FamilyGraph()
    graph.add_dude("Ann", Sex.FEMALE, None, None)
    graph.add_dude("Bob", Sex.MALE, 1980, 2020)
    graph.add_edge("Ann", "Bob", Relation.CHILD)
    assert graph.describe_dude(0) == (
        "[0]: Ann, WOMAN, year of birth unknown, \nALIVE\n"
        "Immediate family:\n\tBob her child\n\n"
    )
    assert graph.describe_dude(1) == (
        "[1]: Bob, MAN, was born in 1980, died in 2020\n"
        "Immediate family:\n\tAnn his parent\n\n"
    )
    with pytest.raises(InvalidArgumentError):
        graph.describe_dude(5)
    assert graph.describe().startswith("\nYour family tree (number of dudes: 2)\n[0]: Ann")


def test_to_dot_and_export(family, tmp_path):
    dot = family.to_dot()
    assert dot.startswith("digraph FAMILY_GRAPH {\n  rankdir=TB;\n")
    assert dot.endswith("}\n")
    assert '"1_father" -> "2_kid" [arrowhead=none];' in dot
    assert 'fillcolor="pink"' in dot
    path = tmp_path / "family.dot"
    family.export_to_dot(str(path))
    assert path.read_text(encoding="utf-8") == dot
    with pytest.raises(InvalidArgumentError):
        family.export_to_dot(str(tmp_path / "missing" / "x.dot"))


def test_generate_image_calls_dot():
    with mock.patch("familygraph.graph.subprocess.run", return_value=SimpleNamespace(returncode=0)) as run:
        result = generate_image("tree.dot")
    assert result in (None, "tree.dot.png")
    assert run.call_count == 1
    assert run.call_args[0][0] == ["dot", "-Tpng", "tree.dot", "-o", "tree.dot.png"]


def test_generate_image_failure():
    with mock.patch("familygraph.graph.subprocess.run", return_value=SimpleNamespace(returncode=1)):
        with pytest.raises(InvalidArgumentError):
            generate_image("tree.dot")
    with pytest.raises(InvalidArgumentError):
        generate_image("")