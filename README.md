# familygraph

A small family tree editor. People ("dudes") are the nodes of a graph and
parent/child links are its edges; every link is stored in both directions.
Besides adding, editing and deleting people and links, it can:

- find the distance between two people, the number of links on the shortest
  path between them (the interactive menu reports this as a degree of kinship,
  one less than the number of links);
- find a person's oldest living male ancestor, that is the earliest-born living
  man with a known year of birth reachable by following parent links;
- split a sum of money among a person's living descendants up to three
  generations down, each share halving with every generation;
- write the tree as a Graphviz DOT file and render it to PNG with the `dot` tool.

## Installation

```
pip install .
```

PNG export needs Graphviz's `dot` program on your `PATH`.

## Interactive use

```
familygraph
```

A numbered menu is shown (options `00` to `12`). Start with option `00` to
create a graph, then add people and the links between them. An unknown year of
birth is entered as any year after 2025, and so is the year of death of someone
still alive. Sex is chosen by the parity of the number you enter: even for
male, odd for female. Option `12` asks for a file name, writes the DOT text to
that file and renders it to the same name with `.png` appended.
End-of-input (Ctrl-D) leaves the program.

## Library use

```python
from familygraph.graph import FamilyGraph, Relation, Sex

tree = FamilyGraph()
tree.add_dude("Ivan", Sex.MALE, 1950, 1990)
tree.add_dude("Petr", Sex.MALE, 1975, 2000)
tree.add_edge("Petr", "Ivan", Relation.PARENT)  # Ivan is Petr's parent

print(tree.kinship_distance("Petr", "Ivan"))  # 1
print(tree.describe())
tree.export_to_dot("family.dot")
```

In `FamilyGraph`, a year of birth of `None` means unknown and a year of death
of `None` means alive. Other methods include `search`, `delete_dude`,
`edit_dude`, `delete_edge`, `edit_edge`, `oldest_living_male_ancestor`,
`distance_matrix`, `distribute_money` (returns a dict of name to share) and
`to_dot`. The module-level `generate_image(filename)` runs `dot` on a DOT file.

Failed operations raise subclasses of `familygraph.graph.FamilyGraphError`,
for example `DudeNotFoundError`, `DuplicateEdgeError`, `NoChangeError` or
`NoHeirsError`.

The `familygraph.prompts` module holds the line prompts the menu uses:
`read_int`, `read_size` and `read_line`, which re-ask on malformed input and
raise `EOFError` when input ends.

## What it does not do

Trees live only in memory: there is no way to save a tree and load it again
later. The DOT export is write-only and cannot be read back in.

## Running the tests

```
pip install .[test]
pytest
```