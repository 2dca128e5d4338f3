"""Family tree graph with kinship queries, inheritance splits, Graphviz export and an interactive menu."""

__version__ = "0.1.0"