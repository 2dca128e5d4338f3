"""Interactive menu for building and querying a family graph."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from familygraph.graph import (
    DudeNotFoundError,
    DuplicateDudeError,
    DuplicateEdgeError,
    EdgeNotFoundError,
    FamilyGraph,
    FamilyGraphError,
    InvalidArgumentError,
    NameTakenError,
    NoChangeError,
    NoHeirsError,
    Relation,
    Sex,
    generate_image,
)
from familygraph.prompts import read_int, read_line

_BANNER = "============================ LAB5 ============================"
_LAST_KNOWN_YEAR = 2025

_MENU_TEXT = (
    "\t(00) Create graph\n"
    "\t(01) Search dude\n"
    "\t(02) Add dude\n"
    "\t(03) Delete dude\n"
    "\t(04) Edit Information about dude\n"
    "\t(05) Print graph\n"
    "\t(06) Add edge\n"
    "\t(07) Delete edge\n"
    "\t(08) Edit Information about dude\n"
    "\t(09) Degree of kinship \n"
    "\t(10) Get information about the oldest alive man\n"
    "\t(11) Distribute money \n"
    "\t(12) To PNG\n"
    "Input selected option: "
)

_FAREWELL = "\n".join(
    [
        "\n┌────────────────────────────────────────────────────────────┐",
        "│              ┌─ ╷ ╷ ┌─╮   ┌─┐ ┌─   ┌─ ┬ ╷  ┌─              │",
        "│              ├─ │╲│ │ │   │ │ ├─   ├─ │ │  ├─              │",
        "│              └─ ╵ ╵ └─╯   └─┘ ╵    ╵  ┴ └─ └─              │",
        "└────────────────────────────────────────────────────────────┘",
    ]
)

_MESSAGES = {
    InvalidArgumentError: "Error: Invalid arguments",
    DudeNotFoundError: "Error: Uncorrect name",
    EdgeNotFoundError: "Error: Uncorrect edge",
    DuplicateDudeError: "Error: Non-unique name",
    DuplicateEdgeError: "Error: This edge alredy exist",
    NameTakenError: "Error: New name is already taken",
    NoChangeError: "Error: You didn't change anything",
    NoHeirsError: "Error: Nobody can inherit",
}


def _report(error: FamilyGraphError) -> None:
    for kind, message in _MESSAGES.items():
        if isinstance(error, kind):
            print(message)
            return
    print(f"Error: {error}")


def menu() -> int:
    """Show the menu until a valid option is chosen and return it."""
    print(_BANNER)
    while True:
        choice = read_int(_MENU_TEXT)
        if 0 <= choice < 13:
            break
        print(f"{_BANNER}\nChoiceError: Invalid choice\nlet's try again...\n{_BANNER}")
    print(_BANNER)
    return choice


class FamilyShell:
    """Holds the current graph and runs one dialog per menu option."""

    def __init__(self) -> None:
        self.graph: Optional[FamilyGraph] = None
        self._actions: Dict[int, Callable[[], None]] = {
            0: self.create_graph,
            1: self.search_dude,
            2: self.add_dude,
            3: self.delete_dude,
            4: self.edit_dude,
            5: self.print_graph,
            6: self.add_edge,
            7: self.delete_edge,
            8: self.edit_edge,
            9: self.shortest_path,
            10: self.oldest_male,
            11: self.distribute_money,
            12: self.to_png,
        }

    @staticmethod
    def _read_person_details(qualifier: str) -> tuple:
        birth: Optional[int] = read_int(
            f"Enter his {qualifier}year of birth, if unknown enter any number "
            f"greater than {_LAST_KNOWN_YEAR}: "
        )
        death: Optional[int] = read_int(
            f"Enter his {qualifier}year of death, if he is alive enter any year "
            f"greater than {_LAST_KNOWN_YEAR}: "
        )
        if birth > _LAST_KNOWN_YEAR:
            birth = None
        if death > _LAST_KNOWN_YEAR:
            death = None
        cond = read_int(
            "Enter an even number if it is male and an odd number if it is female: "
        )
        sex = Sex.FEMALE if cond % 2 else Sex.MALE
        return sex, birth, death

    @staticmethod
    def _read_pair() -> tuple:
        first = read_line("Enter the first guy name: ")
        second = read_line("Enter the second guy name: ")
        return first, second

    @staticmethod
    def _read_relation(first: str, second: str) -> Relation:
        cond = read_int(
            f"Enter an even number if {first} is {second}'s child and an odd "
            f"number if {first} is {second}'s parent: "
        )
        return Relation.CHILD if cond % 2 else Relation.PARENT

    def create_graph(self) -> None:
        self.graph = FamilyGraph()

    def search_dude(self) -> None:
        if not self.graph:
            print("Graph is empty")
            return
        name = read_line("Enter the guy name: ")
        index = self.graph.search(name)
        if index is None:
            print("This guy is not from this family(")
        else:
            print(self.graph.describe_dude(index), end="")

    def add_dude(self) -> None:
        name = read_line("Enter the guy name: ")
        sex, birth, death = self._read_person_details("")
        try:
            self.graph.add_dude(name, sex, birth, death)
        except FamilyGraphError as error:
            _report(error)
        else:
            print("Succes")

    def delete_dude(self) -> None:
        name = read_line("Enter the guy name: ")
        try:
            self.graph.delete_dude(name)
        except FamilyGraphError as error:
            _report(error)
        else:
            print("Succes")

    def edit_dude(self) -> None:
        old_name = read_line("Enter the guy name: ")
        new_name = read_line("Enter the NEW guy name: ")
        sex, birth, death = self._read_person_details("NEW ")
        try:
            self.graph.edit_dude(old_name, new_name, sex, birth, death)
        except FamilyGraphError as error:
            _report(error)
        else:
            print("Succes")

    def print_graph(self) -> None:
        print(self.graph.describe(), end="")

    def add_edge(self) -> None:
        first, second = self._read_pair()
        relation = self._read_relation(first, second)
        try:
            self.graph.add_edge(first, second, relation)
        except FamilyGraphError as error:
            _report(error)
        else:
            print("Succes")

    def delete_edge(self) -> None:
        first, second = self._read_pair()
        try:
            self.graph.delete_edge(first, second)
        except FamilyGraphError as error:
            _report(error)
        else:
            print("Succes")

    def edit_edge(self) -> None:
        first, second = self._read_pair()
        relation = self._read_relation(first, second)
        try:
            self.graph.edit_edge(first, second, relation)
        except FamilyGraphError as error:
            _report(error)
        else:
            print("Succes")

    def shortest_path(self) -> None:
        first, second = self._read_pair()
        try:
            distance = self.graph.kinship_distance(first, second)
        except FamilyGraphError as error:
            _report(error)
            return
        print("Succes")
        if distance is None:
            print("This two dudes re not related")
        else:
            print(f"Degree of kinship: {distance - 1}")

    def oldest_male(self) -> None:
        name = read_line("Enter the guy name: ")
        try:
            index = self.graph.oldest_living_male_ancestor(name)
        except FamilyGraphError as error:
            _report(error)
            return
        print("Succes")
        if index is None:
            print(f"{name} doesn't have oldest male alive ancestor(")
        else:
            print(f"{name}'s oldest male alive ancestor is:")
            print(self.graph.describe_dude(index), end="")

    def distribute_money(self) -> None:
        name = read_line("Enter the guy name: ")
        amount = read_int("Enter the amount to be divided: ")
        try:
            shares = self.graph.distribute_money(name, float(amount))
        except FamilyGraphError as error:
            _report(error)
            return
        print("Succes")
        for heir, share in shares.items():
            print(f"{heir} will recive {share:.2f} rubles")

    def to_png(self) -> None:
        filename = read_line("Enter the .png file name: ")
        try:
            self.graph.export_to_dot(filename)
        except FamilyGraphError:
            print("Invalid filename")
            return
        try:
            generate_image(filename)
        except FamilyGraphError:
            print("Invalid  filename")
            return
        print("Succes")
        print(f"File {filename}.png created")

    def run(self) -> None:
        """Run the menu loop until input ends."""
        try:
            while True:
                choice = menu()
                if self.graph is None and choice != 0:
                    print("Error: Graph doesnt exist")
                    continue
                self._actions[choice]()
        except EOFError:
            pass
        print(_FAREWELL)


def main(argv=None) -> int:
    FamilyShell().run()
    return 0