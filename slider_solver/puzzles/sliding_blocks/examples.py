"""Built-in example puzzles, from easy to hard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .board import Board, parse_board


@dataclass(frozen=True)
class Puzzle:
    """A named source/target pair in text form."""

    name: str
    source: str
    target: str
    expected_cost: Optional[int] = None

    def boards(self) -> Tuple[Board, Board]:
        return parse_board(self.source), parse_board(self.target)


SIMPLE = Puzzle(
    name="simple",
    source="""
######
#AA11#
#AA22#
#34  #
#5677#
#5688#
######
""",
    target="""
######
#    #
#    #
#    #
#AA  #
#AA  #
######
""",
    expected_cost=59,
)

# Classic Klotski layout: the big block has to reach the bottom middle
MEDIUM = Puzzle(
    name="medium",
    source="""
######
#1AA2#
#1AA2#
#4335#
#4675#
#8  9#
######
""",
    target="""
######
#    #
#    #
#    #
# AA #
# AA #
######
""",
    expected_cost=81,
)

HARDER = Puzzle(
    name="harder",
    source="""
######
#MAAN#
#MAAN#
#OWWP#
#ObcP#
#a  d#
######
""",
    target="""
######
# MN #
#OMNP#
#OWWP#
#aAAb#
#cAAd#
######
""",
    expected_cost=87,
)

EXAMPLES: Dict[str, Puzzle] = {p.name: p for p in (SIMPLE, MEDIUM, HARDER)}


def get_example(name: str) -> Puzzle:
    try:
        return EXAMPLES[name]
    except KeyError:
        raise ValueError(f"unknown example {name!r}, choose from {sorted(EXAMPLES)}") from None
