"""
Grouping tree nodes.

Each tree level partitions suffixes by one grouping feature. Inner levels
hold NodeGroups; the last level holds Cells. A NodeGroup knows which of the
two it holds, so callers never have to inspect element types.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from inflection_tables.features import Feature
from inflection_tables.matching import MatchData, MatchResults
from inflection_tables.suffix import Suffix
from inflection_tables.table.grouping import GroupingFeature


@dataclass
class Cell:
    """
    A table cell: all (combined) suffixes sharing one complete feature path.

    Attributes:
        suffixes: Suffixes after sibling records were combined.
        features: Feature path from the outermost grouping level.
        index: Sequential index of the cell within its table.
        suffix_match: Some suffix in the cell matches the word's suffix.
        full_match: Some suffix in the cell is a full match.
        matches: Match data per entry of `suffixes` (None if unmatched).
    """
    suffixes: List[Suffix]
    features: List[Feature]
    index: int = 0
    suffix_match: bool = False
    full_match: bool = False
    matches: List[Optional[MatchData]] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        suffixes: Sequence[Suffix],
        features: Sequence[Feature],
        match_results: Optional[MatchResults] = None,
        index: int = 0,
    ) -> 'Cell':
        """Combine sibling suffixes and look up their match flags."""
        combined = Suffix.combine(suffixes)
        matches = [match_results.get(s) if match_results is not None else None for s in combined]
        return cls(
            suffixes=combined,
            features=list(features),
            index=index,
            suffix_match=any(m is not None and m.suffix_match for m in matches),
            full_match=any(m is not None and m.full_match for m in matches),
            matches=matches,
        )

    @property
    def empty(self) -> bool:
        return not self.suffixes

    @property
    def value(self) -> str:
        """Suffix texts joined for display."""
        return ', '.join(str(s) for s in self.suffixes)

    @property
    def footnotes(self) -> List[str]:
        indices: List[str] = []
        for suffix in self.suffixes:
            for index in suffix.all_footnotes:
                if index not in indices:
                    indices.append(index)
        return indices

    def feature(self, type: str) -> Optional[Feature]:
        """The path feature of a given type."""
        for feature in self.features:
            if feature.type == type:
                return feature
        return None


@dataclass
class NodeGroup:
    """
    A level of the grouping tree.

    Attributes:
        feature: Grouping feature this node partitions by.
        ancestors: Feature path leading to this node.
        values: Values of `feature`, one per child, in order.
        subgroups: Child nodes (inner levels only).
        leaves: Child cells (last level only).
        cells: All cells below this node, in table order.
    """
    feature: GroupingFeature
    ancestors: List[Feature]
    values: List[Feature] = field(default_factory=list)
    subgroups: List['NodeGroup'] = field(default_factory=list)
    leaves: List[Cell] = field(default_factory=list)
    cells: List[Cell] = field(default_factory=list)

    @property
    def is_last_level(self) -> bool:
        return not self.subgroups

    @property
    def children(self) -> List[Union['NodeGroup', Cell]]:
        if self.subgroups:
            return list(self.subgroups)
        return list(self.leaves)

    def child_cells(self, position: int) -> List[Cell]:
        """Cells below the child at `position`."""
        if self.subgroups:
            return self.subgroups[position].cells
        return [self.leaves[position]]
