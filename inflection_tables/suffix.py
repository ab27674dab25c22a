"""
Suffix records.

A Suffix maps a literal ending (or no ending at all) to one value per
grammatical feature type. Source data often lists one ending for several
values of a feature at once (e.g. -us for masculine and feminine nouns of
the 2nd declension). Such rows are split into one Suffix per value; each
split record remembers the whole value list in `feature_groups` so the
siblings can be merged back together for display.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from inflection_tables.errors import ValidationError
from inflection_tables.features import Feature
from inflection_tables.settings import MERGE_SEPARATOR


@dataclass
class Suffix:
    """
    A single inflectional ending with its grammatical features.

    Attributes:
        value: Literal suffix text, or None if the form has no overt suffix
            (an empty string is stored as None).
        features: Feature type -> single value.
        feature_groups: Feature type -> full value list of the group this
            record was split from.
        extended_lang_data: Language code -> language specific annotations.
        footnotes: Footnote indices referenced by this ending.
        parts: Records this one was merged from (empty unless merged).
    """
    value: Optional[str]
    features: Dict[str, str] = field(default_factory=dict)
    feature_groups: Dict[str, List[str]] = field(default_factory=dict)
    extended_lang_data: Dict[str, Any] = field(default_factory=dict)
    footnotes: List[str] = field(default_factory=list)
    parts: Tuple['Suffix', ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self):
        if self.value is not None and not isinstance(self.value, str):
            raise ValidationError(f"Suffix value must be a string or None, got {self.value!r}")
        if self.value == '':
            self.value = None

    def clone(self) -> 'Suffix':
        """Return a copy that shares no mutable state with this record."""
        return Suffix(
            self.value,
            features=dict(self.features),
            feature_groups={k: list(v) for k, v in self.feature_groups.items()},
            extended_lang_data=dict(self.extended_lang_data),
            footnotes=list(self.footnotes),
            parts=self.parts,
        )

    def feature_match(self, type: str, values: Sequence[str]) -> bool:
        """True if this record has feature `type` set to any of `values`."""
        if type not in self.features:
            return False
        return self.features[type] in values

    def has_feature(self, feature: Feature) -> bool:
        """True if this record matches a (possibly grouped) Feature."""
        return self.feature_match(feature.type, feature.values)

    def split(self, type: str, features: Sequence[Feature]) -> List['Suffix']:
        """
        Split this record into one clone per value of a multi-valued feature.

        Every clone gets a single value in `features[type]` and the full
        value list in `feature_groups[type]`.
        """
        group = [f.value for f in features]
        copies = []
        for value in group:
            copy = self.clone()
            copy.features[type] = value
            copy.feature_groups[type] = list(group)
            copies.append(copy)
        return copies

    @property
    def all_footnotes(self) -> List[str]:
        """Footnote indices of this record and, for merged records, of its parts."""
        indices = list(self.footnotes)
        for part in self.parts:
            for index in part.all_footnotes:
                if index not in indices:
                    indices.append(index)
        return indices

    def is_in_same_group_with(self, other: 'Suffix') -> bool:
        """
        Check whether `other` is a sibling split from the same group.

        Both records must share a feature group, have the same suffix text,
        agree on every feature outside the shared groups and differ on every
        shared group feature.
        """
        common_groups = Suffix.get_common_groups([self, other])
        if not common_groups:
            return False
        if self.value != other.value:
            return False

        for type in set(self.features) | set(other.features):
            if type in common_groups:
                continue
            if self.features.get(type) != other.features.get(type):
                return False

        for type in common_groups:
            values = {self.features.get(type), other.features.get(type)}
            if len(values) != 2:
                return False
        return True

    @staticmethod
    def get_common_groups(suffixes: Sequence['Suffix']) -> List[str]:
        """Feature group types present in every one of `suffixes`."""
        if not suffixes:
            return []
        common = list(suffixes[0].feature_groups)
        for suffix in suffixes[1:]:
            common = [t for t in common if t in suffix.feature_groups]
        return common

    @staticmethod
    def merge(a: 'Suffix', b: 'Suffix') -> 'Suffix':
        """
        Join two sibling records into one.

        Values of every shared group feature are concatenated with ', ' in
        the order (a, b). The result keeps a's other data and lists both
        records in `parts`.
        """
        result = a.clone()
        for type in Suffix.get_common_groups([a, b]):
            result.features[type] = f"{a.features[type]}{MERGE_SEPARATOR}{b.features[type]}"
        for index in b.footnotes:
            if index not in result.footnotes:
                result.footnotes.append(index)
        result.parts = (a, b)
        return result

    @staticmethod
    def combine(suffixes: Sequence['Suffix']) -> List['Suffix']:
        """
        Merge all sibling records in a list.

        Scans pairs in order; the first mergeable pair is merged into the
        earlier position and the later record removed, then the scan starts
        over. Stops when a full pass finds nothing to merge.
        """
        items = list(suffixes)
        merged = True
        while merged:
            merged = False
            for i in range(len(items)):
                for j in range(i + 1, len(items)):
                    if items[i].is_in_same_group_with(items[j]):
                        items[i] = Suffix.merge(items[i], items[j])
                        del items[j]
                        merged = True
                        break
                if merged:
                    break
        return items

    def __str__(self) -> str:
        return self.value if self.value is not None else '-'
