"""
Grouping features.

A GroupingFeature describes how one feature type partitions a table: which
values it has and in what order, whether it forms columns or rows, and how
its titles are placed. A GroupFeatureList is the ordered list of grouping
features of one table, outermost level first.
"""

from typing import Callable, List, Optional, Sequence, Union

from inflection_tables.errors import ConfigurationError
from inflection_tables.features import Feature, FeatureType, FeatureValue, get_language_model

# ancestor features -> ordered values
OrderFunction = Callable[[Sequence[Feature]], Sequence[FeatureValue]]

COLUMN = 'column'
ROW = 'row'


def _as_value(value: Union[str, Sequence[str]]) -> FeatureValue:
    if isinstance(value, str):
        return value
    values = tuple(value)
    return values[0] if len(values) == 1 else values


class GroupingFeature:
    """
    A feature type annotated with its role in a table layout.

    Args:
        type: Feature type identifier.
        values: Values in display order. A list entry such as
            ['masculine', 'feminine'] groups several values into one column
            or row.
        language: Language code.
        title: Title shown for this feature.
        order_fn: Optional function of the ancestor features returning the
            values to use instead of `values`.
    """

    def __init__(
        self,
        type: str,
        values: Sequence[Union[str, Sequence[str]]],
        language: str,
        title: Optional[str] = None,
        order_fn: Optional[OrderFunction] = None,
    ):
        self.type = type
        self.values: List[FeatureValue] = [_as_value(v) for v in values]
        self.language = language
        self.title = title or type.capitalize()
        self.order_fn = order_fn
        self.group_type: Optional[str] = None
        self.row_title = False
        self.full_width_title = False

    @classmethod
    def from_feature_type(
        cls,
        feature_type: FeatureType,
        title: Optional[str] = None,
        values: Optional[Sequence[Union[str, Sequence[str]]]] = None,
    ) -> 'GroupingFeature':
        """Create a grouping feature from a vocabulary feature type."""
        if values is None:
            values = feature_type.values or []
        return cls(feature_type.type, values, feature_type.language, title)

    def clone(self) -> 'GroupingFeature':
        copy = GroupingFeature(self.type, self.values, self.language, self.title, self.order_fn)
        copy.group_type = self.group_type
        copy.row_title = self.row_title
        copy.full_width_title = self.full_width_title
        return copy

    # Chainable setters, used as `numbers.clone().set_row_group().set_row_title()`

    def set_column_group(self) -> 'GroupingFeature':
        self.group_type = COLUMN
        return self

    def set_row_group(self) -> 'GroupingFeature':
        self.group_type = ROW
        return self

    def set_row_title(self, enabled: bool = True) -> 'GroupingFeature':
        """Show this feature's values in a title column on the left of the table."""
        self.row_title = enabled
        if enabled:
            self.full_width_title = False
        return self

    def set_full_width_title(self, enabled: bool = True) -> 'GroupingFeature':
        """Show this feature's values in a title row spanning the whole table."""
        self.full_width_title = enabled
        if enabled:
            self.row_title = False
        return self

    def set_order(self, order_fn: OrderFunction) -> 'GroupingFeature':
        self.order_fn = order_fn
        return self

    @property
    def is_column_group(self) -> bool:
        return self.group_type == COLUMN

    @property
    def is_row_group(self) -> bool:
        return self.group_type == ROW

    @property
    def has_title(self) -> bool:
        return self.row_title or self.full_width_title

    def ordered_values(self, ancestors: Sequence[Feature] = ()) -> List[Feature]:
        """Values of this feature as Features, given the ancestor path."""
        values = self.order_fn(ancestors) if self.order_fn is not None else self.values
        return [Feature(self.type, _as_value(v)) for v in values]

    def __repr__(self) -> str:
        return f"GroupingFeature({self.type!r}, {self.group_type})"


class GroupFeatureList:
    """
    Ordered grouping features of a table, outermost level first.

    Column features must come before row features, because columns are read
    off the outer levels of the grouping tree and rows off the inner ones.

    Raises:
        ConfigurationError: If the list is empty, mixes languages, refers to
            a feature type the language does not declare, repeats a feature
            type, has a feature that is neither a row nor a column group, or
            puts a column feature after a row feature.
    """

    def __init__(self, features: Sequence[GroupingFeature]):
        if not features:
            raise ConfigurationError("A table needs at least one grouping feature")
        self.items: List[GroupingFeature] = list(features)

        languages = {f.language for f in self.items}
        if len(languages) > 1:
            raise ConfigurationError(f"Grouping features mix languages: {sorted(languages)}")
        self.language = self.items[0].language
        model = get_language_model(self.language)

        seen = set()
        row_seen = False
        for feature in self.items:
            if not model.has_feature_type(feature.type):
                raise ConfigurationError(
                    f"Feature type '{feature.type}' is not declared for {model.name}"
                )
            if feature.type in seen:
                raise ConfigurationError(f"Feature type '{feature.type}' is used twice")
            seen.add(feature.type)
            if feature.group_type is None:
                raise ConfigurationError(
                    f"Feature '{feature.type}' is neither a row nor a column group"
                )
            if feature.is_row_group:
                row_seen = True
            elif row_seen:
                raise ConfigurationError(
                    f"Column feature '{feature.type}' must come before all row features"
                )

    @property
    def columns(self) -> List[GroupingFeature]:
        return [f for f in self.items if f.is_column_group]

    @property
    def rows(self) -> List[GroupingFeature]:
        return [f for f in self.items if f.is_row_group]

    @property
    def column_row_titles(self) -> List[GroupingFeature]:
        """Row features that get a title column on the left."""
        return [f for f in self.rows if f.row_title]

    @property
    def full_width_row_titles(self) -> List[GroupingFeature]:
        return [f for f in self.rows if f.full_width_title]

    @property
    def types(self) -> List[str]:
        return [f.type for f in self.items]

    def __getitem__(self, index: int) -> GroupingFeature:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
