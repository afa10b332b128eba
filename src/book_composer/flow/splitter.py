"""Partitioning of one item into a "keep" remainder and a "move" fragment."""

import copy
import logging
from dataclasses import dataclass
from typing import Optional, Set, Union

from ..models.document import Item
from ..models.enums import ContentField, Direction, ItemType, SplitPolicy
from ..models.identity import generate_id
from ..models.selection import matches_sub_field, parse_name_key

logger = logging.getLogger(__name__)


# Canonical reading order of field groups used by SplitPolicy.FIELD_ORDER.
CONTENT_GROUP_ORDER = tuple(
    tuple(field.value for field in group)
    for group in (
        (ContentField.HEADING_URDU, ContentField.HEADING_ENGLISH),
        (ContentField.ARABIC,),
        (ContentField.ROMAN,),
        (ContentField.URDU,),
        (ContentField.CONTENT_URDU,),
        (ContentField.ENGLISH,),
        (ContentField.CONTENT_ENGLISH,),
    )
)


@dataclass
class SplitOutcome:
    """
    Result of partitioning an item.

    ``keep`` is None when the whole item moves; in that case ``move`` is the
    original item object, untouched.
    """
    move: Item
    keep: Optional[Item] = None

    @property
    def is_split(self) -> bool:
        return self.keep is not None


class ItemSplitter:
    """
    Splits an item at a selected sub-field for a directional transfer.

    Names collections split at name granularity. Other items split by field
    according to the configured policy. Neither side of a split is ever
    empty: when one would be, the whole item moves instead.
    """

    def __init__(self, policy: SplitPolicy = SplitPolicy.FIELD):
        self.policy = policy

    def split(
        self,
        item: Item,
        sub_field: Optional[str],
        direction: Union[Direction, int],
    ) -> SplitOutcome:
        """
        Partition ``item`` for a move in ``direction``.

        Args:
            item: The selected item.
            sub_field: Selected sub-field key, or None for the whole item.
            direction: Direction of the transfer.

        Returns:
            SplitOutcome with the fragment to move and the remainder to keep.
        """
        direction = Direction(direction)
        if not sub_field:
            return SplitOutcome(move=item)

        name_key = parse_name_key(sub_field)
        if name_key is not None and item.names:
            return self._split_names(item, name_key[0], direction)

        move_keys = None
        if self.policy is SplitPolicy.FIELD_ORDER:
            move_keys = self._ordered_move_keys(item, sub_field, direction)
        if move_keys is None:
            move_keys = {key for key in item.fields if matches_sub_field(key, sub_field)}

        return self._partition(item, move_keys)

    def _split_names(self, item: Item, index: int, direction: Direction) -> SplitOutcome:
        names = item.names or []
        if direction is Direction.FORWARD:
            keep_names, move_names = names[:index], names[index:]
        else:
            keep_names, move_names = names[index + 1:], names[:index + 1]

        if not keep_names or not move_names:
            logger.debug(f"Names split of '{item.id}' at {index} leaves one side empty; moving whole item")
            return SplitOutcome(move=item)

        keep = item.copy()
        keep.names = copy.deepcopy(keep_names)
        move = item.copy()
        move.id = generate_id("split-names")
        move.names = copy.deepcopy(move_names)
        return SplitOutcome(move=move, keep=keep)

    @staticmethod
    def _ordered_move_keys(item: Item, sub_field: str, direction: Direction) -> Optional[Set[str]]:
        """Move keys under the field-order policy, or None if the field is unordered."""
        split_index = None
        for i, group in enumerate(CONTENT_GROUP_ORDER):
            if any(matches_sub_field(key, sub_field) for key in group):
                split_index = i
                break
        if split_index is None:
            return None

        if direction is Direction.FORWARD:
            groups = CONTENT_GROUP_ORDER[split_index:]
        else:
            groups = CONTENT_GROUP_ORDER[:split_index + 1]
        return {key for group in groups for key in group if item.has(key)}

    @staticmethod
    def _partition(item: Item, move_keys: Set[str]) -> SplitOutcome:
        move_fields = {k: copy.deepcopy(v) for k, v in item.fields.items() if k in move_keys}
        keep_fields = {k: copy.deepcopy(v) for k, v in item.fields.items() if k not in move_keys}

        # names never move on a field split, so they count as kept content
        if not move_fields or not (keep_fields or item.names):
            logger.debug(f"Field split of '{item.id}' leaves one side empty; moving whole item")
            return SplitOutcome(move=item)

        keep = Item(
            id=item.id,
            type=item.type,
            fields=keep_fields,
            names=copy.deepcopy(item.names),
            styles=copy.deepcopy(item.styles),
        )
        move = Item(
            id=generate_id("split"),
            type=ItemType.TEXT.value if item.is_heading else item.type,
            fields=move_fields,
            styles=copy.deepcopy(item.styles),
        )
        return SplitOutcome(move=move, keep=keep)
