"""Shopping list presentation helpers: grouping by category and plain-text export."""
from typing import Dict, List, Sequence

from chefmate.domain.ShoppingList import ShoppingListItem
from chefmate.utilities.constants import SHOPPING_LIST_TITLE


def format_amount(amount) -> str:
    """Render an amount without a trailing '.0' for whole numbers (2.0 -> '2', 0.25 -> '0.25')."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def group_by_category(items: Sequence[ShoppingListItem]) -> Dict[str, List[ShoppingListItem]]:
    """Group items by category, categories in order of first appearance."""
    groups: Dict[str, List[ShoppingListItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return groups


def format_item_line(item: ShoppingListItem) -> str:
    return f"- {format_amount(item.amount)} {item.unit} {item.item} ({', '.join(item.recipes)})"


def export_text(items: Sequence[ShoppingListItem]) -> str:
    """Serialize the list as downloadable text.

    Layout:
        SHOPPING LIST
        <blank>
        PRODUCE
        - 2 medium avocado (Avocado Toast)
        <blank>
        ...
    """
    lines = [SHOPPING_LIST_TITLE, ""]
    for category, category_items in group_by_category(items).items():
        lines.append(category.upper())
        lines.extend(format_item_line(i) for i in category_items)
        lines.append("")
    return "\n".join(lines) + "\n"


__all__ = ['format_amount', 'group_by_category', 'format_item_line', 'export_text']
