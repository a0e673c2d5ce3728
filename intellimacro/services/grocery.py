"""
Grocery list formatting.
"""

UNCATEGORIZED = "Uncategorized"


def parse_grocery_list(markdown: str) -> dict[str, list[str]]:
    """
    Group a markdown grocery list into store sections.

    ``###`` lines open a section and ``*`` lines are items. Items seen before
    the first heading land in "Uncategorized". Sections without items are
    dropped; the rest keep the order they first appeared in.

    Args:
        markdown: Grocery list as returned by the AI

    Returns:
        Dict mapping section name to its items
    """
    sections: dict[str, list[str]] = {}
    current = UNCATEGORIZED

    for line in markdown.splitlines():
        line = line.strip()
        if line.startswith("###"):
            current = line.lstrip("#").strip() or UNCATEGORIZED
            sections.setdefault(current, [])
        elif line.startswith("*"):
            item = line[1:].strip()
            if item:
                sections.setdefault(current, []).append(item)

    return {name: items for name, items in sections.items() if items}
