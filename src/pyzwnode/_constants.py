"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Node summary table
# ------------------------------------------------------------------

# Index 0 is never a valid basic type; it is only a placeholder.
BASIC_TYPE_NAMES: tuple[str, ...] = (
    "???",
    "Controller",
    "StaticController",
    "Slave",
    "RoutingSlave",
)

# Column widths of the one-line summary, in display order:
# node id, last status, basic type, type, product name, name.
NODE_ID_WIDTH = 3
STATUS_WIDTH = 8
BASIC_TYPE_WIDTH = 16
TYPE_WIDTH = 24
PRODUCT_WIDTH = 50
NAME_WIDTH = 30
LOCATION_WIDTH = 30

# ------------------------------------------------------------------
# Value genres
# ------------------------------------------------------------------

USER_GENRE = "user"


def basic_type_name(basic: int) -> str:
    """Map a transport basic-type code to its display name.

    Codes outside 1-4 render as ``??? <code> ???``.
    """
    if 1 <= basic < len(BASIC_TYPE_NAMES):
        return BASIC_TYPE_NAMES[basic]
    return f"??? {basic} ???"
