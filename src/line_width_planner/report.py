"""Plain text table of a layer height sweep."""

from typing import List, Optional

from line_width_planner.formatting import format_number, format_percent_delta
from line_width_planner.models import LayerHeightRecord

# (header, width) for every numeric column, in display order
COLUMNS = [
    ("Layer Height", 12),
    ("Min Line Width", 14),
    ("Min Extrusion Volume", 20),
    ("Min Volume Delta", 16),
    ("Ideal Line Width", 16),
    ("Max Line Width", 14),
    ("Max Extrusion Volume", 20),
    ("Max Volume Delta", 16),
]


def format_row(record: LayerHeightRecord) -> List[str]:
    """Display values of a record's numeric columns, rounded like the table shows them."""
    return [
        format_number(record.layer_height, 2),
        format_number(record.min_line_width, 2),
        format_number(record.min_extrusion_volume, 3),
        format_percent_delta(record.min_volume_delta),
        format_number(record.ideal_line_width, 3),
        format_number(record.max_line_width, 2),
        format_number(record.max_extrusion_volume, 3),
        format_percent_delta(record.max_volume_delta),
    ]


def format_table(
    records: List[LayerHeightRecord],
    show_colors: bool = True,
    output_volume: Optional[float] = None,
) -> str:
    """Render records as an aligned text table.

    Each row is followed by its notes on an indented line. With show_colors,
    the worst safety color of the row is appended to the notes line.
    With output_volume, a "Constant Output Volume" summary line heads the table.

    Args:
        records: Records from a sweep
        show_colors: Whether to include the worst safety color
        output_volume: Optional reference output volume to show above the table

    Returns:
        Multi-line table, or a single "No layer heights" line for an empty sweep
    """
    if not records:
        return "No layer heights"

    header = " ".join(f"{title:<{width}}" for title, width in COLUMNS)
    lines = [header, "-" * len(header)]
    if output_volume is not None:
        lines.insert(0, f"Constant Output Volume: {format_number(output_volume, 3)}")

    for record in records:
        cells = format_row(record)
        lines.append(
            " ".join(f"{cell:<{width}}" for cell, (_, width) in zip(cells, COLUMNS)).rstrip()
        )
        if show_colors:
            lines.append(f"    [{record.worst_safety_color}] {record.notes}")
        else:
            lines.append(f"    {record.notes}")

    return "\n".join(lines)
