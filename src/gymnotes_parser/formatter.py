"""Plain-text rendering of parsed entries and plans for previews."""
from typing import List, Optional

from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.models import ParsedEntry, ParsedPlan


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def format_entry(entry: ParsedEntry) -> str:
    """
    Render one entry, e.g.

        Bench Press
        • 3×10 @ 60kg RPE 8
          (felt easy)
    """
    formatted = f"{entry.exercise}\n"
    formatted += f"• {entry.sets}×{entry.reps}"

    if entry.weight:
        formatted += f" @ {_format_number(entry.weight)}{entry.unit}"

    if entry.rpe:
        formatted += f" RPE {entry.rpe}"

    if entry.notes:
        formatted += f"\n  ({entry.notes})"

    return formatted


def format_plan(plan: ParsedPlan, catalog: Optional[ExerciseCatalog] = None) -> str:
    """Preview of a whole plan with a glyph per exercise."""
    catalog = catalog or ExerciseCatalog.load_default()
    lines: List[str] = [plan.name]
    if plan.description:
        lines.append(plan.description)
    lines.append(f"Difficulty: {plan.estimated_difficulty.upper()}")

    for day in plan.days:
        lines.append("")
        lines.append(f"{day.name}:")
        for entry in day.exercises:
            detail = f"{entry.sets}×{entry.reps}"
            if entry.weight:
                detail += f" @ {_format_number(entry.weight)}{entry.unit}"
            lines.append(f"  {catalog.glyph_for(entry.exercise)} {entry.exercise} {detail}")

    return "\n".join(lines)
