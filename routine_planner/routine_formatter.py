"""
Plain-text rendering of a routine for terminal output.
"""


def _block_letter(index):
    return chr(ord("A") + index % 26)


def format_routine_text(routine):
    """
    Render a routine as markdown-style text.

    Layout per day:
        ## DAY 1 — Chest + Shoulders
        ### A1. Machine Chest Press
        - 4 x 10
        - **Rest:** 75 seconds
    """
    lines = [f"# {routine.get('routine_name', '')}"]
    description = routine.get("description")
    if description:
        lines.append(description)

    for index, day in enumerate(routine.get("days") or []):
        lines.append("")
        lines.append(f"## {str(day.get('day', '')).upper()} — {day.get('focus', '')}")
        if day.get("note"):
            lines.append(f"_{day['note']}_")

        letter = _block_letter(index)
        for number, exercise in enumerate(day.get("exercises") or [], start=1):
            lines.append(f"### {letter}{number}. {exercise.get('name', '')}")
            lines.append(f"- {exercise.get('sets', 0)} x {exercise.get('reps', 0)}")
            lines.append(f"- **Rest:** {exercise.get('rest', '-')}")

    tips = routine.get("tips") or []
    if tips:
        lines.append("")
        lines.append("## TIPS")
        lines.extend(f"• {tip}" for tip in tips)

    return "\n".join(lines) + "\n"
