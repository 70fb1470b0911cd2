"""
Split planning: which muscle groups train together on which day.
"""

from routine_planner.equipment_catalog import muscle_group_label, order_groups


UPPER_GROUPS = ("chest", "shoulder", "back", "arms")
LOWER_GROUPS = ("legs",)

# Core rides along with the lower-body grouping in multi-day splits.
ACCESSORY_GROUPS = ("core",)

FOCUS_GROUPS = {
    "upper": UPPER_GROUPS,
    "lower": LOWER_GROUPS,
    "glutes": LOWER_GROUPS,
}

SPLIT_TEMPLATES = {
    2: [UPPER_GROUPS, LOWER_GROUPS + ACCESSORY_GROUPS],
    3: [("chest", "shoulder"), ("back", "arms"), LOWER_GROUPS + ACCESSORY_GROUPS],
    4: [("chest",), ("back",), ("shoulder", "arms"), LOWER_GROUPS + ACCESSORY_GROUPS],
}

NO_EQUIPMENT_LABEL = "No equipment"
NO_EQUIPMENT_NOTE = "No equipment selected. Pick at least one item to build a routine."


def grouping_label(grouping):
    if not grouping:
        return NO_EQUIPMENT_LABEL
    return " + ".join(muscle_group_label(group) for group in grouping)


def repeat_note(round_number):
    return f"Cycle round {round_number}: use variant movements"


def build_cycle(split, available_groups):
    """
    Build the base cycle template for a split scheme.

    Returns a list of groupings (tuples in canonical order); groupings with
    nothing available are dropped.
    """
    available = order_groups(available_groups)
    if not available:
        return []

    if split == 0:
        return [tuple(available)]

    template = SPLIT_TEMPLATES.get(split)
    if template is None:
        return [(group,) for group in available]

    cycle = []
    for grouping in template:
        kept = tuple(order_groups(set(grouping) & set(available)))
        if kept:
            cycle.append(kept)
    return cycle


def focus_groupings(cycle, focus):
    """Indexes of groupings that contain at least one group from the focus target."""
    targets = set(FOCUS_GROUPS.get(focus or "", ()))
    if not targets:
        return []
    return [index for index, grouping in enumerate(cycle) if targets & set(grouping)]


def amplify_for_focus(cycle, focus):
    """
    Append a duplicate of the single focus grouping.

    Only applies when exactly one grouping qualifies and the cycle has at least
    two groupings; otherwise the cycle is returned unchanged (as a new list).
    """
    amplified = list(cycle)
    if len(amplified) < 2:
        return amplified

    qualifying = focus_groupings(amplified, focus)
    if len(qualifying) == 1:
        amplified.append(amplified[qualifying[0]])
    return amplified


def expand_days(cycle, frequency):
    """Expand a cycle to `frequency` day plans, wrapping around with repeat notes."""
    days = []
    cycle_length = len(cycle)
    for i in range(frequency):
        grouping = cycle[i % cycle_length]
        note = ""
        if i >= cycle_length:
            note = repeat_note(i // cycle_length + 1)
        days.append(
            {
                "day": f"Day {i + 1}",
                "focus": grouping_label(grouping),
                "muscle_groups": list(grouping),
                "note": note,
            }
        )
    return days


def plan_days(split, focus, frequency, available_groups):
    """
    Decide the day-by-day muscle-group assignment.

    Args:
        split: Split scheme (0 = full body, 2/3/4 = fixed templates, other = per group)
        focus: Focus target ("upper", "lower", "glutes") or None
        frequency: Number of training days to produce
        available_groups: Categories that have at least one selected equipment item

    Returns:
        Tuple (cycle, days): the possibly amplified cycle of groupings and the
        ordered day plans (dicts with day, focus, muscle_groups, note).
    """
    cycle = build_cycle(split, available_groups)
    if not cycle:
        placeholder = {
            "day": "Day 1",
            "focus": NO_EQUIPMENT_LABEL,
            "muscle_groups": [],
            "note": NO_EQUIPMENT_NOTE,
        }
        return [()], [placeholder]

    cycle = amplify_for_focus(cycle, focus)
    return cycle, expand_days(cycle, max(int(frequency), 0))
