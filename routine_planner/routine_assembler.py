"""
Deterministic routine assembly from equipment and training preferences.
"""

from collections import namedtuple

from routine_planner.equipment_catalog import (
    CustomEquipment,
    custom_equipment_id,
    get_catalog,
)
from routine_planner.exercise_selector import select_exercises
from routine_planner.routine_rules import clamp_exercise_cap
from routine_planner.seeded_random import routine_seed
from routine_planner.settings import load_config
from routine_planner.split_planner import FOCUS_GROUPS, plan_days
from routine_planner.training_params import (
    FOCUS_LABELS,
    get_tips,
    get_training_params,
    level_label,
    normalize_profile,
)


DEFAULT_FREQUENCY = 3
DEFAULT_SPLIT = 3
MIN_FREQUENCY = 1
MAX_FREQUENCY = 7

# Day seeds are spaced so neighbouring days draw from distinct streams.
DAY_SEED_STEP = 100

GenerationInput = namedtuple("GenerationInput", "equipment frequency split focus profile level")


def _parse_int(value, default):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def _parse_frequency(value):
    frequency = _parse_int(value, DEFAULT_FREQUENCY)
    return max(MIN_FREQUENCY, min(frequency, MAX_FREQUENCY))


def _parse_split(value):
    split = _parse_int(value, DEFAULT_SPLIT)
    return split if split >= 0 else DEFAULT_SPLIT


def _parse_focus(value):
    focus = (value or "").strip().lower()
    return focus if focus in FOCUS_GROUPS else None


def parse_generation_input(
    equipment_ids,
    frequency=None,
    split=None,
    focus=None,
    level=None,
    profile=None,
    catalog=None,
):
    """
    Build a GenerationInput from raw UI values.

    Never raises: malformed values fall back to defaults, unresolvable
    equipment ids are dropped, and duplicates keep their first occurrence.
    """
    catalog = catalog or get_catalog()
    return GenerationInput(
        equipment=tuple(catalog.decode_all(equipment_ids)),
        frequency=_parse_frequency(frequency),
        split=_parse_split(split),
        focus=_parse_focus(focus),
        profile=normalize_profile(profile),
        level=(level or "").strip().lower() or None,
    )


def reference_id(ref):
    if isinstance(ref, CustomEquipment):
        return custom_equipment_id(ref)
    return ref.equipment_id


def split_label(split):
    return "Full-Body" if split == 0 else f"{split}-Split"


def build_routine_name(generation_input):
    label = level_label(generation_input.profile, generation_input.level)
    return (
        f"{label} {split_label(generation_input.split)} Routine "
        f"({generation_input.frequency}x/week)"
    )


def build_description(generation_input):
    equipment_count = len(generation_input.equipment)
    if not equipment_count:
        return "No equipment selected yet. Add equipment to build a full routine."

    label = level_label(generation_input.profile, generation_input.level).lower()
    noun = "piece" if equipment_count == 1 else "pieces"
    description = (
        f"A {generation_input.frequency}-day-per-week {split_label(generation_input.split).lower()} "
        f"{label} program using {equipment_count} {noun} of equipment"
    )
    if generation_input.focus:
        description += f", with extra {FOCUS_LABELS[generation_input.focus]} volume"
    return description + "."


def assemble_routine(generation_input, catalog=None, max_per_day=None):
    """
    Assemble a full routine for a parsed GenerationInput.

    Args:
        generation_input: GenerationInput from parse_generation_input
        catalog: ExerciseCatalog to draw from (defaults to the shared catalog)
        max_per_day: Optional extra cap on exercises per day

    Returns:
        Routine dict with keys: routine_name, description, days, tips
    """
    catalog = catalog or get_catalog()
    refs = list(generation_input.equipment)

    available = catalog.available_categories(refs)
    _cycle, day_plans = plan_days(
        generation_input.split,
        generation_input.focus,
        generation_input.frequency,
        available,
    )

    params = get_training_params(generation_input.profile, generation_input.level)
    cap = params["max_per_day"]
    if max_per_day is not None:
        cap = min(cap, clamp_exercise_cap(max_per_day))
    cap = clamp_exercise_cap(cap)

    seed = routine_seed(
        [reference_id(ref) for ref in refs],
        generation_input.frequency,
        generation_input.split,
    )

    days = []
    for i, day_plan in enumerate(day_plans):
        templates = catalog.templates_for_equipment(refs, day_plan["muscle_groups"])
        day = dict(day_plan)
        day["exercises"] = select_exercises(templates, params, cap, seed + i * DAY_SEED_STEP)
        days.append(day)

    return {
        "routine_name": build_routine_name(generation_input),
        "description": build_description(generation_input),
        "days": days,
        "tips": get_tips(generation_input.profile, generation_input.level),
    }


class RoutineGenerator:
    """Generates deterministic routines using configured defaults and profile."""

    def __init__(self, config=None, catalog=None):
        """
        Initialize the routine generator.

        Args:
            config: Configuration dictionary (defaults to load_config())
            catalog: ExerciseCatalog (defaults to the shared catalog)
        """
        self.config = config if config is not None else load_config()
        generation = self.config.get("generation", {}) or {}
        self.profile = normalize_profile(generation.get("profile"))
        self.defaults = generation.get("defaults", {}) or {}
        self.max_exercises_per_day = generation.get("max_exercises_per_day")
        self.catalog = catalog or get_catalog()

    def build_input(self, equipment_ids, frequency=None, split=None, focus=None, level=None):
        return parse_generation_input(
            equipment_ids,
            frequency=frequency if frequency is not None else self.defaults.get("frequency"),
            split=split if split is not None else self.defaults.get("split"),
            focus=focus if focus is not None else self.defaults.get("focus"),
            level=level if level is not None else self.defaults.get("level"),
            profile=self.profile,
            catalog=self.catalog,
        )

    def generate(self, equipment_ids, frequency=None, split=None, focus=None, level=None):
        generation_input = self.build_input(
            equipment_ids,
            frequency=frequency,
            split=split,
            focus=focus,
            level=level,
        )
        return assemble_routine(
            generation_input,
            catalog=self.catalog,
            max_per_day=self.max_exercises_per_day,
        )
