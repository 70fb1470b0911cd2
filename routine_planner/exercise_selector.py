"""
Per-day exercise selection with reproducible sets/reps/rest draws.
"""

from routine_planner.routine_rules import clamp_exercise_cap, clamp_sets_range
from routine_planner.seeded_random import rand_between, seeded_shuffle


PLACEHOLDER_EXERCISE_NAME = "Add more equipment for this muscle group"

# Per-exercise seed offsets for each drawn value.
SETS_SEED_STEP = 7
REPS_SEED_STEP = 13
REST_SEED_STEP = 19


def placeholder_exercise():
    return {
        "name": PLACEHOLDER_EXERCISE_NAME,
        "sets": 0,
        "reps": 0,
        "rest": "-",
    }


def format_rest(seconds):
    return f"{seconds} seconds"


def order_candidates(templates, max_compounds, seed):
    """
    Shuffle compounds and isolations separately and put compounds first.

    Compounds are capped at `max_compounds`.
    """
    compounds = [template for template in templates if template.is_compound]
    isolations = [template for template in templates if not template.is_compound]

    compounds = seeded_shuffle(compounds, seed)
    isolations = seeded_shuffle(isolations, seed + 1)

    if max_compounds is not None:
        compounds = compounds[: max(int(max_compounds), 0)]
    return compounds + isolations


def _unique_by_name(templates):
    seen = set()
    unique = []
    for template in templates:
        if template.name in seen:
            continue
        seen.add(template.name)
        unique.append(template)
    return unique


def select_exercises(templates, params, max_per_day, seed):
    """
    Pick an ordered, bounded, de-duplicated exercise list for one day.

    Args:
        templates: Candidate ExerciseTemplates for the day's muscle groups
        params: Parameter row (sets, reps, rest_seconds, max_compounds)
        max_per_day: Exercise cap for the day (clamped to the shared ceiling)
        seed: Day seed; the same seed always yields the same list

    Returns:
        List of exercise dicts (name, sets, reps, rest). Never empty: with no
        candidates a single placeholder with zero sets/reps is returned.
    """
    cap = clamp_exercise_cap(max_per_day)
    ordered = order_candidates(templates or [], params.get("max_compounds"), seed)
    selected = _unique_by_name(ordered[:cap])

    if not selected:
        return [placeholder_exercise()]

    sets_low, sets_high = clamp_sets_range(params["sets"])
    reps_low, reps_high = params["reps"]
    rest_low, rest_high = params["rest_seconds"]

    exercises = []
    for i, template in enumerate(selected):
        exercises.append(
            {
                "name": template.name,
                "sets": rand_between(sets_low, sets_high, seed + i * SETS_SEED_STEP),
                "reps": rand_between(reps_low, reps_high, seed + i * REPS_SEED_STEP),
                "rest": format_rest(rand_between(rest_low, rest_high, seed + i * REST_SEED_STEP)),
            }
        )
    return exercises
