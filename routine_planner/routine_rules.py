"""
Hard routine rules shared by the deterministic assembler and the validator.

The assembler stays inside these bounds by construction; the validator uses
the same checks to reject externally produced routines.
"""

MAX_EXERCISES_PER_DAY = 6
MAX_SETS_PER_EXERCISE = 6


def clamp_exercise_cap(max_per_day):
    """Bound a per-day exercise cap to [1, MAX_EXERCISES_PER_DAY]."""
    try:
        value = int(max_per_day)
    except (TypeError, ValueError):
        return MAX_EXERCISES_PER_DAY
    return max(1, min(value, MAX_EXERCISES_PER_DAY))


def clamp_sets_range(sets_range):
    low, high = sets_range
    return min(low, MAX_SETS_PER_EXERCISE), min(high, MAX_SETS_PER_EXERCISE)


def duplicate_names(exercises):
    """Names that appear more than once, in first-repeat order."""
    seen = set()
    duplicates = []
    for exercise in exercises or []:
        name = str(exercise.get("name") or "").strip()
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates


def parse_set_count(value):
    """Whole set count from an int, float, or numeric string; None if unreadable."""
    if isinstance(value, bool):
        return None
    try:
        return int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


def add_violation(violations, code, message, day=None, exercise=None):
    violations.append(
        {
            "code": code,
            "message": message,
            "day": day or "",
            "exercise": exercise or "",
        }
    )


def day_rule_violations(day):
    """
    Check one day against the hard rules.

    Returns:
        List of violation dicts with keys: code, message, day, exercise
    """
    violations = []
    label = str(day.get("day") or "")
    exercises = day.get("exercises") or []

    if len(exercises) > MAX_EXERCISES_PER_DAY:
        add_violation(
            violations,
            "too_many_exercises",
            f"{label} has {len(exercises)} exercises; the limit is {MAX_EXERCISES_PER_DAY}.",
            day=label,
        )

    for name in duplicate_names(exercises):
        add_violation(
            violations,
            "duplicate_exercise",
            f"{label} lists '{name}' more than once.",
            day=label,
            exercise=name,
        )

    for exercise in exercises:
        sets = parse_set_count(exercise.get("sets"))
        if sets is None:
            add_violation(
                violations,
                "malformed_exercise",
                f"{label}: '{exercise.get('name')}' has an unreadable set count ({exercise.get('sets')!r}).",
                day=label,
                exercise=exercise.get("name"),
            )
        elif sets > MAX_SETS_PER_EXERCISE:
            add_violation(
                violations,
                "too_many_sets",
                f"{label}: '{exercise.get('name')}' has {sets} sets; the limit is {MAX_SETS_PER_EXERCISE}.",
                day=label,
                exercise=exercise.get("name"),
            )

    return violations
