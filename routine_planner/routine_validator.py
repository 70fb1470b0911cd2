"""
Validation utilities for externally produced routines.

Candidates (for example an AI reply already decoded to a dict) are checked
against the same hard rules the deterministic assembler follows. Validation
only accepts or rejects; it never repairs.
"""

import re

from routine_planner.routine_rules import add_violation, day_rule_violations


DEFAULT_SETS = 3
DEFAULT_REPS = 10
DEFAULT_REST = "60 seconds"
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class RoutineValidationError(ValueError):
    """Raised when a candidate routine breaks a hard rule."""

    def __init__(self, violations):
        self.violations = list(violations)
        messages = [violation["message"] for violation in self.violations]
        super().__init__("; ".join(messages) or "Routine failed validation.")


def _parse_int(value, default):
    """Leading integer of a value ("8 sets" -> 8, 8.0 -> 8); default when there is none."""
    if value is None or isinstance(value, bool):
        return default
    match = LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else default


def _text(value):
    return str(value).strip() if value is not None else ""


def _structure_violations(candidate):
    violations = []
    if not isinstance(candidate, dict):
        add_violation(violations, "malformed_routine", "Routine must be an object.")
        return violations

    days = candidate.get("days")
    if not isinstance(days, list):
        add_violation(violations, "malformed_routine", "Routine must contain a list of days.")
        return violations

    for index, day in enumerate(days):
        label = f"Day {index + 1}"
        if not isinstance(day, dict):
            add_violation(violations, "malformed_day", f"{label} must be an object.", day=label)
            continue
        label = _text(day.get("day")) or label
        exercises = day.get("exercises")
        if not isinstance(exercises, list):
            add_violation(violations, "malformed_day", f"{label} must contain a list of exercises.", day=label)
            continue
        if any(not isinstance(exercise, dict) for exercise in exercises):
            add_violation(violations, "malformed_exercise", f"{label} has an exercise that is not an object.", day=label)
    return violations


def collect_violations(candidate):
    """
    Check a candidate routine against the hard rules.

    Returns:
        List of violation dicts with keys: code, message, day, exercise
    """
    violations = _structure_violations(candidate)
    if violations:
        return violations

    for day in candidate["days"]:
        violations.extend(day_rule_violations(day))
    return violations


def validate_routine(candidate):
    """
    Accept or reject a candidate routine.

    Returns the candidate unchanged when every day passes; otherwise raises
    RoutineValidationError naming the offending day and rule.
    """
    violations = collect_violations(candidate)
    if violations:
        raise RoutineValidationError(violations)
    return candidate


def _normalize_exercise(exercise, _index=None):
    return {
        "name": _text(exercise.get("name") or exercise.get("exercise")),
        "sets": _parse_int(exercise.get("sets"), DEFAULT_SETS),
        "reps": _parse_int(exercise.get("reps"), DEFAULT_REPS),
        "rest": _text(exercise.get("rest") or exercise.get("restTime")) or DEFAULT_REST,
    }


def _normalize_entries(entries, normalize):
    """
    Normalize dict entries and keep anything else as-is.

    Non-dict entries and non-list containers are kept for validation to report.
    """
    if entries is None:
        return []
    if not isinstance(entries, list):
        return entries
    return [
        normalize(entry, index) if isinstance(entry, dict) else entry
        for index, entry in enumerate(entries)
    ]


def _normalize_day(day, index):
    exercises = _normalize_entries(day.get("exercises"), _normalize_exercise)
    muscle_groups = day.get("muscle_groups") or day.get("muscleGroups") or []
    if isinstance(muscle_groups, str):
        muscle_groups = [muscle_groups]
    return {
        "day": _text(day.get("day")) or f"Day {_parse_int(day.get('dayNumber'), index + 1)}",
        "focus": _text(day.get("focus")) or " + ".join(_text(group) for group in muscle_groups),
        "muscle_groups": [_text(group) for group in muscle_groups],
        "note": _text(day.get("note")),
        "exercises": exercises,
    }


def routine_from_dict(payload, split_hint=None):
    """
    Coerce a JSON-shaped candidate into the routine shape.

    Missing fields get defaults and common alternate keys are accepted. Only
    structural coercion happens here; rule checks belong to validate_routine.
    """
    if not isinstance(payload, dict):
        raise RoutineValidationError(
            [{"code": "malformed_routine", "message": "Routine must be an object.", "day": "", "exercise": ""}]
        )

    default_name = f"{split_hint}-Split Routine" if split_hint else "Custom Routine"
    tips = payload.get("tips") or []
    if not isinstance(tips, list):
        tips = [tips]

    return {
        "routine_name": _text(payload.get("routine_name") or payload.get("routineName")) or default_name,
        "description": _text(payload.get("description")),
        "days": _normalize_entries(payload.get("days"), _normalize_day),
        "tips": [_text(tip) for tip in tips if _text(tip)],
    }
