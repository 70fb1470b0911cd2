"""
Training parameter tables keyed by experience level or training goal.

Two profiles exist: "experience" (canonical, used with a focus target) and
"goal" (the older goal-keyed design). Exactly one is active per generation.
"""

EXPERIENCE_PROFILE = "experience"
GOAL_PROFILE = "goal"
DEFAULT_PROFILE = EXPERIENCE_PROFILE

# sets / reps / rest_seconds are inclusive (min, max) ranges.
EXPERIENCE_PARAMS = {
    "beginner": {
        "sets": (2, 3),
        "reps": (10, 12),
        "rest_seconds": (60, 90),
        "max_compounds": 2,
        "max_per_day": 4,
    },
    "intermediate": {
        "sets": (3, 4),
        "reps": (8, 12),
        "rest_seconds": (60, 90),
        "max_compounds": 3,
        "max_per_day": 5,
    },
    "advanced": {
        "sets": (4, 5),
        "reps": (6, 10),
        "rest_seconds": (90, 120),
        "max_compounds": 4,
        "max_per_day": 6,
    },
}

GOAL_PARAMS = {
    "hypertrophy": {
        "sets": (3, 4),
        "reps": (8, 12),
        "rest_seconds": (60, 90),
        "max_compounds": 3,
        "max_per_day": 5,
    },
    "fat-loss": {
        "sets": (3, 4),
        "reps": (12, 15),
        "rest_seconds": (30, 45),
        "max_compounds": 3,
        "max_per_day": 5,
    },
    "beginner": {
        "sets": (3, 3),
        "reps": (10, 12),
        "rest_seconds": (60, 90),
        "max_compounds": 2,
        "max_per_day": 4,
    },
    "maintenance": {
        "sets": (3, 3),
        "reps": (10, 12),
        "rest_seconds": (60, 60),
        "max_compounds": 2,
        "max_per_day": 5,
    },
}

PROFILE_TABLES = {
    EXPERIENCE_PROFILE: EXPERIENCE_PARAMS,
    GOAL_PROFILE: GOAL_PARAMS,
}

PROFILE_DEFAULT_LEVEL = {
    EXPERIENCE_PROFILE: "intermediate",
    GOAL_PROFILE: "hypertrophy",
}

LEVEL_LABELS = {
    "beginner": "Beginner",
    "intermediate": "Intermediate",
    "advanced": "Advanced",
    "hypertrophy": "Hypertrophy",
    "fat-loss": "Fat Loss",
    "maintenance": "Maintenance",
}

FOCUS_LABELS = {
    "upper": "upper body",
    "lower": "lower body",
    "glutes": "glutes",
}

TIPS = {
    "beginner": [
        "Learn the movement pattern with light weight before adding load.",
        "Warm up for 5-10 minutes before your first working set.",
        "Stop the set if you feel sharp pain and check your form.",
        "Consistency beats intensity: build a routine you can keep.",
        "Log every session so you can see your progress week to week.",
    ],
    "intermediate": [
        "Apply progressive overload: add a little weight or a rep each week.",
        "Keep the listed rest times so the working sets stay productive.",
        "Aim for 1.6-2.2 g of protein per kg of bodyweight.",
        "Sleep 7-9 hours; recovery is where the growth happens.",
        "Swap in variant movements on repeat days to keep the stimulus fresh.",
    ],
    "advanced": [
        "Run the heavy compounds first while you are fresh.",
        "Plan a deload week every 4-6 weeks to manage fatigue.",
        "Track RPE on the compounds and hold the load when RPE climbs above 9.",
        "Rotate grips and angles on repeat days to spread joint stress.",
        "Keep accessory work strict; the compounds carry the intensity.",
    ],
    "hypertrophy": [
        "Apply progressive overload: add a little weight or a rep each week.",
        "Focus on the squeeze and the stretch of every rep.",
        "Aim for 1.6-2.2 g of protein per kg of bodyweight.",
        "Sleep 7-9 hours; recovery is where the growth happens.",
        "Keep the listed rest times so the working sets stay productive.",
    ],
    "fat-loss": [
        "Keep rest short to hold your heart rate up.",
        "Stay in a calorie deficit but do not cut protein.",
        "Add cardio on off days to speed up fat loss.",
        "Stretch after training to help recovery.",
        "Drink plenty of water through the day.",
    ],
    "maintenance": [
        "The goal is to hold strength, so avoid big jumps in load.",
        "Keep training frequency and intensity steady.",
        "Eat a balanced diet to support recovery.",
        "Manage stress and sleep; both matter for maintenance.",
        "Vary the routine slightly every few weeks for a fresh stimulus.",
    ],
}


def normalize_profile(profile):
    value = (profile or "").strip().lower()
    return value if value in PROFILE_TABLES else DEFAULT_PROFILE


def default_level(profile):
    return PROFILE_DEFAULT_LEVEL[normalize_profile(profile)]


def resolve_level(profile, level):
    """Return the table key actually used for `level` (unknown -> profile default)."""
    table = PROFILE_TABLES[normalize_profile(profile)]
    key = (level or "").strip().lower()
    return key if key in table else default_level(profile)


def get_training_params(profile, level):
    """Look up the parameter row for a level, falling back to the profile default."""
    table = PROFILE_TABLES[normalize_profile(profile)]
    return table[resolve_level(profile, level)]


def get_tips(profile, level):
    return list(TIPS[resolve_level(profile, level)])


def level_label(profile, level):
    return LEVEL_LABELS[resolve_level(profile, level)]
