import re
import unittest

from routine_planner.equipment_catalog import ExerciseTemplate
from routine_planner.exercise_selector import (
    PLACEHOLDER_EXERCISE_NAME,
    select_exercises,
)
from routine_planner.training_params import EXPERIENCE_PARAMS, GOAL_PARAMS


def _template(name, is_compound, muscle_group="chest", equipment_id=None):
    return ExerciseTemplate(
        name=name,
        equipment_id=equipment_id or name.lower().replace(" ", "-"),
        muscle_group=muscle_group,
        is_compound=is_compound,
    )


COMPOUNDS = [_template(f"Compound {i}", True) for i in range(5)]
ISOLATIONS = [_template(f"Isolation {i}", False) for i in range(5)]
REST_RE = re.compile(r"^(\d+) seconds$")


class ExerciseSelectorTests(unittest.TestCase):
    def test_no_candidates_returns_single_placeholder(self):
        exercises = select_exercises([], EXPERIENCE_PARAMS["intermediate"], 5, seed=11)
        self.assertEqual(
            exercises,
            [{"name": PLACEHOLDER_EXERCISE_NAME, "sets": 0, "reps": 0, "rest": "-"}],
        )

    def test_compounds_come_before_isolations(self):
        templates = ISOLATIONS[:2] + COMPOUNDS[:2]
        exercises = select_exercises(templates, EXPERIENCE_PARAMS["intermediate"], 4, seed=3)
        kinds = [exercise["name"].split()[0] for exercise in exercises]
        self.assertEqual(kinds, ["Compound", "Compound", "Isolation", "Isolation"])

    def test_respects_day_cap(self):
        exercises = select_exercises(COMPOUNDS + ISOLATIONS, EXPERIENCE_PARAMS["intermediate"], 4, seed=9)
        self.assertEqual(len(exercises), 4)

    def test_cap_never_exceeds_shared_ceiling(self):
        many = [_template(f"Isolation {i}", False) for i in range(12)]
        exercises = select_exercises(many, EXPERIENCE_PARAMS["advanced"], 10, seed=1)
        self.assertEqual(len(exercises), 6)

    def test_compound_count_is_capped(self):
        params = EXPERIENCE_PARAMS["beginner"]
        exercises = select_exercises(COMPOUNDS + ISOLATIONS, params, 4, seed=21)
        compounds = [e for e in exercises if e["name"].startswith("Compound")]
        self.assertEqual(len(compounds), params["max_compounds"])
        self.assertEqual(len(exercises), 4)

    def test_duplicate_names_are_removed(self):
        templates = [
            _template("Dumbbell Pullover", False, "chest", "db-pullover"),
            _template("Dumbbell Pullover", False, "back", "db-pullover-back"),
            _template("Dumbbell Fly", False, "chest", "db-fly"),
        ]
        exercises = select_exercises(templates, EXPERIENCE_PARAMS["intermediate"], 5, seed=4)
        names = [exercise["name"] for exercise in exercises]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(sorted(names), ["Dumbbell Fly", "Dumbbell Pullover"])

    def test_same_seed_same_output(self):
        params = GOAL_PARAMS["hypertrophy"]
        first = select_exercises(COMPOUNDS + ISOLATIONS, params, 5, seed=1234)
        second = select_exercises(COMPOUNDS + ISOLATIONS, params, 5, seed=1234)
        self.assertEqual(first, second)

    def test_draws_stay_in_parameter_ranges(self):
        for level, params in GOAL_PARAMS.items():
            for seed in range(0, 500, 37):
                for exercise in select_exercises(COMPOUNDS + ISOLATIONS, params, 5, seed):
                    self.assertGreaterEqual(exercise["sets"], params["sets"][0], level)
                    self.assertLessEqual(exercise["sets"], params["sets"][1], level)
                    self.assertGreaterEqual(exercise["reps"], params["reps"][0], level)
                    self.assertLessEqual(exercise["reps"], params["reps"][1], level)
                    rest = int(REST_RE.match(exercise["rest"]).group(1))
                    self.assertGreaterEqual(rest, params["rest_seconds"][0], level)
                    self.assertLessEqual(rest, params["rest_seconds"][1], level)

    def test_zero_compound_cap_with_only_compounds_falls_back(self):
        params = dict(EXPERIENCE_PARAMS["intermediate"], max_compounds=0)
        exercises = select_exercises(COMPOUNDS, params, 5, seed=8)
        self.assertEqual(len(exercises), 1)
        self.assertEqual(exercises[0]["sets"], 0)


if __name__ == "__main__":
    unittest.main()
