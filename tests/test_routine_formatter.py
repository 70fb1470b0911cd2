import unittest

from routine_planner.routine_formatter import format_routine_text


ROUTINE = {
    "routine_name": "Intermediate 2-Split Routine (2x/week)",
    "description": "A short program.",
    "days": [
        {
            "day": "Day 1",
            "focus": "Chest",
            "muscle_groups": ["chest"],
            "note": "",
            "exercises": [{"name": "Barbell Bench Press", "sets": 4, "reps": 8, "rest": "90 seconds"}],
        },
        {
            "day": "Day 2",
            "focus": "Legs",
            "muscle_groups": ["legs"],
            "note": "Cycle round 2: use variant movements",
            "exercises": [
                {"name": "Leg Press", "sets": 3, "reps": 10, "rest": "60 seconds"},
                {"name": "Leg Curl", "sets": 3, "reps": 12, "rest": "60 seconds"},
            ],
        },
    ],
    "tips": ["Warm up first"],
}


class FormatRoutineTextTests(unittest.TestCase):
    def setUp(self):
        self.text = format_routine_text(ROUTINE)
        self.lines = self.text.splitlines()

    def test_header_and_description(self):
        self.assertEqual(self.lines[0], "# Intermediate 2-Split Routine (2x/week)")
        self.assertEqual(self.lines[1], "A short program.")

    def test_day_headers_and_block_letters(self):
        self.assertIn("## DAY 1 — Chest", self.lines)
        self.assertIn("### A1. Barbell Bench Press", self.lines)
        self.assertIn("### B2. Leg Curl", self.lines)
        self.assertIn("- 4 x 8", self.lines)
        self.assertIn("- **Rest:** 90 seconds", self.lines)

    def test_note_and_tips(self):
        self.assertIn("_Cycle round 2: use variant movements_", self.lines)
        self.assertIn("## TIPS", self.lines)
        self.assertEqual(self.lines[-1], "• Warm up first")
        self.assertTrue(self.text.endswith("\n"))

    def test_empty_routine(self):
        self.assertEqual(format_routine_text({"routine_name": "Empty"}), "# Empty\n")


if __name__ == "__main__":
    unittest.main()
