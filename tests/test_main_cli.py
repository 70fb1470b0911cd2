import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import main


class MainCliTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.config_path = os.path.join(self.tmpdir.name, "missing.yaml")
        dotenv_patch = patch.object(main, "load_dotenv")
        dotenv_patch.start()
        self.addCleanup(dotenv_patch.stop)

    def _run(self, argv):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main.main(argv)
        return code, buffer.getvalue()

    def _write_json(self, payload):
        path = os.path.join(self.tmpdir.name, "candidate.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        return path

    def test_json_output(self):
        code, output = self._run(
            ["--config", self.config_path, "--json", "--equipment", "leg-press", "--frequency", "2"]
        )
        self.assertEqual(code, 0)
        routine = json.loads(output)
        self.assertEqual(len(routine["days"]), 2)
        self.assertEqual(routine["days"][0]["exercises"][0]["name"], "Leg Press")

    def test_text_output(self):
        code, output = self._run(["--config", self.config_path, "--equipment", "bench-press"])
        self.assertEqual(code, 0)
        self.assertIn("## DAY 1", output)
        self.assertIn("✓ Routine generated successfully!", output)

    def test_no_equipment_warns(self):
        code, output = self._run(["--config", self.config_path])
        self.assertEqual(code, 0)
        self.assertIn("⚠ No equipment selected", output)

    def test_validate_accepts_good_candidate(self):
        path = self._write_json({"routine_name": "Mine", "days": [{"day": "Day 1", "exercises": [{"name": "Squat"}]}]})
        code, output = self._run(["--validate", path])
        self.assertEqual(code, 0)
        self.assertIn("✓ Mine", output)

    def test_validate_rejects_bad_candidate(self):
        exercises = [{"name": f"Move {i}", "sets": 3} for i in range(7)]
        path = self._write_json({"days": [{"day": "Day 1", "exercises": exercises}]})
        code, output = self._run(["--validate", path])
        self.assertEqual(code, 1)
        self.assertIn("too_many_exercises", output)

    def test_validate_rejects_non_object_exercise(self):
        exercises = [{"name": f"Move {i}", "sets": 3} for i in range(6)] + ["Squat"]
        path = self._write_json({"days": [{"day": "Day 1", "exercises": exercises}]})
        code, output = self._run(["--validate", path])
        self.assertEqual(code, 1)
        self.assertIn("malformed_exercise", output)

    def test_validate_rejects_text_set_count_over_limit(self):
        path = self._write_json({"days": [{"day": "Day 1", "exercises": [{"name": "Squat", "sets": "8 sets"}]}]})
        code, output = self._run(["--validate", path])
        self.assertEqual(code, 1)
        self.assertIn("too_many_sets", output)

    def test_validate_missing_file(self):
        code, output = self._run(["--validate", os.path.join(self.tmpdir.name, "nope.json")])
        self.assertEqual(code, 1)
        self.assertIn("❌ Error", output)


if __name__ == "__main__":
    unittest.main()
