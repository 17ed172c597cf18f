import unittest
from dataclasses import replace

from tcxread import read, read_file, validate
from tcxread.model import ActivityLap, Application, Plan, Position, Repeat, Step, TrackPoint, Workout
from tcxread.validate import Length, Pattern, Range, compiled_pattern

from test_vars import PLANS_FILE, POLAR_RUN_FILE, lap_tcx


class ConstraintTestCase(unittest.TestCase):

    def test_01_range(self):
        r = Range(min=1, max=5)
        self.assertIsNone(r.check(1))
        self.assertIsNone(r.check(5))
        self.assertIsNotNone(r.check(0))
        self.assertIsNotNone(r.check(6))
        self.assertIsNone(Range(max=254).check(-10))

    def test_02_length(self):
        self.assertIsNone(Length(equal=2).check('EN'))
        self.assertIsNotNone(Length(equal=2).check('ENG'))
        self.assertIsNotNone(Length(min=1, max=15).check(''))
        self.assertIsNotNone(Length(min=1, max=15).check('A' * 16))
        self.assertIsNone(Length(min=1, max=15).check('A' * 15))

    def test_03_pattern(self):
        p = Pattern('part_number')
        self.assertIsNone(p.check('XXX-XXXXX-XX'))
        self.assertIsNone(p.check('006-D2449-00'))
        for value in ('', 'xxx-xxxxx-xx', 'XXX-XXXX-XX', 'XXX-XXXXX-XXX', 'XXXXXXXXXX'):
            self.assertIsNotNone(p.check(value), msg=value)
        # The whole value must have the shape, in ASCII upper case letters and digits.
        for value in ('PN XXX-XXXXX-XX', 'XXX-XXXXX-XX\n', '\u00c4BC-XXXXX-XX', '\u0660\u0660\u0666-D2449-00'):
            self.assertIsNotNone(p.check(value), msg=value)
        # The pattern is compiled once.
        self.assertIs(compiled_pattern('part_number'), compiled_pattern('part_number'))


class ValidateTestCase(unittest.TestCase):

    def test_01_default_application(self):
        """An Application built from defaults has an empty language id and
        part number, neither of which is valid.
        """
        result = validate(Application())
        self.assertFalse(result.is_valid)
        self.assertEqual(set(result.field_errors), {'lang_id', 'part_number'})

        app = replace(Application(), lang_id='EN', part_number='XXX-XXXXX-XX')
        result = validate(app)
        self.assertTrue(result.is_valid)
        self.assertEqual(result.violations, [])
        self.assertEqual(result.field_errors, {})

    def test_02_position(self):
        self.assertTrue(validate(Position(90.0, -180.0)).is_valid)
        result = validate(Position(90.5, 181.0))
        self.assertEqual(set(result.field_errors), {'latitude_degrees', 'longitude_degrees'})
        violation = result.field_errors['latitude_degrees'][0]
        self.assertEqual(violation.value, 90.5)
        self.assertEqual(violation.constraint, Range(min=-90.0, max=90.0))

    def test_03_plan_name(self):
        self.assertTrue(validate(Plan()).is_valid)
        self.assertTrue(validate(Plan(name='Easy 5k')).is_valid)
        self.assertFalse(validate(Plan(name='')).is_valid)
        self.assertFalse(validate(Plan(name='A name that is too long')).is_valid)

    def test_04_nested_paths(self):
        """Violations in nested objects are reported with their full path."""
        tc_db = read(lap_tcx('<Cadence>255</Cadence><Track><Trackpoint><HeartRateBpm><Value>0</Value>'
                             '</HeartRateBpm></Trackpoint></Track>'))
        result = validate(tc_db)
        self.assertFalse(result.is_valid)
        self.assertEqual(set(result.field_errors), {
            'activity_list.activities[0].laps[0].cadence',
            'activity_list.activities[0].laps[0].track_points[0].heart_rate_bpm',
        })

    def test_05_lists(self):
        lap = ActivityLap(track_points=[TrackPoint(), TrackPoint(cadence=300)])
        result = validate(lap)
        self.assertEqual(list(result.field_errors), ['track_points[1].cadence'])

    def test_06_steps(self):
        workout = Workout(name='W', steps=[Repeat(step_id=2, repetitions=1, children=[Step(step_id=21)])])
        result = validate(workout)
        self.assertEqual(set(result.field_errors), {'steps[0].repetitions', 'steps[0].children[0].step_id'})

    def test_07_files(self):
        self.assertTrue(validate(read_file(POLAR_RUN_FILE)).is_valid)
        self.assertTrue(validate(read_file(PLANS_FILE)).is_valid)


if __name__ == '__main__':
    unittest.main()
