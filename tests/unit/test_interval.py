import unittest

from svcontig.interval import Interval, ReferenceInterval


class TestInterval(unittest.TestCase):

    def test___init__error(self):
        with self.assertRaises(AttributeError):
            Interval(4, 3)

    def test___init__single_position(self):
        self.assertEqual(Interval(5, 5), Interval(5))

    def test___contains__(self):
        self.assertTrue(Interval(1, 2) in Interval(1, 7))
        self.assertFalse(Interval(1, 7) in Interval(1, 2))
        self.assertTrue(1 in Interval(1, 7))
        self.assertFalse(0 in Interval(1, 7))

    def test___len__(self):
        self.assertEqual(5, len(Interval(1, 5)))
        self.assertEqual(1, len(Interval(3)))

    def test_intersection(self):
        self.assertEqual(Interval(5, 10), Interval(1, 10) & Interval(5, 50))
        self.assertEqual(None, Interval(1, 2) & Interval(10, 11))

    def test___get_item__(self):
        temp = Interval(1, 2)
        self.assertEqual(1, temp[0])
        self.assertEqual(2, temp[1])
        with self.assertRaises(IndexError):
            temp[3]
        with self.assertRaises(IndexError):
            temp['1b']


class TestReferenceInterval(unittest.TestCase):

    def test_contains(self):
        outer = ReferenceInterval('1', 100, 200)
        self.assertTrue(outer.contains(ReferenceInterval('1', 100, 200)))
        self.assertTrue(outer.contains(ReferenceInterval('1', 150, 160)))
        self.assertFalse(outer.contains(ReferenceInterval('1', 150, 201)))
        self.assertFalse(outer.contains(ReferenceInterval('2', 150, 160)))
        self.assertTrue(ReferenceInterval('1', 150, 160) in outer)
        self.assertFalse(ReferenceInterval('X', 150, 160) in outer)

    def test_eq(self):
        self.assertEqual(ReferenceInterval('1', 1, 10), ReferenceInterval('1', 1, 10))
        self.assertNotEqual(ReferenceInterval('1', 1, 10), ReferenceInterval('2', 1, 10))
        self.assertNotEqual(ReferenceInterval('1', 1, 10), Interval(1, 10))

    def test_str(self):
        self.assertEqual('chr1:5-10', str(ReferenceInterval('chr1', 5, 10)))

    def test_parse(self):
        self.assertEqual(ReferenceInterval('chr1', 5, 10), ReferenceInterval.parse('chr1:5-10'))
        self.assertEqual(
            ReferenceInterval('HLA-A*01:01:01:01', 1, 300), ReferenceInterval.parse('HLA-A*01:01:01:01:1-300'))
        self.assertEqual(ReferenceInterval('chrUn_gl000220', 1, 5), ReferenceInterval.parse('chrUn_gl000220:1-5'))

    def test_parse_error(self):
        with self.assertRaises(ValueError):
            ReferenceInterval.parse('chr1:5')
        with self.assertRaises(ValueError):
            ReferenceInterval.parse('chr1')
