import math
import unittest

from chromakit.category import CATEGORIES, category_of_yxy
from chromakit.conspicuity import conspicuity_of_lab
from chromakit.conversion import convert
from chromakit.difference import (
    closest,
    deltaE_cie76,
    deltaE_ciede2000,
    distance,
    NBS,
    nbs_of,
)


class TestDifference(unittest.TestCase):

    def test_ciede2000(self) -> None:
        # Reference pairs from Sharma, Wu, and Dalal
        for lab1, lab2, expected in (
            ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
            ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
            ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
            ((60.2574, -34.0099, 36.2677), (60.4626, -34.1751, 39.4387), 1.2644),
        ):
            with self.subTest(lab1=lab1, lab2=lab2):
                self.assertAlmostEqual(deltaE_ciede2000(*lab1, *lab2), expected, places=4)
                self.assertAlmostEqual(deltaE_ciede2000(*lab2, *lab1), expected, places=4)

    def test_identity(self) -> None:
        self.assertEqual(deltaE_ciede2000(50, 20, -30, 50, 20, -30), 0)
        self.assertEqual(deltaE_ciede2000(50, 0, 0, 50, 0, 0), 0)
        self.assertEqual(deltaE_cie76(50, 20, -30, 50, 20, -30), 0)

    def test_cie76_and_distance(self) -> None:
        self.assertEqual(deltaE_cie76(0, 0, 0, 3, 4, 0), 5)
        self.assertEqual(distance((1, 2, 3), (1, 2, 3)), 0)
        self.assertEqual(distance((0, 0, 0), (2, 3, 6)), 7)

    def test_nbs(self) -> None:
        self.assertIs(nbs_of(0.1), NBS.TRACE)
        self.assertIs(nbs_of(1), NBS.SLIGHT)
        self.assertIs(nbs_of(2), NBS.NOTICEABLE)
        self.assertIs(nbs_of(5), NBS.APPRECIABLE)
        self.assertIs(nbs_of(10), NBS.MUCH)
        self.assertIs(nbs_of(20), NBS.VERY_MUCH)

    def test_closest(self) -> None:
        index, color = closest(
            (50, 20, 20),
            iter([(90, 0, 0), (52, 18, 21), (10, -40, 5)]),
        )
        self.assertEqual(index, 1)
        self.assertEqual(color, (52, 18, 21))
        self.assertEqual(closest((50, 0, 0), []), (-1, (50, 0, 0)))


class TestEvaluation(unittest.TestCase):

    def test_categories(self) -> None:
        for rgb, expected in (
            ((255, 255, 255), 'white'),
            ((0, 0, 0), 'black'),
            ((128, 128, 128), 'gray'),
            ((255, 0, 0), 'red'),
            ((255, 255, 0), 'yellow'),
        ):
            with self.subTest(color=expected):
                yxy = convert(rgb, 'rgb', 'yxy').coordinates
                self.assertEqual(category_of_yxy(*yxy), expected)

    def test_chromaticity_of_yellow(self) -> None:
        self.assertEqual(category_of_yxy(0.8, 0.44, 0.47), 'yellow')

    def test_category_range(self) -> None:
        for yxy in ((0.5, 0.2, 0.1), (0.05, 0.6, 0.3), (0.9, 0.3, 0.6)):
            with self.subTest(yxy=yxy):
                self.assertIn(category_of_yxy(*yxy), CATEGORIES)

    def test_conspicuity(self) -> None:
        self.assertAlmostEqual(conspicuity_of_lab(50, 1, 0), 145)
        for h, expected in ((35, 180), (215, 0), (125, 90), (305, 90)):
            with self.subTest(hue=h):
                a = math.cos(math.radians(h))
                b = math.sin(math.radians(h))
                self.assertAlmostEqual(conspicuity_of_lab(50, a, b), expected, places=6)


if __name__ == '__main__':
    unittest.main()
