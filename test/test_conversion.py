import math
import unittest

from chromakit.conversion import (
    adapt_xyz,
    adaptation_matrix,
    BRADFORD,
    convert,
    D50,
    D65,
    get_converter,
    hsl_to_rgb,
    hwb_to_rgb,
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    lms_to_xyz,
    lrgb_to_rgb,
    lrgb_to_xyz,
    lrgb_to_yiq,
    monochrome_rgb,
    rgb_to_hsl,
    rgb_to_hwb,
    rgb_to_lrgb,
    VON_KRIES,
    xyz_to_lab,
    xyz_to_lms,
    xyz_to_lrgb,
    xyz_to_yxy,
    yiq_to_lrgb,
    yxy_to_xyz,
)
from chromakit.equality import normalize
from chromakit.space import LCH, MUNSELL, Space
from chromakit.spec import ConversionResult, Options


class TestConversion(unittest.TestCase):

    def assertCloseTo(
        self,
        actual: tuple[float, ...],
        expected: tuple[float, ...],
        places: int = 9,
    ) -> None:
        self.assertEqual(len(actual), len(expected))
        for a, e in zip(actual, expected):
            self.assertAlmostEqual(a, e, places=places)

    def test_white_and_red(self) -> None:
        white = convert((255, 255, 255), 'rgb', 'lab')
        self.assertIsInstance(white, ConversionResult)
        self.assertCloseTo(white.coordinates, (100.0, 0.0, 0.0), places=3)
        self.assertFalse(white.out_of_gamut)
        self.assertTrue(white.converged)

        L, a, b = convert((255, 0, 0), 'rgb', 'lab').coordinates
        self.assertAlmostEqual(L, 53.2408, delta=0.01)
        self.assertAlmostEqual(a, 80.0925, delta=0.05)
        self.assertAlmostEqual(b, 67.2032, delta=0.05)

    def test_round_trips(self) -> None:
        for rgb in ((0, 0, 0), (255, 255, 255), (255, 202, 0), (49, 120, 234)):
            with self.subTest('rgb to lrgb and back', rgb=rgb):
                self.assertCloseTo(lrgb_to_rgb(*rgb_to_lrgb(*rgb)), rgb)

            with self.subTest('rgb to hsl and back', rgb=rgb):
                self.assertCloseTo(hsl_to_rgb(*rgb_to_hsl(*rgb)), rgb)

            with self.subTest('rgb to hwb and back', rgb=rgb):
                self.assertCloseTo(hwb_to_rgb(*rgb_to_hwb(*rgb)), rgb)

            lrgb = rgb_to_lrgb(*rgb)
            with self.subTest('lrgb to yiq and back', rgb=rgb):
                self.assertCloseTo(yiq_to_lrgb(*lrgb_to_yiq(*lrgb)), lrgb)

            xyz = lrgb_to_xyz(*lrgb)
            with self.subTest('xyz to lrgb and back', rgb=rgb):
                self.assertCloseTo(lrgb_to_xyz(*xyz_to_lrgb(*xyz)), xyz)

            with self.subTest('xyz to lms and back', rgb=rgb):
                self.assertCloseTo(lms_to_xyz(*xyz_to_lms(*xyz)), xyz)

            with self.subTest('xyz to lab and back', rgb=rgb):
                self.assertCloseTo(lab_to_xyz(*xyz_to_lab(*xyz)), xyz)

            with self.subTest('xyz to yxy and back', rgb=rgb):
                if xyz != (0.0, 0.0, 0.0):
                    self.assertCloseTo(yxy_to_xyz(*xyz_to_yxy(*xyz)), xyz)

            lab = xyz_to_lab(*xyz)
            with self.subTest('lab to lch and back', rgb=rgb):
                self.assertCloseTo(lch_to_lab(*lab_to_lch(*lab)), lab)

    def test_adaptation(self) -> None:
        for name, cone in (('von kries', VON_KRIES), ('bradford', BRADFORD)):
            with self.subTest(cone=name):
                matrix = adaptation_matrix(D65, D50, cone)
                self.assertCloseTo(
                    tuple(sum(m * c for m, c in zip(row, D65)) for row in matrix), D50
                )

        self.assertCloseTo(adapt_xyz(*D65, source=D65, target=D50), D50)
        self.assertEqual(adapt_xyz(0.1, 0.2, 0.3, source=D65, target=D65), (0.1, 0.2, 0.3))

    def test_d50(self) -> None:
        xyz = lrgb_to_xyz(1, 1, 1, white='D50')
        self.assertCloseTo(xyz_to_lab(*xyz, white='D50'), (100, 0, 0), places=3)

        result = convert((255, 255, 255), 'rgb', 'lab', white='D50')
        self.assertCloseTo(result.coordinates, (100, 0, 0), places=3)

    def test_hsl_and_hwb(self) -> None:
        self.assertCloseTo(rgb_to_hsl(255, 0, 0), (0, 100, 50))
        self.assertCloseTo(rgb_to_hsl(0, 0, 255), (240, 100, 50))
        self.assertCloseTo(rgb_to_hwb(255, 0, 0), (0, 0, 0))
        self.assertCloseTo(rgb_to_hwb(128, 128, 128), (0, 100 * 128 / 255, 100 - 100 * 128 / 255))
        self.assertCloseTo(hwb_to_rgb(120, 60, 60), (127.5, 127.5, 127.5))

    def test_black_chromaticity(self) -> None:
        Y, x, y = xyz_to_yxy(0, 0, 0)
        self.assertEqual(Y, 0)
        self.assertAlmostEqual(x, 0.3127, places=4)
        self.assertAlmostEqual(y, 0.3290, places=4)
        self.assertEqual(yxy_to_xyz(0.5, 0.3, 0.0), (0.0, 0.0, 0.0))

    def test_monochrome(self) -> None:
        r, g, b = monochrome_rgb(255, 0, 0)
        self.assertAlmostEqual(r, g, places=9)
        self.assertAlmostEqual(g, b, places=9)
        L = xyz_to_lab(*lrgb_to_xyz(*rgb_to_lrgb(r, g, b)))[0]
        self.assertAlmostEqual(L, 53.2408, delta=0.01)

    def test_gamut_flag(self) -> None:
        self.assertTrue(convert((1.2, 0.5, 0.5), 'lrgb', 'rgb').out_of_gamut)
        self.assertTrue(convert((50, 150, 0), 'lab', 'rgb').out_of_gamut)
        self.assertFalse(convert((50, 10, 10), 'lab', 'rgb').out_of_gamut)
        # Unbounded targets are never flagged
        self.assertFalse(convert((50, 150, 0), 'lab', 'xyz').out_of_gamut)

    def test_dispatcher(self) -> None:
        converter = get_converter('rgb', 'lab')
        self.assertEqual(converter.__name__, 'rgb_to_lab')
        self.assertEqual(getattr(converter, 'route'), ('rgb', 'lrgb', 'xyz', 'lab'))
        self.assertIs(get_converter('rgb', 'lab'), converter)
        self.assertIsNot(get_converter('rgb', 'lab', options=Options(white='D50')), converter)

        self.assertEqual(
            getattr(get_converter('hsl', 'hwb'), 'route'), ('hsl', 'rgb', 'hwb')
        )
        self.assertEqual(
            getattr(get_converter('pccs', 'rgb'), 'route'),
            ('pccs', 'munsell', 'xyz', 'lrgb', 'rgb'),
        )

        for source, target, route in (
            ('lab', 'lab', ('lab',)),
            ('lab', 'lch', ('lab', 'lch')),
            ('lch', 'xyz', ('lch', 'lab', 'xyz')),
            ('xyz', 'hsl', ('xyz', 'lrgb', 'rgb', 'hsl')),
            ('yiq', 'rgb', ('yiq', 'lrgb', 'rgb')),
        ):
            with self.subTest(source=source, target=target):
                self.assertEqual(getattr(get_converter(source, target), 'route'), route)

        same = convert((1, 2, 3), 'lab', 'lab')
        self.assertEqual(same.coordinates, (1, 2, 3))

        with self.assertRaises(ValueError):
            convert((1, 2, 3), 'lab', 'bogus')
        with self.assertRaises(ValueError):
            get_converter('bogus', 'lab')

    def test_coordinate_count(self) -> None:
        for coordinates, source, target in (
            ((1, 2), 'lab', 'xyz'),
            ((1, 2, 3, 4), 'lab', 'lab'),
            ((), 'rgb', 'munsell'),
        ):
            with self.subTest(coordinates=coordinates, route=(source, target)):
                with self.assertRaises(ValueError):
                    convert(coordinates, source, target)

        with self.assertRaises(ValueError):
            get_converter('rgb', 'lab')(255, 0)

    def test_options(self) -> None:
        with self.assertRaises(ValueError):
            Options(max_iterations=0)
        with self.assertRaises(ValueError):
            Options(tolerance=-1.0)
        with self.assertRaises(ValueError):
            Options(white='D55')  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            convert((1, 2, 3), 'lab', 'xyz', max_iterations=0)

        options = Options().replace(max_iterations=5)
        self.assertEqual(options.max_iterations, 5)
        self.assertEqual(hash(options), hash(Options(max_iterations=5)))


class TestSpace(unittest.TestCase):

    def test_spaces(self) -> None:
        self.assertEqual(LCH.angular_index, 2)
        self.assertEqual(MUNSELL.hue_period, 100)
        self.assertTrue(Space.resolve('rgb').device)
        self.assertFalse(Space.resolve('lab').device)
        with self.assertRaises(ValueError):
            Space.resolve('bogus')

    def test_normalize(self) -> None:
        self.assertEqual(
            normalize((math.nan, 1.0, 360.0), angular_index=2),
            (None, 1.0, 0.0),
        )
        self.assertEqual(
            MUNSELL.normalize(105.0, 5.0, 4.0),
            MUNSELL.normalize(5.0, 5.0, 4.0),
        )


if __name__ == '__main__':
    unittest.main()
