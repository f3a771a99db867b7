import unittest

from chromakit import Color, Method, Options, VisionModel
from chromakit.difference import NBS


class ColorValues:

    def __init__(
        self,
        spec: str,
        rgb: tuple[float, float, float],
        lrgb: tuple[float, float, float],
        xyz: tuple[float, float, float],
        lightness: float,
        category: str,
    ) -> None:
        self.spec = spec
        self.rgb = Color('rgb', rgb)
        self.lrgb = Color('lrgb', lrgb)
        self.xyz = Color('xyz', xyz)
        self.lightness = lightness
        self.category = category


class TestColor(unittest.TestCase):

    BLACK = ColorValues(
        spec = '#000000',
        rgb = (0.0, 0.0, 0.0),
        lrgb = (0.0, 0.0, 0.0),
        xyz = (0.0, 0.0, 0.0),
        lightness = 0.0,
        category = 'black',
    )

    YELLOW = ColorValues(
        spec = '#ffca00',
        rgb = (255.0, 202.0, 0.0),
        lrgb = (1.0, 0.5906188409193369, 0.0),
        xyz = (0.623648, 0.635055, 0.089731),
        lightness = 83.7075,
        category = 'yellow',
    )

    def assertCloseTo(self, actual: Color, expected: Color, places: int = 7) -> None:
        self.assertEqual(actual.tag, expected.tag)
        for a, e in zip(actual.coordinates, expected.coordinates):
            self.assertAlmostEqual(a, e, places=places)

    def test_construction(self) -> None:
        self.assertEqual(Color('#f00'), Color('rgb', 255, 0, 0))
        self.assertEqual(Color('lab(50, 20, -30)'), Color('lab', (50, 20, -30)))
        self.assertEqual(Color('5R 4/14'), Color('munsell', 5, 4, 14))
        self.assertEqual(Color('N 5'), Color('munsell', 0, 5, 0))

        color = Color('lab', 50, 20, -30)
        self.assertIs(Color(color).tag, 'lab')
        self.assertEqual(Color(color), color)
        self.assertEqual(color.L, 50)
        self.assertEqual(color.b, -30)
        with self.assertRaises(AttributeError):
            color.q

        with self.assertRaises(ValueError):
            Color('nonsense')
        with self.assertRaises(ValueError):
            Color('rgb', (1, 2))
        with self.assertRaises(ValueError):
            Color('bogus', 1, 2, 3)
        with self.assertRaises(SyntaxError):
            Color('#12')

    def test_equality(self) -> None:
        self.assertEqual(Color('lch', 50, 20, 360), Color('lch', 50, 20, 0))
        self.assertEqual(hash(Color('lch', 50, 20, 360)), hash(Color('lch', 50, 20, 0)))
        self.assertEqual(Color('munsell', 105, 5, 4), Color('munsell', 5, 5, 4))
        self.assertEqual(Color('pccs', 26, 5, 4), Color('pccs', 2, 5, 4))
        self.assertNotEqual(Color('rgb', 1, 2, 3), Color('lrgb', 1, 2, 3))

    def test_conversions(self) -> None:
        for color_name in ('BLACK', 'YELLOW'):
            values = getattr(self, color_name)
            color_name = color_name.lower()

            with self.subTest('hex-string to sRGB', color=color_name):
                rgb = Color(values.spec)
                self.assertEqual(rgb, values.rgb)

            with self.subTest('sRGB back to hex-string', color=color_name):
                self.assertEqual(f'{rgb:h}', values.spec)

            with self.subTest('sRGB to linear sRGB', color=color_name):
                lrgb = rgb.to('lrgb')
                self.assertCloseTo(lrgb, values.lrgb)

            with self.subTest('linear sRGB back to sRGB', color=color_name):
                self.assertCloseTo(lrgb.to('rgb'), rgb)

            with self.subTest('linear sRGB to XYZ', color=color_name):
                xyz = lrgb.to('xyz')
                self.assertCloseTo(xyz, values.xyz, places=5)

            with self.subTest('XYZ to CIELAB', color=color_name):
                lab = xyz.to('lab')
                self.assertIs(lab.tag, 'lab')
                self.assertAlmostEqual(lab.L, values.lightness, delta=0.01)

            with self.subTest('CIELAB back to sRGB', color=color_name):
                self.assertCloseTo(lab.to('rgb'), rgb)

            with self.subTest('category', color=color_name):
                self.assertEqual(rgb.category(), values.category)

    def test_conversion_diagnostics(self) -> None:
        result = Color('lab', 50, 150, 0).convert('rgb')
        self.assertTrue(result.out_of_gamut)

        result = Color('#808080').convert('munsell', options=Options(max_iterations=1))
        self.assertFalse(result.converged)

        concise = Color('#3178ea').to('pccs', options=Options(method=Method.CONCISE))
        accurate = Color('#3178ea').to('pccs')
        self.assertNotEqual(concise, accurate)

    def test_gamut(self) -> None:
        self.assertFalse(Color('rgb', 300, 0, 0).in_gamut())
        self.assertEqual(Color('rgb', 300, 0, 0).clip(), Color('rgb', 255, 0, 0))
        self.assertTrue(Color('rgb', 255, 0, 0).in_gamut())

        mapped = Color('lrgb', 1.2, 0.5, 0.5).to_gamut()
        self.assertTrue(mapped.in_gamut())
        self.assertGreater(mapped.r, mapped.g)

        lab = Color('lab', 50, 150, 0)
        self.assertIs(lab.to_gamut().tag, 'lab')
        self.assertEqual(lab.to_gamut(), lab)

    def test_evaluation(self) -> None:
        red = Color('#ff0000')
        self.assertEqual(red.distance('#ff0000'), 0)
        self.assertGreater(red.distance('#00ff00'), 50)
        self.assertIs(red.difference_grade('#00ff00'), NBS.VERY_MUCH)
        self.assertEqual(red.closest(['#0000ff', '#fe0101', '#00ff00']), 1)
        self.assertEqual(red.category(), 'red')
        self.assertGreater(red.conspicuity(), 150)
        self.assertEqual(Color('#808080').tone(), 'Gy')

    def test_simulation(self) -> None:
        red = Color('#ff0000')
        green = Color('#008000')
        for model in VisionModel:
            with self.subTest(model=model.value):
                self.assertLess(
                    red.protanopia(model).distance(green.protanopia(model)),
                    red.distance(green),
                )
                self.assertIs(red.deuteranopia(model).tag, 'rgb')

        elderly = Color('lab', 60, 50, 0).elderly()
        self.assertEqual(elderly.L, 60)

        r, g, b = red.monochrome().coordinates
        self.assertAlmostEqual(r, g, places=9)
        self.assertAlmostEqual(g, b, places=9)

    def test_format(self) -> None:
        self.assertEqual(str(Color('lab', 50, 20, -30)), 'lab(50.0, 20.0, -30.0)')
        self.assertEqual(f'{Color("#ff8000"):h}', '#ff8000')
        self.assertEqual(f'{Color("lab", 1/3, 0, 0):.3}', 'lab(0.333, 0.0, 0.0)')
        self.assertEqual(f'{Color("5R 4/14"):n}', '5R 4/14')
        self.assertEqual(f'{Color("pccs", 2, 4.5, 9):n}', 'v2 2:R-4.5-9s')
        with self.assertRaises(ValueError):
            f'{Color("lab", 50, 20, -30):h}'
        with self.assertRaises(ValueError):
            f'{Color("lab", 50, 20, -30):q}'


if __name__ == '__main__':
    unittest.main()
