import unittest

from chromakit.serde import (
    Format,
    from_color_integer,
    parse_fn,
    parse_format_spec,
    parse_hex,
    parse_munsell,
    stringify,
    to_color_integer,
)


class TestSerde(unittest.TestCase):

    def test_parse_hex(self) -> None:
        self.assertEqual(parse_hex('#fff'), ('rgb', (255.0, 255.0, 255.0)))
        self.assertEqual(parse_hex('#3178ea'), ('rgb', (49.0, 120.0, 234.0)))

        for text in ('fff', '#ggg', '#12', '#1234567'):
            with self.subTest(text=text):
                with self.assertRaises(SyntaxError):
                    parse_hex(text)

    def test_parse_fn(self) -> None:
        self.assertEqual(parse_fn('lab(50, 20, -30)'), ('lab', (50.0, 20.0, -30.0)))
        self.assertEqual(parse_fn(' xyz(0.1,0.2,0.3) '), ('xyz', (0.1, 0.2, 0.3)))

        for text in ('foo(1, 2, 3)', 'lab(1, 2)', 'lab(1, two, 3)', 'lab 1 2 3'):
            with self.subTest(text=text):
                with self.assertRaises(SyntaxError):
                    parse_fn(text)

    def test_parse_munsell(self) -> None:
        self.assertEqual(parse_munsell('2.5GY 6/8'), ('munsell', (32.5, 6.0, 8.0)))
        self.assertEqual(parse_munsell('5R 4/14'), ('munsell', (5.0, 4.0, 14.0)))
        self.assertEqual(parse_munsell('N5'), ('munsell', (0.0, 5.0, 0.0)))
        self.assertEqual(parse_munsell('N 9.5'), ('munsell', (0.0, 9.5, 0.0)))

        for text in ('5Q 4/14', '5R 4', 'R 4/14', '11R 4/14'):
            with self.subTest(text=text):
                with self.assertRaises(SyntaxError):
                    parse_munsell(text)

    def test_color_integer(self) -> None:
        self.assertEqual(to_color_integer(255, 128, 0), 0xff8000)
        self.assertEqual(to_color_integer(0.4, 0, 254.6), 0x0000ff)
        self.assertEqual(from_color_integer(0x123456), (0x12, 0x34, 0x56))
        with self.assertRaises(ValueError):
            to_color_integer(256, 0, 0)
        with self.assertRaises(ValueError):
            to_color_integer(0, -1, 0)
        for value in (-1, 0x1000000):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    from_color_integer(value)

    def test_format_spec(self) -> None:
        self.assertEqual(parse_format_spec(''), (Format.FUNCTION, 5))
        self.assertEqual(parse_format_spec('h'), (Format.HEX, 5))
        self.assertEqual(parse_format_spec('.3h'), (Format.HEX, 3))
        self.assertEqual(parse_format_spec('.2'), (Format.FUNCTION, 2))
        self.assertEqual(parse_format_spec('n'), (Format.NOTATION, 5))
        for spec in ('q', '3', '.x', '.3hh'):
            with self.subTest(spec=spec):
                with self.assertRaises(ValueError):
                    parse_format_spec(spec)

    def test_stringify(self) -> None:
        self.assertEqual(stringify('rgb', (255, 0, 128), Format.HEX), '#ff0080')
        self.assertEqual(
            stringify('lab', (50.123456, 0.0, -1.5)), 'lab(50.123, 0.0, -1.5)'
        )
        self.assertEqual(stringify('munsell', (0, 5, 0), Format.NOTATION), 'N 5')
        with self.assertRaises(ValueError):
            stringify('xyz', (0.1, 0.2, 0.3), Format.NOTATION)


if __name__ == '__main__':
    unittest.main()
