from __future__ import annotations

import unittest

from pgfplots import AxisKey, ErrorCharacter, ErrorDirection, PictureKey, PlotKey, Scale, Type2D
from pgfplots.options import OptionKey, add_key


class AddKeyTests(unittest.TestCase):
    def test_custom_keys_are_never_deduplicated(self) -> None:
        keys: list[OptionKey] = []
        add_key(keys, PictureKey.custom("random"))
        add_key(keys, PictureKey.custom("random"))
        self.assertEqual([k.render() for k in keys], ["random", "random"])

    def test_same_kind_replaces_and_moves_to_end(self) -> None:
        keys: list[AxisKey] = []
        add_key(keys, AxisKey.x_mode(Scale.LOG))
        add_key(keys, AxisKey.custom("grid=major"))
        add_key(keys, AxisKey.x_mode(Scale.NORMAL))
        self.assertEqual([k.render() for k in keys], ["grid=major", "xmode=normal"])

    def test_comparison_uses_kind_not_payload(self) -> None:
        keys: list[PlotKey] = []
        add_key(keys, PlotKey.type_2d(Type2D.smooth(0.55)))
        add_key(keys, PlotKey.type_2d(Type2D.xbar(bar_width=1.0)))
        self.assertEqual(len(keys), 1)
        self.assertEqual(keys[0].render(), "xbar, bar width=1, bar shift=0")

    def test_at_most_one_key_per_kind_with_latest_value(self) -> None:
        keys: list[PlotKey] = []
        sequence = [
            PlotKey.x_error(ErrorCharacter.ABSOLUTE),
            PlotKey.type_2d(Type2D.sharp_plot()),
            PlotKey.x_error(ErrorCharacter.RELATIVE),
            PlotKey.custom("dashed"),
            PlotKey.type_2d(Type2D.only_marks()),
        ]
        for key in sequence:
            add_key(keys, key)
        kinds = [k.kind for k in keys]
        self.assertEqual(kinds, ["x_error", "custom", "type_2d"])
        self.assertEqual(keys[0].value, ErrorCharacter.RELATIVE)
        self.assertEqual(keys[2].render(), "only marks")

    def test_custom_key_renders_verbatim(self) -> None:
        self.assertEqual(PlotKey.custom("something/random here").render(), "something/random here")
        self.assertEqual(str(AxisKey.custom("something/random here")), "something/random here")
        self.assertEqual(str(PictureKey.custom("something/random here")), "something/random here")


class KeyValidationTests(unittest.TestCase):
    def test_unknown_kind_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PlotKey("title", "x")
        with self.assertRaises(ValueError):
            AxisKey("type_2d", Type2D.sharp_plot())
        with self.assertRaises(ValueError):
            PictureKey("x_mode", Scale.LOG)

    def test_wrong_payload_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PlotKey("type_2d", "sharp plot")
        with self.assertRaises(ValueError):
            PlotKey("x_error", ErrorDirection.BOTH)
        with self.assertRaises(ValueError):
            AxisKey("x_mode", "log")
        with self.assertRaises(ValueError):
            PictureKey.custom(None)

    def test_valid_direct_construction_renders(self) -> None:
        self.assertEqual(PlotKey("type_2d", Type2D.sharp_plot()).render(), "sharp plot")
        self.assertEqual(AxisKey("title", "Data").render(), "title={Data}")
        self.assertEqual(PictureKey("custom", "scale=2").render(), "scale=2")


if __name__ == "__main__":
    unittest.main()
