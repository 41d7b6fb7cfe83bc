from __future__ import annotations

import unittest

from linechart.errors import ChartDataError
from linechart.layout import ViewportGeometry
from linechart.config import ChartConfig
from linechart.scales import Domain, line_gap, map_points, resolve_domain, rounded_top_value
from linechart.series import DataItem


def _items(*values: int) -> list[DataItem]:
    return [DataItem(value=v, label=str(i + 1)) for i, v in enumerate(values)]


class ScaleResolverTests(unittest.TestCase):
    def test_rounded_top_known_values(self) -> None:
        self.assertEqual(rounded_top_value(500), 600)
        self.assertEqual(rounded_top_value(449), 600)
        self.assertEqual(rounded_top_value(450), 600)
        self.assertEqual(rounded_top_value(510), 700)
        self.assertEqual(rounded_top_value(99), 200)
        self.assertEqual(rounded_top_value(0), 100)

    def test_rounded_top_is_multiple_of_100_strictly_above_max(self) -> None:
        for value in range(0, 2001, 7):
            top = rounded_top_value(value)
            self.assertEqual(top % 100, 0, msg=f"value={value}")
            self.assertGreater(top, value, msg=f"value={value}")

    def test_four_item_scenario_resolves_to_zero_six_hundred(self) -> None:
        domain = resolve_domain(_items(10, 50, 90, 500))
        self.assertEqual(domain, Domain(min=0.0, max=600.0))

    def test_auto_mode_falls_back_to_min_max_for_negative_values(self) -> None:
        domain = resolve_domain(_items(-10, 40, 90))
        self.assertEqual(domain.min, -10.0)
        self.assertAlmostEqual(domain.max, -10.0 + 100.0 * 1.10)

    def test_forced_min_max_mode(self) -> None:
        domain = resolve_domain(_items(100, 200), mode="min_max")
        self.assertEqual(domain.min, 100.0)
        self.assertAlmostEqual(domain.max, 210.0)

    def test_forced_rounded_top_mode(self) -> None:
        domain = resolve_domain(_items(-20, 120), mode="rounded_top")
        self.assertEqual(domain, Domain(min=0.0, max=300.0))

    def test_forced_rounded_top_keeps_axis_above_zero_for_negative_data(self) -> None:
        for values in ((-200, -200), (-150, -160), (-40, -90)):
            domain = resolve_domain(_items(*values), mode="rounded_top")
            self.assertEqual(domain, Domain(min=0.0, max=100.0))
            self.assertGreater(domain.max, domain.min)

    def test_values_beyond_machine_integers_resolve(self) -> None:
        domain = resolve_domain(_items(10, 2**63), mode="min_max")
        self.assertEqual(domain.min, 10.0)
        self.assertGreater(domain.max, 2.0**63)

    def test_degenerate_min_max_domain_is_widened(self) -> None:
        domain = resolve_domain(_items(5, 5, 5), mode="min_max")
        self.assertGreater(domain.span, 0.0)
        self.assertEqual(domain, Domain(min=4.0, max=6.0))

    def test_empty_series_has_no_domain(self) -> None:
        with self.assertRaises(ChartDataError):
            resolve_domain([])


class PointMapperTests(unittest.TestCase):
    def test_points_have_increasing_x_and_span_the_width(self) -> None:
        items = _items(3, 9, 1, 7, 5, 11)
        points = map_points(items, resolve_domain(items), width=250.0, height=120.0)
        self.assertEqual(len(points), len(items))
        xs = [p.x for p in points]
        self.assertTrue(all(b > a for a, b in zip(xs, xs[1:])))
        self.assertAlmostEqual(line_gap(len(items), 250.0) * (len(items) - 1), 250.0)
        self.assertAlmostEqual(xs[-1], 250.0)

    def test_domain_bounds_map_to_area_edges(self) -> None:
        domain = Domain(min=0.0, max=600.0)
        points = map_points(_items(600, 0), domain, width=100.0, height=200.0)
        self.assertAlmostEqual(points[0].y, 0.0)
        self.assertAlmostEqual(points[1].y, 200.0)

    def test_higher_values_sit_higher(self) -> None:
        items = _items(10, 50, 90, 500)
        points = map_points(items, resolve_domain(items), width=300.0, height=200.0)
        ys = [p.y for p in points]
        self.assertEqual(ys, sorted(ys, reverse=True))
        self.assertAlmostEqual(ys[3], 200.0 * (1.0 - 500.0 / 600.0))

    def test_single_item_cannot_be_mapped(self) -> None:
        with self.assertRaises(ChartDataError):
            map_points(_items(42), Domain(0.0, 100.0), width=100.0, height=100.0)

    def test_degenerate_domain_is_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            map_points(_items(1, 1), Domain(1.0, 1.0), width=100.0, height=100.0)


class ViewportGeometryTests(unittest.TestCase):
    def test_data_area_uses_insets(self) -> None:
        viewport = ViewportGeometry.from_config(346, 250, ChartConfig())
        self.assertEqual(viewport.data_area(), (30.0, 20.0, 300.0, 200.0))

    def test_too_small_viewport_has_no_data_area(self) -> None:
        viewport = ViewportGeometry.from_config(40, 40, ChartConfig())
        with self.assertRaises(ChartDataError):
            viewport.data_area()


if __name__ == "__main__":
    unittest.main()
