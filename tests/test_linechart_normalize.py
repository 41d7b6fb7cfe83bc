from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from linechart import ChartDataError, DataItem
from linechart.adapters.normalize import normalize_items


class NormalizeItemsTests(unittest.TestCase):
    def test_none_and_empty_are_empty_series(self) -> None:
        self.assertEqual(normalize_items(None), ())
        self.assertEqual(normalize_items([]), ())

    def test_accepts_items_pairs_and_mappings(self) -> None:
        items = normalize_items([DataItem(1, "a"), (2, "b"), {"value": 3, "label": "c"}, {"value": 4}])
        self.assertEqual([i.value for i in items], [1, 2, 3, 4])
        self.assertEqual([i.label for i in items], ["a", "b", "c", ""])

    def test_accepts_integral_floats_and_numpy_scalars(self) -> None:
        items = normalize_items([(np.int64(7), "x"), (3.0, "y"), (Decimal("12"), "z")])
        self.assertEqual([i.value for i in items], [7, 3, 12])
        self.assertTrue(all(type(i.value) is int for i in items))

    def test_rejects_fractional_and_non_numeric_values(self) -> None:
        for bad in ([(1.5, "a")], [(True, "a")], [("12", "a")], [(float("nan"), "a")]):
            with self.assertRaises(ChartDataError):
                normalize_items(bad)

    def test_rejects_values_outside_int64(self) -> None:
        for bad in ([(2**63, "a")], [(-(2**63) - 1, "a")], [(1e20, "a")], [DataItem(2**64, "a")]):
            with self.assertRaisesRegex(ChartDataError, "int64"):
                normalize_items(bad)
        items = normalize_items([(2**63 - 1, "a"), (-(2**63), "b")])
        self.assertEqual([i.value for i in items], [2**63 - 1, -(2**63)])

    def test_rejects_unsupported_containers(self) -> None:
        with self.assertRaises(ChartDataError):
            normalize_items("1,2,3")
        with self.assertRaises(ChartDataError):
            normalize_items([(1, "a", "extra")])
        with self.assertRaisesRegex(ChartDataError, "no `value`"):
            normalize_items([{"label": "a"}])

    def test_items_compare_by_value_only(self) -> None:
        self.assertEqual(DataItem(5, "mon"), DataItem(5, "tue"))
        self.assertLess(DataItem(1, "z"), DataItem(2, "a"))
        self.assertEqual(max([DataItem(1, "a"), DataItem(9, "b"), DataItem(4, "c")]).label, "b")

    def test_normalize_pandas_dataframe(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"value": [10, 20, 30], "label": ["a", "b", "c"]})
        items = normalize_items(df)
        self.assertEqual([i.value for i in items], [10, 20, 30])
        self.assertEqual([i.label for i in items], ["a", "b", "c"])

    def test_normalize_pandas_dataframe_uses_index_without_labels(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"value": [1, 2]}, index=["mon", "tue"])
        items = normalize_items(df)
        self.assertEqual([i.label for i in items], ["mon", "tue"])
        with self.assertRaisesRegex(ChartDataError, "column not found"):
            normalize_items(pd.DataFrame({"v": [1]}))


if __name__ == "__main__":
    unittest.main()
