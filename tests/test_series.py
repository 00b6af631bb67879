import json
import unittest

from facetcharts.transforms import config
from facetcharts.transforms.series import (
    FacetedSeries,
    MalformedSeriesError,
    coerce_faceted_series,
    decode_faceted_series,
    normalize_faceted_series,
    x_axis_label,
    y_axis_label,
)


def _rec(f1=None, f2=None, y=1.0, name="series", measure="Count", facet_label="Country", color=None):
    groups = [{"type": "function", "displayName": measure}]
    if f1 is not None:
        groups.append({"type": "facet", "value": f1, "displayName": facet_label})
    if f2 is not None:
        groups.append({"type": "facet", "value": f2})
    metadata = {"name": name, "groups": groups}
    if color is not None:
        metadata["color"] = color
    return {"metadata": metadata, "data": [{"x": 0, "y": y}]}


class NormalizeTests(unittest.TestCase):
    def test_drops_sentinels_and_keeps_record_order(self):
        raw = [
            _rec("US", "Chrome", 3.0),
            _rec("DE", "Chrome", 100.0, name="Other"),
            _rec("FR", "Safari", 2.0),
            _rec("FR", "Safari", 50.0, name="Daylight saving time"),
        ]

        df = normalize_faceted_series(raw)

        self.assertListEqual(list(df.columns), ["name", "facet1", "facet2", "value", "color"])
        self.assertListEqual(df["facet1"].tolist(), ["US", "FR"])
        self.assertListEqual(df["value"].tolist(), [3.0, 2.0])
        self.assertEqual(str(df["value"].dtype), "float64")

    def test_missing_facets_become_unknown(self):
        df = normalize_faceted_series([_rec("US"), _rec()])

        self.assertListEqual(df["facet1"].tolist(), ["US", config.UNKNOWN_FACET])
        self.assertListEqual(df["facet2"].tolist(), [config.UNKNOWN_FACET, config.UNKNOWN_FACET])

    def test_required_facets_raise(self):
        with self.assertRaises(MalformedSeriesError):
            normalize_faceted_series([_rec("US")], require_facets=True)

    def test_numeric_facet_values_are_stringified(self):
        df = normalize_faceted_series([_rec(3.0, 7)])

        self.assertEqual(df.iloc[0]["facet1"], "3")
        self.assertEqual(df.iloc[0]["facet2"], "7")

    def test_only_first_point_is_used(self):
        raw = [_rec("US", "A", 1.0)]
        raw[0]["data"].append({"x": 1, "y": 99.0})

        df = normalize_faceted_series(raw)

        self.assertEqual(df.iloc[0]["value"], 1.0)

    def test_empty_input(self):
        df = normalize_faceted_series([])

        self.assertEqual(len(df), 0)
        self.assertIn("facet1", df.columns)


class MalformedInputTests(unittest.TestCase):
    def test_missing_measure_group(self):
        raw = [{"metadata": {"name": "x", "groups": []}, "data": [{"y": 1}]}]
        with self.assertRaises(MalformedSeriesError):
            coerce_faceted_series(raw)

    def test_empty_data(self):
        raw = [{"metadata": {"name": "x", "groups": [{}]}, "data": []}]
        with self.assertRaises(MalformedSeriesError):
            coerce_faceted_series(raw)

    def test_non_numeric_y(self):
        raw = [{"metadata": {"name": "x", "groups": [{}]}, "data": [{"y": "abc"}]}]
        with self.assertRaises(MalformedSeriesError):
            coerce_faceted_series(raw)

    def test_non_finite_y(self):
        raw = [{"metadata": {"name": "x", "groups": [{}]}, "data": [{"y": float("nan")}]}]
        with self.assertRaises(MalformedSeriesError):
            coerce_faceted_series(raw)

    def test_missing_metadata(self):
        with self.assertRaises(MalformedSeriesError):
            coerce_faceted_series([{"data": [{"y": 1}]}])

    def test_invalid_json(self):
        with self.assertRaises(MalformedSeriesError):
            decode_faceted_series(b"[{")


class DecodeAndLabelTests(unittest.TestCase):
    def test_decode_json_payload(self):
        payload = json.dumps([_rec("US", "Chrome", 4)]).encode()

        series = decode_faceted_series(payload)

        self.assertIsInstance(series[0], FacetedSeries)
        self.assertEqual(series[0].metadata.groups[0].display_name, "Count")
        self.assertEqual(series[0].facet(1), "US")
        self.assertEqual(series[0].data[0].y, 4.0)

    def test_axis_labels(self):
        raw = [_rec("US", measure="Duration", facet_label="Country")]

        self.assertEqual(y_axis_label(raw), "Duration")
        self.assertEqual(x_axis_label(raw), "Country")

    def test_axis_label_defaults(self):
        raw = [{"metadata": {"name": "x", "groups": [{}]}, "data": [{"y": 1}]}]

        self.assertEqual(y_axis_label(raw), config.DEFAULT_Y_AXIS_LABEL)
        self.assertEqual(y_axis_label([]), config.DEFAULT_Y_AXIS_LABEL)
        self.assertEqual(x_axis_label(raw), config.DEFAULT_X_AXIS_LABEL)


if __name__ == "__main__":
    unittest.main()
