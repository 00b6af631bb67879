import unittest

from facetcharts.transforms.graph import build_sankey
from facetcharts.transforms.series import MalformedSeriesError


def _rec(src, dst, y, name="series"):
    return {
        "metadata": {"name": name, "groups": [{"displayName": "Transfers"}, {"value": src}, {"value": dst}]},
        "data": [{"x": 0, "y": y}],
    }


class BuildSankeyTests(unittest.TestCase):
    def test_end_to_end(self):
        out = build_sankey([_rec("A", "B", 10), _rec("B", "C", 5)])

        self.assertListEqual([n["label"] for n in out["nodes"]], ["A", "B", "C"])
        self.assertListEqual(
            out["links"],
            [{"source": 0, "target": 1, "value": 10.0}, {"source": 1, "target": 2, "value": 5.0}],
        )

    def test_indices_contiguous_in_first_seen_order(self):
        out = build_sankey([_rec("A", "B", 1), _rec("B", "C", 1), _rec("A", "C", 1)])

        index = {n["label"]: i for i, n in enumerate(out["nodes"])}
        self.assertDictEqual(index, {"A": 0, "B": 1, "C": 2})
        self.assertEqual(len(out["links"]), 3)
        self.assertDictEqual(out["links"][2], {"source": 0, "target": 2, "value": 1.0})

    def test_target_seen_before_later_source(self):
        out = build_sankey([_rec("A", "C", 1), _rec("B", "C", 1)])

        self.assertListEqual([n["label"] for n in out["nodes"]], ["A", "C", "B"])

    def test_parallel_edges_are_kept(self):
        out = build_sankey([_rec("A", "B", 1), _rec("A", "B", 2)])

        self.assertEqual(len(out["nodes"]), 2)
        self.assertListEqual([link["value"] for link in out["links"]], [1.0, 2.0])

    def test_missing_facet_is_contract_violation(self):
        raw = [{"metadata": {"name": "s", "groups": [{}, {"value": "A"}]}, "data": [{"y": 1}]}]
        with self.assertRaises(MalformedSeriesError):
            build_sankey(raw)

    def test_sentinel_excluded(self):
        out = build_sankey([_rec("A", "B", 1), _rec("X", "Y", 9, name="Other")])

        self.assertListEqual([n["label"] for n in out["nodes"]], ["A", "B"])
        self.assertEqual(len(out["links"]), 1)

    def test_empty(self):
        self.assertDictEqual(build_sankey([]), {"nodes": [], "links": []})


if __name__ == "__main__":
    unittest.main()
