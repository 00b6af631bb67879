import unittest

from facetcharts.transforms.matrix import build_matrix, order_weekday_columns


def _rec(f1, f2, y, name="series"):
    return {
        "metadata": {
            "name": name,
            "groups": [{"displayName": "Requests"}, {"value": f1, "displayName": "Host"}, {"value": f2}],
        },
        "data": [{"x": 0, "y": y}],
    }


class BuildMatrixTests(unittest.TestCase):
    def test_absent_cells_are_zero(self):
        out = build_matrix([_rec("X", "P", 7.0), _rec("Y", "Q", 0.0)])

        self.assertListEqual(out["y"], ["X", "Y"])
        self.assertListEqual(out["x"], ["P", "Q"])
        self.assertListEqual(out["z"], [[7.0, 0.0], [0.0, 0.0]])

    def test_labels_in_first_seen_order_without_sorting(self):
        out = build_matrix([_rec("b", "Tuesday", 1.0), _rec("a", "Sunday", 2.0), _rec("b", "Sunday", 3.0)])

        self.assertListEqual(out["y"], ["b", "a"])
        self.assertListEqual(out["x"], ["Tuesday", "Sunday"])
        self.assertListEqual(out["z"], [[1.0, 3.0], [0.0, 2.0]])

    def test_dimensions_and_density(self):
        raw = [_rec(f"h{i}", f"d{j}", float(i * j)) for i in range(3) for j in range(4) if (i + j) % 2 == 0]

        out = build_matrix(raw)

        self.assertEqual(len(out["z"]), len(out["y"]))
        for row in out["z"]:
            self.assertEqual(len(row), len(out["x"]))

    def test_first_record_wins_for_duplicate_cell(self):
        out = build_matrix([_rec("X", "P", 1.0), _rec("X", "P", 9.0)])

        self.assertListEqual(out["z"], [[1.0]])

    def test_labels_and_sentinels(self):
        out = build_matrix([_rec("X", "P", 1.0), _rec("Z", "R", 5.0, name="Other")])

        self.assertListEqual(out["y"], ["X"])
        self.assertEqual(out["value_label"], "Requests")
        self.assertEqual(out["y_axis_label"], "Host")

    def test_empty(self):
        out = build_matrix([])

        self.assertListEqual(out["z"], [])


class OrderWeekdayColumnsTests(unittest.TestCase):
    def test_columns_and_cells_move_together(self):
        matrix = {"z": [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], "x": ["Tuesday", "Sunday", "unknown"], "y": ["a", "b"]}

        out = order_weekday_columns(matrix)

        self.assertListEqual(out["x"], ["unknown", "Sunday", "Tuesday"])
        self.assertListEqual(out["z"], [[3.0, 2.0, 1.0], [6.0, 5.0, 4.0]])
        self.assertListEqual(out["y"], ["a", "b"])

    def test_non_weekday_columns_untouched(self):
        matrix = {"z": [[1.0, 2.0]], "x": ["P", "Q"], "y": ["a"]}

        self.assertDictEqual(order_weekday_columns(matrix), matrix)


if __name__ == "__main__":
    unittest.main()
