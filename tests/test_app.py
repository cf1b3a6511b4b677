import json
import unittest

from app import app as flask_app  # noqa: E402
from game import Grid, flip      # noqa: E402


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json")

    def test_given_index_and_static_assets_when_requested_then_html_and_correct_mime(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        self.assertIn(b"Lights Out", r.data)

        rjs = self.client.get("/main.js")
        self.assertEqual(rjs.status_code, 200)
        self.assertIn("application/javascript", rjs.headers.get("Content-Type", ""))

        rcss = self.client.get("/styles.css")
        self.assertEqual(rcss.status_code, 200)
        self.assertIn("text/css", rcss.headers.get("Content-Type", ""))

    def test_given_ui_script_when_served_then_request_failures_are_caught_and_shown(self):
        js = self.client.get("/main.js").get_data(as_text=True)
        self.assertEqual(js.count("} catch (err) {"), 2)
        self.assertIn("showError(", js)
        html = self.client.get("/").get_data(as_text=True)
        self.assertIn('id="error"', html)

    def test_given_config_endpoint_when_requested_then_defaults_and_celebration_returned(self):
        r = self.client.get("/api/config")
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(set(d["config"]), {"nrows", "ncols", "chanceLightStartsOn"})
        self.assertIsInstance(d["celebrationMs"], int)

    def test_given_new_game_when_posted_then_returns_grid_of_requested_size(self):
        r = self._post("/api/new", {"nrows": 4, "ncols": 6, "chanceLightStartsOn": 0.5, "seed": 123})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(len(d["grid"]), 4)
        self.assertTrue(all(len(row) == 6 for row in d["grid"]))
        self.assertIn(d["status"], ("won", "in_play"))
        self.assertIn("celebrationMs", d)

    def test_given_same_seed_when_new_game_posted_twice_then_same_grid(self):
        payload = {"nrows": 5, "ncols": 5, "seed": 7}
        g1 = self._post("/api/new", payload).get_json()["grid"]
        g2 = self._post("/api/new", payload).get_json()["grid"]
        self.assertEqual(g1, g2)

    def test_given_zero_chance_when_new_game_posted_then_already_won(self):
        d = self._post("/api/new", {"chanceLightStartsOn": 0.0}).get_json()
        self.assertTrue(d["ok"])
        self.assertTrue(d["won"])
        self.assertEqual(d["status"], "won")

    def test_given_grid_when_flipping_by_coord_key_then_matches_engine(self):
        grid = [[True, False, False], [False, False, False], [False, False, True]]
        r = self._post("/api/flip", {"grid": grid, "coord": "0-0"})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        expected = flip(Grid.from_rows(grid), 0, 0).to_lists()
        self.assertEqual(d["grid"], expected)
        self.assertEqual(sorted(map(tuple, d["flipped"])), [(0, 0), (0, 1), (1, 0)])
        self.assertFalse(d["won"])

    def test_given_row_col_and_list_coord_forms_when_flipping_then_same_result(self):
        grid = [[False] * 4 for _ in range(4)]
        d1 = self._post("/api/flip", {"grid": grid, "coord": [1, 2]}).get_json()
        d2 = self._post("/api/flip", {"grid": grid, "row": 1, "col": 2}).get_json()
        d3 = self._post("/api/flip", {"grid": grid, "coord": "1-2"}).get_json()
        self.assertEqual(d1["grid"], d2["grid"])
        self.assertEqual(d2["grid"], d3["grid"])

    def test_given_last_move_when_flipping_then_won_reported(self):
        grid = [[False, True, False], [True, True, True], [False, True, False]]
        d = self._post("/api/flip", {"grid": grid, "coord": "1-1"}).get_json()
        self.assertTrue(d["ok"])
        self.assertTrue(d["won"])
        self.assertEqual(d["status"], "won")

    def test_given_grids_when_checking_won_then_status_and_lit_count(self):
        d = self._post("/api/won", {"grid": [[False, False], [False, False]]}).get_json()
        self.assertEqual((d["won"], d["status"], d["lit"]), (True, "won", 0))
        d = self._post("/api/won", {"grid": [[False, True], [False, False]]}).get_json()
        self.assertEqual((d["won"], d["status"], d["lit"]), (False, "in_play", 1))


if __name__ == "__main__":
    unittest.main(verbosity=2)
