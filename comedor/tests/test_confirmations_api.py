import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch
from fastapi.testclient import TestClient
from comedor.api.api_run import app
from comedor.api.dependencies import get_data_dir

COORDINATOR = {"X-User-Id": "coord-1", "X-User-Role": "coordinator", "X-Branch-Id": "centro"}


class TestConfirmationsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        data_dir = Path(self._tmp.name)
        app.dependency_overrides[get_data_dir] = lambda: data_dir

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def _confirm(self, branch, employees, headers=COORDINATOR, week="2025-04-07"):
        return self.client.put(f'/api/confirmations/{week}/{branch}',
                               json={"employees": employees}, headers=headers)

    def test_save_and_get(self):
        resp = self._confirm("centro", [{"id": "e1", "name": "Ana", "days": ["Lunes", "miércoles"]}])
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["coordinator_id"], "coord-1")
        self.assertEqual(data["employees"][0]["days"], ["lunes", "miercoles"])
        self.assertEqual(data["by_day"]["miercoles"], 1)

        data = self.client.get('/api/confirmations/2025-04-09/centro').json()
        self.assertEqual(data["week_id"], "2025-04-07")
        self.assertEqual(data["employees"][0]["name"], "Ana")

    def test_replaces_previous_list(self):
        self._confirm("centro", [{"id": "e1", "name": "Ana", "days": ["lunes"]}])
        data = self._confirm("centro", [{"id": "e2", "name": "Luis", "days": ["martes"]}]).json()
        self.assertEqual([e["id"] for e in data["employees"]], ["e2"])

    def test_unknown_day(self):
        resp = self._confirm("centro", [{"id": "e1", "name": "Ana", "days": ["feriado"]}])
        self.assertEqual(resp.status_code, 400)

    def test_coordinator_of_other_branch(self):
        resp = self._confirm("norte", [{"id": "e1", "name": "Ana", "days": ["lunes"]}])
        self.assertEqual(resp.status_code, 403)

    def test_week_summary(self):
        self._confirm("centro", [{"id": "e1", "name": "Ana", "days": ["lunes", "martes"]}])
        self._confirm("norte", [{"id": "e2", "name": "Luis", "days": ["Lunes"]}],
                      headers={"X-User-Role": "admin"})
        resp = self.client.get('/api/confirmations/2025-04-07')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["days"]["lunes"]["count"], 2)
        self.assertEqual(data["days"]["lunes"]["date"], "07/04/2025")
        self.assertEqual(data["totals"]["confirmations"], 3)
        self.assertEqual(set(data["branches"]), {"centro", "norte"})

    def test_invalid_week(self):
        self.assertEqual(self.client.get('/api/confirmations/31-31-2025').status_code, 400)

    def test_closed_window_rejected(self):
        with patch("comedor.api.routes.confirmations.ENFORCE_CONFIRMATION_WINDOW", True):
            # Menu not published, so the window is closed
            resp = self._confirm("centro", [{"id": "e1", "name": "Ana", "days": ["lunes"]}])
        self.assertEqual(resp.status_code, 409)


if __name__ == "__main__":
    unittest.main()
