import tempfile
import unittest
from pathlib import Path
from fastapi.testclient import TestClient
from comedor.api.api_run import app
from comedor.api.dependencies import get_data_dir

ROSTER = (
    "Nombre Completo,Puesto,Email,Estado\n"
    "Ana López,Cocinera,ana@comedor.mx,activo\n"
    "Luis Pérez,Mesero,,inactive\n"
    "Eva Ruiz,,,tal vez\n"
).encode("utf-8")


class TestEmployeesAPI(unittest.TestCase):
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

    def _upload(self, content, filename="empleados.csv"):
        return self.client.post('/api/employees/centro/import',
                                files={"file": (filename, content, "text/csv")})

    def test_import_and_list(self):
        resp = self._upload(ROSTER)
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["imported"], 2)
        self.assertEqual(data["errors"], ["Fila 4: El estado debe ser 'active' o 'inactive'."])
        self.assertFalse(data["success"])

        data = self.client.get('/api/employees/centro').json()
        self.assertEqual(data["count"], 2)
        self.assertEqual([e["name"] for e in data["employees"]], ["Ana López", "Luis Pérez"])
        self.assertEqual(self.client.get('/api/employees/norte').json()["count"], 0)

    def test_reimport_skips_existing(self):
        self._upload(ROSTER)
        data = self._upload(ROSTER).json()
        self.assertEqual(data["imported"], 0)
        self.assertEqual(data["skipped"], ["Ana López", "Luis Pérez"])

    def test_rejects_bad_files(self):
        self.assertEqual(self._upload(ROSTER, filename="empleados.txt").status_code, 400)
        resp = self._upload(b"Nombre Completo,Estado\n")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("vacío", resp.json()["detail"])
        resp = self._upload(b"Nombre,Puesto\nAna,Cocinera\n")
        self.assertEqual(resp.status_code, 400)

    def test_export_csv(self):
        self._upload(ROSTER)
        resp = self.client.get('/api/employees/centro/export')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers["content-type"].startswith("text/csv"))
        lines = resp.text.splitlines()
        self.assertEqual(lines[0], "Nombre,Puesto,Email,Activo")
        self.assertIn("Luis Pérez,Mesero,,No", lines)

    def test_add_and_delete_employee(self):
        resp = self.client.post('/api/employees/centro', json={"name": " Ana ", "email": "ANA@comedor.mx"})
        self.assertEqual(resp.status_code, 200)
        emp = resp.json()
        self.assertEqual(emp["name"], "Ana")
        self.assertEqual(emp["email"], "ana@comedor.mx")

        self.assertEqual(self.client.post('/api/employees/centro', json={"name": "ana"}).status_code, 400)
        self.assertEqual(self.client.post('/api/employees/centro',
                                          json={"name": "Eva", "email": "nope"}).status_code, 400)

        self.assertEqual(self.client.delete(f'/api/employees/centro/{emp["id"]}').status_code, 200)
        self.assertEqual(self.client.delete(f'/api/employees/centro/{emp["id"]}').status_code, 404)


if __name__ == "__main__":
    unittest.main()
