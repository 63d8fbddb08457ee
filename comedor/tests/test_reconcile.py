import unittest
from comedor.logic.menu.reconcile import reconcile_week, menu_days_from_document
from comedor.utilities.constants import DAYS_CANONICAL


class TestReconcileWeek(unittest.TestCase):

    def test_empty_inputs(self):
        for raw in (None, {}):
            result = reconcile_week(raw)
            self.assertEqual(list(result.keys()), list(DAYS_CANONICAL))
            for entry in result.values():
                self.assertEqual(entry, {"items": []})

    def test_display_keys(self):
        result = reconcile_week({"Lunes": {"items": ["Sopa"]}, "Miércoles": {"items": ["Pasta"]}})
        self.assertEqual(result["lunes"]["items"], ["Sopa"])
        self.assertEqual(result["miercoles"]["items"], ["Pasta"])
        for day in ("martes", "jueves", "viernes", "sabado", "domingo"):
            self.assertEqual(result[day]["items"], [])

    def test_extra_fields_kept(self):
        result = reconcile_week({"Viernes": {"otherProp": "value"}})
        self.assertEqual(result["viernes"], {"otherProp": "value", "items": []})

    def test_null_items(self):
        result = reconcile_week({"martes": {"items": None}})
        self.assertEqual(result["martes"]["items"], [])

    def test_non_list_items_carried_through(self):
        result = reconcile_week({"Lunes": {"items": "Sopa"}, "martes": {"items": 5}, "jueves": {"items": {"a": 1}}})
        self.assertEqual(result["lunes"]["items"], "Sopa")
        self.assertEqual(result["martes"]["items"], 5)
        self.assertEqual(result["jueves"]["items"], {"a": 1})
        self.assertEqual(len(result), 7)

    def test_tuple_items_become_list(self):
        self.assertEqual(reconcile_week({"lunes": {"items": ("Sopa",)}})["lunes"]["items"], ["Sopa"])

    def test_unknown_keys_dropped(self):
        result = reconcile_week({"feriado": {"items": ["Pastel"]}, "lunes": {"items": ["Sopa"]}})
        self.assertNotIn("feriado", result)
        self.assertEqual(len(result), 7)

    def test_last_matching_key_wins(self):
        result = reconcile_week({"Lunes": {"items": ["A"]}, "lunes": {"items": ["B"]}})
        self.assertEqual(result["lunes"]["items"], ["B"])

    def test_non_mapping_entry_treated_as_absent(self):
        result = reconcile_week({"Lunes": "Sopa"})
        self.assertEqual(result["lunes"], {"items": []})

    def test_input_not_mutated_or_aliased(self):
        items = ["Sopa"]
        raw = {"Lunes": {"items": items, "note": "x"}}
        result = reconcile_week(raw)
        result["lunes"]["items"].append("Arroz")
        result["lunes"]["note"] = "y"
        self.assertEqual(items, ["Sopa"])
        self.assertEqual(raw, {"Lunes": {"items": ["Sopa"], "note": "x"}})


class TestMenuDaysFromDocument(unittest.TestCase):

    def test_nested_days(self):
        doc = {"weekStart": "2025-04-07", "days": {"lunes": {"items": ["Sopa"]}}}
        self.assertEqual(menu_days_from_document(doc)["lunes"]["items"], ["Sopa"])

    def test_legacy_daily_menus(self):
        doc = {"dailyMenus": {"Martes": {"items": ["Tacos"]}}}
        self.assertEqual(menu_days_from_document(doc)["martes"]["items"], ["Tacos"])

    def test_top_level_days(self):
        doc = {"startDate": "2025-04-07", "Jueves": {"items": ["Pollo"]}}
        result = menu_days_from_document(doc)
        self.assertEqual(result["jueves"]["items"], ["Pollo"])
        self.assertEqual(len(result), 7)

    def test_none(self):
        self.assertEqual(menu_days_from_document(None), reconcile_week({}))


if __name__ == "__main__":
    unittest.main()
