"""
Employee roster import from spreadsheets and CSV export.
"""
import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd

from comedor.domain.Employee import Employee
from comedor.utilities.constants import (
    EMPLOYEE_COLUMN_ALIASES, EMPLOYEE_REQUIRED_COLUMNS, ACTIVE_VALUES, INACTIVE_VALUES
)
from comedor.utilities.text import normalize_text, clean_cell

logger = logging.getLogger(__name__)


class EmployeeImportError(ValueError):
    """The uploaded file cannot be imported at all (empty, unreadable, missing columns)."""


@dataclass
class ImportResult:
    employees: List[Employee] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return bool(self.employees) and not self.errors


class EmployeeImporter:
    """Read employee rosters from .xlsx/.csv files.

    Expected layout: a header row with at least a name column ("Nombre
    Completo") and a status column ("Estado"); "Puesto" and "Email" are
    optional. Headers are matched ignoring case and accents.
    """

    def __init__(self, branch_id: str):
        self.branch_id = branch_id

    def read(self, source: Union[str, Path, io.BytesIO], filename: Optional[str] = None) -> List[list]:
        """Load a spreadsheet into a list of rows (header first)."""
        if filename:
            name = filename.lower()
        elif isinstance(source, (str, Path)):
            name = str(source).lower()
        else:
            name = ""
        try:
            if name.endswith(".csv"):
                df = pd.read_csv(source, dtype=object, header=None, keep_default_na=False)
            else:
                df = pd.read_excel(source, engine="openpyxl", dtype=object, header=None)
        except Exception as e:
            logger.error("Could not read spreadsheet %s: %s", name or "<upload>", e)
            raise EmployeeImportError("No se pudo leer el archivo. Verifique que sea un Excel (.xlsx) o CSV válido.") from e
        return df.values.tolist()

    @staticmethod
    def map_columns(header: Sequence) -> Dict[str, int]:
        """Map field name -> column index using EMPLOYEE_COLUMN_ALIASES.

        Exact alias matches win over substring matches so 'Nombre Completo'
        is not taken for a column merely containing 'nombre'.
        """
        normalized = [normalize_text(clean_cell(h)) for h in header]
        mapping: Dict[str, int] = {}
        used = set()
        for key, aliases in EMPLOYEE_COLUMN_ALIASES.items():
            for idx, col in enumerate(normalized):
                if idx not in used and col in aliases:
                    mapping[key] = idx
                    break
            if key not in mapping:
                for idx, col in enumerate(normalized):
                    if idx not in used and col and any(alias in col for alias in aliases):
                        mapping[key] = idx
                        break
            if key in mapping:
                used.add(mapping[key])
        return mapping

    def process(self, rows: Sequence[Sequence]) -> ImportResult:
        if not rows or len(rows) < 2:
            raise EmployeeImportError("El archivo Excel está vacío o no tiene el formato correcto.")

        cols = self.map_columns(rows[0])
        missing = [c for c in EMPLOYEE_REQUIRED_COLUMNS if c not in cols]
        if missing:
            raise EmployeeImportError('El archivo Excel debe tener las columnas "Nombre Completo" y "Estado".')

        def cell(row, key):
            idx = cols.get(key)
            if idx is None or idx >= len(row):
                return ""
            return clean_cell(row[idx])

        result = ImportResult()
        for i, row in enumerate(rows[1:], start=2):
            name = cell(row, "name")
            if not name:
                continue
            status = normalize_text(cell(row, "status"))
            if status in ACTIVE_VALUES:
                active = True
            elif status in INACTIVE_VALUES:
                active = False
            else:
                result.errors.append(f"Fila {i}: El estado debe ser 'active' o 'inactive'.")
                continue
            emp = Employee(
                name=name,
                branch_id=self.branch_id,
                position=cell(row, "position"),
                email=cell(row, "email"),
                active=active,
            )
            problems = emp.validate()
            if problems:
                result.errors.append(f"Fila {i}: {' '.join(problems)}")
                continue
            result.employees.append(emp)

        logger.info("Import for branch %s: %d employees, %d errors",
                    self.branch_id, len(result.employees), len(result.errors))
        return result

    def import_file(self, source, filename: Optional[str] = None) -> ImportResult:
        return self.process(self.read(source, filename))


class EmployeeExporter:
    """Export employee rosters for Excel-compatible tools."""

    FIELDNAMES = ['Nombre', 'Puesto', 'Email', 'Activo']

    @staticmethod
    def to_csv(employees: Iterable[Employee]) -> str:
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=EmployeeExporter.FIELDNAMES)
        writer.writeheader()
        for emp in employees:
            writer.writerow({
                'Nombre': emp.name,
                'Puesto': emp.position,
                'Email': emp.email,
                'Activo': 'Sí' if emp.active else 'No',
            })
        return buf.getvalue()
