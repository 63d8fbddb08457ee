from typing import Final

# Monday-first, index-aligned: DAYS_DISPLAY[i] <-> DAYS_CANONICAL[i]
DAYS_DISPLAY: Final[tuple[str, ...]] = (
    "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"
)
DAYS_CANONICAL: Final[tuple[str, ...]] = (
    "lunes", "martes", "miercoles", "jueves", "viernes", "sabado", "domingo"
)

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DATE_DISPLAY_FORMAT: Final[str] = "%d/%m/%Y"

MENU_STATUS_DRAFT: Final[str] = "draft"
MENU_STATUS_PUBLISHED: Final[str] = "published"
MENU_STATUS_ARCHIVED: Final[str] = "archived"
MENU_STATUS_TEXT: Final[dict[str, str]] = {
    MENU_STATUS_DRAFT: "Borrador",
    MENU_STATUS_PUBLISHED: "Publicado",
    MENU_STATUS_ARCHIVED: "Archivado",
}

USER_ROLES: Final[tuple[str, ...]] = ("admin", "coordinator", "employee")

# Spreadsheet header aliases, matched against normalized header text
EMPLOYEE_COLUMN_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "name": ("nombre completo", "nombre", "empleado"),
    "position": ("puesto", "cargo", "posicion"),
    "status": ("estado", "activo"),
    "email": ("email", "correo"),
}
EMPLOYEE_REQUIRED_COLUMNS: Final[tuple[str, ...]] = ("name", "status")
ACTIVE_VALUES: Final[frozenset[str]] = frozenset({"active", "activo", "si", "true", "1"})
INACTIVE_VALUES: Final[frozenset[str]] = frozenset({"inactive", "inactivo", "no", "false", "0"})
