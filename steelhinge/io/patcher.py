"""
Idempotent upsert of hinge definitions into a $2k model file.

``patch`` reads the whole file, removes every record carrying the hinge name
from every table, inserts the freshly rendered lines right after the headers
of the three hinge tables (creating missing tables), and only then replaces
the file. Patching the same name twice therefore leaves exactly one copy of
the latest definition and never touches unrelated lines.

Example:
    >>> report = patch("frame.$2k", "IPE400_V1_M3", record)
    >>> report.lines_inserted
    13
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from loguru import logger

from steelhinge.core.errors import InputValidationError
from steelhinge.io.hinge_records import HingeRecord, render_hinge
from steelhinge.io.s2k_tables import ModelTextFile

_INVALID_NAME_RE = re.compile(r'[\s"]')


@dataclass
class PatchReport:
    """What one patch call changed."""
    hinge_name: str
    path: Path
    lines_removed: int = 0
    lines_inserted: int = 0
    tables_created: List[str] = field(default_factory=list)

    @property
    def replaced(self) -> bool:
        return self.lines_removed > 0


def validate_hinge_name(hinge_name: str) -> str:
    """
    Hinge names are bare tokens.

    Raises:
        InputValidationError: If the name is empty or contains whitespace or quotes
    """
    if not hinge_name or _INVALID_NAME_RE.search(hinge_name):
        raise InputValidationError(
            f"Invalid hinge name '{hinge_name}': must be non-empty without whitespace or quotes"
        )
    return hinge_name


def apply_record(model: ModelTextFile, hinge_name: str, record: HingeRecord) -> PatchReport:
    """Upsert ``record`` into an in-memory model. Nothing is written."""
    validate_hinge_name(hinge_name)
    blocks = render_hinge(hinge_name, record)

    report = PatchReport(hinge_name=hinge_name, path=Path())
    report.lines_removed = model.remove_hinge(hinge_name)
    for table_name, lines in blocks.items():
        table, created = model.find_or_create_table(table_name)
        if created:
            report.tables_created.append(table_name)
        table.insert_lines(lines)
        report.lines_inserted += len(lines)
    return report


def patch(file_path: Union[str, Path], hinge_name: str, record: HingeRecord) -> PatchReport:
    """
    Write ``record`` under ``hinge_name`` into the model file.

    Args:
        file_path: Existing $2k file
        hinge_name: Hinge identity, e.g. ``IPE400_V1_M3``
        record: Hinge definition to write

    Returns:
        PatchReport

    Raises:
        FileNotFoundError: If the file does not exist (nothing is written)
        InputValidationError: If the hinge name is not a bare token
        PersistenceError: If the file cannot be replaced
    """
    path = Path(file_path)
    validate_hinge_name(hinge_name)
    model = ModelTextFile.read(path)

    report = apply_record(model, hinge_name, record)
    report.path = path
    model.write(path)

    action = "Replaced" if report.replaced else "Added"
    logger.info(
        f"{action} hinge {hinge_name} in {path.name} "
        f"(-{report.lines_removed}/+{report.lines_inserted} lines)"
    )
    if report.tables_created:
        logger.debug(f"Created tables: {', '.join(report.tables_created)}")
    return report
