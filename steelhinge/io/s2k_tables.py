"""
Table model of SAP2000 $2k text files.

A $2k file is a sequence of tables:

    TABLE:  "MATERIAL PROPERTIES 03A - STEEL DATA"
       Material=S355   Fy=355   Fu=510 ...

    TABLE:  "FRAME SECTION PROPERTIES 01 - GENERAL"
       SectionName=IPE400   Material=S355   Shape="I/Wide Flange" ...

    END TABLE DATA

Each record is one logical row of ``Key=Value`` tokens; long rows continue
on the next physical line after a trailing `` _``. The model here keeps every
physical line so that an untouched file serializes back byte for byte.

Example:
    >>> model = ModelTextFile.parse('TABLE:  "A"\\n   X=1   Y="two words"\\n')
    >>> model.rows("A")
    [{'X': '1', 'Y': 'two words'}]
"""

import os
import re
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from loguru import logger

from steelhinge.core.errors import PersistenceError

TABLE_PREFIX = "TABLE:"
END_MARKER = "END TABLE DATA"
CONTINUATION = " _"
ENCODING = "latin-1"

_TOKEN_RE = re.compile(r'([A-Za-z_][\w]*)=("[^"]*"|\S*)')


def table_header(name: str) -> str:
    """Header line of a table (two spaces after the colon)."""
    return f'{TABLE_PREFIX}  "{name}"'


def parse_fields(text: str) -> Dict[str, str]:
    """``Key=Value`` tokens of a logical row; quotes are stripped."""
    fields = {}
    for key, value in _TOKEN_RE.findall(text):
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        fields[key] = value
    return fields


@dataclass
class TableRecord:
    """One logical row (physical line plus continuations) or a blank line."""
    lines: List[str]

    @property
    def is_blank(self) -> bool:
        return all(not line.strip() for line in self.lines)

    @property
    def continues(self) -> bool:
        """True when the last physical line announces a continuation."""
        return bool(self.lines) and self.lines[-1].rstrip().endswith(CONTINUATION)

    @property
    def text(self) -> str:
        parts = []
        for line in self.lines:
            stripped = line.rstrip()
            if stripped.endswith(CONTINUATION):
                stripped = stripped[: -len(CONTINUATION)]
            parts.append(stripped.strip())
        return " ".join(p for p in parts if p)

    @property
    def fields(self) -> Dict[str, str]:
        return parse_fields(self.text)

    @property
    def hinge_name(self) -> Optional[str]:
        return self.fields.get("HingeName")


@dataclass
class TableSection:
    """A table header line followed by its records."""
    header: str
    records: List[TableRecord] = field(default_factory=list)

    @property
    def name(self) -> str:
        text = self.header.strip()[len(TABLE_PREFIX):].strip()
        return text[1:-1] if text.startswith('"') and text.endswith('"') else text

    def matches(self, name: str) -> bool:
        """Exact header match."""
        return self.header.strip() == table_header(name)

    def insert_lines(self, lines: List[str]) -> None:
        """Insert single-line records right after the header, keeping their order."""
        self.records[0:0] = [TableRecord([line]) for line in lines]

    def physical_lines(self) -> List[str]:
        out = [self.header]
        for record in self.records:
            out.extend(record.lines)
        return out


@dataclass
class ModelTextFile:
    """
    Parsed $2k file: preamble, tables, and the END TABLE DATA trailer.

    Attributes:
        preamble: Lines before the first table (comments, file banner)
        tables: Tables in file order
        trailer: The END TABLE DATA line and everything after it
        newline: Line separator found in the source
        final_newline: Whether the source ended with a separator
    """
    preamble: List[str] = field(default_factory=list)
    tables: List[TableSection] = field(default_factory=list)
    trailer: List[str] = field(default_factory=list)
    newline: str = "\n"
    final_newline: bool = True

    # ------------------------------------------------------------------ I/O

    @classmethod
    def parse(cls, text: str) -> "ModelTextFile":
        newline = "\r\n" if "\r\n" in text else "\n"
        final_newline = text.endswith(newline)
        body = text[: -len(newline)] if final_newline else text
        lines = body.split(newline) if (body or final_newline) else []

        model = cls(newline=newline, final_newline=final_newline)
        current: Optional[TableSection] = None
        for index, line in enumerate(lines):
            stripped = line.strip()
            if stripped == END_MARKER:
                model.trailer = lines[index:]
                break
            if stripped.startswith(TABLE_PREFIX):
                current = TableSection(header=line)
                model.tables.append(current)
            elif current is None:
                model.preamble.append(line)
            elif current.records and current.records[-1].continues:
                current.records[-1].lines.append(line)
            else:
                current.records.append(TableRecord([line]))
        return model

    @classmethod
    def read(cls, path: Union[str, Path]) -> "ModelTextFile":
        """
        Read and parse a model file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Model file not found: {file_path}")
        return cls.parse(file_path.read_bytes().decode(ENCODING))

    def lines(self) -> List[str]:
        out = list(self.preamble)
        for table in self.tables:
            out.extend(table.physical_lines())
        out.extend(self.trailer)
        return out

    def to_text(self) -> str:
        text = self.newline.join(self.lines())
        if self.final_newline:
            text += self.newline
        return text

    def write(self, path: Union[str, Path]) -> None:
        """
        Replace ``path`` atomically with the serialized model.

        Raises:
            PersistenceError: If the file cannot be written
        """
        file_path = Path(path)
        data = self.to_text().encode(ENCODING)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=str(file_path.parent), prefix=f".{file_path.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            if file_path.exists():
                shutil.copymode(file_path, tmp_name)
            os.replace(tmp_name, file_path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Could not write {file_path}: {exc}") from exc
        logger.debug(f"Wrote {len(data)} bytes to {file_path}")

    # --------------------------------------------------------------- tables

    def find_table(self, name: str) -> Optional[TableSection]:
        for table in self.tables:
            if table.matches(name):
                return table
        return None

    def _ends_with_blank(self) -> bool:
        content = list(self.preamble)
        for table in self.tables:
            content.extend(table.physical_lines())
        return bool(content) and not content[-1].strip()

    def find_or_create_table(self, name: str) -> Tuple[TableSection, bool]:
        """
        Return the named table, creating it when absent.

        A new table is preceded by a blank line and placed before the
        END TABLE DATA trailer, or at the end of the file when there is none.

        Returns:
            (table, created)
        """
        table = self.find_table(name)
        if table is not None:
            return table, False

        if not self._ends_with_blank() and (self.preamble or self.tables):
            if self.tables:
                self.tables[-1].records.append(TableRecord([""]))
            else:
                self.preamble.append("")
        if not self.lines():
            self.final_newline = True
        table = TableSection(header=table_header(name))
        if self.trailer:
            table.records.append(TableRecord([""]))
        self.tables.append(table)
        logger.debug(f"Created table '{name}'")
        return table, True

    def remove_hinge(self, hinge_name: str) -> int:
        """
        Delete every record whose HingeName token equals ``hinge_name``.

        Returns:
            Number of physical lines removed
        """
        removed = 0
        for table in self.tables:
            kept = []
            for record in table.records:
                if not record.is_blank and record.hinge_name == hinge_name:
                    removed += len(record.lines)
                else:
                    kept.append(record)
            table.records = kept
        return removed

    def rows(self, table_name: str) -> List[Dict[str, str]]:
        """Field dicts of the non-blank records of a table (empty if absent)."""
        table = self.find_table(table_name)
        if table is None:
            return []
        return [r.fields for r in table.records if not r.is_blank]
