"""
Unit tests for job files
"""

from pathlib import Path

import pytest
from steelhinge.core.config import JobConfig, load_job
from steelhinge.core.errors import InputValidationError
from steelhinge.core.variants import BeamVariant, BraceVariant

JOB = """
model: frame.$2k
sections: sections.yaml
export: false
variants:
  - name: V1
    section_name: IPE400
    category: Beam-I-Section
    length: 6000
    fy: 345
    column_section: HEB300
    column_length: 3500
    column_fy: 345
  - name: B1
    section_name: BOX150
    category: Brace-Tube-Section
    length: 3000
    fy: 345
    length_minor: 3000
    length_major: 3000
"""


class TestLoadJob:
    """Test parsing and path resolution."""

    def test_paths_resolved(self, tmp_path):
        path = tmp_path / "job.yaml"
        path.write_text(JOB, encoding="utf-8")
        job = load_job(path)
        assert job.model == tmp_path / "frame.$2k"
        assert job.sections == tmp_path / "sections.yaml"
        assert job.parameters is None
        assert job.export is False

    def test_absolute_path_kept(self):
        job = JobConfig(model=Path("/abs/frame.$2k")).resolve(Path("/elsewhere"))
        assert job.model == Path("/abs/frame.$2k")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_job(tmp_path / "absent.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "job.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(InputValidationError, match="mapping"):
            load_job(path)

    def test_model_required(self, tmp_path):
        path = tmp_path / "job.yaml"
        path.write_text("export: true\n", encoding="utf-8")
        with pytest.raises(InputValidationError):
            load_job(path)


class TestBuildVariants:
    """Test variant construction from job entries."""

    def test_members_inferred(self, tmp_path):
        path = tmp_path / "job.yaml"
        path.write_text(JOB, encoding="utf-8")
        variants = list(load_job(path).build_variants())
        assert isinstance(variants[0], BeamVariant)
        assert isinstance(variants[1], BraceVariant)

    def test_duplicate_rejected(self):
        entry = {"name": "B1", "section_name": "BOX150", "category": "Brace-Tube-Section",
                 "length": 3000, "fy": 345, "length_minor": 3000, "length_major": 3000}
        job = JobConfig(model=Path("m.$2k"), variants=[entry, dict(entry)])
        with pytest.raises(InputValidationError):
            job.build_variants()

    def test_invalid_entry(self):
        job = JobConfig(model=Path("m.$2k"), variants=[{"name": "X", "category": "Beam-I-Section"}])
        with pytest.raises(InputValidationError):
            job.build_variants()
