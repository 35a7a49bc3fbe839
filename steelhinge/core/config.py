"""
Job files for batch runs.

A job file is YAML:

    model: frame.$2k            # model text file to patch
    sections: sections.yaml     # optional catalog, else read from the model
    parameters: custom.yaml     # optional reference-constant override
    export: true                # write <model>_Results.xlsx
    variants:
      - name: V1
        section_name: IPE400
        category: Beam-I-Section
        length: 6000
        fy: 345
        column_section: HEB300
        column_length: 3500
        column_fy: 345

Relative paths are resolved against the directory of the job file.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml
from pydantic import BaseModel, Field

from steelhinge.core.errors import InputValidationError
from steelhinge.core.variants import VariantCollection, variant_from_dict


class JobConfig(BaseModel):
    """Parsed job file."""
    model: Path = Field(..., description="Model text file to patch")
    sections: Optional[Path] = Field(default=None, description="Section catalog YAML")
    parameters: Optional[Path] = Field(default=None, description="Reference constant override")
    export: bool = Field(default=True, description="Write the results workbook")
    variants: List[Dict[str, Any]] = Field(default_factory=list)

    def resolve(self, base_dir: Path) -> "JobConfig":
        """Return a copy with relative paths anchored at ``base_dir``."""
        def _abs(p: Optional[Path]) -> Optional[Path]:
            if p is None or p.is_absolute():
                return p
            return base_dir / p

        return self.model_copy(update={
            "model": _abs(self.model),
            "sections": _abs(self.sections),
            "parameters": _abs(self.parameters),
        })

    def build_variants(self) -> VariantCollection:
        """
        Validate every variant entry, keeping file order.

        Raises:
            InputValidationError: On the first invalid or duplicate entry
        """
        collection = VariantCollection()
        for entry in self.variants:
            variant = variant_from_dict(entry)
            try:
                collection.add(variant)
            except ValueError as exc:
                raise InputValidationError(str(exc)) from exc
        return collection


def load_job(path: Union[str, Path]) -> JobConfig:
    """
    Load and validate a job file.

    Raises:
        FileNotFoundError: If the job file does not exist
        InputValidationError: If the content is not a valid job
    """
    job_path = Path(path)
    if not job_path.exists():
        raise FileNotFoundError(f"Job file not found: {job_path}")
    with open(job_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InputValidationError(f"Job file {job_path} must contain a mapping")
    try:
        config = JobConfig.model_validate(data)
    except ValueError as exc:
        raise InputValidationError(f"Invalid job file {job_path}: {exc}") from exc
    return config.resolve(job_path.parent)
