"""
Batch "calculate and write" over a collection of variants.

Variants are processed strictly in collection order. For each one:
fetch geometry -> calculate -> build hinge record -> patch the model file ->
export a results row. A failing variant is logged and recorded; the batch
always moves on to the next one. Export is best-effort and runs whether or
not the patch succeeded.

Example:
    >>> summary = run_batch(collection, S2kSectionSource("frame.$2k"), "frame.$2k")
    >>> print(f"{summary.succeeded}/{summary.total} hinges written")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
from loguru import logger

from steelhinge.core.errors import ExportError, HingeError
from steelhinge.core.settings import HingeParameters
from steelhinge.core.variants import hinge_name
from steelhinge.design import get_calculator
from steelhinge.io.excel_export import ResultsSink
from steelhinge.io.patcher import patch
from steelhinge.io.section_source import SectionPropertySource

STAGE_CALCULATE = "calculate"
STAGE_PATCH = "patch"
STAGE_EXPORT = "export"


@dataclass
class VariantFailure:
    """One failed step of one variant."""
    section_name: str
    variant_name: str
    stage: str
    message: str


@dataclass
class BatchSummary:
    """Outcome of a batch run."""
    total: int = 0
    succeeded: int = 0
    failures: List[VariantFailure] = field(default_factory=list)
    computed: List = field(default_factory=list)

    @property
    def failed(self) -> List[VariantFailure]:
        """Failures that prevented a hinge from being written."""
        return [f for f in self.failures if f.stage != STAGE_EXPORT]

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_frame(self) -> pd.DataFrame:
        """Per-variant overview (hinge, status, message)."""
        rows = []
        failed = {(f.section_name, f.variant_name): f for f in self.failed}
        for variant in self.computed:
            failure = failed.pop((variant.section_name, variant.name), None)
            rows.append({
                "Hinge": hinge_name(variant),
                "Status": "FAIL" if failure else "OK",
                "Stage": failure.stage if failure else "",
                "Message": failure.message if failure else "",
            })
        for failure in failed.values():
            rows.append({
                "Hinge": f"{failure.section_name}_{failure.variant_name}",
                "Status": "FAIL",
                "Stage": failure.stage,
                "Message": failure.message,
            })
        return pd.DataFrame(rows, columns=["Hinge", "Status", "Stage", "Message"])


def run_batch(
    variants: Iterable,
    source: SectionPropertySource,
    model_path: Union[str, Path],
    sink: Optional[ResultsSink] = None,
    parameters: Optional[HingeParameters] = None,
) -> BatchSummary:
    """
    Calculate every variant and write its hinge into the model file.

    Args:
        variants: Variants in processing order (e.g. a VariantCollection)
        source: Section-property source for geometry lookups
        model_path: $2k file to patch
        sink: Optional results sink (best-effort)
        parameters: Reference constants (defaults to the packaged set)

    Returns:
        BatchSummary
    """
    summary = BatchSummary()
    for variant in variants:
        summary.total += 1
        label = f"{variant.section_name}/{variant.name}"

        def fail(stage: str, exc: Exception) -> None:
            summary.failures.append(
                VariantFailure(variant.section_name, variant.name, stage, str(exc))
            )

        try:
            calculator = get_calculator(variant.member, parameters)
            computed = calculator.calculate(calculator.fetch(variant, source))
            record = calculator.build_hinge_record(computed)
        except (HingeError, ValueError, ArithmeticError) as exc:
            logger.error(f"Calculation failed for {label}: {exc}")
            fail(STAGE_CALCULATE, exc)
            continue
        summary.computed.append(computed)

        try:
            patch(model_path, hinge_name(computed), record)
            summary.succeeded += 1
        except (FileNotFoundError, HingeError, OSError) as exc:
            logger.error(f"Writing hinge failed for {label}: {exc}")
            fail(STAGE_PATCH, exc)

        if sink is not None:
            try:
                sink.export(computed)
            except ExportError as exc:
                logger.warning(f"Export failed for {label}: {exc}")
                fail(STAGE_EXPORT, exc)

    logger.info(f"Batch finished: {summary.succeeded} of {summary.total} hinges written")
    return summary
