"""
Model-file and spreadsheet I/O: $2k tables, hinge records, the patcher,
section sources and the results workbook.
"""

from .s2k_tables import ModelTextFile, TableSection, TableRecord, table_header, parse_fields
from .hinge_records import (
    GENERAL_TABLE,
    BACKBONE_TABLE,
    ACCEPTANCE_TABLE,
    HINGE_TABLES,
    BackbonePoint,
    AcceptancePoint,
    YieldScale,
    HingeRecord,
    moment_hinge_record,
    axial_hinge_record,
    render_general,
    render_backbone,
    render_acceptance,
    render_hinge,
)
from .patcher import PatchReport, patch, apply_record, validate_hinge_name
from .section_source import (
    SectionPropertySource,
    S2kSectionSource,
    CatalogSectionSource,
    fetch_section,
)
from .excel_export import ResultsSink, ExcelResultsSink, results_path_for, variant_row

__all__ = [
    'ModelTextFile',
    'TableSection',
    'TableRecord',
    'table_header',
    'parse_fields',
    'GENERAL_TABLE',
    'BACKBONE_TABLE',
    'ACCEPTANCE_TABLE',
    'HINGE_TABLES',
    'BackbonePoint',
    'AcceptancePoint',
    'YieldScale',
    'HingeRecord',
    'moment_hinge_record',
    'axial_hinge_record',
    'render_general',
    'render_backbone',
    'render_acceptance',
    'render_hinge',
    'PatchReport',
    'patch',
    'apply_record',
    'validate_hinge_name',
    'SectionPropertySource',
    'S2kSectionSource',
    'CatalogSectionSource',
    'fetch_section',
    'ResultsSink',
    'ExcelResultsSink',
    'results_path_for',
    'variant_row',
]
