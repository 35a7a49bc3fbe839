"""
Core data model: sections, variants, reference constants, errors, logging.
"""

from .errors import (
    HingeError,
    InputValidationError,
    SectionLookupError,
    PersistenceError,
    ExportError,
)
from .sections import (
    DEFAULT_AREA,
    MemberType,
    ShapeKind,
    SectionCategory,
    SectionGeometry,
    approximate_area,
    effective_area,
    flange_slenderness,
    web_slenderness,
)
from .settings import (
    PARAMETER_NAMES,
    HingeParameters,
    ParameterPair,
    DEFAULT_PARAMETERS,
    load_hinge_parameters,
)
from .variants import (
    ProfileParameters,
    BeamClassification,
    AxialClassification,
    ControlFactors,
    AxialCapacity,
    BeamResults,
    BraceResults,
    ColumnResults,
    BeamVariant,
    BraceVariant,
    ColumnVariant,
    Variant,
    VariantCollection,
    variant_from_dict,
    hinge_name,
)
from .logging import configure_logging

__all__ = [
    'HingeError',
    'InputValidationError',
    'SectionLookupError',
    'PersistenceError',
    'ExportError',
    'DEFAULT_AREA',
    'MemberType',
    'ShapeKind',
    'SectionCategory',
    'SectionGeometry',
    'approximate_area',
    'effective_area',
    'flange_slenderness',
    'web_slenderness',
    'PARAMETER_NAMES',
    'HingeParameters',
    'ParameterPair',
    'DEFAULT_PARAMETERS',
    'load_hinge_parameters',
    'ProfileParameters',
    'BeamClassification',
    'AxialClassification',
    'ControlFactors',
    'AxialCapacity',
    'BeamResults',
    'BraceResults',
    'ColumnResults',
    'BeamVariant',
    'BraceVariant',
    'ColumnVariant',
    'Variant',
    'VariantCollection',
    'variant_from_dict',
    'hinge_name',
    'configure_logging',
]
