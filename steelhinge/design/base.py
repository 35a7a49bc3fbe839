"""
Base abstract class for member hinge calculators.

This module provides the Strategy Pattern interface for member-type dispatch.
Beam, brace and column calculators inherit from MemberCalculator.
"""

from abc import ABC, abstractmethod
from typing import Optional

from steelhinge.core.settings import DEFAULT_PARAMETERS, HingeParameters
from steelhinge.io.hinge_records import HingeRecord
from steelhinge.io.section_source import SectionPropertySource


class MemberCalculator(ABC):
    """Abstract base class for hinge calculators."""

    def __init__(self, parameters: Optional[HingeParameters] = None):
        self.parameters = parameters or DEFAULT_PARAMETERS

    @property
    @abstractmethod
    def member_type(self) -> str:
        """Return the member tag handled ('Beam', 'Brace', 'Column')."""
        pass

    @abstractmethod
    def fetch(self, variant, source: SectionPropertySource):
        """
        Resolve section geometry for a variant.

        Returns:
            Copy of the variant with geometry fields set (zero geometry on
            lookup failure)
        """
        pass

    @abstractmethod
    def calculate(self, variant):
        """
        Compute hinge parameters from the variant's geometry.

        Returns:
            Copy of the variant with ``results`` set

        Raises:
            InputValidationError: If the inputs make the calculation undefined
        """
        pass

    @abstractmethod
    def build_hinge_record(self, variant) -> HingeRecord:
        """
        Hinge record for a calculated variant.

        Raises:
            ValueError: If the variant has not been calculated
        """
        pass

    def _require_results(self, variant):
        if variant.results is None:
            raise ValueError(f"Variant '{variant.name}' has not been calculated")
        return variant.results
