"""
Runs validator trees over JSON data.
"""

import logging
from typing import Any, Union

from .api import ValidationResult
from .schema import Schema
from .validators import ValidatorBase, ValidationContext

logger = logging.getLogger("json_typeschema")


class Validator:
    """
    Validates data against validator trees.

    This class creates the validation context, runs the tree and
    collects the errors into a ValidationResult.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize a new validator.

        Args:
            verbose: Whether to include additional details in error messages
        """
        self.verbose = verbose

    def validate(self, data: Any, target: Union[ValidatorBase, Schema]) -> ValidationResult:
        """
        Validate data against a validator tree.

        Args:
            data: Data to validate
            target: Validator, or schema carrying a validator

        Returns:
            ValidationResult containing validation status and errors
        """
        if isinstance(target, Schema):
            if target.validator is None:
                raise ValueError(f"Schema {target.title!r} has no validator")
            target = target.validator

        context = ValidationContext(verbose=self.verbose)
        valid = target.validate(data, context)

        if self.verbose:
            for error in context.errors:
                logger.debug(f"{error} (schema path '{error.schema_path}')")

        return ValidationResult(
            valid=valid,
            errors=context.errors
        )
