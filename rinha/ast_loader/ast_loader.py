"""
Loads programs in the JSON AST format into the pydantic node models.

This is the boundary where structurally malformed input is rejected; the
evaluator assumes every tree it receives went through here (or was built
directly from the node classes).
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from rinha.system.ast_nodes import Program
from rinha.system.errors import ProgramLoadError

logger = logging.getLogger(__name__)

_EXCERPT_LENGTH = 80


class AstLoader:
    """
    Validates JSON programs ({"name": ..., "expression": {...}}) and returns
    Program instances whose nodes are discriminated by their 'kind' field.
    """

    def load_string(self, json_text: str) -> Program:
        """
        Parses and validates a JSON program.

        Args:
            json_text: The JSON document, as produced by the language's parser.

        Returns:
            The validated Program.

        Raises:
            ProgramLoadError: If the text is empty, not valid JSON, or does not
                              describe a well-formed program.
            TypeError: If the input is not a string.
        """
        if not isinstance(json_text, str):
            raise TypeError("Input must be a string.")

        if not json_text.strip():
            logger.error("Program loading failed: input is empty or contains only whitespace.")
            raise ProgramLoadError("Input is empty or contains only whitespace.", json_text)

        try:
            program = Program.model_validate_json(json_text)
        except ValidationError as e:
            logger.error(f"Program loading failed: {e.error_count()} validation error(s)")
            raise ProgramLoadError(
                "Input is not a well-formed program.",
                json_text[:_EXCERPT_LENGTH],
                error_details=str(e),
            ) from e

        logger.debug(f"Loaded program '{program.name}' (root kind: {program.expression.kind})")
        return program

    def load_dict(self, data: Dict[str, Any]) -> Program:
        """
        Validates an already-decoded JSON program.

        Raises:
            ProgramLoadError: If the data does not describe a well-formed program.
        """
        try:
            program = Program.model_validate(data)
        except ValidationError as e:
            logger.error(f"Program loading failed: {e.error_count()} validation error(s)")
            raise ProgramLoadError(
                "Input is not a well-formed program.",
                repr(data)[:_EXCERPT_LENGTH],
                error_details=str(e),
            ) from e

        logger.debug(f"Loaded program '{program.name}' (root kind: {program.expression.kind})")
        return program
