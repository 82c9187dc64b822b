"""
Schema compiler that turns an ``enum`` schema into a constraint.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict

from .constraints import EnumConstraint
from .utils import SchemaKeywords

logger = logging.getLogger("json_enum")


class SchemaCompiler:
    """
    Compiles JSON Schemas into enum constraints.

    Only the ``enum`` keyword is compiled. Annotation keywords such as
    ``title`` are accepted silently; any other keyword is reported and
    left unchecked.
    """

    def compile(self, schema: Dict[str, Any]) -> EnumConstraint:
        """
        Compile a JSON Schema into an enum constraint.

        Args:
            schema: JSON Schema to compile

        Returns:
            Enum constraint built from the schema's ``enum`` array

        Raises:
            ValueError: If the schema is not an object, has no ``enum``
                keyword, or its ``enum`` value is not an array
        """
        if not isinstance(schema, Mapping):
            raise ValueError(f"Schema must be an object, got {type(schema).__name__}")

        if SchemaKeywords.ENUM not in schema:
            raise ValueError(f"Schema has no '{SchemaKeywords.ENUM}' keyword")

        values = schema[SchemaKeywords.ENUM]
        if not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray)):
            raise ValueError(
                f"The '{SchemaKeywords.ENUM}' keyword must be an array, got {type(values).__name__}")

        for keyword in schema:
            if keyword != SchemaKeywords.ENUM and keyword not in SchemaKeywords.ANNOTATIONS:
                logger.warning(f"Ignoring unsupported keyword '{keyword}' in schema")

        constraint = EnumConstraint(values)
        logger.debug(f"Compiled schema into {constraint}")
        return constraint
