"""Placeholder interpolation for translation templates.

Templates use ``{{name}}`` placeholders. Inner whitespace is allowed
(``{{ name }}``) and dotted names reach into nested parameters
(``{{user.name}}``).
"""

import re
from collections.abc import Mapping
from typing import Any, Dict, Optional

from infrastructure.i18n.errors import InterpolationError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")

_MISSING = object()


class TemplateInterpolator:
    """Replaces ``{{variable}}`` placeholders with parameter values.

    Unknown placeholders are kept as written unless ``strict`` is set, in
    which case an InterpolationError is raised.

    Attributes:
        strict: Raise on placeholders with no matching parameter.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def interpolate(self, template: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Perform variable interpolation in a template.

        Args:
            template: Template with {{variable}} placeholders.
            params: Dict of variable name -> value.

        Returns:
            Template with variables interpolated.

        Raises:
            InterpolationError: In strict mode, if a variable is not provided.
        """
        params = params or {}
        if "{{" not in template:
            return template

        def _replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            value = self._lookup(params, name)
            if value is _MISSING:
                if self.strict:
                    logger.error(
                        "missing_interpolation_variable",
                        variable=name,
                        available_variables=list(params.keys()),
                    )
                    raise InterpolationError(name)
                return match.group(0)
            return str(value)

        return PLACEHOLDER_PATTERN.sub(_replace, template)

    @staticmethod
    def _lookup(params: Mapping, name: str) -> Any:
        if name in params:
            return params[name]

        value: Any = params
        for part in name.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return _MISSING
            value = value[part]
        return value
