"""Input validators for wizard prompts.

A validator takes the user's answer and returns an error message, or None if
the answer is acceptable.
"""

import re
from functools import lru_cache

from license_expression import ExpressionError, Licensing, get_spdx_licensing

# User-defined license identifiers, optionally qualified by an external document
LICENSE_REF = re.compile(r"(DocumentRef-[A-Za-z0-9.-]+:)?LicenseRef-[A-Za-z0-9.-]+")


@lru_cache(maxsize=1)
def spdx_licensing() -> Licensing:
    """Return the SPDX license index, loaded once."""
    return get_spdx_licensing()


def validate_license_expression(expression: str) -> str | None:
    """Check that ``expression`` is a valid SPDX license expression.

    Keys must be on the SPDX license list or be ``LicenseRef-`` identifiers.
    Keys are matched case-insensitively; see normalize_license_expression().

    Args:
        expression: e.g. "MIT OR Apache-2.0"

    Returns:
        Error message, or None if the expression is valid
    """
    licensing = spdx_licensing()
    try:
        parsed = licensing.parse(expression, strict=True)
    except ExpressionError as e:
        return str(e)
    if parsed is None:
        return "Empty license expression"

    unknown = [key for key in licensing.unknown_license_keys(parsed) if not LICENSE_REF.fullmatch(key)]
    if unknown:
        return f"Unknown license key(s): {', '.join(unknown)}"
    return None


def normalize_license_expression(expression: str) -> str:
    """Rewrite a valid expression with canonical key case and operators.

    "mit or apache-2.0" becomes "MIT OR Apache-2.0". ``LicenseRef-`` keys are
    kept as written.

    Raises:
        ExpressionError: If ``expression`` cannot be parsed
    """
    parsed = spdx_licensing().parse(expression, strict=True)
    if parsed is None:
        return expression
    return str(parsed)
