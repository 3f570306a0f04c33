"""
Argument validation module for drtv_guide

Handles validation of command-line arguments: the schedule date and the
network timeout.
"""

import re
from typing import Optional, Tuple


class ArgumentValidator:
    """Validates command-line arguments"""

    # Lexical check only: 2026-13-40 passes and is left to the API to reject
    DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}\Z")

    @classmethod
    def validate_date(cls, date: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate date parameter

        Args:
            date: Date string to validate, None when omitted

        Returns:
            Tuple of (is_valid, error_message)
        """
        if date is None:
            return True, None

        if not cls.DATE_PATTERN.match(date):
            return False, f"Date must be YYYY-MM-DD (e.g. 2026-02-26), got: {date}"

        return True, None

    @classmethod
    def validate_timeout(cls, timeout: Optional[float]) -> Tuple[bool, Optional[str]]:
        """
        Validate timeout parameter

        Args:
            timeout: Read timeout in seconds

        Returns:
            Tuple of (is_valid, error_message)
        """
        if timeout is None:
            return True, None

        if timeout <= 0 or timeout > 300:
            return False, f"Parameter [--timeout] must be above 0 and at most 300 seconds, got: {timeout}"

        return True, None

    @classmethod
    def validate_all_arguments(cls, args) -> list:
        """
        Validate all arguments at once

        Args:
            args: Parsed arguments object

        Returns:
            List of error messages (empty if all valid)
        """
        errors = []

        valid, error = cls.validate_date(getattr(args, "date", None))
        if not valid:
            errors.append(error)

        valid, error = cls.validate_timeout(getattr(args, "timeout", None))
        if not valid:
            errors.append(error)

        return errors
