"""
# EsHTML: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception and warning classes.
"""


class InconsistentMappingException(Exception):
    pass


class ValidationFailedException(Exception):
    """
    Raised in strict mode when validation produces any findings.

    The rewriter is never run once this has been raised.
    """
    _errors: list

    def __init__(self, errors: list):
        self._errors = list(errors)
        super().__init__(format_validation_errors('validation errors', self._errors))

    @property
    def errors(self) -> list:
        return self._errors


class ValidationWarning(UserWarning):
    """
    Side channel for findings in lenient mode.
    """
    _errors: list

    def __init__(self, errors: list):
        self._errors = list(errors)
        super().__init__(format_validation_errors('validation warnings', self._errors))

    @property
    def errors(self) -> list:
        return self._errors


def format_validation_errors(heading: str, errors: list) -> str:
    return '\n'.join([f'{heading}:', *(error.format() for error in errors)])
