# /app/core/exceptions.py


class CodeGenerationError(Exception):
    """
    Raised when the model call fails or yields no usable code.
    Nothing is persisted when this is raised.
    """
