"""N-dimensional float arrays with broadcasting arithmetic and basic linear algebra."""

__version__ = "0.1.0"
__all__ = ["array", "ops", "lin_alg", "matrix"]