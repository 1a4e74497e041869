# bookstore/errors.py


class ValidationError(ValueError):
    """A decoded request carries a value the API refuses to store."""


class ConversionError(ValueError):
    """A wire value could not be turned into its column type."""
