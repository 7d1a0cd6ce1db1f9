class MalformedConfigError(ValueError):
    """The bundled market configuration could not be normalized or decoded."""


class InvalidContextError(ValueError):
    """A network context or env name has no configuration mapping."""
