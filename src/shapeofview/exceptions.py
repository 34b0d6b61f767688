"""Exception hierarchy for ShapeOfView."""


class ShapeOfViewError(Exception):
    """Base exception for all ShapeOfView errors."""

    pass


class InvalidArgumentError(ShapeOfViewError, ValueError):
    """A required argument is missing or a parameter is out of range."""

    pass


class ShapeParameterError(InvalidArgumentError):
    """A shape was configured with an out-of-range parameter."""

    def __init__(self, shape_name: str, parameter: str, reason: str) -> None:
        self.shape_name = shape_name
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid {parameter} for {shape_name}: {reason}")


class ShapeOptionError(InvalidArgumentError):
    """A shape could not be created from textual options."""

    def __init__(self, shape_name: str, option: str, reason: str) -> None:
        self.shape_name = shape_name
        self.option = option
        self.reason = reason
        super().__init__(f"Bad option '{option}' for shape '{shape_name}': {reason}")


class UnknownShapeError(InvalidArgumentError):
    """Requested shape name is not registered."""

    def __init__(self, shape_name: str) -> None:
        self.shape_name = shape_name
        super().__init__(f"Unknown shape '{shape_name}'")


class InvalidStateError(ShapeOfViewError, RuntimeError):
    """An object was used in a state that cannot produce a result."""

    pass


class RenderError(ShapeOfViewError):
    """Error writing rendered output."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
