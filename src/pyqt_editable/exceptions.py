"""Editable component exceptions."""


class EditableComponentsError(Exception):
    """Base class for errors raised by pyqt-editable-components."""


class ContainerDepthError(EditableComponentsError):
    """Raised when containers nest deeper than the configured limit."""


class ModelServiceUnavailableError(EditableComponentsError):
    """Raised when a node has a path to synchronize but no model service."""
