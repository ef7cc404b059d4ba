"""Custom exceptions for GPX Walk"""


class GPXWalkError(Exception):
    """Base exception for GPX Walk"""
    pass


class GPXDecodeError(GPXWalkError):
    """Raised when GPX bytes cannot be decoded into a document"""
    pass


class GPXReadError(GPXWalkError):
    """Raised when a GPX file cannot be opened or read"""
    pass


class IngestionError(GPXWalkError):
    """Raised when a folder of GPX files cannot be ingested"""
    pass


class TransformError(GPXWalkError):
    """Raised when GeoJSON transformation fails"""
    pass


class RenderError(GPXWalkError):
    """Raised when the path image cannot be rendered or saved"""
    pass


class ConfigurationError(GPXWalkError):
    """Raised when configuration is invalid"""
    pass
