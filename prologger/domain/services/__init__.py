from .payload_converter import PayloadConverter, stringify

__all__ = ["PayloadConverter", "stringify"]
