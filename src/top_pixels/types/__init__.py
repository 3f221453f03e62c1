from .sample import Pixel, Sample

__all__ = ["Pixel", "Sample"]
