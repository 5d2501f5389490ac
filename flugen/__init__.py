"""flugen: generate Dart model implementations from annotated declarations."""

__version__ = "0.1.0"
