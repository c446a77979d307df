from .composition import Composition, DuplicateIdError, column, compose, page, row

__all__ = ["Composition", "DuplicateIdError", "column", "compose", "page", "row"]
