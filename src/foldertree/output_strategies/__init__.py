"""Output strategies for rendering a scanned folder tree."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .markdown_strategy import MarkdownOutputStrategy
from .text_strategy import TextOutputStrategy

__all__ = ["JSONOutputStrategy", "MarkdownOutputStrategy", "OutputStrategy", "TextOutputStrategy"]
