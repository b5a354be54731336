"""Output formats for generated path excludes."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .text_strategy import TextOutputStrategy
from .yaml_strategy import OrtYamlOutputStrategy

__all__ = [
    "JSONOutputStrategy",
    "OrtYamlOutputStrategy",
    "OutputStrategy",
    "TextOutputStrategy",
]
