"""Template subpackage: the expected-value model.

Re-exports the public API for the template module:
- ExpectedNode: frozen dataclass representing one expected value
- NodeKind: StrEnum of the four node kinds (LITERAL, OBJECT, ARRAY, MATCHER)
- TemplateBuilder: converts Python templates or JSON text into ExpectedNode trees
"""

from json_expect.template.builder import TemplateBuilder
from json_expect.template.nodes import ExpectedNode, NodeKind

__all__ = ["ExpectedNode", "NodeKind", "TemplateBuilder"]
