"""engine subpackage: public API for the comparison engine.

Provides the Verifier, its configuration and the property-path tracker.
Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_expect.engine import AssertConfig, PropertyComparison, Verifier
    from json_expect.template import TemplateBuilder

    template = TemplateBuilder().build_root({"Name": "x"})
    config = AssertConfig(property_comparison=PropertyComparison.IGNORE_CASE)
    Verifier(config).verify(template, {"name": "x"})   # []
"""

from __future__ import annotations

from json_expect.engine.config import AssertConfig, PropertyComparison
from json_expect.engine.path import PropertyPath
from json_expect.engine.verifier import Verifier

__all__ = ["AssertConfig", "PropertyComparison", "PropertyPath", "Verifier"]
