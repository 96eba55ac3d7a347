"""
fnidioms - functional programming idioms as small, pure components.

Components:
- mailer: immutable fluent builder DSL with hidden construction
- colors: function composition in place of decorators
- converters: currying via partial application
- expenses: filter/sort/limit/group collection pipelines
"""

__version__ = "0.1.0"
