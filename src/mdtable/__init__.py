"""Interactive Markdown table editor.

Subpackages:
  table        -- table model, editing operations, serializer, parser
  interaction  -- Normal/Insert state machine and event dispatch
  web          -- FastAPI view collaborator
"""

__version__ = "0.1.0"
