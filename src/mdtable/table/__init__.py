"""Table model, editing operations, and Markdown conversion.

Submodules:
  errors      -- user-facing error taxonomy
  schema      -- TableModel Pydantic model and Alignment tags
  operations  -- structural and cell edits that preserve the model invariants
  formatting  -- TableModel -> GitHub-flavored Markdown
  parsing     -- GitHub-flavored Markdown -> TableModel
"""
