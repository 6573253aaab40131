"""Modal interaction layer.

Submodules:
  events   -- typed Event reported by a view
  state    -- EditorState (table + cursor + mode) and its Snapshot
  machine  -- dispatch(): routes events to edits and cursor moves
"""
