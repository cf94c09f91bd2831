"""
Test package for tasmap.

- unit/: Unit tests for individual components
- integration/: HTTP and CLI tests against the assembled application
- fixtures/: Shared coordinate samples
"""
